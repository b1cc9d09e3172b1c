"""
Stores Package

Local JSON file persistence for api-tester: saved environments and the
last test report. Both are whole-file read/write with no locking.
"""

from .environment_store import EnvironmentStore
from .json_file import read_json, write_json
from .report_store import ReportStore

__all__ = [
    "EnvironmentStore",
    "ReportStore",
    "read_json",
    "write_json",
]
