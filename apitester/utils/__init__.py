"""
Utils Package

Common helpers for api-tester.
"""

from .console import escape, format_json, get_console

__all__ = [
    "escape",
    "format_json",
    "get_console",
]
