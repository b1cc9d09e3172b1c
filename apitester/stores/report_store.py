"""
Report Store

Persists the results of the last test suite run as a JSON array.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from apitester.core.config import settings
from apitester.core.logger import get_logger
from apitester.models import TestResult
from apitester.stores.json_file import read_json, write_json

logger = get_logger(__name__)

_REPORT = TypeAdapter(List[TestResult])


class ReportStore:
    """Store class for the test report file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or settings.report_file_path

    def load(self) -> List[TestResult]:
        """
        Load the persisted report.

        Returns:
            Test results in run order. Empty when the file is missing or
            cannot be parsed.
        """
        try:
            raw = read_json(self.path)
        except FileNotFoundError:
            logger.debug("No report file at %s", self.path)
            return []
        except (OSError, ValueError) as e:
            logger.warning(
                "Report file %s is unreadable, treating it as empty: %s", self.path, e
            )
            return []

        try:
            return _REPORT.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                "Report file %s has an unexpected shape, treating it as empty: %s",
                self.path,
                e,
            )
            return []

    def save(self, results: List[TestResult]) -> Path:
        """
        Write the full report, replacing any previous one.

        Returns:
            Path the report was written to

        Raises:
            StorageException: If the file cannot be written
        """
        write_json(self.path, _REPORT.dump_python(results, mode="json", by_alias=True))
        logger.info("Saved report with %d results to %s", len(results), self.path)
        return self.path


__all__ = ["ReportStore"]
