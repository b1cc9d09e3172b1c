"""
JSON File Access

Whole-file JSON reads and writes shared by the local stores.
Writes replace the file; there is no locking, so the last writer wins.
"""

import json
from pathlib import Path
from typing import Any

from apitester.core.error_codes import StorageErrorCode
from apitester.core.exceptions import StorageException
from apitester.core.logger import get_logger

logger = get_logger(__name__)


def read_json(path: Path) -> Any:
    """
    Read and parse a JSON document.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
        json.JSONDecodeError: If the content is not valid JSON
    """
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any) -> None:
    """
    Serialize data as indented JSON, replacing the file.

    Raises:
        StorageException: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.debug("Wrote %s", path)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Failed to write %s: %s", path, e)
        raise StorageException.wrap(
            e,
            f"Failed to write {path}: {e}",
            StorageErrorCode.WRITE_FAILED,
            path=str(path),
        ) from e


__all__ = ["read_json", "write_json"]
