"""
Console Output

Shared rich console for user-facing output. Logging goes to stderr separately.
"""

import json
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

_console: Optional[Console] = None


def get_console() -> Console:
    """Return the process-wide console, creating it on first use."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def format_json(value: Any) -> str:
    """Pretty-print a JSON value with two-space indentation."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


__all__ = ["escape", "format_json", "get_console"]
