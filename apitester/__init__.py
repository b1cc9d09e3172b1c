"""
api-tester Package

Send ad-hoc or scripted HTTP requests, check responses against expected
status codes and JSON Schemas, and keep a report of the last suite run.
"""

__version__ = "0.1.0"

__all__ = [
    "core",
    "models",
    "services",
    "stores",
    "utils",
]
