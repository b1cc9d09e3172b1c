"""
Services Package

Request execution, schema validation, suite runs, reports and prompt sessions.
"""

from .environment_service import EnvironmentService
from .interactive_service import InteractiveResult, InteractiveSession
from .prompts import PromptField, QuestionaryPrompter, collect_answers, json_parser
from .report_service import ReportService
from .request_executor import RequestExecutor
from .schema_validator import SchemaValidationResult, has_schema, validate_schema
from .test_suite_service import TestSuiteService, evaluate_outcome

__all__ = [
    "EnvironmentService",
    "InteractiveResult",
    "InteractiveSession",
    "PromptField",
    "QuestionaryPrompter",
    "ReportService",
    "RequestExecutor",
    "SchemaValidationResult",
    "TestSuiteService",
    "collect_answers",
    "evaluate_outcome",
    "has_schema",
    "json_parser",
    "validate_schema",
]
