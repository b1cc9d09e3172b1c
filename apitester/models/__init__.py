"""
Models Package

Pydantic models for requests, outcomes, test cases and environments.
On-disk JSON uses camelCase aliases (baseUrl, expectedStatus, responseTime).
"""

from .environment import Environment
from .request_spec import HttpMethod, QueryValue, RequestSpec
from .response_outcome import (
    NO_RESPONSE_TIME,
    ResponseFailure,
    ResponseOutcome,
    ResponseSuccess,
)
from .test_case import JsonSchema, ReportSummary, TestCase, TestResult

__all__ = [
    # Environments
    "Environment",
    # Requests
    "HttpMethod",
    "QueryValue",
    "RequestSpec",
    # Responses
    "NO_RESPONSE_TIME",
    "ResponseFailure",
    "ResponseOutcome",
    "ResponseSuccess",
    # Test suites
    "JsonSchema",
    "ReportSummary",
    "TestCase",
    "TestResult",
]
