"""
Interactive Service

Builds one ad-hoc request from prompts, sends it and prints the response.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ValidationError
from rich.console import Console

from apitester.core.config import settings
from apitester.core.error_codes import DataProcessErrorCode, RequestParamErrorCode
from apitester.core.exceptions import DataProcessException, RequestParamException
from apitester.core.logger import get_logger
from apitester.models import (
    HttpMethod,
    JsonSchema,
    RequestSpec,
    ResponseFailure,
    ResponseOutcome,
)
from apitester.services.prompts import (
    Answers,
    Prompter,
    PromptField,
    QuestionaryPrompter,
    collect_answers,
    json_parser,
)
from apitester.services.request_executor import RequestExecutor
from apitester.services.schema_validator import (
    SchemaValidationResult,
    has_schema,
    validate_schema,
)
from apitester.stores.environment_store import EnvironmentStore
from apitester.utils.console import escape, format_json, get_console

logger = get_logger(__name__)


def _method_accepts_body(answers: Answers) -> bool:
    return HttpMethod(answers["method"]).accepts_body


def build_request_fields(default_url: str) -> List[PromptField]:
    """Prompt sequence for an ad-hoc request; body is asked only for POST and PUT."""
    return [
        PromptField(name="url", message="Enter API URL:", default=default_url),
        PromptField(
            name="method",
            message="Select HTTP method:",
            choices=[method.value for method in HttpMethod],
        ),
        PromptField(
            name="headers",
            message=(
                'Enter headers (JSON format, e.g., {"Authorization": "Bearer token"}):'
            ),
            default="{}",
            parse=json_parser("headers", require_object=True),
        ),
        PromptField(
            name="query",
            message='Enter query params (JSON format, e.g., {"id": 1}):',
            default="{}",
            parse=json_parser("query", require_object=True),
        ),
        PromptField(
            name="body",
            message='Enter request body (JSON format, e.g., {"name": "John"}):',
            default="{}",
            parse=json_parser("body"),
            when=_method_accepts_body,
        ),
        PromptField(
            name="expected_schema",
            message="Enter expected JSON schema (optional, JSON format):",
            default="{}",
            parse=json_parser("expected schema"),
        ),
    ]


class InteractiveResult(BaseModel):
    """What one interactive session sent and got back."""

    request: RequestSpec
    outcome: ResponseOutcome
    expected_schema: Optional[JsonSchema] = None
    schema_validation: Optional[SchemaValidationResult] = None


class InteractiveSession:
    """Prompt-driven single request session."""

    def __init__(
        self,
        executor: Optional[RequestExecutor] = None,
        environment_store: Optional[EnvironmentStore] = None,
        prompter: Optional[Prompter] = None,
        console: Optional[Console] = None,
        default_environment: Optional[str] = None,
    ):
        self.executor = executor or RequestExecutor()
        self.environment_store = environment_store or EnvironmentStore()
        self.prompter = prompter or QuestionaryPrompter()
        self.console = console or get_console()
        self.default_environment = (
            default_environment
            if default_environment is not None
            else settings.default_environment
        )

    def resolve_default_url(self) -> str:
        """Base URL of the default environment when saved, else the fallback URL."""
        if self.default_environment:
            environment = self.environment_store.load().get(self.default_environment)
            if environment is not None:
                return environment.base_url
            logger.info(
                "Default environment '%s' is not saved; using fallback URL",
                self.default_environment,
            )
        return settings.default_base_url

    async def collect_request(self) -> Tuple[RequestSpec, Optional[JsonSchema]]:
        """
        Prompt for every request field.

        An empty schema answer is returned as None.

        Raises:
            DataProcessException: If any JSON answer is malformed, or the
                schema is neither an object nor a boolean
            RequestParamException: If the answers do not form a valid request
        """
        answers = await collect_answers(
            build_request_fields(self.resolve_default_url()), self.prompter
        )
        try:
            spec = RequestSpec(
                method=answers["method"],
                url=answers["url"],
                headers=answers["headers"],
                query=answers["query"],
                body=answers.get("body"),
            )
        except ValidationError as e:
            logger.error("Invalid request parameters: %s", e)
            raise RequestParamException.wrap(
                e,
                f"Invalid request parameters: {e.error_count()} validation error(s)",
                RequestParamErrorCode.INVALID_PARAMETER,
                errors=[err["msg"] for err in e.errors()],
            ) from e

        expected_schema = answers["expected_schema"]
        if not has_schema(expected_schema):
            return spec, None
        if not isinstance(expected_schema, (dict, bool)):
            raise DataProcessException(
                "expected schema must be a JSON object or a boolean",
                DataProcessErrorCode.VALIDATION_FAILED,
                details={
                    "field": "expected schema",
                    "type": type(expected_schema).__name__,
                },
            )
        return spec, expected_schema

    async def run(self) -> InteractiveResult:
        """
        Collect one request, send it and print the outcome.

        Schema validation runs only when a non-empty schema was entered and a
        response was received.
        """
        spec, expected_schema = await self.collect_request()

        self.console.print("[blue]Sending request...[/blue]")
        outcome = await self.executor.send(spec)
        result = InteractiveResult(
            request=spec, outcome=outcome, expected_schema=expected_schema
        )

        if isinstance(outcome, ResponseFailure):
            self.console.print(f"[red]Error: {escape(outcome.error)}[/red]")
            return result

        self.console.print("[cyan]Response:[/cyan]")
        self.console.print(f"Status: [green]{outcome.status}[/green]")
        self.console.print(f"Headers: {escape(format_json(outcome.headers))}")
        self.console.print(f"Body: {escape(format_json(outcome.data))}")
        self.console.print(f"Response Time: {escape(outcome.response_time)}")

        if has_schema(expected_schema):
            validation = validate_schema(outcome.data, expected_schema)
            result.schema_validation = validation
            self.console.print("[cyan]Schema Validation:[/cyan]")
            if validation.valid:
                self.console.print("[green]Valid[/green]")
            else:
                self.console.print("[red]Invalid[/red]")
                self.console.print(escape(format_json(validation.errors)))

        return result


__all__ = ["InteractiveResult", "InteractiveSession", "build_request_fields"]
