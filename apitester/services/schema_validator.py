"""
Schema Validator

Checks JSON values against JSON Schema documents using jsonschema.
"""

from typing import Any, List

from jsonschema import exceptions as jsonschema_exceptions
from jsonschema.validators import validator_for
from pydantic import BaseModel, Field

from apitester.core.error_codes import ValidationErrorCode
from apitester.core.exceptions import ValidationException
from apitester.core.logger import get_logger
from apitester.models import JsonSchema

logger = get_logger(__name__)


class SchemaValidationResult(BaseModel):
    """Validity plus ordered violation descriptions."""

    valid: bool = Field(..., description="Whether the value satisfies the schema")
    errors: List[str] = Field(
        default_factory=list, description="Violation descriptions in document order"
    )


def has_schema(schema: Any) -> bool:
    """Return True when a schema was supplied; None, {} and [] request none."""
    if schema is None:
        return False
    if isinstance(schema, (dict, list)) and not schema:
        return False
    return True


def _describe(error: jsonschema_exceptions.ValidationError) -> str:
    return f"{error.json_path}: {error.message}"


def validate_schema(data: Any, schema: JsonSchema) -> SchemaValidationResult:
    """
    Validate a value against a JSON Schema.

    The validator class follows the schema's $schema keyword, defaulting to the
    latest draft jsonschema supports.

    Args:
        data: JSON value to check
        schema: JSON Schema document

    Returns:
        SchemaValidationResult with every violation found

    Raises:
        ValidationException: If the schema itself is invalid
    """
    if not isinstance(schema, (dict, bool)):
        raise ValidationException(
            "Invalid JSON schema: expected an object or a boolean",
            ValidationErrorCode.INVALID_SCHEMA,
            details={"type": type(schema).__name__},
        )

    validator_cls = validator_for(schema)
    try:
        validator_cls.check_schema(schema)
    except jsonschema_exceptions.SchemaError as e:
        logger.error("Invalid JSON schema: %s", e.message)
        raise ValidationException.wrap(
            e,
            f"Invalid JSON schema: {e.message}",
            ValidationErrorCode.INVALID_SCHEMA,
        ) from e

    validator = validator_cls(schema)
    errors = sorted(validator.iter_errors(data), key=lambda err: err.json_path)
    result = SchemaValidationResult(
        valid=not errors, errors=[_describe(err) for err in errors]
    )
    logger.debug(
        "Schema validation finished: valid=%s errors=%d", result.valid, len(errors)
    )
    return result


__all__ = ["SchemaValidationResult", "has_schema", "validate_schema"]
