"""
Prompt Sequences

Ordered field descriptors answered one at a time. A field may carry a
predicate over the answers collected so far and is skipped when it is false.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

import questionary

from apitester.core.error_codes import DataProcessErrorCode
from apitester.core.exceptions import DataProcessException
from apitester.core.logger import get_logger

logger = get_logger(__name__)

Answers = Dict[str, Any]


class Prompter(Protocol):
    """Asks the user for one value at a time."""

    async def text(self, message: str, default: str = "") -> str: ...

    async def select(self, message: str, choices: List[str]) -> str: ...


class QuestionaryPrompter:
    """Prompter backed by questionary; Ctrl-C raises KeyboardInterrupt."""

    async def text(self, message: str, default: str = "") -> str:
        return await questionary.text(message, default=default).unsafe_ask_async()

    async def select(self, message: str, choices: List[str]) -> str:
        return await questionary.select(message, choices=choices).unsafe_ask_async()


@dataclass(frozen=True)
class PromptField:
    """One step of a prompt sequence."""

    name: str
    message: str
    default: str = ""
    choices: Optional[Sequence[str]] = None
    parse: Optional[Callable[[str], Any]] = None
    when: Optional[Callable[[Answers], bool]] = None


def json_parser(field_name: str, require_object: bool = False) -> Callable[[str], Any]:
    """
    Build a parser that decodes JSON text typed at a prompt.

    The returned callable raises DataProcessException on malformed input, and
    on non-object input when require_object is set.
    """

    def parse(text: str) -> Any:
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Malformed JSON for %s: %s", field_name, e)
            raise DataProcessException.wrap(
                e,
                f"Invalid JSON for {field_name}: {e}",
                DataProcessErrorCode.PARSING_FAILED,
                field=field_name,
            ) from e
        if require_object and not isinstance(value, dict):
            raise DataProcessException(
                f"{field_name} must be a JSON object",
                DataProcessErrorCode.VALIDATION_FAILED,
                details={"field": field_name, "type": type(value).__name__},
            )
        return value

    return parse


async def collect_answers(fields: Sequence[PromptField], prompter: Prompter) -> Answers:
    """
    Ask each field in order and return the parsed answers.

    Fields whose predicate is false are skipped and absent from the result.
    Parse failures propagate immediately; nothing is re-asked.
    """
    answers: Answers = {}
    for field in fields:
        if field.when is not None and not field.when(answers):
            logger.debug("Skipping prompt %s", field.name)
            continue

        if field.choices:
            raw = await prompter.select(field.message, list(field.choices))
        else:
            raw = await prompter.text(field.message, default=field.default)

        answers[field.name] = field.parse(raw) if field.parse else raw
    return answers


__all__ = [
    "Answers",
    "PromptField",
    "Prompter",
    "QuestionaryPrompter",
    "collect_answers",
    "json_parser",
]
