"""
Environment Service

Prompts for and saves a named environment.
"""

from typing import List, Optional

from rich.console import Console

from apitester.core.config import settings
from apitester.core.logger import get_logger
from apitester.models import Environment
from apitester.services.prompts import (
    Prompter,
    PromptField,
    QuestionaryPrompter,
    collect_answers,
)
from apitester.stores.environment_store import EnvironmentStore
from apitester.utils.console import escape, get_console

logger = get_logger(__name__)


def build_environment_fields() -> List[PromptField]:
    return [
        PromptField(
            name="base_url",
            message="Enter base URL:",
            default=settings.default_base_url,
        ),
        PromptField(name="api_key", message="Enter API key (optional):"),
    ]


class EnvironmentService:
    """Service class for the save command."""

    def __init__(
        self,
        store: Optional[EnvironmentStore] = None,
        prompter: Optional[Prompter] = None,
        console: Optional[Console] = None,
    ):
        self.store = store or EnvironmentStore()
        self.prompter = prompter or QuestionaryPrompter()
        self.console = console or get_console()

    async def prompt_and_save(self, name: str) -> Environment:
        """
        Ask for a base URL and API key and save them under a name.

        An existing environment with the same name is replaced.

        Raises:
            StorageException: If the environment file cannot be written
        """
        answers = await collect_answers(build_environment_fields(), self.prompter)
        environment = Environment(
            base_url=answers["base_url"], api_key=answers["api_key"]
        )

        self.store.save(name, environment)
        self.console.print(f'[green]Environment "{escape(name)}" saved![/green]')
        return environment


__all__ = ["EnvironmentService", "build_environment_fields"]
