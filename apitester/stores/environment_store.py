"""
Environment Store

Persists named environments (base URL + optional API key) in a per-user JSON file.
"""

from pathlib import Path
from typing import Dict, Optional

from pydantic import TypeAdapter, ValidationError

from apitester.core.config import settings
from apitester.core.logger import get_logger
from apitester.models import Environment
from apitester.stores.json_file import read_json, write_json

logger = get_logger(__name__)

_ENVIRONMENTS = TypeAdapter(Dict[str, Environment])


class EnvironmentStore:
    """Store class for named environments; load() and save() are its only interface."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or settings.env_file_path

    def load(self) -> Dict[str, Environment]:
        """
        Load every saved environment.

        Returns:
            Mapping of environment name to Environment. Empty when the file is
            missing or cannot be parsed.
        """
        try:
            raw = read_json(self.path)
        except FileNotFoundError:
            logger.debug("No environment file at %s", self.path)
            return {}
        except (OSError, ValueError) as e:
            logger.warning(
                "Environment file %s is unreadable, treating it as empty: %s",
                self.path,
                e,
            )
            return {}

        try:
            environments = _ENVIRONMENTS.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                "Environment file %s has an unexpected shape, treating it as empty: %s",
                self.path,
                e,
            )
            return {}

        logger.debug("Loaded %d environments from %s", len(environments), self.path)
        return environments

    def save(self, name: str, environment: Environment) -> Dict[str, Environment]:
        """
        Save an environment under a name, replacing any entry with that name.

        Args:
            name: Environment name
            environment: Environment to store

        Returns:
            The full mapping as written

        Raises:
            StorageException: If the file cannot be written
        """
        environments = self.load()
        environments[name] = environment
        write_json(
            self.path,
            {
                env_name: env.model_dump(by_alias=True, exclude_none=True)
                for env_name, env in environments.items()
            },
        )
        logger.info("Saved environment '%s' to %s", name, self.path)
        return environments


__all__ = ["EnvironmentStore"]
