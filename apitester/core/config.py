"""
Configuration

Application settings and environment configuration for api-tester.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILE = "~/.api_test_env.json"
DEFAULT_REPORT_FILE = "api_test_report.json"
DEFAULT_BASE_URL = "https://api.example.com"


class Settings(BaseSettings):
    """
    Application configuration settings.

    Supports both environment variables (APITESTER_ prefix) and .env file loading.
    Environment variables take precedence over .env file values.
    """

    # Application settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="warning", description="Log level (debug, info, warning, error)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        allowed_levels = {"debug", "info", "warning", "error"}
        normalized = v.lower().strip()
        if normalized not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {sorted(allowed_levels)}, got '{v}'"
            )
        return normalized

    # Storage settings
    storage__env_file: str = Field(
        default=DEFAULT_ENV_FILE,
        description="Per-user file holding named environments",
    )
    storage__report_file: str = Field(
        default=DEFAULT_REPORT_FILE,
        description="Report file, relative paths resolve against the working directory",
    )

    # HTTP client settings
    http__timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds; unset means no timeout",
    )
    http__follow_redirects: bool = Field(
        default=True, description="Follow HTTP redirects"
    )
    http__verify_ssl: bool = Field(
        default=True, description="Verify TLS certificates"
    )
    http__response_time_header: str = Field(
        default="x-response-time",
        description="Response header carrying the server-reported response time",
    )

    # Interactive session defaults
    default_environment: Optional[str] = Field(
        default=None,
        description="Saved environment whose base URL seeds the interactive URL prompt",
    )
    default_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Fallback URL offered when no environment applies",
    )

    # Logging file settings (optional)
    log__file_enabled: bool = Field(
        default=False, description="Also write logs to a rotating file"
    )
    log__dir: str = Field(
        default="logs", description="Directory where log files are stored"
    )
    log__file_path: Optional[str] = Field(
        default=None, description="Custom log file path; overrides log__dir if set"
    )
    log__file_level: str = Field(default="INFO", description="File handler log level")
    log__file_max_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Max size of a log file before rotation",
    )
    log__file_backup_count: int = Field(
        default=3, ge=0, description="Number of backup log files to keep"
    )

    @property
    def env_file_path(self) -> Path:
        """Expanded path of the environment file."""
        return Path(self.storage__env_file).expanduser()

    @property
    def report_file_path(self) -> Path:
        """Absolute path of the report file."""
        return Path(self.storage__report_file).expanduser().absolute()

    model_config = SettingsConfigDict(
        env_prefix="APITESTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


def create_settings() -> Settings:
    """
    Create and validate settings instance.

    Returns:
        Settings: Configured settings instance

    Raises:
        ConfigurationException: If configuration validation fails
    """
    try:
        return Settings()
    except ValueError as e:
        from apitester.core.error_codes import ConfigurationErrorCode
        from apitester.core.exceptions import ConfigurationException

        raise ConfigurationException.wrap(
            e,
            f"Configuration loading failed: {e}",
            ConfigurationErrorCode.CONFIG_LOAD_FAILED,
        ) from e


# Global configuration instance
settings = create_settings()
