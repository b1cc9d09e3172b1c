"""Named environment model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Environment(BaseModel):
    """Base URL and optional API key saved under a name."""

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(..., alias="baseUrl", description="API base URL")
    api_key: Optional[str] = Field(None, alias="apiKey", description="API key")


__all__ = ["Environment"]
