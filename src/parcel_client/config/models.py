"""Pydantic models for client configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from parcel_client.config.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT


class ApiProfile(BaseModel):
    """A named Parcel API connection profile."""

    name: str
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="API base URL, e.g. https://api.oasislabs.com/parcel/v1",
    )
    token: str | None = Field(default=None, description="Bearer API token")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, ApiProfile] = Field(default_factory=dict)
