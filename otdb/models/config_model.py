from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from otdb.utils.defaults import base_client_config, base_headers


class ClientConfig(BaseModel):
    """Transport settings shared by every request of a client."""
    base_url: str = Field(default_factory=lambda: base_client_config()["base_url"])
    user_agent: str = Field(default_factory=lambda: base_client_config()["user_agent"])
    timeout: float = Field(default_factory=lambda: base_client_config()["timeout"], gt=0, description="Total request timeout in seconds")

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) url, got {v!r}")
        return v.rstrip("/")

    def headers(self) -> Dict[str, Any]:
        return base_headers(self.user_agent)
