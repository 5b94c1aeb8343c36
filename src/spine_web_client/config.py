"""Client settings loaded from the environment."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Connection settings for :class:`~spine_web_client.client.BackendClient`.

    Every field can be set through a ``SPINE_CLIENT_``-prefixed variable,
    e.g. ``SPINE_CLIENT_BASE_URL``, or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPINE_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "http://localhost:8080"
    query_path: str = "/query"
    command_path: str = "/command"
    timeout_seconds: float = Field(default=30.0, gt=0)
    log_requests: bool = False

    @field_validator("query_path", "command_path")
    @classmethod
    def _absolute_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("Endpoint paths must start with '/'")
        return v
