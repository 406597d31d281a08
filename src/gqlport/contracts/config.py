"""Configuration contracts."""

from __future__ import annotations

from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, PositiveFloat, field_validator, model_validator

DEFAULT_RETRY_COUNT = 3
DEFAULT_TOKEN_ENV = "GRAPHQL_TOKEN"

AuthMode = Literal["none", "token", "env", "command"]


class ClientOptions(BaseModel):
    endpoint: str
    auth: AuthMode = "none"
    token: str | None = None
    token_env: str = DEFAULT_TOKEN_ENV
    token_command: list[str] | None = None
    max_retries: int = Field(default=DEFAULT_RETRY_COUNT, ge=0, le=10)
    require_token: bool = False
    timeout: PositiveFloat | None = 30.0
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        endpoint = value.strip()
        parsed = urlparse(endpoint)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("endpoint must be an absolute http(s) URL")
        return endpoint

    @model_validator(mode="after")
    def validate_auth_settings(self) -> ClientOptions:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth == "env" and not self.token_env.strip():
            raise ValueError("env auth requires a non-empty token_env")
        if self.auth == "command" and not self.token_command:
            raise ValueError("command auth requires a non-empty token_command")
        return self
