"""Environment token provider."""

from __future__ import annotations

import os
from dataclasses import dataclass

from gqlport.auth.base import TokenProvider
from gqlport.contracts.config import DEFAULT_TOKEN_ENV
from gqlport.contracts.exceptions import TokenProviderError


@dataclass(frozen=True)
class EnvTokenProvider(TokenProvider):
    variable: str = DEFAULT_TOKEN_ENV

    async def token(self) -> str:
        value = (os.getenv(self.variable) or "").strip()
        if not value:
            raise TokenProviderError(f"{self.variable} is not set or empty")
        return value
