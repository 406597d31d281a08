"""Static token provider."""

from __future__ import annotations

from dataclasses import dataclass

from gqlport.auth.base import TokenProvider
from gqlport.contracts.exceptions import TokenProviderError


@dataclass(frozen=True)
class StaticTokenProvider(TokenProvider):
    value: str

    async def token(self) -> str:
        resolved = self.value.strip()
        if not resolved:
            raise TokenProviderError("Static token is empty")
        return resolved
