"""Token provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenProvider(ABC):
    @abstractmethod
    async def token(self) -> str:
        """Return a bearer token or raise ``TokenProviderError``."""
