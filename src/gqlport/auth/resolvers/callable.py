"""Adapter turning a plain function into a token provider."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable

from gqlport.auth.base import TokenProvider
from gqlport.contracts.exceptions import TokenProviderError


class CallableTokenProvider(TokenProvider):
    """Wraps a sync or async zero-argument callable returning a token."""

    def __init__(self, fn: Callable[[], str | Awaitable[str]]) -> None:
        self._fn = fn

    async def token(self) -> str:
        result = self._fn()
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, str) or not result.strip():
            raise TokenProviderError("token callable returned an empty token")
        return result.strip()
