import pytest

from gqlport.auth.resolvers.callable import CallableTokenProvider
from gqlport.contracts.exceptions import TokenProviderError


@pytest.mark.asyncio
async def test_callable_token_provider_accepts_sync_function() -> None:
    provider = CallableTokenProvider(lambda: "tok_sync")

    assert await provider.token() == "tok_sync"


@pytest.mark.asyncio
async def test_callable_token_provider_awaits_async_function() -> None:
    async def _fetch() -> str:
        return "tok_async "

    provider = CallableTokenProvider(_fetch)

    assert await provider.token() == "tok_async"


@pytest.mark.asyncio
async def test_callable_token_provider_rejects_empty_result() -> None:
    provider = CallableTokenProvider(lambda: "")

    with pytest.raises(TokenProviderError):
        await provider.token()
