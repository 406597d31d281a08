"""Async GraphQL-over-HTTP client with bearer auth and bounded 401 retry."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from gqlport.auth.base import TokenProvider
from gqlport.auth.factory import create_token_provider
from gqlport.contracts.config import DEFAULT_RETRY_COUNT, ClientOptions
from gqlport.contracts.envelope import GraphQLRequest, GraphQLResponse, Operation
from gqlport.contracts.exceptions import (
    ConfigError,
    GraphQLError,
    ResponseDecodeError,
    RetryExhaustedError,
    TokenProviderError,
    TransportError,
    UnexpectedStatusError,
)
from gqlport.request import build_request

_LOG = logging.getLogger(__name__)


class GraphQLClient:
    """Issues GraphQL queries and mutations against a single endpoint.

    The client caches a bearer token and keeps one unauthorized-retry counter
    shared by every call made through it. Both are guarded by a single lock
    that is never held across network I/O.

    Token handling:
    - Whenever no token is cached and a provider is configured, the provider
      is asked for one before the request is sent.
    - A 401 drops the cached token, counts one retry, fetches a fresh token
      and resubmits. Going past ``max_retries`` raises
      :class:`RetryExhaustedError` and resets the counter to zero.
    - With ``require_token=False`` a failing provider is logged and the
      request goes out without credentials; with ``require_token=True`` it
      aborts the call with :class:`TokenProviderError`.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        token_provider: TokenProvider | None = None,
        max_retries: int = DEFAULT_RETRY_COUNT,
        require_token: bool = False,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        if not endpoint or not endpoint.strip():
            raise ConfigError("endpoint must not be empty")
        if max_retries < 0:
            raise ConfigError("max_retries must be >= 0")

        self._endpoint = endpoint.strip()
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient()
        self._token_provider = token_provider
        self._max_retries = max_retries
        self._require_token = require_token
        self._timeout = timeout
        self._headers = dict(headers or {})

        self._lock = asyncio.Lock()
        self._token = ""
        self._retry_count = 0

    @classmethod
    def from_options(cls, options: ClientOptions, *, http_client: httpx.AsyncClient | None = None) -> GraphQLClient:
        return cls(
            options.endpoint,
            http_client=http_client,
            token_provider=create_token_provider(options),
            max_retries=options.max_retries,
            require_token=options.require_token,
            timeout=options.timeout,
            headers=options.headers,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def token(self) -> str:
        return self._token

    @property
    def retry_count(self) -> int:
        return self._retry_count

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def set_token(self, token: str) -> None:
        async with self._lock:
            self._token = token.strip()

    async def clear_token(self) -> None:
        async with self._lock:
            self._token = ""

    async def refresh_token(self) -> str:
        """Ask the provider for a new token and cache it.

        Raises:
            TokenProviderError: If no provider is configured or it fails.
        """
        token = await self._fetch_token()
        async with self._lock:
            self._token = token
        return token

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def query(
        self,
        query: str,
        variables: object = None,
        *,
        output_type: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """Execute a GraphQL query and return its ``data``.

        Args:
            query: Query document text, sent verbatim.
            variables: A str-keyed mapping, a pydantic model, a dataclass
                instance, or None.
            output_type: Optional type to validate ``data`` into.
            timeout: Per-attempt timeout overriding the client default.
        """
        return await self._run("query", query, variables, output_type=output_type, timeout=timeout)

    async def mutation(
        self,
        query: str,
        variables: object = None,
        *,
        output_type: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """Execute a GraphQL mutation; same mechanics as :meth:`query`."""
        return await self._run("mutation", query, variables, output_type=output_type, timeout=timeout)

    async def _run(
        self,
        operation: Operation,
        query: str,
        variables: object,
        *,
        output_type: Any,
        timeout: float | None,
    ) -> Any:
        request = build_request(operation, query, variables)
        response = await self._execute(request, timeout=timeout)
        return self._decode(response, output_type)

    # ------------------------------------------------------------------
    # Auth / retry
    # ------------------------------------------------------------------

    async def _execute(self, request: GraphQLRequest, *, timeout: float | None) -> httpx.Response:
        while True:
            token = await self._ensure_token()
            response = await self._send(request, token=token, timeout=timeout)
            if response.status_code != httpx.codes.UNAUTHORIZED:
                return response

            attempt = await self._register_unauthorized(token)
            _LOG.warning(
                "Unauthorized response, retrying GraphQL %s (attempt %d of %d)",
                request.operation,
                attempt,
                self._max_retries,
            )

    async def _register_unauthorized(self, sent_token: str) -> int:
        async with self._lock:
            # A concurrent call may already have replaced the rejected token.
            if self._token == sent_token:
                self._token = ""
            self._retry_count += 1
            if self._retry_count > self._max_retries:
                self._retry_count = 0
                raise RetryExhaustedError(self._max_retries)
            return self._retry_count

    async def _ensure_token(self) -> str:
        async with self._lock:
            if self._token:
                return self._token

        if self._token_provider is None:
            if self._require_token:
                raise TokenProviderError("failed to get token: no token cached and no token provider configured")
            return ""

        try:
            token = await self._fetch_token()
        except TokenProviderError as exc:
            if self._require_token:
                raise
            _LOG.warning("Sending request without credentials: %s", exc)
            return ""

        async with self._lock:
            self._token = token
        return token

    async def _fetch_token(self) -> str:
        if self._token_provider is None:
            raise TokenProviderError("failed to get token: no token provider configured")
        try:
            token = await self._token_provider.token()
        except Exception as exc:
            raise TokenProviderError(f"failed to get token: {exc}") from exc
        if not token or not token.strip():
            raise TokenProviderError("failed to get token: provider returned an empty token")
        return token.strip()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _send(self, request: GraphQLRequest, *, token: str, timeout: float | None) -> httpx.Response:
        headers = httpx.Headers(self._headers)
        headers["Content-Type"] = "application/json"
        headers["Accept"] = "application/json"
        if token:
            headers["Authorization"] = f"Bearer {token}"

        effective_timeout = timeout if timeout is not None else self._timeout
        _LOG.debug("Sending GraphQL %s to %s", request.operation, self._endpoint)
        try:
            response = await self._http_client.post(
                self._endpoint,
                json=request.payload(),
                headers=headers,
                timeout=httpx.USE_CLIENT_DEFAULT if effective_timeout is None else effective_timeout,
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"failed to do request: {exc}") from exc

        _LOG.debug("GraphQL %s returned HTTP %d", request.operation, response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response, output_type: Any) -> Any:
        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(response.status_code)

        try:
            envelope = GraphQLResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError(f"failed to decode response: {exc}") from exc

        if envelope.errors:
            raise GraphQLError(envelope.errors)

        if output_type is None:
            return envelope.data
        try:
            return TypeAdapter(output_type).validate_python(envelope.data)
        except ValidationError as exc:
            raise ResponseDecodeError(f"failed to decode response data: {exc}") from exc
