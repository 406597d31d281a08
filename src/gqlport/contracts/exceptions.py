"""Exception hierarchy for gqlport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gqlport.contracts.envelope import ErrorLocation, GraphQLErrorDetail


class GQLPortError(Exception):
    """Base exception for all gqlport errors."""


class ConfigError(GQLPortError):
    """Client options or config file are invalid."""


class VariablesValidationError(GQLPortError):
    """Operation variables are neither a str-keyed mapping nor a record."""


class TransportError(GQLPortError):
    """The HTTP exchange could not be completed."""


class UnexpectedStatusError(GQLPortError):
    """The endpoint answered with a status other than 200 or 401."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code


class ResponseDecodeError(GQLPortError):
    """The response body could not be decoded into the expected shape."""


class GraphQLError(GQLPortError):
    """The server reported GraphQL errors.

    The exception describes the first reported error; ``errors`` keeps every
    entry from the response in server order.
    """

    def __init__(self, errors: list[GraphQLErrorDetail]) -> None:
        first = errors[0]
        super().__init__(first.message)
        self.errors = errors
        self.message = first.message
        self.locations: list[ErrorLocation] = first.locations
        self.path: list[str | int] = first.path
        self.extensions: Any = first.extensions


class AuthenticationError(GQLPortError):
    """Credential acquisition or authorization failure."""


class TokenProviderError(AuthenticationError):
    """The token provider could not produce a token."""


class RetryExhaustedError(AuthenticationError):
    """Unauthorized responses exceeded the retry ceiling."""

    def __init__(self, max_retries: int) -> None:
        super().__init__(f"failed to retry, max retry count reached ({max_retries})")
        self.max_retries = max_retries
