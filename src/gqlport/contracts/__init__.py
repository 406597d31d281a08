"""Public contracts for gqlport."""

from gqlport.contracts.config import DEFAULT_RETRY_COUNT, DEFAULT_TOKEN_ENV, AuthMode, ClientOptions
from gqlport.contracts.envelope import (
    ErrorLocation,
    GraphQLErrorDetail,
    GraphQLRequest,
    GraphQLResponse,
    Operation,
)
from gqlport.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GQLPortError,
    GraphQLError,
    ResponseDecodeError,
    RetryExhaustedError,
    TokenProviderError,
    TransportError,
    UnexpectedStatusError,
    VariablesValidationError,
)

__all__ = [
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_TOKEN_ENV",
    "AuthMode",
    "AuthenticationError",
    "ClientOptions",
    "ConfigError",
    "ErrorLocation",
    "GQLPortError",
    "GraphQLError",
    "GraphQLErrorDetail",
    "GraphQLRequest",
    "GraphQLResponse",
    "Operation",
    "ResponseDecodeError",
    "RetryExhaustedError",
    "TokenProviderError",
    "TransportError",
    "UnexpectedStatusError",
    "VariablesValidationError",
]
