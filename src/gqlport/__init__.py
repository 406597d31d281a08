"""Public API surface for gqlport."""

from gqlport.auth import (
    CallableTokenProvider,
    CommandTokenProvider,
    EnvTokenProvider,
    StaticTokenProvider,
    TokenProvider,
    create_token_provider,
)
from gqlport.client import GraphQLClient
from gqlport.contracts.config import DEFAULT_RETRY_COUNT, ClientOptions
from gqlport.contracts.envelope import ErrorLocation, GraphQLErrorDetail, GraphQLRequest, GraphQLResponse
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
from gqlport.loader import load_options
from gqlport.request import build_request, serialize_variables, validate_variables

__all__ = [
    "DEFAULT_RETRY_COUNT",
    "AuthenticationError",
    "CallableTokenProvider",
    "ClientOptions",
    "CommandTokenProvider",
    "ConfigError",
    "EnvTokenProvider",
    "ErrorLocation",
    "GQLPortError",
    "GraphQLClient",
    "GraphQLError",
    "GraphQLErrorDetail",
    "GraphQLRequest",
    "GraphQLResponse",
    "ResponseDecodeError",
    "RetryExhaustedError",
    "StaticTokenProvider",
    "TokenProvider",
    "TokenProviderError",
    "TransportError",
    "UnexpectedStatusError",
    "VariablesValidationError",
    "build_request",
    "create_token_provider",
    "load_options",
    "serialize_variables",
    "validate_variables",
]
