"""Auth module public exports."""

from gqlport.auth.base import TokenProvider
from gqlport.auth.factory import create_token_provider
from gqlport.auth.resolvers import (
    CallableTokenProvider,
    CommandTokenProvider,
    EnvTokenProvider,
    StaticTokenProvider,
)

__all__ = [
    "CallableTokenProvider",
    "CommandTokenProvider",
    "EnvTokenProvider",
    "StaticTokenProvider",
    "TokenProvider",
    "create_token_provider",
]
