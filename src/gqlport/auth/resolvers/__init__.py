"""Concrete token providers."""

from gqlport.auth.resolvers.callable import CallableTokenProvider
from gqlport.auth.resolvers.command import CommandTokenProvider
from gqlport.auth.resolvers.env import EnvTokenProvider
from gqlport.auth.resolvers.static import StaticTokenProvider

__all__ = ["CallableTokenProvider", "CommandTokenProvider", "EnvTokenProvider", "StaticTokenProvider"]
