"""Token provider factory."""

from __future__ import annotations

from gqlport.auth.base import TokenProvider
from gqlport.auth.resolvers.command import CommandTokenProvider
from gqlport.auth.resolvers.env import EnvTokenProvider
from gqlport.auth.resolvers.static import StaticTokenProvider
from gqlport.contracts.config import ClientOptions
from gqlport.contracts.exceptions import ConfigError

PROVIDERS: dict[str, type[TokenProvider]] = {
    "token": StaticTokenProvider,
    "env": EnvTokenProvider,
    "command": CommandTokenProvider,
}


def create_token_provider(options: ClientOptions) -> TokenProvider | None:
    auth_mode = options.auth
    if auth_mode == "none":
        return None
    if auth_mode not in PROVIDERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenProvider(variable=options.token_env)
    if auth_mode == "command":
        return CommandTokenProvider(argv=tuple(options.token_command or ()))
    return StaticTokenProvider(value=options.token or "")
