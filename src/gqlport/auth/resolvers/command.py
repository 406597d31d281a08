"""Token provider backed by an external CLI (``gh auth token``, ``gcloud auth print-access-token``, ...)."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from gqlport.auth.base import TokenProvider
from gqlport.contracts.exceptions import TokenProviderError


@dataclass(frozen=True)
class CommandTokenProvider(TokenProvider):
    argv: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.argv:
            raise ValueError("argv must not be empty")
        object.__setattr__(self, "argv", tuple(self.argv))

    async def token(self) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                *self.argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise TokenProviderError(f"Failed to execute {self.argv[0]}: {exc}") from exc

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            details = stderr.decode(errors="replace").strip()
            message = f"token command {self.argv[0]} exited with status {process.returncode}"
            if details:
                message = f"{message}: {details}"
            raise TokenProviderError(message)

        value = stdout.decode(errors="replace").strip()
        if not value:
            raise TokenProviderError(f"token command {self.argv[0]} returned an empty token")

        return value
