"""Wire envelopes exchanged with a GraphQL endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Operation = Literal["query", "mutation"]


@dataclass(frozen=True)
class GraphQLRequest:
    """A single operation ready to be posted.

    ``operation`` only labels the request for logging; it never reaches the
    wire body.
    """

    operation: Operation
    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def payload(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


class ErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLErrorDetail(BaseModel):
    """One server-reported error. ``extensions`` is passed through as-is."""

    model_config = ConfigDict(extra="allow")

    message: str
    locations: list[ErrorLocation] = Field(default_factory=list)
    path: list[str | int] = Field(default_factory=list)
    extensions: Any = None

    @field_validator("locations", "path", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class GraphQLResponse(BaseModel):
    data: Any = None
    errors: list[GraphQLErrorDetail] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
