"""Operation variables validation and request envelope assembly."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from gqlport.contracts.envelope import GraphQLRequest, Operation
from gqlport.contracts.exceptions import VariablesValidationError


def _is_record(value: object) -> bool:
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def validate_variables(variables: object) -> None:
    """Check that *variables* is a str-keyed mapping or a structured record.

    ``None`` stands for "no variables". Pydantic models and dataclass
    instances count as records.

    Raises:
        VariablesValidationError: For any other shape.
    """
    if variables is None or _is_record(variables):
        return
    if isinstance(variables, Mapping):
        for key in variables:
            if not isinstance(key, str):
                raise VariablesValidationError(f"expected variables keys to be str, got {type(key).__name__}")
        return
    raise VariablesValidationError(
        f"expected variables to be a str-keyed mapping or a record, got {type(variables).__name__}"
    )


def serialize_variables(variables: object) -> dict[str, Any]:
    """Convert validated *variables* into a JSON-ready dict."""
    if variables is None:
        return {}
    source = dict(variables) if isinstance(variables, Mapping) else variables
    try:
        encoded = to_jsonable_python(source, by_alias=True)
    except PydanticSerializationError as exc:
        raise VariablesValidationError(f"variables are not JSON serializable: {exc}") from exc
    if not isinstance(encoded, dict):
        raise VariablesValidationError(f"variables must encode to a JSON object, got {type(encoded).__name__}")
    return encoded


def build_request(operation: Operation, query: str, variables: object = None) -> GraphQLRequest:
    validate_variables(variables)
    return GraphQLRequest(operation=operation, query=query, variables=serialize_variables(variables))
