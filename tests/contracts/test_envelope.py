from __future__ import annotations

import pytest
from pydantic import ValidationError

from gqlport.contracts.envelope import ErrorLocation, GraphQLRequest, GraphQLResponse


def test_request_payload_omits_operation() -> None:
    request = GraphQLRequest(operation="query", query="{ ping }")

    assert request.payload() == {"query": "{ ping }", "variables": {}}


def test_response_defaults_to_no_errors() -> None:
    response = GraphQLResponse.model_validate({"data": {"ok": True}})

    assert response.data == {"ok": True}
    assert response.errors == []


def test_response_parses_full_error_entries() -> None:
    response = GraphQLResponse.model_validate_json(
        b'{"data": null, "errors": [{"message": "boom", "locations": [{"line": 1, "column": 3}],'
        b' "path": ["a", 2, "b"], "extensions": ["opaque", 1], "traceId": "t-1"}]}'
    )

    error = response.errors[0]
    assert error.message == "boom"
    assert error.locations == [ErrorLocation(line=1, column=3)]
    assert error.path == ["a", 2, "b"]
    assert error.extensions == ["opaque", 1]
    assert error.model_extra == {"traceId": "t-1"}


def test_error_entry_tolerates_null_locations_and_path() -> None:
    response = GraphQLResponse.model_validate({"errors": [{"message": "x", "locations": None, "path": None}]})

    assert response.errors[0].locations == []
    assert response.errors[0].path == []
    assert response.errors[0].extensions is None


def test_error_entry_requires_message() -> None:
    with pytest.raises(ValidationError):
        GraphQLResponse.model_validate({"errors": [{"locations": []}]})
