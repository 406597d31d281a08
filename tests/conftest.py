"""Shared test fixtures for gqlport tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from tests.fakes.countries import ALBANIA
from tests.fakes.transport import RecordingHandler


@pytest.fixture
def country_payload() -> dict[str, Any]:
    """A successful response body for the Albania lookup."""
    return {"data": {"country": dict(ALBANIA)}}


@pytest.fixture
def make_http_client() -> Callable[[RecordingHandler], httpx.AsyncClient]:
    """Build an httpx client whose requests are served by *handler*."""

    def _make(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url="https://countries.example", transport=httpx.MockTransport(handler))

    return _make
