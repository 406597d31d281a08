"""Tests for JSON config loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gqlport.contracts.exceptions import ConfigError
from gqlport.loader import load_options


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "gqlport.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_options_reads_valid_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "endpoint": "https://countries.example/graphql",
            "auth": "env",
            "token_env": "COUNTRIES_TOKEN",
            "max_retries": 2,
            "require_token": True,
            "headers": {"X-Client": "gqlport"},
        },
    )

    options = load_options(path)

    assert options.endpoint == "https://countries.example/graphql"
    assert options.auth == "env"
    assert options.token_env == "COUNTRIES_TOKEN"
    assert options.max_retries == 2
    assert options.require_token is True
    assert options.headers == {"X-Client": "gqlport"}


def test_load_options_accepts_str_path(tmp_path: Path) -> None:
    path = _write(tmp_path, {"endpoint": "http://localhost:4000/graphql"})

    assert load_options(str(path)).endpoint == "http://localhost:4000/graphql"


def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_options(tmp_path / "missing.json")


def test_load_options_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "gqlport.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_options(path)


def test_load_options_invalid_config(tmp_path: Path) -> None:
    path = _write(tmp_path, {"endpoint": "https://countries.example/graphql", "auth": "token"})

    with pytest.raises(ConfigError, match="invalid config"):
        load_options(path)
