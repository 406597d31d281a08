"""Command-line interface for gqlport."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from gqlport import (
    AuthenticationError,
    ClientOptions,
    ConfigError,
    GraphQLClient,
    GraphQLError,
    ResponseDecodeError,
    TransportError,
    UnexpectedStatusError,
    VariablesValidationError,
    load_options,
)


def _package_version() -> str:
    try:
        return version("gqlport")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gqlport")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for operation in ("query", "mutation"):
        op_parser = subparsers.add_parser(operation, help=f"Execute a GraphQL {operation}")
        target = op_parser.add_mutually_exclusive_group(required=True)
        target.add_argument("--config", help="Path to a gqlport JSON config file")
        target.add_argument("--endpoint", help="GraphQL endpoint URL")
        document = op_parser.add_mutually_exclusive_group(required=True)
        document.add_argument("--query", dest="document", help="Operation document text")
        document.add_argument("--query-file", help="Path to a file holding the operation document")
        op_parser.add_argument("--variables", default=None, help="Variables as a JSON object")
        op_parser.add_argument("--token", default=None, help="Static bearer token (endpoint mode only)")
        op_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _resolve_options(args: argparse.Namespace) -> ClientOptions:
    if args.config:
        if args.token:
            raise ConfigError("--token cannot be combined with --config")
        return load_options(args.config)
    try:
        if args.token:
            return ClientOptions(endpoint=args.endpoint, auth="token", token=args.token)
        return ClientOptions(endpoint=args.endpoint)
    except ValueError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc


def _read_document(args: argparse.Namespace) -> str:
    if args.document is not None:
        return str(args.document)
    try:
        return Path(args.query_file).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading query file: {args.query_file}") from exc


def _parse_variables(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise VariablesValidationError(f"--variables is not valid JSON: {exc}") from exc


async def _run(args: argparse.Namespace) -> Any:
    options = _resolve_options(args)
    document = _read_document(args)
    variables = _parse_variables(args.variables)
    async with GraphQLClient.from_options(options) as client:
        if args.command == "mutation":
            return await client.mutation(document, variables)
        return await client.query(document, variables)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        data = asyncio.run(_run(args))
    except (ConfigError, VariablesValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (TransportError, UnexpectedStatusError, ResponseDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except GraphQLError as exc:
        for detail in exc.errors:
            print(f"graphql error: {detail.message}", file=sys.stderr)
        return 6

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0
