# qdrant_grpc_sdk/cli.py
# SPDX-License-Identifier: Apache-2.0
"""
Qdrant gRPC SDK CLI

Small operator entrypoint for checking a server from the shell.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import enum
import json
import logging
import os
import sys
from typing import Any, List, Optional

from qdrant_grpc_sdk.builders import CountPointsBuilder
from qdrant_grpc_sdk.client import QdrantClient, QdrantConfig
from qdrant_grpc_sdk.core.errors import QdrantError

LOG = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Internal helpers
# --------------------------------------------------------------------------- #

def _jsonable(obj: Any) -> Any:
    """Plain JSON-compatible structure for a response message."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, enum.Enum):
        return obj.name
    if isinstance(obj, dict):
        return {str(k): _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(v) for v in obj]
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    return obj


def _emit(response: Any, text: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps(_jsonable(response), indent=2, sort_keys=True))
    else:
        print(text)


async def _run(args: argparse.Namespace) -> int:
    config = QdrantConfig(
        url=args.url,
        api_key=args.api_key,
        timeout=args.timeout,
        connect_timeout=args.timeout,
        check_compatibility=False,
    )
    async with QdrantClient(config) as client:
        if args.command == "health":
            reply = await client.health_check()
            _emit(reply, f"{reply.title} {reply.version}", args.json)
            return 0

        if args.command == "collections":
            response = await client.list_collections()
            names = [c.name for c in response.collections]
            _emit(response, "\n".join(names) if names else "(no collections)", args.json)
            return 0

        if args.command == "info":
            response = await client.collection_info(args.collection)
            info = response.result
            if info is None:
                text = f"{args.collection}: no info returned"
            else:
                text = (
                    f"{args.collection}: status={getattr(info.status, 'name', info.status)} "
                    f"points={info.points_count if info.points_count is not None else '-'} "
                    f"segments={info.segments_count}"
                )
            _emit(response, text, args.json)
            return 0

        if args.command == "count":
            response = await client.count(CountPointsBuilder(args.collection).exact(True))
            count = response.result.count if response.result is not None else 0
            _emit(response, str(count), args.json)
            return 0

    raise AssertionError(f"unhandled command {args.command!r}")  # pragma: no cover


# --------------------------------------------------------------------------- #
# Entrypoint
# --------------------------------------------------------------------------- #

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qdrant-grpc-sdk",
        description="Qdrant gRPC SDK CLI - inspect a Qdrant server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  qdrant-grpc-sdk health
  qdrant-grpc-sdk --url https://qdrant.example.com:6334 collections
  qdrant-grpc-sdk info docs --json
  QDRANT_API_KEY=secret qdrant-grpc-sdk count docs

Configuration (environment variables):
  QDRANT_URL         Server URL (default: http://localhost:6334)
  QDRANT_API_KEY     API key sent with every call
        """.strip(),
    )

    parser.add_argument(
        "--url", default=os.getenv("QDRANT_URL") or "http://localhost:6334",
        help="Server URL"
    )
    parser.add_argument(
        "--api-key", default=os.getenv("QDRANT_API_KEY") or None,
        help="API key"
    )
    parser.add_argument(
        "--timeout", type=float, default=5.0,
        help="Connect and request timeout in seconds (default: 5)"
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the full response as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable DEBUG logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="command to execute",
        metavar="COMMAND"
    )
    subparsers.add_parser("health", help="Show server title and version")
    subparsers.add_parser("collections", help="List collection names")
    info_parser = subparsers.add_parser("info", help="Show collection status")
    info_parser.add_argument("collection")
    count_parser = subparsers.add_parser("count", help="Count points exactly")
    count_parser.add_argument("collection")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return asyncio.run(_run(args))
    except QdrantError as e:
        LOG.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e.code}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
