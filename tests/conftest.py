# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures: an in-process fake Qdrant gRPC server.

The fake registers raw-bytes handlers for every method of the compiled
schema. Requests are decoded into model values and recorded together with
their metadata; responses are either canned model values, callables that
receive the decoded request (and may be coroutines or return a
:class:`Failure`), or a status to abort with.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple, Union

import grpc
import pytest
import pytest_asyncio

from qdrant_grpc_sdk.client import QdrantClient, QdrantConfig
from qdrant_grpc_sdk.models import MESSAGE_TYPES, decode, encode
from qdrant_grpc_sdk.models.snapshots import HealthCheckReply
from qdrant_grpc_sdk.proto import SCHEMA


@dataclass
class RecordedCall:
    service: str
    method: str
    request: Any
    metadata: Dict[str, str]


@dataclass
class Failure:
    code: grpc.StatusCode
    details: str = ""
    trailing_metadata: Sequence[Tuple[str, str]] = ()


Reply = Union[Any, Callable[[Any], Any], Failure]


class FakeQdrant:
    """Fake server state; configure replies with :meth:`reply` and :meth:`fail`."""

    def __init__(self) -> None:
        self.calls: List[RecordedCall] = []
        self._replies: Dict[Tuple[str, str], Reply] = {
            ("Qdrant", "HealthCheck"): HealthCheckReply(title="qdrant - vector search engine", version="1.12.1"),
        }

    def reply(self, service: str, method: str, response: Reply) -> None:
        self._replies[(service, method)] = response

    def fail(
        self,
        service: str,
        method: str,
        code: grpc.StatusCode,
        details: str = "",
        trailing_metadata: Sequence[Tuple[str, str]] = (),
    ) -> None:
        self._replies[(service, method)] = Failure(code, details, tuple(trailing_metadata))

    @staticmethod
    def failure(code: grpc.StatusCode, details: str = "") -> Failure:
        """A reply value that makes the call fail with ``code``."""
        return Failure(code, details)

    def calls_to(self, service: str, method: str) -> List[RecordedCall]:
        return [c for c in self.calls if (c.service, c.method) == (service, method)]

    def _handler(self, service: str, method: str):
        descriptor = SCHEMA.method(service, method)
        request_type = MESSAGE_TYPES[descriptor.input_type.full_name]
        response_type = MESSAGE_TYPES[descriptor.output_type.full_name]

        async def handle(request: bytes, context: grpc.aio.ServicerContext) -> bytes:
            decoded = decode(request_type, request)
            metadata = {k: v for k, v in context.invocation_metadata()}
            self.calls.append(RecordedCall(service, method, decoded, metadata))

            reply = self._replies.get((service, method))
            if reply is None:
                await context.abort(grpc.StatusCode.UNIMPLEMENTED, f"{service}/{method} not configured")
            if callable(reply):
                reply = reply(decoded)
                if inspect.isawaitable(reply):
                    reply = await reply
            if isinstance(reply, Failure):
                await context.abort(reply.code, reply.details, trailing_metadata=tuple(reply.trailing_metadata))
            return encode(reply if reply is not None else response_type())

        return grpc.unary_unary_rpc_method_handler(handle)

    def generic_handlers(self) -> List[grpc.GenericRpcHandler]:
        handlers = []
        for service in SCHEMA.pool.FindFileByName(SCHEMA.file_proto.name).services_by_name.values():
            methods = {m.name: self._handler(service.name, m.name) for m in service.methods}
            handlers.append(grpc.method_handlers_generic_handler(service.full_name, methods))
        return handlers


@pytest.fixture
def fake_qdrant() -> FakeQdrant:
    return FakeQdrant()


@pytest_asyncio.fixture
async def server_url(fake_qdrant: FakeQdrant):
    """Start an in-process server backed by ``fake_qdrant`` and yield its URL."""
    server = grpc.aio.server()
    server.add_generic_rpc_handlers(tuple(fake_qdrant.generic_handlers()))
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await server.stop(None)


@pytest_asyncio.fixture
async def client(server_url: str):
    """Client connected to the fake server, without the version check."""
    config = QdrantConfig(url=server_url, timeout=5.0, connect_timeout=5.0, check_compatibility=False)
    async with QdrantClient(config) as c:
        yield c

