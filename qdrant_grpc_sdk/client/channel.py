# qdrant_grpc_sdk/client/channel.py
# SPDX-License-Identifier: Apache-2.0
"""
Lazily created, shared gRPC channel.

Purpose
-------
Holds at most one ``grpc.aio.Channel`` for the client. The channel is
created on first use, shared by every concurrent call (gRPC multiplexes
calls over it), and dropped after failures that usually mean the
connection itself is broken so the next call reconnects.

Design notes
------------
- Creation and the readiness wait are bounded by ``connect_timeout``; an
  unreachable endpoint raises :class:`TransportError` instead of hanging.
- Dropping a channel never retries the call that failed, and never
  cancels other calls still running on it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Set

import grpc

from qdrant_grpc_sdk.client.config import QdrantConfig
from qdrant_grpc_sdk.core.errors import TransportError

LOG = logging.getLogger(__name__)

# Statuses after which the connection is not trusted for further calls.
RECONNECT_STATUS_CODES = frozenset(
    {
        grpc.StatusCode.INTERNAL,
        grpc.StatusCode.UNAVAILABLE,
        grpc.StatusCode.CANCELLED,
        grpc.StatusCode.UNKNOWN,
    }
)

ChannelFactory = Callable[[QdrantConfig], grpc.aio.Channel]


def create_channel(config: QdrantConfig) -> grpc.aio.Channel:
    """Open a ``grpc.aio`` channel for ``config`` (no I/O happens until first use)."""
    options = config.channel_options()
    compression = config.grpc_compression()
    if config.use_tls:
        credentials = grpc.ssl_channel_credentials(root_certificates=config.tls_root_certificates)
        return grpc.aio.secure_channel(config.target, credentials, options=options, compression=compression)
    return grpc.aio.insecure_channel(config.target, options=options, compression=compression)


class ChannelPool:
    """Owns the client's channel; see the module docstring."""

    def __init__(self, config: QdrantConfig, factory: ChannelFactory = create_channel) -> None:
        self._config = config
        self._factory = factory
        self._channel: Optional[grpc.aio.Channel] = None
        self._retiring: Set[asyncio.Task] = set()
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._channel is not None

    async def get_channel(self) -> grpc.aio.Channel:
        channel = self._channel
        if channel is not None and channel.get_state() == grpc.ChannelConnectivity.READY:
            return channel

        async with self._lock:
            if self._channel is None:
                LOG.debug("opening channel to %s", self._config.target)
                self._channel = self._factory(self._config)
            channel = self._channel
            try:
                await asyncio.wait_for(channel.channel_ready(), timeout=self._config.connect_timeout)
            except asyncio.TimeoutError:
                await self._discard(channel)
                raise TransportError(
                    f"could not connect to {self._config.target} within {self._config.connect_timeout}s",
                    details={"target": self._config.target, "connect_timeout": self._config.connect_timeout},
                ) from None
            return channel

    async def drop_channel(self, channel: Optional[grpc.aio.Channel] = None) -> None:
        """
        Detach ``channel`` (or the current one) so the next call reconnects.

        Calls still in flight on the detached channel keep running; the
        channel is closed in the background once they finish, or after the
        request timeout as a grace period.
        """
        async with self._lock:
            if self._channel is None or (channel is not None and channel is not self._channel):
                return
            LOG.warning("dropping channel to %s after a connection-level failure", self._config.target)
            retired, self._channel = self._channel, None
            task = asyncio.get_running_loop().create_task(retired.close(grace=self._config.timeout))
            self._retiring.add(task)
            task.add_done_callback(self._retiring.discard)

    async def _discard(self, channel: grpc.aio.Channel) -> None:
        if channel is self._channel:
            self._channel = None
        await channel.close()

    async def close(self) -> None:
        async with self._lock:
            if self._channel is not None:
                LOG.debug("closing channel to %s", self._config.target)
                await self._discard(self._channel)
            retiring = list(self._retiring)
        if retiring:
            await asyncio.gather(*retiring)


__all__ = ["ChannelPool", "ChannelFactory", "RECONNECT_STATUS_CODES", "create_channel"]
