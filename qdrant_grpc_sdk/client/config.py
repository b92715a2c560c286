# qdrant_grpc_sdk/client/config.py
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration.

Frozen and validated on construction. Parsing the URL is the only work done
here; nothing touches the network.

Environment
-----------
``QdrantConfig.from_env()`` reads:

    QDRANT_URL       server URL (default http://localhost:6334)
    QDRANT_API_KEY   API key sent as the ``api-key`` header
"""

from __future__ import annotations

import dataclasses
import enum
import os
from dataclasses import dataclass
from typing import Any, Optional, Tuple
from urllib.parse import urlsplit

import grpc

from qdrant_grpc_sdk.client.interceptors import MetadataDecorator
from qdrant_grpc_sdk.core.errors import InvalidUriError, PreconditionError

DEFAULT_URL = "http://localhost:6334"
DEFAULT_PORT = 6334
DEFAULT_MAX_MESSAGE_LENGTH = 64 * 1024 * 1024


class Compression(str, enum.Enum):
    GZIP = "gzip"

    def to_grpc(self) -> grpc.Compression:
        return grpc.Compression.Gzip


@dataclass(frozen=True)
class QdrantConfig:
    """
    Connection and call settings.

    Attributes:
        url: ``http://`` or ``https://`` URL of the gRPC endpoint
        api_key: Optional API key attached to every call
        timeout: Default per-request deadline in seconds
        connect_timeout: Seconds to wait for the channel to become ready
        keep_alive_while_idle: Send keepalive pings even without active calls
        compression: Request compression, or None
        max_message_length: Send and receive size limit in bytes
        check_compatibility: Compare client and server versions once, before the first call
        tls_root_certificates: PEM root certificates for ``https`` (system roots if None)
        metadata_decorators: Extra request decorators applied after the built-in ones
    """
    url: str = DEFAULT_URL
    api_key: Optional[str] = None
    timeout: float = 5.0
    connect_timeout: float = 5.0
    keep_alive_while_idle: bool = True
    compression: Optional[Compression] = None
    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH
    check_compatibility: bool = True
    tls_root_certificates: Optional[bytes] = None
    metadata_decorators: Tuple[MetadataDecorator, ...] = ()

    def __post_init__(self) -> None:
        if self.compression is not None and not isinstance(self.compression, Compression):
            try:
                object.__setattr__(self, "compression", Compression(self.compression))
            except ValueError:
                raise PreconditionError(f"unsupported compression: {self.compression!r}") from None
        object.__setattr__(self, "metadata_decorators", tuple(self.metadata_decorators))

        for name in ("timeout", "connect_timeout"):
            value = getattr(self, name)
            if value is None or value <= 0:
                raise PreconditionError(f"{name} must be a positive number of seconds, got {value!r}")
        if self.max_message_length <= 0:
            raise PreconditionError(f"max_message_length must be positive, got {self.max_message_length!r}")

        # Parse eagerly so a bad URL fails at construction rather than on first use.
        self._endpoint()

    # ------------------------------------------------------------------ #
    # Constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> "QdrantConfig":
        return cls(url=url, **overrides)

    @classmethod
    def from_env(cls, **overrides: Any) -> "QdrantConfig":
        """Read ``QDRANT_URL`` and ``QDRANT_API_KEY``; explicit overrides win."""
        overrides.setdefault("url", os.getenv("QDRANT_URL") or DEFAULT_URL)
        overrides.setdefault("api_key", os.getenv("QDRANT_API_KEY") or None)
        return cls(**overrides)

    def replace(self, **changes: Any) -> "QdrantConfig":
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------ #
    # Derived values
    # ------------------------------------------------------------------ #

    def _endpoint(self) -> Tuple[str, str, int]:
        try:
            parts = urlsplit(self.url)
            port = parts.port
        except ValueError as e:
            raise InvalidUriError(f"invalid URL {self.url!r}: {e}", details={"url": self.url}) from e
        if parts.scheme not in ("http", "https"):
            raise InvalidUriError(
                f"Unsupported schema {parts.scheme!r} in {self.url!r}; expected http or https",
                details={"url": self.url},
            )
        if not parts.hostname:
            raise InvalidUriError(f"URL {self.url!r} has no host", details={"url": self.url})
        return parts.scheme, parts.hostname, port or DEFAULT_PORT

    @property
    def use_tls(self) -> bool:
        return self._endpoint()[0] == "https"

    @property
    def target(self) -> str:
        """``host:port`` target for the gRPC channel."""
        _, host, port = self._endpoint()
        if ":" in host:
            host = f"[{host}]"
        return f"{host}:{port}"

    def channel_options(self) -> Tuple[Tuple[str, Any], ...]:
        options = [
            ("grpc.max_send_message_length", self.max_message_length),
            ("grpc.max_receive_message_length", self.max_message_length),
        ]
        if self.keep_alive_while_idle:
            options.extend(
                [
                    ("grpc.keepalive_time_ms", 30_000),
                    ("grpc.keepalive_permit_without_calls", 1),
                ]
            )
        return tuple(options)

    def grpc_compression(self) -> Optional[grpc.Compression]:
        return self.compression.to_grpc() if self.compression is not None else None

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return (
            f"QdrantConfig(url={self.url!r}, api_key={key!r}, timeout={self.timeout}, "
            f"connect_timeout={self.connect_timeout}, compression={self.compression})"
        )


__all__ = ["Compression", "QdrantConfig", "DEFAULT_URL", "DEFAULT_PORT"]
