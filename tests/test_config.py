# SPDX-License-Identifier: Apache-2.0
"""
Client configuration: URL parsing, validation, environment fallbacks and
channel options.
"""

import grpc
import pytest

from qdrant_grpc_sdk.client.config import Compression, QdrantConfig
from qdrant_grpc_sdk.core.errors import InvalidUriError, PreconditionError


def test_defaults():
    """Verify the default config targets a local server without TLS."""
    config = QdrantConfig()
    assert config.target == "localhost:6334"
    assert config.use_tls is False
    assert config.timeout == 5.0
    assert config.grpc_compression() is None


@pytest.mark.parametrize(
    "url, target, tls",
    [
        ("http://localhost:6334", "localhost:6334", False),
        ("https://cluster.example.com", "cluster.example.com:6334", True),
        ("http://10.0.0.5:7000", "10.0.0.5:7000", False),
        ("http://[::1]:6334", "[::1]:6334", False),
    ],
)
def test_target_and_tls_from_url(url, target, tls):
    """Verify host, port and TLS are derived from the URL."""
    config = QdrantConfig.from_url(url)
    assert config.target == target
    assert config.use_tls is tls


@pytest.mark.parametrize("url", ["ftp://localhost:6334", "localhost:6334", "http://", "http://host:notaport"])
def test_invalid_urls_raise(url):
    """Verify unusable URLs raise InvalidUriError at construction."""
    with pytest.raises(InvalidUriError) as exc_info:
        QdrantConfig(url=url)
    assert exc_info.value.code == "INVALID_URI"


def test_unsupported_schema_message():
    """Verify an unsupported scheme is reported as such."""
    with pytest.raises(InvalidUriError) as exc_info:
        QdrantConfig(url="grpc://localhost:6334")
    assert "Unsupported schema" in str(exc_info.value)


@pytest.mark.parametrize(
    "overrides",
    [{"timeout": 0}, {"timeout": -1.0}, {"connect_timeout": 0}, {"max_message_length": 0}, {"compression": "brotli"}],
)
def test_invalid_settings_raise_precondition_error(overrides):
    """Verify non-positive limits and unknown compression are rejected."""
    with pytest.raises(PreconditionError):
        QdrantConfig(**overrides)


def test_compression_accepts_string():
    """Verify compression may be given by name."""
    config = QdrantConfig(compression="gzip")
    assert config.compression is Compression.GZIP
    assert config.grpc_compression() == grpc.Compression.Gzip


def test_from_env(monkeypatch):
    """Verify QDRANT_URL and QDRANT_API_KEY are read, and overrides win."""
    monkeypatch.setenv("QDRANT_URL", "https://env.example.com:6335")
    monkeypatch.setenv("QDRANT_API_KEY", "secret")
    config = QdrantConfig.from_env()
    assert config.target == "env.example.com:6335"
    assert config.api_key == "secret"

    assert QdrantConfig.from_env(api_key=None).api_key is None


def test_from_env_defaults(monkeypatch):
    """Verify missing environment variables fall back to defaults."""
    monkeypatch.delenv("QDRANT_URL", raising=False)
    monkeypatch.delenv("QDRANT_API_KEY", raising=False)
    config = QdrantConfig.from_env()
    assert config.url == "http://localhost:6334"
    assert config.api_key is None


def test_channel_options():
    """Verify message size limits and keepalive options."""
    options = dict(QdrantConfig(max_message_length=1024).channel_options())
    assert options["grpc.max_send_message_length"] == 1024
    assert options["grpc.max_receive_message_length"] == 1024
    assert options["grpc.keepalive_permit_without_calls"] == 1

    quiet = dict(QdrantConfig(keep_alive_while_idle=False).channel_options())
    assert "grpc.keepalive_time_ms" not in quiet


def test_replace_revalidates():
    """Verify replace() returns a new validated config."""
    config = QdrantConfig()
    assert config.replace(timeout=1.0).timeout == 1.0
    with pytest.raises(PreconditionError):
        config.replace(timeout=0)


def test_repr_masks_api_key():
    """Verify the API key never appears in repr."""
    text = repr(QdrantConfig(api_key="top-secret"))
    assert "top-secret" not in text
    assert "***" in text
