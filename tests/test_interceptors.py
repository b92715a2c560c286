# SPDX-License-Identifier: Apache-2.0
"""
Request decoration: header order, user agent and metadata validation.
"""

import pytest

from qdrant_grpc_sdk.client.interceptors import (
    API_KEY_HEADER,
    USER_AGENT_HEADER,
    ApiKeyDecorator,
    UserAgentDecorator,
    decorate,
    validate_header_value,
)
from qdrant_grpc_sdk.core.errors import MalformedMetadataError
from qdrant_grpc_sdk.core.version import user_agent


def test_decorators_apply_in_order():
    """Verify api-key precedes the user agent, then custom decorators."""
    custom = lambda md: [*md, ("x-request-id", "abc")]  # noqa: E731
    metadata = decorate([], [ApiKeyDecorator("secret"), UserAgentDecorator(), custom])
    assert metadata == [
        (API_KEY_HEADER, "secret"),
        (USER_AGENT_HEADER, user_agent()),
        ("x-request-id", "abc"),
    ]


def test_no_api_key_adds_nothing():
    """Verify the api-key header is omitted when no key is configured."""
    assert ApiKeyDecorator(None)([("a", "b")]) == [("a", "b")]


def test_custom_user_agent():
    """Verify an explicit user agent replaces the default."""
    assert UserAgentDecorator("my-app/1.0")([]) == [(USER_AGENT_HEADER, "my-app/1.0")]


@pytest.mark.parametrize("bad", ["sécret", "line\nbreak", "tab\tkey", "\x7f"])
def test_malformed_api_key_rejected_at_construction(bad):
    """Verify a key that is not printable ASCII raises MalformedMetadataError."""
    with pytest.raises(MalformedMetadataError) as exc_info:
        ApiKeyDecorator(bad)
    assert exc_info.value.header == API_KEY_HEADER
    assert exc_info.value.code == "MALFORMED_METADATA"


def test_decorate_validates_custom_headers():
    """Verify values added by custom decorators are validated too."""
    bad = lambda md: [*md, ("x-tenant", "naïve")]  # noqa: E731
    with pytest.raises(MalformedMetadataError) as exc_info:
        decorate([], [bad])
    assert exc_info.value.header == "x-tenant"


def test_validate_header_value_rejects_non_strings():
    """Verify non-string header values are rejected."""
    with pytest.raises(MalformedMetadataError):
        validate_header_value("api-key", b"bytes")
    assert validate_header_value("api-key", "ok ~ value") == "ok ~ value"
