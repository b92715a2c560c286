# SPDX-License-Identifier: Apache-2.0
"""
Version parsing, compatibility rules and the user agent string.
"""

import platform

import pytest

from qdrant_grpc_sdk.core.errors import VersionError
from qdrant_grpc_sdk.core.version import Version, __version__, is_compatible, user_agent


def test_parse_major_minor_patch():
    """Verify major and minor are read and the patch level is ignored."""
    assert Version.parse("1.12.3") == Version(major=1, minor=12)
    assert Version.parse("2.0") == Version(major=2, minor=0)


@pytest.mark.parametrize("text", ["1", "a.b", "1.x.0", "v1.2"])
def test_parse_rejects_invalid_format(text):
    """Verify malformed version strings raise VersionError."""
    with pytest.raises(VersionError) as exc_info:
        Version.parse(text)
    assert "invalid format" in str(exc_info.value)
    assert exc_info.value.code == "VERSION_ERROR"


def test_parse_rejects_empty():
    """Verify an empty version string is reported as empty."""
    with pytest.raises(VersionError) as exc_info:
        Version.parse("")
    assert str(exc_info.value) == "empty version"


@pytest.mark.parametrize(
    "client, server, expected",
    [
        ("1.12.0", "1.12.0", True),
        ("1.12.0", "1.12.5", True),
        ("1.12.0", "1.13.0", True),
        ("1.12.0", "1.11.2", True),
        ("1.12.0", "1.14.0", False),
        ("1.12.0", "1.10.0", False),
        ("1.12.0", "2.12.0", False),
        ("dev", "dev", True),
        ("1.12.0", "", False),
        ("1.12.0", "garbage", False),
    ],
)
def test_is_compatible(client, server, expected):
    """Verify same major and minor within one, or identical strings, are compatible."""
    assert is_compatible(client, server) is expected


def test_user_agent_format():
    """Verify the user agent names the library and runtime versions."""
    assert user_agent() == f"python-client/{__version__} python/{platform.python_version()}"
