# qdrant_grpc_sdk/core/version.py
# SPDX-License-Identifier: Apache-2.0
"""
Library version and client/server version compatibility.

A client and server are considered compatible when their version strings are
identical, or when they share the major version and their minor versions
differ by at most one.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass

from qdrant_grpc_sdk.core.errors import VersionError

LOG = logging.getLogger(__name__)

__version__ = "1.12.0"


@dataclass(frozen=True)
class Version:
    """
    A parsed ``major.minor[.patch]`` version.

    Attributes:
        major: Major version number
        minor: Minor version number
    """
    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> "Version":
        if not text:
            raise VersionError("empty version")
        parts = text.split(".")
        if len(parts) < 2:
            raise VersionError(f"invalid format: {text!r}")
        try:
            return cls(major=int(parts[0]), minor=int(parts[1]))
        except ValueError:
            raise VersionError(f"invalid format: {text!r}") from None


def is_compatible(client_version: str, server_version: str) -> bool:
    if client_version == server_version:
        return True
    try:
        client = Version.parse(client_version)
        server = Version.parse(server_version)
    except VersionError as e:
        LOG.debug("unable to compare versions %r and %r: %s", client_version, server_version, e)
        return False
    return client.major == server.major and abs(client.minor - server.minor) <= 1


def user_agent() -> str:
    """Client identification string sent as ``x-user-agent``."""
    return f"python-client/{__version__} python/{platform.python_version()}"


__all__ = ["__version__", "Version", "is_compatible", "user_agent"]
