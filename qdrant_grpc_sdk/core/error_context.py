# qdrant_grpc_sdk/core/error_context.py
# SPDX-License-Identifier: Apache-2.0

"""
Error context utilities for the client.

Helpers for attaching debugging context (operation, collection, chunk index)
to exceptions as they propagate out of the transport wrapper, without
changing the exception's type or message.

Typical usage
-------------

    from qdrant_grpc_sdk.core.error_context import attach_context

    try:
        response = await client.upsert_points(request)
    except Exception as exc:
        attach_context(
            exc,
            origin="points",
            operation="Points/Upsert",
            collection=request.collection_name,
        )
        raise

Later, in error handlers:

    except QdrantError as exc:
        context = get_context(exc)
        LOG.error("call failed", extra={"operation": context.get("operation")})

Design philosophy
-----------------

* Non-invasive:
    Context lives in the `__qdrant_context__` attribute. The exception
    propagates unchanged except for that attribute.

* Composable:
    Repeated calls merge into the existing context, so the channel layer and
    the client can both contribute keys.

* Safe:
    Attachment failures are logged at DEBUG and never mask the original
    exception.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

LOG = logging.getLogger(__name__)

_CONTEXT_ATTR = "__qdrant_context__"


def attach_context(exc: BaseException, origin: str, **context: Any) -> None:
    """
    Attach debugging context to an exception.

    Parameters
    ----------
    exc:
        The exception to enrich.

    origin:
        Component that produced the context (e.g. "points", "collections",
        "channel"). Stored under the "origin" key unless already present.

    **context:
        Arbitrary keys such as ``operation``, ``collection``, ``chunk``.
        Avoid credentials and payload contents.
    """
    try:
        merged: MutableMapping[str, Any] = {}
        existing = getattr(exc, _CONTEXT_ATTR, None)
        if isinstance(existing, Mapping):
            merged.update(existing)

        merged.setdefault("origin", origin)
        merged.update(context)
        setattr(exc, _CONTEXT_ATTR, merged)
    except Exception as attachment_error:  # noqa: BLE001
        LOG.debug(
            "Failed to attach error context to %s: %s",
            type(exc).__name__,
            attachment_error,
        )


def get_context(exc: BaseException) -> Mapping[str, Any]:
    """Return the context attached to ``exc``, or an empty dict."""
    ctx = getattr(exc, _CONTEXT_ATTR, None)
    if isinstance(ctx, Mapping):
        return ctx
    return {}


def has_context(exc: BaseException) -> bool:
    return len(get_context(exc)) > 0


__all__ = [
    "attach_context",
    "get_context",
    "has_context",
]
