"""Shared protocol bases: request and notification params, results, pagination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import Model, String, StringOrInteger, WireModel, meta, optional

# The latest Model Context Protocol revision these types mirror
LATEST_PROTOCOL_VERSION = "2025-06-18"

# Protocol revisions whose messages these types decode (oldest first)
SUPPORTED_PROTOCOL_VERSIONS = ["2024-11-05", "2025-03-26", "2025-06-18"]

RequestId = str | int
ProgressToken = str | int
Cursor = str

REQUEST_ID = StringOrInteger()
PROGRESS_TOKEN = StringOrInteger(minimum=0)


@dataclass(frozen=True, kw_only=True)
class RequestMeta(WireModel):
    """``_meta`` member of request params, optionally carrying a progress token."""

    progress_token: ProgressToken = optional(PROGRESS_TOKEN)


@dataclass(frozen=True, kw_only=True)
class RequestParams(WireModel):
    """Params of a request that takes no method-specific members."""

    meta: RequestMeta = optional(Model(RequestMeta), wire="_meta")


@dataclass(frozen=True, kw_only=True)
class NotificationParams(WireModel):
    """Params of a notification that takes no method-specific members."""

    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class Result(WireModel):
    """Base result of a successful request."""

    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class EmptyResult(Result):
    """A result that indicates success but carries no data."""


@dataclass(frozen=True, kw_only=True)
class PaginatedParams(RequestParams):
    """Params of a listing request that may resume from a cursor."""

    cursor: Cursor = optional(String())


@dataclass(frozen=True, kw_only=True)
class PaginatedResult(Result):
    """A result that may point at a further page."""

    next_cursor: Cursor = optional(String())
