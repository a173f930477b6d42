"""Tool descriptors and the tools/list and tools/call shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import (
    Boolean,
    JsonObject,
    ListOf,
    Model,
    SchemaDocument,
    String,
    WireModel,
    meta,
    optional,
    required,
)
from mcp_schema.types.base import PaginatedResult, RequestParams, Result
from mcp_schema.types.content import CONTENT_BLOCK, ContentBlock


@dataclass(frozen=True, kw_only=True)
class ToolAnnotations(WireModel):
    """Behavioral hints about a tool.

    All hints are advisory; clients must not rely on them for tools from
    untrusted servers.
    """

    title: str = optional(String())
    read_only_hint: bool = optional(Boolean())
    destructive_hint: bool = optional(Boolean())
    idempotent_hint: bool = optional(Boolean())
    open_world_hint: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class Tool(WireModel):
    """Definition of a tool the client can call.

    ``input_schema`` and ``output_schema`` are JSON Schema documents whose
    root type must be ``object``.
    """

    name: str = required(String())
    title: str = optional(String())
    description: str = optional(String())
    input_schema: dict[str, Any] = required(SchemaDocument())
    output_schema: dict[str, Any] = optional(SchemaDocument())
    annotations: ToolAnnotations = optional(Model(ToolAnnotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class ListToolsResult(PaginatedResult):
    tools: list[Tool] = required(ListOf(Model(Tool)))


@dataclass(frozen=True, kw_only=True)
class CallToolParams(RequestParams):
    """Params of the ``tools/call`` request."""

    name: str = required(String())
    arguments: dict[str, Any] = optional(JsonObject())


@dataclass(frozen=True, kw_only=True)
class CallToolResult(Result):
    """Result of a tool call.

    ``structured_content`` carries a machine-readable payload matching the
    tool's output schema. Tool-level failures are reported with
    ``is_error=True`` rather than as a JSON-RPC error.
    """

    content: list[ContentBlock] = required(ListOf(CONTENT_BLOCK))
    structured_content: dict[str, Any] = optional(JsonObject())
    is_error: bool = optional(Boolean())
