"""Implementation info, capabilities and the initialize handshake shapes.

Capabilities are presence flags: an absent capability means "not supported",
never "false". Capabilities with no settings of their own (``sampling``,
``elicitation``, ``logging``, ``completions``) are carried as opaque objects,
so ``{}`` means "supported".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import Boolean, JsonObject, Model, String, WireModel, optional, required
from mcp_schema.types.base import RequestParams, Result


@dataclass(frozen=True, kw_only=True)
class Implementation(WireModel):
    """Name and version of an MCP implementation."""

    name: str = required(String())
    title: str = optional(String())
    version: str = required(String())


@dataclass(frozen=True, kw_only=True)
class RootsCapability(WireModel):
    list_changed: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class PromptsCapability(WireModel):
    list_changed: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class ResourcesCapability(WireModel):
    subscribe: bool = optional(Boolean())
    list_changed: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class ToolsCapability(WireModel):
    list_changed: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class ClientCapabilities(WireModel):
    """Capabilities a client may support."""

    experimental: dict[str, Any] = optional(JsonObject())
    roots: RootsCapability = optional(Model(RootsCapability))
    sampling: dict[str, Any] = optional(JsonObject())
    elicitation: dict[str, Any] = optional(JsonObject())


@dataclass(frozen=True, kw_only=True)
class ServerCapabilities(WireModel):
    """Capabilities a server may support."""

    experimental: dict[str, Any] = optional(JsonObject())
    logging: dict[str, Any] = optional(JsonObject())
    completions: dict[str, Any] = optional(JsonObject())
    prompts: PromptsCapability = optional(Model(PromptsCapability))
    resources: ResourcesCapability = optional(Model(ResourcesCapability))
    tools: ToolsCapability = optional(Model(ToolsCapability))


@dataclass(frozen=True, kw_only=True)
class InitializeParams(RequestParams):
    """Params of the ``initialize`` request (client to server)."""

    protocol_version: str = required(String())
    capabilities: ClientCapabilities = required(Model(ClientCapabilities))
    client_info: Implementation = required(Model(Implementation))


@dataclass(frozen=True, kw_only=True)
class InitializeResult(Result):
    """Result of the ``initialize`` request."""

    protocol_version: str = required(String())
    capabilities: ServerCapabilities = required(Model(ServerCapabilities))
    server_info: Implementation = required(Model(Implementation))
    instructions: str = optional(String())
