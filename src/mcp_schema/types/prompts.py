"""Prompt descriptors and the prompts/list and prompts/get shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import (
    Boolean,
    EnumOf,
    ListOf,
    MapOf,
    Model,
    String,
    WireModel,
    meta,
    optional,
    required,
)
from mcp_schema.types.base import PaginatedResult, RequestParams, Result
from mcp_schema.types.content import CONTENT_BLOCK, ContentBlock, Role


@dataclass(frozen=True, kw_only=True)
class PromptArgument(WireModel):
    name: str = required(String())
    title: str = optional(String())
    description: str = optional(String())
    required: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class Prompt(WireModel):
    """A prompt or prompt template offered by the server."""

    name: str = required(String())
    title: str = optional(String())
    description: str = optional(String())
    arguments: list[PromptArgument] = optional(ListOf(Model(PromptArgument)))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class PromptMessage(WireModel):
    role: Role = required(EnumOf(Role))
    content: ContentBlock = required(CONTENT_BLOCK)


@dataclass(frozen=True, kw_only=True)
class ListPromptsResult(PaginatedResult):
    prompts: list[Prompt] = required(ListOf(Model(Prompt)))


@dataclass(frozen=True, kw_only=True)
class GetPromptParams(RequestParams):
    """Params of ``prompts/get``; argument values are always strings."""

    name: str = required(String())
    arguments: dict[str, str] = optional(MapOf(String()))


@dataclass(frozen=True, kw_only=True)
class GetPromptResult(Result):
    description: str = optional(String())
    messages: list[PromptMessage] = required(ListOf(Model(PromptMessage)))
