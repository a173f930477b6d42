"""Shapes for ``sampling/createMessage``, a server request for an LLM completion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcp_schema.codec import (
    EnumOf,
    Integer,
    JsonObject,
    ListOf,
    Model,
    Number,
    String,
    WireModel,
    optional,
    required,
)
from mcp_schema.types.base import RequestParams, Result
from mcp_schema.types.content import SAMPLING_CONTENT, Role, SamplingContent


class IncludeContext(str, Enum):
    """Which MCP servers' context the client should attach to the prompt."""

    NONE = "none"
    THIS_SERVER = "thisServer"
    ALL_SERVERS = "allServers"


@dataclass(frozen=True, kw_only=True)
class ModelHint(WireModel):
    """A model name hint, matched by the client as a substring."""

    name: str = optional(String())


@dataclass(frozen=True, kw_only=True)
class ModelPreferences(WireModel):
    """Server preferences for model selection; each priority lies in [0, 1]."""

    hints: list[ModelHint] = optional(ListOf(Model(ModelHint)))
    cost_priority: float = optional(Number(minimum=0, maximum=1))
    speed_priority: float = optional(Number(minimum=0, maximum=1))
    intelligence_priority: float = optional(Number(minimum=0, maximum=1))


@dataclass(frozen=True, kw_only=True)
class SamplingMessage(WireModel):
    role: Role = required(EnumOf(Role))
    content: SamplingContent = required(SAMPLING_CONTENT)


@dataclass(frozen=True, kw_only=True)
class CreateMessageParams(RequestParams):
    """Params of the ``sampling/createMessage`` request."""

    messages: list[SamplingMessage] = required(ListOf(Model(SamplingMessage)))
    model_preferences: ModelPreferences = optional(Model(ModelPreferences))
    system_prompt: str = optional(String())
    include_context: IncludeContext = optional(EnumOf(IncludeContext))
    temperature: float = optional(Number())
    max_tokens: int = required(Integer(minimum=1))
    stop_sequences: list[str] = optional(ListOf(String()))
    metadata: dict[str, Any] = optional(JsonObject())


@dataclass(frozen=True, kw_only=True)
class CreateMessageResult(Result):
    """The client's completion; ``stop_reason`` is open-ended (e.g. ``endTurn``)."""

    role: Role = required(EnumOf(Role))
    content: SamplingContent = required(SAMPLING_CONTENT)
    model: str = required(String())
    stop_reason: str = optional(String())
