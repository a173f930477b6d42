"""Shapes for ``completion/complete``, argument autocompletion."""

from __future__ import annotations

from dataclasses import dataclass

from mcp_schema.codec import (
    Boolean,
    Integer,
    ListOf,
    MapOf,
    Model,
    String,
    TaggedUnion,
    WireModel,
    optional,
    required,
)
from mcp_schema.types.base import RequestParams, Result

# Upper bound on completion values in a single result
MAX_COMPLETION_VALUES = 100


@dataclass(frozen=True, kw_only=True)
class PromptReference(WireModel):
    _tag = "ref/prompt"

    name: str = required(String())
    title: str = optional(String())


@dataclass(frozen=True, kw_only=True)
class ResourceTemplateReference(WireModel):
    _tag = "ref/resource"

    uri: str = required(String())


Reference = PromptReference | ResourceTemplateReference

# Closed: a completion must point at a prompt or a resource template
REFERENCE = TaggedUnion([PromptReference, ResourceTemplateReference])


@dataclass(frozen=True, kw_only=True)
class CompleteArgument(WireModel):
    name: str = required(String())
    value: str = required(String())


@dataclass(frozen=True, kw_only=True)
class CompleteContext(WireModel):
    """Previously resolved arguments, to narrow the completion."""

    arguments: dict[str, str] = optional(MapOf(String()))


@dataclass(frozen=True, kw_only=True)
class CompleteParams(RequestParams):
    ref: Reference = required(REFERENCE)
    argument: CompleteArgument = required(Model(CompleteArgument))
    context: CompleteContext = optional(Model(CompleteContext))


@dataclass(frozen=True, kw_only=True)
class Completion(WireModel):
    """Candidate values; ``total`` may exceed ``len(values)`` when ``has_more`` is set."""

    values: list[str] = required(ListOf(String(), max_items=MAX_COMPLETION_VALUES))
    total: int = optional(Integer(minimum=0))
    has_more: bool = optional(Boolean())


@dataclass(frozen=True, kw_only=True)
class CompleteResult(Result):
    completion: Completion = required(Model(Completion))
