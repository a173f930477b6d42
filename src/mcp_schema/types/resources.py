"""Resource descriptors and the resources/* request and result shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import (
    Integer,
    ListOf,
    Model,
    String,
    WireModel,
    meta,
    optional,
    required,
)
from mcp_schema.types.base import NotificationParams, PaginatedResult, RequestParams, Result
from mcp_schema.types.content import RESOURCE_CONTENTS, Annotations, ResourceContents


@dataclass(frozen=True, kw_only=True)
class Resource(WireModel):
    """A resource the server can read."""

    uri: str = required(String())
    name: str = required(String())
    title: str = optional(String())
    description: str = optional(String())
    mime_type: str = optional(String())
    size: int = optional(Integer(minimum=0))
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class ResourceTemplate(WireModel):
    """A template (RFC 6570) for building resource URIs."""

    uri_template: str = required(String())
    name: str = required(String())
    title: str = optional(String())
    description: str = optional(String())
    mime_type: str = optional(String())
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class ListResourcesResult(PaginatedResult):
    resources: list[Resource] = required(ListOf(Model(Resource)))


@dataclass(frozen=True, kw_only=True)
class ListResourceTemplatesResult(PaginatedResult):
    resource_templates: list[ResourceTemplate] = required(ListOf(Model(ResourceTemplate)))


@dataclass(frozen=True, kw_only=True)
class ReadResourceParams(RequestParams):
    uri: str = required(String())


@dataclass(frozen=True, kw_only=True)
class ReadResourceResult(Result):
    contents: list[ResourceContents] = required(ListOf(RESOURCE_CONTENTS))


@dataclass(frozen=True, kw_only=True)
class SubscribeParams(RequestParams):
    uri: str = required(String())


@dataclass(frozen=True, kw_only=True)
class UnsubscribeParams(RequestParams):
    uri: str = required(String())


@dataclass(frozen=True, kw_only=True)
class ResourceUpdatedParams(NotificationParams):
    """Params of ``notifications/resources/updated``."""

    uri: str = required(String())
