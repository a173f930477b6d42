"""Content blocks, annotations and resource contents.

A content block is one unit of a tool result or message payload. Blocks form
a closed union discriminated by their ``type`` member:

    text, image, audio, resource_link, resource

Unknown tags are rejected, or kept as ``UnrecognizedContent`` when the decode
policy preserves unknown variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from mcp_schema.codec import (
    EnumOf,
    Integer,
    KeyedUnion,
    ListOf,
    Model,
    Number,
    String,
    TaggedUnion,
    Unrecognized,
    WireModel,
    meta,
    optional,
    required,
)


class Role(str, Enum):
    """The sender or recipient of a message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True, kw_only=True)
class Annotations(WireModel):
    """Hints to the client about how a piece of content is used or shown."""

    audience: list[Role] = optional(ListOf(EnumOf(Role)))
    priority: float = optional(Number(minimum=0, maximum=1))
    last_modified: str = optional(String())


@dataclass(frozen=True, kw_only=True)
class TextResourceContents(WireModel):
    uri: str = required(String())
    mime_type: str = optional(String())
    text: str = required(String())
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class BlobResourceContents(WireModel):
    """Binary resource contents, base64 encoded in ``blob``."""

    uri: str = required(String())
    mime_type: str = optional(String())
    blob: str = required(String())
    meta: dict[str, Any] = meta()


ResourceContents = TextResourceContents | BlobResourceContents

# Text or blob, chosen by which member is present
RESOURCE_CONTENTS = KeyedUnion({"text": TextResourceContents, "blob": BlobResourceContents})


@dataclass(frozen=True, kw_only=True)
class TextContent(WireModel):
    _tag = "text"

    text: str = required(String())
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class ImageContent(WireModel):
    """An image, base64 encoded in ``data``."""

    _tag = "image"

    data: str = required(String())
    mime_type: str = required(String())
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class AudioContent(WireModel):
    """An audio clip, base64 encoded in ``data``."""

    _tag = "audio"

    data: str = required(String())
    mime_type: str = required(String())
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class ResourceLink(WireModel):
    """A reference to a resource the client may read; the contents are not inlined."""

    _tag = "resource_link"

    uri: str = required(String())
    name: str = required(String())
    title: str = optional(String())
    description: str = optional(String())
    mime_type: str = optional(String())
    size: int = optional(Integer(minimum=0))
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class EmbeddedResource(WireModel):
    """Resource contents inlined into a message."""

    _tag = "resource"

    resource: ResourceContents = required(RESOURCE_CONTENTS)
    annotations: Annotations = optional(Model(Annotations))
    meta: dict[str, Any] = meta()


@dataclass(frozen=True)
class UnrecognizedContent(Unrecognized):
    """A content block with a tag this library does not define."""

    known_tags: ClassVar[frozenset[str]] = frozenset(
        {"text", "image", "audio", "resource_link", "resource"}
    )


@dataclass(frozen=True)
class UnrecognizedSamplingContent(Unrecognized):
    """A sampling message block with a tag sampling does not allow."""

    known_tags: ClassVar[frozenset[str]] = frozenset({"text", "image", "audio"})


ContentBlock = (
    TextContent
    | ImageContent
    | AudioContent
    | ResourceLink
    | EmbeddedResource
    | UnrecognizedContent
)

CONTENT_BLOCK = TaggedUnion(
    [TextContent, ImageContent, AudioContent, ResourceLink, EmbeddedResource],
    fallback=UnrecognizedContent,
)

SamplingContent = TextContent | ImageContent | AudioContent | UnrecognizedSamplingContent

# Content allowed in sampling messages
SAMPLING_CONTENT = TaggedUnion(
    [TextContent, ImageContent, AudioContent],
    fallback=UnrecognizedSamplingContent,
)
