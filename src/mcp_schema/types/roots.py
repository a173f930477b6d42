"""Roots: the directories or files a client exposes to servers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import ListOf, Model, String, WireModel, meta, optional, required
from mcp_schema.types.base import Result


@dataclass(frozen=True, kw_only=True)
class Root(WireModel):
    """A root, identified by a URI (currently always ``file://``)."""

    uri: str = required(String())
    name: str = optional(String())
    meta: dict[str, Any] = meta()


@dataclass(frozen=True, kw_only=True)
class ListRootsResult(Result):
    roots: list[Root] = required(ListOf(Model(Root)))
