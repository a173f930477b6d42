"""Shapes for ``elicitation/create``: a server asking the user for input.

The server sends a message and a restricted JSON Schema describing the form.
The client answers with one of three actions; only ``accept`` carries the
submitted ``content``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcp_schema.codec import (
    EnumOf,
    JsonObject,
    SchemaDocument,
    String,
    is_set,
    optional,
    required,
)
from mcp_schema.errors import ConstraintViolation, MissingField
from mcp_schema.types.base import RequestParams, Result


class ElicitAction(str, Enum):
    """The user's response to an elicitation."""

    ACCEPT = "accept"
    DECLINE = "decline"
    CANCEL = "cancel"


@dataclass(frozen=True, kw_only=True)
class ElicitParams(RequestParams):
    message: str = required(String())
    requested_schema: dict[str, Any] = required(SchemaDocument())


@dataclass(frozen=True, kw_only=True)
class ElicitResult(Result):
    """The client's answer to an elicitation.

    ``content`` must be present when ``action`` is ``accept`` and must be
    absent otherwise.
    """

    action: ElicitAction = required(EnumOf(ElicitAction))
    content: dict[str, Any] = optional(JsonObject())

    def _validate(self) -> None:
        if self.action == ElicitAction.ACCEPT:
            if not is_set(self.content):
                raise MissingField("content")
        elif is_set(self.content):
            action = getattr(self.action, "value", self.action)
            raise ConstraintViolation("content", f"must be absent when action is {action!r}")
