"""Params of notifications and of ``logging/setLevel``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcp_schema.codec import EnumOf, Json, Number, String, optional, required
from mcp_schema.types.base import (
    PROGRESS_TOKEN,
    REQUEST_ID,
    NotificationParams,
    ProgressToken,
    RequestId,
    RequestParams,
)


class LoggingLevel(str, Enum):
    """Log message severity, following syslog (RFC 5424)."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"


@dataclass(frozen=True, kw_only=True)
class ProgressNotificationParams(NotificationParams):
    """Progress of a long-running request.

    ``progress`` should increase with each notification for the same token,
    even when ``total`` is unknown.
    """

    progress_token: ProgressToken = required(PROGRESS_TOKEN)
    progress: float = required(Number())
    total: float = optional(Number())
    message: str = optional(String())


@dataclass(frozen=True, kw_only=True)
class CancelledNotificationParams(NotificationParams):
    request_id: RequestId = required(REQUEST_ID)
    reason: str = optional(String())


@dataclass(frozen=True, kw_only=True)
class SetLevelParams(RequestParams):
    level: LoggingLevel = required(EnumOf(LoggingLevel))


@dataclass(frozen=True, kw_only=True)
class LoggingMessageParams(NotificationParams):
    """Params of ``notifications/message``. ``data`` may be any JSON value, null included."""

    level: LoggingLevel = required(EnumOf(LoggingLevel))
    logger: str = optional(String())
    data: Any = required(Json())
