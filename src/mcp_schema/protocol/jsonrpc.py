"""JSON-RPC 2.0 envelopes, parsing and formatting.

Implements the JSON-RPC 2.0 message shapes MCP is carried in. An envelope's
``params`` or ``result`` is either a typed protocol value, a raw JSON object
(when decoded without a target type), or ``ABSENT``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from mcp_schema.codec import (
    ABSENT,
    Const,
    Integer,
    Json,
    JsonObject,
    Model,
    String,
    WireModel,
    clone_json,
    is_set,
    json_type_name,
    optional,
    required,
)
from mcp_schema.errors import (
    ConstraintViolation,
    DecodeError,
    MissingField,
    TypeMismatch,
    UnknownVariant,
)
from mcp_schema.policy import DEFAULT_POLICY, DecodePolicy
from mcp_schema.types.base import REQUEST_ID, RequestId

JSONRPC_VERSION = "2.0"

# Standard JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

_VERSION = Const(JSONRPC_VERSION)
_METHOD = String()
_PAYLOAD = JsonObject()


class JsonRpcError(Exception):
    """JSON-RPC error with code and message."""

    def __init__(self, code: int, message: str, data: Any = ABSENT) -> None:
        """Initialize the error.

        Args:
            code: JSON-RPC error code.
            message: Human-readable error message.
            data: Optional additional error data.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_detail(self) -> ErrorDetail:
        """Build the error object sent back to the peer."""
        return ErrorDetail(code=self.code, message=self.message, data=self.data)


@dataclass(frozen=True, kw_only=True)
class ErrorDetail(WireModel):
    """The ``error`` member of an error response.

    ``data`` is tri-state: ``ABSENT`` (omitted), ``None`` (null) or a value.
    """

    code: int = required(Integer())
    message: str = required(String())
    data: Any = optional(Json())


def _check_payload(value: Any, path: str) -> None:
    if value is ABSENT or isinstance(value, WireModel):
        return
    if not isinstance(value, dict):
        raise TypeMismatch(path, "object", json_type_name(value))
    clone_json(value, path)


def _encode_payload(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_json()
    return clone_json(value)


def _decode_payload(
    data: dict[str, Any], key: str, target: type[WireModel] | None, policy: DecodePolicy
) -> Any:
    if key not in data:
        return ABSENT
    if target is None:
        return _PAYLOAD.decode(data[key], key, policy)
    return Model(target).decode(data[key], key, policy)


def check_version(data: dict[str, Any]) -> None:
    """Check the ``jsonrpc`` member of an envelope.

    Raises:
        MissingField: If the member is absent.
        ConstraintViolation: If it is anything other than ``"2.0"``.
    """
    if "jsonrpc" not in data:
        raise MissingField("jsonrpc")
    _VERSION.decode(data["jsonrpc"], "jsonrpc", DEFAULT_POLICY)


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise MissingField(key)
    return data[key]


def _as_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeMismatch("", "object", json_type_name(data))
    return data


@dataclass(frozen=True)
class JsonRpcRequest:
    """Represents a JSON-RPC request (has id)."""

    id: RequestId
    method: str
    params: Any = ABSENT

    def __post_init__(self) -> None:
        REQUEST_ID.check(self.id, "id")
        _METHOD.check(self.method, "method")
        _check_payload(self.params, "params")

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "id": self.id, "method": self.method}
        if is_set(self.params):
            data["params"] = _encode_payload(self.params)
        return data

    @classmethod
    def from_json(
        cls,
        data: Any,
        *,
        params: type[WireModel] | None = None,
        policy: DecodePolicy | None = None,
    ) -> JsonRpcRequest:
        """Decode a request envelope.

        Args:
            data: Parsed JSON value.
            params: Params type; when omitted params stay a raw JSON object.
            policy: Decode policy.

        Returns:
            Decoded request.

        Raises:
            DecodeError: If the envelope or its params are malformed.
        """
        policy = policy or DEFAULT_POLICY
        data = _as_object(data)
        check_version(data)
        return cls(
            id=REQUEST_ID.decode(_require(data, "id"), "id", policy),
            method=_METHOD.decode(_require(data, "method"), "method", policy),
            params=_decode_payload(data, "params", params, policy),
        )


@dataclass(frozen=True)
class JsonRpcNotification:
    """Represents a JSON-RPC notification (no id)."""

    method: str
    params: Any = ABSENT

    def __post_init__(self) -> None:
        _METHOD.check(self.method, "method")
        _check_payload(self.params, "params")

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": self.method}
        if is_set(self.params):
            data["params"] = _encode_payload(self.params)
        return data

    @classmethod
    def from_json(
        cls,
        data: Any,
        *,
        params: type[WireModel] | None = None,
        policy: DecodePolicy | None = None,
    ) -> JsonRpcNotification:
        policy = policy or DEFAULT_POLICY
        data = _as_object(data)
        check_version(data)
        if "id" in data:
            raise ConstraintViolation("id", "a notification must not carry an id")
        return cls(
            method=_METHOD.decode(_require(data, "method"), "method", policy),
            params=_decode_payload(data, "params", params, policy),
        )


@dataclass(frozen=True)
class JsonRpcResponse:
    """Represents a successful JSON-RPC response."""

    id: RequestId
    result: Any

    def __post_init__(self) -> None:
        REQUEST_ID.check(self.id, "id")
        if self.result is ABSENT:
            raise MissingField("result")
        _check_payload(self.result, "result")

    def to_json(self) -> dict[str, Any]:
        return {"jsonrpc": JSONRPC_VERSION, "id": self.id, "result": _encode_payload(self.result)}

    @classmethod
    def from_json(
        cls,
        data: Any,
        *,
        result: type[WireModel] | None = None,
        policy: DecodePolicy | None = None,
    ) -> JsonRpcResponse:
        """Decode a success response.

        Args:
            data: Parsed JSON value.
            result: Result type; when omitted the result stays a raw JSON object.
            policy: Decode policy.

        Returns:
            Decoded response.

        Raises:
            DecodeError: If the envelope or its result is malformed.
        """
        policy = policy or DEFAULT_POLICY
        data = _as_object(data)
        check_version(data)
        if "error" in data:
            raise ConstraintViolation("", "result and error are mutually exclusive")
        _require(data, "result")
        return cls(
            id=REQUEST_ID.decode(_require(data, "id"), "id", policy),
            result=_decode_payload(data, "result", result, policy),
        )


@dataclass(frozen=True)
class JsonRpcErrorResponse:
    """Represents a JSON-RPC error response.

    ``id`` is ``None`` when the request id could not be determined, for
    example after a parse error.
    """

    id: RequestId | None
    error: ErrorDetail

    def __post_init__(self) -> None:
        if self.id is not None:
            REQUEST_ID.check(self.id, "id")
        Model(ErrorDetail).check(self.error, "error")

    def to_json(self) -> dict[str, Any]:
        return {"jsonrpc": JSONRPC_VERSION, "id": self.id, "error": self.error.to_json()}

    @classmethod
    def from_json(
        cls, data: Any, *, policy: DecodePolicy | None = None
    ) -> JsonRpcErrorResponse:
        policy = policy or DEFAULT_POLICY
        data = _as_object(data)
        check_version(data)
        if "result" in data:
            raise ConstraintViolation("", "result and error are mutually exclusive")
        msg_id = _require(data, "id")
        return cls(
            id=None if msg_id is None else REQUEST_ID.decode(msg_id, "id", policy),
            error=Model(ErrorDetail).decode(_require(data, "error"), "error", policy),
        )


Message = JsonRpcRequest | JsonRpcNotification | JsonRpcResponse | JsonRpcErrorResponse


def decode_envelope(data: Any, *, policy: DecodePolicy | None = None) -> Message:
    """Classify and decode a parsed JSON-RPC message, keeping payloads raw.

    A member ``method`` marks a request (with ``id``) or a notification
    (without); otherwise ``error`` or ``result`` marks a response.

    Args:
        data: Parsed JSON value.
        policy: Decode policy.

    Returns:
        Generic envelope whose params or result is a raw JSON object.

    Raises:
        DecodeError: If the message is not a well-formed envelope.
    """
    data = _as_object(data)
    check_version(data)
    if "method" in data:
        if "id" in data:
            return JsonRpcRequest.from_json(data, policy=policy)
        return JsonRpcNotification.from_json(data, policy=policy)
    if "error" in data:
        return JsonRpcErrorResponse.from_json(data, policy=policy)
    if "result" in data:
        return JsonRpcResponse.from_json(data, policy=policy)
    raise MissingField("method")


def parse_message(raw: str | bytes, *, policy: DecodePolicy | None = None) -> Message:
    """Parse a JSON-RPC message from a string.

    Args:
        raw: Raw JSON text.
        policy: Decode policy; supplies the message size limit.

    Returns:
        Parsed request, notification or response, with raw payloads.

    Raises:
        JsonRpcError: If the message is invalid.
    """
    policy = policy or DEFAULT_POLICY

    # Check message size before parsing
    if len(raw) > policy.max_message_size:
        raise JsonRpcError(
            PARSE_ERROR,
            f"Message too large: {len(raw)} bytes exceeds {policy.max_message_size} limit",
        )

    # Parse JSON
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise JsonRpcError(PARSE_ERROR, f"Parse error: {e}") from e

    # Must be an object
    if not isinstance(data, dict):
        raise JsonRpcError(INVALID_REQUEST, "Invalid Request: message must be an object")

    try:
        return decode_envelope(data, policy=policy)
    except DecodeError as e:
        raise JsonRpcError(INVALID_REQUEST, f"Invalid Request: {e}", {"field": e.path}) from e


def error_detail_for(error: DecodeError) -> ErrorDetail:
    """Map a decode failure to a JSON-RPC error object.

    Failures inside ``params`` map to ``INVALID_PARAMS``, an unknown method to
    ``METHOD_NOT_FOUND``, and anything else about the envelope to
    ``INVALID_REQUEST``.

    Args:
        error: The decode failure.

    Returns:
        Error object naming the offending field in ``data``.
    """
    if error.path == "params" or error.path.startswith(("params.", "params[")):
        code = INVALID_PARAMS
    elif isinstance(error, UnknownVariant) and error.path == "method":
        code = METHOD_NOT_FOUND
    else:
        code = INVALID_REQUEST
    return ErrorDetail(code=code, message=str(error), data={"field": error.path})


def format_message(message: Message | WireModel) -> str:
    """Format an envelope as JSON text.

    Args:
        message: Envelope (or bare protocol value) to encode.

    Returns:
        JSON string.
    """
    return json.dumps(message.to_json())


def format_response(msg_id: RequestId, result: Any) -> str:
    """Format a successful JSON-RPC response.

    Args:
        msg_id: Request ID to echo back.
        result: Result payload, typed or raw.

    Returns:
        JSON string.
    """
    return format_message(JsonRpcResponse(id=msg_id, result=result))


def format_error(
    msg_id: RequestId | None,
    code: int,
    message: str,
    data: Any = ABSENT,
) -> str:
    """Format a JSON-RPC error response.

    Args:
        msg_id: Request ID (or None for parse errors).
        code: Error code.
        message: Error message.
        data: Optional error data; ``None`` is sent as null.

    Returns:
        JSON string.
    """
    error = ErrorDetail(code=code, message=message, data=data)
    return format_message(JsonRpcErrorResponse(id=msg_id, error=error))


def format_notification(method: str, params: Any = ABSENT) -> str:
    """Format a JSON-RPC notification.

    Args:
        method: Notification method name.
        params: Optional parameters, typed or raw.

    Returns:
        JSON string.
    """
    return format_message(JsonRpcNotification(method=method, params=params))
