"""Method tables and typed envelope decoding per direction.

Requests and notifications are discriminated by ``method``. Each direction
(client to server, server to client) has its own closed table mapping a
method to its params type. Results carry no discriminator, so a result is
decoded against the method of the request it answers.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, NamedTuple

from mcp_schema.codec import JsonObject, Model, WireModel, json_type_name
from mcp_schema.errors import MissingField, TypeMismatch, UnknownVariant
from mcp_schema.policy import DEFAULT_POLICY, DecodePolicy
from mcp_schema.protocol.jsonrpc import (
    JsonRpcErrorResponse,
    JsonRpcNotification,
    JsonRpcRequest,
    JsonRpcResponse,
    check_version,
)
from mcp_schema.types.base import (
    EmptyResult,
    NotificationParams,
    PaginatedParams,
    RequestParams,
    Result,
)
from mcp_schema.types.completion import CompleteParams, CompleteResult
from mcp_schema.types.elicitation import ElicitParams, ElicitResult
from mcp_schema.types.initialization import InitializeParams, InitializeResult
from mcp_schema.types.notifications import (
    CancelledNotificationParams,
    LoggingMessageParams,
    ProgressNotificationParams,
    SetLevelParams,
)
from mcp_schema.types.prompts import GetPromptParams, GetPromptResult, ListPromptsResult
from mcp_schema.types.resources import (
    ListResourcesResult,
    ListResourceTemplatesResult,
    ReadResourceParams,
    ReadResourceResult,
    ResourceUpdatedParams,
    SubscribeParams,
    UnsubscribeParams,
)
from mcp_schema.types.roots import ListRootsResult
from mcp_schema.types.sampling import CreateMessageParams, CreateMessageResult
from mcp_schema.types.tools import CallToolParams, CallToolResult, ListToolsResult


class MethodSpec(NamedTuple):
    """Params type of a method, and whether ``params`` may be omitted."""

    params: type[WireModel]
    params_required: bool


def _required(params: type[WireModel]) -> MethodSpec:
    return MethodSpec(params, True)


def _optional(params: type[WireModel]) -> MethodSpec:
    return MethodSpec(params, False)


CLIENT_REQUESTS: Mapping[str, MethodSpec] = MappingProxyType(
    {
        "ping": _optional(RequestParams),
        "initialize": _required(InitializeParams),
        "completion/complete": _required(CompleteParams),
        "logging/setLevel": _required(SetLevelParams),
        "prompts/get": _required(GetPromptParams),
        "prompts/list": _optional(PaginatedParams),
        "resources/list": _optional(PaginatedParams),
        "resources/templates/list": _optional(PaginatedParams),
        "resources/read": _required(ReadResourceParams),
        "resources/subscribe": _required(SubscribeParams),
        "resources/unsubscribe": _required(UnsubscribeParams),
        "tools/call": _required(CallToolParams),
        "tools/list": _optional(PaginatedParams),
    }
)

SERVER_REQUESTS: Mapping[str, MethodSpec] = MappingProxyType(
    {
        "ping": _optional(RequestParams),
        "sampling/createMessage": _required(CreateMessageParams),
        "roots/list": _optional(RequestParams),
        "elicitation/create": _required(ElicitParams),
    }
)

CLIENT_NOTIFICATIONS: Mapping[str, MethodSpec] = MappingProxyType(
    {
        "notifications/cancelled": _required(CancelledNotificationParams),
        "notifications/progress": _required(ProgressNotificationParams),
        "notifications/initialized": _optional(NotificationParams),
        "notifications/roots/list_changed": _optional(NotificationParams),
    }
)

SERVER_NOTIFICATIONS: Mapping[str, MethodSpec] = MappingProxyType(
    {
        "notifications/cancelled": _required(CancelledNotificationParams),
        "notifications/progress": _required(ProgressNotificationParams),
        "notifications/message": _required(LoggingMessageParams),
        "notifications/resources/updated": _required(ResourceUpdatedParams),
        "notifications/resources/list_changed": _optional(NotificationParams),
        "notifications/tools/list_changed": _optional(NotificationParams),
        "notifications/prompts/list_changed": _optional(NotificationParams),
    }
)

RESULTS: Mapping[str, type[Result]] = MappingProxyType(
    {
        "initialize": InitializeResult,
        "ping": EmptyResult,
        "logging/setLevel": EmptyResult,
        "resources/subscribe": EmptyResult,
        "resources/unsubscribe": EmptyResult,
        "completion/complete": CompleteResult,
        "prompts/get": GetPromptResult,
        "prompts/list": ListPromptsResult,
        "resources/list": ListResourcesResult,
        "resources/templates/list": ListResourceTemplatesResult,
        "resources/read": ReadResourceResult,
        "tools/list": ListToolsResult,
        "tools/call": CallToolResult,
        "sampling/createMessage": CreateMessageResult,
        "roots/list": ListRootsResult,
        "elicitation/create": ElicitResult,
    }
)


def _lookup(
    data: Any, table: Mapping[str, MethodSpec], policy: DecodePolicy
) -> MethodSpec | None:
    """Find the method of an envelope in a table.

    Returns ``None`` for an unknown method under the preserve policy.
    """
    if not isinstance(data, dict):
        raise TypeMismatch("", "object", json_type_name(data))
    check_version(data)
    if "method" not in data:
        raise MissingField("method")
    method = data["method"]
    if not isinstance(method, str):
        raise TypeMismatch("method", "string", json_type_name(method))

    spec = table.get(method)
    if spec is None:
        if policy.preserve_unknown_variants:
            return None
        raise UnknownVariant("method", method)
    if spec.params_required and "params" not in data:
        raise MissingField("params")
    return spec


def _decode_request(
    data: Any, table: Mapping[str, MethodSpec], policy: DecodePolicy | None
) -> JsonRpcRequest:
    policy = policy or DEFAULT_POLICY
    spec = _lookup(data, table, policy)
    params = spec.params if spec is not None else None
    return JsonRpcRequest.from_json(data, params=params, policy=policy)


def _decode_notification(
    data: Any, table: Mapping[str, MethodSpec], policy: DecodePolicy | None
) -> JsonRpcNotification:
    policy = policy or DEFAULT_POLICY
    spec = _lookup(data, table, policy)
    params = spec.params if spec is not None else None
    return JsonRpcNotification.from_json(data, params=params, policy=policy)


def decode_client_request(data: Any, *, policy: DecodePolicy | None = None) -> JsonRpcRequest:
    """Decode a request sent by a client.

    Args:
        data: Parsed JSON value.
        policy: Decode policy.

    Returns:
        Request whose params are typed by method.

    Raises:
        UnknownVariant: If the method is not a client request (unless the
            policy preserves unknown variants, in which case params stay raw).
        DecodeError: If the envelope or its params are malformed.
    """
    return _decode_request(data, CLIENT_REQUESTS, policy)


def decode_server_request(data: Any, *, policy: DecodePolicy | None = None) -> JsonRpcRequest:
    """Decode a request sent by a server. See ``decode_client_request``."""
    return _decode_request(data, SERVER_REQUESTS, policy)


def decode_client_notification(
    data: Any, *, policy: DecodePolicy | None = None
) -> JsonRpcNotification:
    """Decode a notification sent by a client."""
    return _decode_notification(data, CLIENT_NOTIFICATIONS, policy)


def decode_server_notification(
    data: Any, *, policy: DecodePolicy | None = None
) -> JsonRpcNotification:
    """Decode a notification sent by a server."""
    return _decode_notification(data, SERVER_NOTIFICATIONS, policy)


def result_type_for(method: str, policy: DecodePolicy) -> type[Result] | None:
    """Look up the result type of a request method.

    Returns ``None`` for an unknown method under the preserve policy.

    Raises:
        UnknownVariant: If the method has no result type.
    """
    result = RESULTS.get(method)
    if result is None and not policy.preserve_unknown_variants:
        raise UnknownVariant("result", method)
    return result


def decode_result(
    method: str, data: Any, *, policy: DecodePolicy | None = None
) -> Result | dict[str, Any]:
    """Decode the result of a request.

    Args:
        method: Method of the request the result answers.
        data: Parsed JSON value of the ``result`` member.
        policy: Decode policy.

    Returns:
        Typed result, or a raw JSON object for an unknown method under the
        preserve policy.

    Raises:
        DecodeError: If the result does not match the method's result type.
    """
    policy = policy or DEFAULT_POLICY
    result = result_type_for(method, policy)
    if result is None:
        return JsonObject().decode(data, "", policy)
    return Model(result).decode(data, "", policy)


def decode_response(
    data: Any, *, method: str | None = None, policy: DecodePolicy | None = None
) -> JsonRpcResponse | JsonRpcErrorResponse:
    """Decode a response envelope.

    Args:
        data: Parsed JSON value.
        method: Method of the originating request. When given, the result is
            typed; otherwise it stays a raw JSON object.
        policy: Decode policy.

    Returns:
        Success or error response.

    Raises:
        DecodeError: If the envelope or its result is malformed.
    """
    policy = policy or DEFAULT_POLICY
    if isinstance(data, dict) and "error" in data:
        return JsonRpcErrorResponse.from_json(data, policy=policy)
    result = result_type_for(method, policy) if method is not None else None
    return JsonRpcResponse.from_json(data, result=result, policy=policy)
