"""MCP protocol layer: JSON-RPC envelopes and method tables."""

from mcp_schema.protocol.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ErrorDetail,
    JsonRpcError,
    JsonRpcErrorResponse,
    JsonRpcNotification,
    JsonRpcRequest,
    JsonRpcResponse,
    Message,
    decode_envelope,
    error_detail_for,
    format_error,
    format_message,
    format_notification,
    format_response,
    parse_message,
)
from mcp_schema.protocol.messages import (
    CLIENT_NOTIFICATIONS,
    CLIENT_REQUESTS,
    RESULTS,
    SERVER_NOTIFICATIONS,
    SERVER_REQUESTS,
    MethodSpec,
    decode_client_notification,
    decode_client_request,
    decode_response,
    decode_result,
    decode_server_notification,
    decode_server_request,
)

__all__ = [
    "CLIENT_NOTIFICATIONS",
    "CLIENT_REQUESTS",
    "ErrorDetail",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JSONRPC_VERSION",
    "JsonRpcError",
    "JsonRpcErrorResponse",
    "JsonRpcNotification",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "METHOD_NOT_FOUND",
    "Message",
    "MethodSpec",
    "PARSE_ERROR",
    "RESULTS",
    "SERVER_NOTIFICATIONS",
    "SERVER_REQUESTS",
    "decode_client_notification",
    "decode_client_request",
    "decode_envelope",
    "decode_response",
    "decode_result",
    "decode_server_notification",
    "decode_server_request",
    "error_detail_for",
    "format_error",
    "format_message",
    "format_notification",
    "format_response",
    "parse_message",
]
