"""Tests for the method tables and typed envelope decoding."""

import pytest

from mcp_schema.codec import ABSENT
from mcp_schema.errors import ConstraintViolation, MissingField, UnknownVariant
from mcp_schema.protocol.jsonrpc import JsonRpcErrorResponse, JsonRpcResponse
from mcp_schema.protocol.messages import (
    CLIENT_NOTIFICATIONS,
    CLIENT_REQUESTS,
    RESULTS,
    SERVER_NOTIFICATIONS,
    SERVER_REQUESTS,
    decode_client_notification,
    decode_client_request,
    decode_response,
    decode_result,
    decode_server_notification,
    decode_server_request,
)
from mcp_schema.types.base import EmptyResult, PaginatedParams
from mcp_schema.types.elicitation import ElicitParams, ElicitResult
from mcp_schema.types.initialization import InitializeParams
from mcp_schema.types.notifications import LoggingLevel, LoggingMessageParams
from mcp_schema.types.tools import CallToolParams, ListToolsResult


class TestMethodTables:
    """Tests for the per-direction method tables."""

    def test_every_request_has_a_result(self):
        """Should map every request method to a result type."""
        assert set(CLIENT_REQUESTS) | set(SERVER_REQUESTS) == set(RESULTS)

    def test_elicitation_is_a_server_request(self):
        """Should route elicitation from server to client only."""
        assert "elicitation/create" in SERVER_REQUESTS
        assert "elicitation/create" not in CLIENT_REQUESTS

    def test_tables_are_read_only(self):
        """Should not allow the tables to be modified."""
        with pytest.raises(TypeError):
            CLIENT_REQUESTS["tools/destroy"] = CLIENT_REQUESTS["tools/call"]

    def test_message_notification_is_server_only(self):
        """Should accept log messages only from servers."""
        assert "notifications/message" in SERVER_NOTIFICATIONS
        assert "notifications/message" not in CLIENT_NOTIFICATIONS


class TestDecodeRequests:
    """Tests for decoding typed requests."""

    def test_decodes_initialize(self):
        """Should type initialize params by method."""
        data = {
            "jsonrpc": "2.0",
            "id": 0,
            "method": "initialize",
            "params": {
                "protocolVersion": "2025-06-18",
                "capabilities": {"roots": {"listChanged": True}, "sampling": {}},
                "clientInfo": {"name": "example-client", "version": "1.0.0"},
            },
        }
        request = decode_client_request(data)

        assert isinstance(request.params, InitializeParams)
        assert request.params.capabilities.roots.list_changed is True
        assert request.params.capabilities.elicitation is ABSENT
        assert request.to_json() == data

    def test_decodes_tools_call_with_string_id(self):
        """Should keep a string id on a typed request."""
        data = {
            "jsonrpc": "2.0",
            "id": "call-1",
            "method": "tools/call",
            "params": {"name": "echo", "arguments": {"text": "hi"}},
        }
        request = decode_client_request(data)

        assert request.id == "call-1"
        assert request.params == CallToolParams(name="echo", arguments={"text": "hi"})

    def test_optional_params(self):
        """Should allow listing requests without params."""
        request = decode_client_request({"jsonrpc": "2.0", "id": 2, "method": "tools/list"})

        assert request.params is ABSENT

    def test_optional_params_are_typed_when_present(self):
        """Should decode present params of a listing request."""
        request = decode_client_request(
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list", "params": {"cursor": "c"}}
        )

        assert request.params == PaginatedParams(cursor="c")

    def test_required_params(self):
        """Should reject a request that omits required params."""
        with pytest.raises(MissingField) as exc_info:
            decode_client_request({"jsonrpc": "2.0", "id": 1, "method": "tools/call"})
        assert exc_info.value.path == "params"

    def test_params_errors_carry_path(self):
        """Should prefix params failures with the params path."""
        data = {"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {}}
        with pytest.raises(MissingField) as exc_info:
            decode_client_request(data)
        assert exc_info.value.path == "params.name"

    def test_unknown_method(self):
        """Should reject a method outside the table."""
        with pytest.raises(UnknownVariant) as exc_info:
            decode_client_request({"jsonrpc": "2.0", "id": 1, "method": "tools/destroy"})
        assert exc_info.value.tag == "tools/destroy"
        assert exc_info.value.path == "method"

    def test_unknown_method_preserved(self, preserve_policy):
        """Should keep params raw for an unknown method under preserve."""
        data = {"jsonrpc": "2.0", "id": 1, "method": "tools/destroy", "params": {"all": True}}
        request = decode_client_request(data, policy=preserve_policy)

        assert request.params == {"all": True}

    def test_direction_matters(self):
        """Should reject a server request decoded as a client request."""
        data = {
            "jsonrpc": "2.0",
            "id": 5,
            "method": "elicitation/create",
            "params": {"message": "m", "requestedSchema": {"type": "object"}},
        }
        with pytest.raises(UnknownVariant):
            decode_client_request(data)
        assert isinstance(decode_server_request(data).params, ElicitParams)

    def test_rejects_notification_as_request(self):
        """Should require an id on a request."""
        with pytest.raises(MissingField) as exc_info:
            decode_client_request({"jsonrpc": "2.0", "method": "ping"})
        assert exc_info.value.path == "id"

    def test_rejects_wrong_version(self):
        """Should check the jsonrpc member before the method."""
        with pytest.raises(ConstraintViolation):
            decode_client_request({"jsonrpc": "1.0", "id": 1, "method": "ping"})


class TestDecodeNotifications:
    """Tests for decoding typed notifications."""

    def test_initialized_without_params(self):
        """Should accept notifications/initialized without params."""
        notification = decode_client_notification(
            {"jsonrpc": "2.0", "method": "notifications/initialized"}
        )

        assert notification.params is ABSENT

    def test_log_message(self):
        """Should decode a server log message with null data."""
        data = {
            "jsonrpc": "2.0",
            "method": "notifications/message",
            "params": {"level": "warning", "logger": "db", "data": None},
        }
        notification = decode_server_notification(data)

        assert notification.params == LoggingMessageParams(
            level=LoggingLevel.WARNING, logger="db", data=None
        )
        assert notification.to_json() == data

    def test_progress_requires_params(self):
        """Should reject a progress notification without params."""
        with pytest.raises(MissingField):
            decode_client_notification({"jsonrpc": "2.0", "method": "notifications/progress"})


class TestDecodeResults:
    """Tests for decoding results by originating method."""

    def test_decode_result(self):
        """Should type a result by the method it answers."""
        result = decode_result("tools/list", {"tools": []})

        assert result == ListToolsResult(tools=[])

    def test_empty_result(self):
        """Should decode ping results as empty results keeping _meta."""
        result = decode_result("ping", {"_meta": {"k": "v"}})

        assert result == EmptyResult(meta={"k": "v"})

    def test_unknown_method(self):
        """Should reject a result for an unknown method."""
        with pytest.raises(UnknownVariant):
            decode_result("tools/destroy", {})

    def test_unknown_method_preserved(self, preserve_policy):
        """Should keep the raw result for an unknown method under preserve."""
        assert decode_result("tools/destroy", {"ok": 1}, policy=preserve_policy) == {"ok": 1}

    def test_decode_typed_response(self):
        """Should decode a response envelope with a typed result."""
        data = {"jsonrpc": "2.0", "id": 9, "result": {"action": "cancel"}}
        response = decode_response(data, method="elicitation/create")

        assert response == JsonRpcResponse(id=9, result=ElicitResult.from_json({"action": "cancel"}))

    def test_decode_raw_response(self):
        """Should keep the result raw when the method is unknown to the caller."""
        response = decode_response({"jsonrpc": "2.0", "id": "x", "result": {"a": 1}})

        assert response.result == {"a": 1}

    def test_decode_error_response(self):
        """Should decode an error response regardless of the method."""
        data = {"jsonrpc": "2.0", "id": 9, "error": {"code": -32601, "message": "Method not found"}}
        response = decode_response(data, method="tools/call")

        assert isinstance(response, JsonRpcErrorResponse)
        assert response.to_json() == data
