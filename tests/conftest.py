"""Pytest configuration and shared fixtures."""

import pytest

from mcp_schema.policy import PRESERVE, DecodePolicy


@pytest.fixture
def preserve_policy() -> DecodePolicy:
    """Policy that keeps unknown variants and enum values instead of rejecting them."""
    return DecodePolicy(unknown_variants=PRESERVE, unknown_enum_values=PRESERVE)


@pytest.fixture
def tool_json() -> dict:
    """Wire form of a tool with annotations and both schemas."""
    return {
        "name": "get_weather",
        "title": "Weather",
        "description": "Get current weather for a location",
        "inputSchema": {
            "type": "object",
            "properties": {"location": {"type": "string"}},
            "required": ["location"],
        },
        "outputSchema": {
            "type": "object",
            "properties": {"temperature": {"type": "number"}},
        },
        "annotations": {"readOnlyHint": True, "openWorldHint": True},
    }
