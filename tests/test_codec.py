"""Tests for field codecs, the ABSENT marker and the WireModel base."""

import copy
import math

import pytest

from mcp_schema.codec import (
    ABSENT,
    Integer,
    ListOf,
    Number,
    String,
    StringOrInteger,
    camel_case,
    clone_json,
    decode,
    encode,
    is_set,
)
from mcp_schema.errors import (
    ConstraintViolation,
    DecodeError,
    MissingField,
    TypeMismatch,
    UnknownVariant,
    join_path,
)
from mcp_schema.policy import DEFAULT_POLICY
from mcp_schema.types.base import PaginatedResult, RequestMeta, RequestParams
from mcp_schema.types.content import TextContent
from mcp_schema.types.tools import CallToolResult, Tool


class TestAbsent:
    """Tests for the ABSENT marker."""

    def test_is_singleton(self):
        """Should survive copying as the same object."""
        assert copy.copy(ABSENT) is ABSENT
        assert copy.deepcopy(ABSENT) is ABSENT

    def test_is_distinct_from_none(self):
        """Should not compare equal to None."""
        assert ABSENT is not None
        assert ABSENT != None  # noqa: E711
        assert is_set(None) is True
        assert is_set(ABSENT) is False

    def test_is_falsy(self):
        """Should be falsy so `if value:` reads naturally."""
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"


class TestHelpers:
    """Tests for path and naming helpers."""

    def test_join_path(self):
        """Should join members with dots and indices directly."""
        assert join_path("", "content") == "content"
        assert join_path("content", "[0]") == "content[0]"
        assert join_path("content[0]", "type") == "content[0].type"
        assert join_path("params", "") == "params"

    def test_camel_case(self):
        """Should convert snake_case attribute names to wire names."""
        assert camel_case("input_schema") == "inputSchema"
        assert camel_case("read_only_hint") == "readOnlyHint"
        assert camel_case("name") == "name"

    def test_clone_json_copies(self):
        """Should return a tree that does not alias the input."""
        source = {"a": [1, {"b": 2}]}
        cloned = clone_json(source)
        source["a"][1]["b"] = 3

        assert cloned == {"a": [1, {"b": 2}]}

    def test_clone_json_rejects_non_json(self):
        """Should reject values JSON cannot represent."""
        with pytest.raises(TypeMismatch) as exc_info:
            clone_json({"a": {"b": object()}})
        assert exc_info.value.path == "a.b"

        with pytest.raises(ConstraintViolation):
            clone_json([math.inf])

        with pytest.raises(TypeMismatch):
            clone_json({1: "x"})


class TestScalarCodecs:
    """Tests for the numeric and string codecs."""

    def test_integer_rejects_boolean(self):
        """Should reject booleans for integer fields."""
        with pytest.raises(TypeMismatch) as exc_info:
            Integer().decode(True, "size", DEFAULT_POLICY)
        assert exc_info.value.expected == "integer"
        assert exc_info.value.actual == "boolean"

    def test_integer_accepts_integral_float(self):
        """Should accept 3.0 as the integer 3."""
        value = Integer().decode(3.0, "size", DEFAULT_POLICY)

        assert value == 3
        assert isinstance(value, int)

    def test_integer_rejects_fractional_float(self):
        """Should reject 3.5 as a constraint violation."""
        with pytest.raises(ConstraintViolation):
            Integer().decode(3.5, "size", DEFAULT_POLICY)

    def test_integer_enforces_minimum(self):
        """Should reject values below the minimum."""
        with pytest.raises(ConstraintViolation, match=">= 0"):
            Integer(minimum=0).decode(-1, "size", DEFAULT_POLICY)

    def test_number_rejects_non_finite(self):
        """Should reject infinities and NaN."""
        with pytest.raises(ConstraintViolation):
            Number().decode(math.nan, "progress", DEFAULT_POLICY)

    def test_number_enforces_range(self):
        """Should enforce inclusive bounds."""
        codec = Number(minimum=0, maximum=1)

        assert codec.decode(1, "priority", DEFAULT_POLICY) == 1
        with pytest.raises(ConstraintViolation, match="<= 1"):
            codec.decode(1.5, "priority", DEFAULT_POLICY)

    def test_string_or_integer(self):
        """Should accept strings and integers without conversion."""
        codec = StringOrInteger()

        assert codec.decode("7", "id", DEFAULT_POLICY) == "7"
        assert codec.decode(7, "id", DEFAULT_POLICY) == 7
        with pytest.raises(TypeMismatch):
            codec.decode(7.0, "id", DEFAULT_POLICY)
        with pytest.raises(TypeMismatch):
            codec.decode(None, "id", DEFAULT_POLICY)

    def test_list_reports_index(self):
        """Should report the failing index in the path."""
        with pytest.raises(TypeMismatch) as exc_info:
            ListOf(String()).decode(["a", 2], "values", DEFAULT_POLICY)
        assert exc_info.value.path == "values[1]"


class TestWireModel:
    """Tests for encoding, decoding and constructing protocol values."""

    def test_omits_absent_members(self):
        """Should omit unset optional members instead of writing null."""
        assert PaginatedResult().to_json() == {}
        assert PaginatedResult.from_json({}).next_cursor is ABSENT

    def test_writes_meta_last(self):
        """Should write _meta after the declared members."""
        result = PaginatedResult(meta={"trace": "t1"}, next_cursor="c")

        assert list(result.to_json()) == ["nextCursor", "_meta"]

    def test_writes_discriminator_first(self):
        """Should write the tag before any other member."""
        block = TextContent(text="hi", meta={"k": 1})

        assert list(block.to_json()) == ["type", "text", "_meta"]

    def test_preserves_unknown_members(self):
        """Should keep undeclared members through a round trip."""
        data = {"nextCursor": "c", "x-vendor": {"rank": 2}}
        result = PaginatedResult.from_json(data)

        assert result.extra == {"x-vendor": {"rank": 2}}
        assert result.to_json() == data

    def test_rejects_declared_member_in_extra(self):
        """Should refuse to shadow a declared member through extra."""
        with pytest.raises(ConstraintViolation) as exc_info:
            PaginatedResult(extra={"nextCursor": "c"})
        assert exc_info.value.path == "nextCursor"

    def test_rejects_tag_in_extra(self):
        """Should refuse to set the discriminator through extra."""
        with pytest.raises(ConstraintViolation):
            TextContent(text="hi", extra={"type": "image"})

    def test_constructor_validates(self):
        """Should run field checks at construction."""
        with pytest.raises(TypeMismatch) as exc_info:
            Tool(name=5, input_schema={"type": "object"})
        assert exc_info.value.path == "name"

    def test_constructor_requires_required_members(self):
        """Should reject a constructed value without a required member."""
        with pytest.raises(MissingField) as exc_info:
            Tool(name="t", input_schema=ABSENT)
        assert exc_info.value.path == "inputSchema"

    def test_is_immutable(self):
        """Should not allow mutation after construction."""
        block = TextContent(text="hi")
        with pytest.raises(AttributeError):
            block.text = "bye"

    def test_decoded_value_does_not_alias_input(self):
        """Should copy JSON subtrees on decode."""
        data = {"content": [], "structuredContent": {"nested": [1]}}
        result = CallToolResult.from_json(data)
        data["structuredContent"]["nested"].append(2)

        assert result.structured_content == {"nested": [1]}

    def test_rejects_non_object(self):
        """Should reject a JSON value that is not an object."""
        with pytest.raises(TypeMismatch) as exc_info:
            PaginatedResult.from_json(["nextCursor"])
        assert exc_info.value.actual == "array"

    def test_reports_nested_path(self):
        """Should report the full path of a nested failure."""
        data = {"content": [{"type": "text", "text": "ok"}, {"type": 3}]}
        with pytest.raises(TypeMismatch) as exc_info:
            CallToolResult.from_json(data)

        assert exc_info.value.path == "content[1].type"
        assert str(exc_info.value) == "content[1].type: expected string, got integer"

    def test_reports_unknown_variant_tag(self):
        """Should name the unknown tag and where it was found."""
        data = {"content": [{"type": "video", "url": "https://example.com/v.mp4"}]}
        with pytest.raises(UnknownVariant) as exc_info:
            CallToolResult.from_json(data)

        assert exc_info.value.tag == "video"
        assert exc_info.value.path == "content[0].type"

    def test_request_meta_progress_token(self):
        """Should decode the progress token inside request _meta."""
        params = RequestParams.from_json({"_meta": {"progressToken": "p-1"}})

        assert params.meta == RequestMeta(progress_token="p-1")
        assert params.to_json() == {"_meta": {"progressToken": "p-1"}}

    def test_rejects_negative_progress_token(self):
        """Should reject a negative integer progress token."""
        with pytest.raises(ConstraintViolation) as exc_info:
            RequestParams.from_json({"_meta": {"progressToken": -1}})
        assert exc_info.value.path == "_meta.progressToken"

    def test_errors_share_a_base(self):
        """Should let callers catch every decode failure at once."""
        with pytest.raises(DecodeError):
            Tool.from_json({"name": "t"})
        assert issubclass(DecodeError, ValueError)


class TestModuleFunctions:
    """Tests for the encode and decode entry points."""

    def test_encode_model(self):
        """Should encode a model through to_json."""
        assert encode(TextContent(text="hi")) == {"type": "text", "text": "hi"}

    def test_encode_plain_json(self):
        """Should copy plain JSON values."""
        assert encode({"a": [1]}) == {"a": [1]}

    def test_decode_model_class(self):
        """Should accept a model class as the target."""
        assert decode(TextContent, {"type": "text", "text": "hi"}) == TextContent(text="hi")

    def test_decode_rejects_wrong_tag_for_variant(self):
        """Should reject a payload whose tag names another variant."""
        with pytest.raises(ConstraintViolation) as exc_info:
            decode(TextContent, {"type": "image", "text": "hi"})
        assert exc_info.value.path == "type"
