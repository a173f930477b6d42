"""Field codecs and the base class for protocol value types.

Every protocol type is a frozen dataclass deriving from ``WireModel``. Its
fields are declared with ``required()`` or ``optional()``, which attach a
``Codec`` describing the member's wire name and JSON shape.

Optional members default to ``ABSENT``. ``ABSENT`` is omitted on the wire,
while ``None`` is written as ``null``, so the three states absent /
present-null / present-value never collapse into one another.
"""

from __future__ import annotations

import dataclasses
import functools
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, NamedTuple, TypeVar

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from mcp_schema.errors import (
    ConstraintViolation,
    DecodeError,
    MissingField,
    TypeMismatch,
    UnknownVariant,
    join_path,
)
from mcp_schema.policy import DEFAULT_POLICY, DecodePolicy

M = TypeVar("M", bound="WireModel")


class _Absent:
    """Marker for an optional member that is not present on the wire."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Any = _Absent()


def is_set(value: Any) -> bool:
    """Check if an optional member is present (possibly as null)."""
    return value is not ABSENT


def json_type_name(value: Any) -> str:
    """Name the JSON type of a value for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def clone_json(value: Any, path: str = "") -> Any:
    """Copy a JSON tree, validating that it holds only JSON values.

    Args:
        value: Tree to copy.
        path: Path of the tree, for error messages.

    Returns:
        An independent copy built from dicts, lists and scalars.

    Raises:
        TypeMismatch: If the tree contains a non-JSON value.
        ConstraintViolation: If the tree contains a non-finite number.
    """
    if value is None or isinstance(value, bool | int | str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConstraintViolation(path, "must be a finite number")
        return value
    if isinstance(value, list | tuple):
        return [clone_json(item, join_path(path, f"[{i}]")) for i, item in enumerate(value)]
    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeMismatch(path, "object with string keys", type(key).__name__)
            result[key] = clone_json(item, join_path(path, key))
        return result
    raise TypeMismatch(path, "JSON value", type(value).__name__)


def camel_case(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire name."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _check_bounds(
    value: int | float, path: str, minimum: float | None, maximum: float | None
) -> None:
    if minimum is not None and value < minimum:
        raise ConstraintViolation(path, f"must be >= {minimum}")
    if maximum is not None and value > maximum:
        raise ConstraintViolation(path, f"must be <= {maximum}")


class Codec:
    """Describes how one member is checked, decoded and encoded.

    ``decode`` turns a raw JSON value into its typed form, ``encode`` does the
    reverse, and ``check`` validates an already-typed value at construction.
    """

    expected = "value"

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> Any:
        raise NotImplementedError

    def encode(self, value: Any) -> Any:
        return value

    def check(self, value: Any, path: str) -> None:
        self.decode(value, path, DEFAULT_POLICY)

    def _mismatch(self, raw: Any, path: str) -> TypeMismatch:
        return TypeMismatch(path, self.expected, json_type_name(raw))


class String(Codec):
    expected = "string"

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> str:
        if not isinstance(raw, str):
            raise self._mismatch(raw, path)
        return raw


class Const(String):
    """A string member with exactly one allowed value."""

    def __init__(self, value: str) -> None:
        self.value = value

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> str:
        raw = super().decode(raw, path, policy)
        if raw != self.value:
            raise ConstraintViolation(path, f"must be {self.value!r}")
        return raw


class Boolean(Codec):
    expected = "boolean"

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> bool:
        if not isinstance(raw, bool):
            raise self._mismatch(raw, path)
        return raw


class Integer(Codec):
    """An integer member. Integral floats such as ``3.0`` are accepted."""

    expected = "integer"

    def __init__(self, minimum: int | None = None, maximum: int | None = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int | float):
            raise self._mismatch(raw, path)
        if isinstance(raw, float):
            if not raw.is_integer():
                raise ConstraintViolation(path, "must be an integer")
            raw = int(raw)
        _check_bounds(raw, path, self.minimum, self.maximum)
        return raw


class Number(Codec):
    expected = "number"

    def __init__(self, minimum: float | None = None, maximum: float | None = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> int | float:
        if isinstance(raw, bool) or not isinstance(raw, int | float):
            raise self._mismatch(raw, path)
        if not math.isfinite(raw):
            raise ConstraintViolation(path, "must be a finite number")
        _check_bounds(raw, path, self.minimum, self.maximum)
        return raw


class StringOrInteger(Codec):
    """A string-or-integer member, used for request ids and progress tokens.

    The two representations are kept apart: ``"1"`` and ``1`` never compare
    equal and are never converted into one another.
    """

    expected = "string or integer"

    def __init__(self, minimum: int | None = None) -> None:
        self.minimum = minimum

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> str | int:
        if isinstance(raw, str):
            return raw
        if isinstance(raw, int) and not isinstance(raw, bool):
            _check_bounds(raw, path, self.minimum, None)
            return raw
        raise self._mismatch(raw, path)


class Json(Codec):
    """Any JSON value, carried as an opaque tree (null included)."""

    expected = "JSON value"

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> Any:
        return clone_json(raw, path)

    def encode(self, value: Any) -> Any:
        return clone_json(value)


class JsonObject(Json):
    expected = "object"

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> dict[str, Any]:
        if not isinstance(raw, dict):
            raise self._mismatch(raw, path)
        return clone_json(raw, path)


class SchemaDocument(JsonObject):
    """A JSON Schema document, passed through as an opaque object.

    Only the root ``type`` is enforced. When the policy enables
    ``check_schema_documents`` the document is also checked against the
    JSON Schema meta-schema; instances are never validated here.
    """

    def __init__(self, root_type: str | None = "object") -> None:
        self.root_type = root_type

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> dict[str, Any]:
        document = super().decode(raw, path, policy)
        if self.root_type is not None:
            if "type" not in document:
                raise MissingField(join_path(path, "type"))
            if document["type"] != self.root_type:
                raise ConstraintViolation(join_path(path, "type"), f"must be {self.root_type!r}")
        if policy.check_schema_documents:
            try:
                Draft202012Validator.check_schema(document)
            except SchemaError as e:
                raise ConstraintViolation(path, f"invalid JSON Schema: {e.message}") from e
        return document


class UnknownEnumValue(str):
    """An enumeration string outside the known members, kept verbatim.

    Decoding yields one only when the policy preserves unknown enum values.
    Constructors accept it where they would otherwise reject the string.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"UnknownEnumValue({str.__repr__(self)})"


class EnumOf(Codec):
    """A string member restricted to the values of an Enum.

    Unknown strings are rejected unless the policy preserves unknown enum
    values, in which case they decode to an ``UnknownEnumValue``.
    """

    expected = "string"

    def __init__(self, enum: type[Enum]) -> None:
        self.enum = enum

    def _violation(self, path: str) -> ConstraintViolation:
        allowed = ", ".join(repr(member.value) for member in self.enum)
        return ConstraintViolation(path, f"must be one of {allowed}")

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> Enum | UnknownEnumValue:
        if not isinstance(raw, str):
            raise self._mismatch(raw, path)
        try:
            return self.enum(raw)
        except ValueError:
            if policy.preserve_unknown_enum_values:
                return UnknownEnumValue(raw)
            raise self._violation(path) from None

    def encode(self, value: Any) -> str:
        return value.value if isinstance(value, Enum) else str(value)

    def check(self, value: Any, path: str) -> None:
        if isinstance(value, (self.enum, UnknownEnumValue)):
            return
        if not isinstance(value, str):
            raise TypeMismatch(path, self.enum.__name__, type(value).__name__)
        try:
            self.enum(value)
        except ValueError:
            raise self._violation(path) from None


class ListOf(Codec):
    expected = "array"

    def __init__(self, item: Codec, max_items: int | None = None) -> None:
        self.item = item
        self.max_items = max_items

    def _check_length(self, value: Sequence[Any], path: str) -> None:
        if self.max_items is not None and len(value) > self.max_items:
            raise ConstraintViolation(path, f"must contain at most {self.max_items} items")

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> list[Any]:
        if not isinstance(raw, list):
            raise self._mismatch(raw, path)
        self._check_length(raw, path)
        return [
            self.item.decode(item, join_path(path, f"[{i}]"), policy) for i, item in enumerate(raw)
        ]

    def encode(self, value: Any) -> list[Any]:
        return [self.item.encode(item) for item in value]

    def check(self, value: Any, path: str) -> None:
        if not isinstance(value, list | tuple):
            raise self._mismatch(value, path)
        self._check_length(value, path)
        for i, item in enumerate(value):
            self.item.check(item, join_path(path, f"[{i}]"))


class MapOf(Codec):
    expected = "object"

    def __init__(self, value: Codec) -> None:
        self.value = value

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> dict[str, Any]:
        if not isinstance(raw, dict):
            raise self._mismatch(raw, path)
        return {key: self.value.decode(item, join_path(path, key), policy) for key, item in raw.items()}

    def encode(self, value: Any) -> dict[str, Any]:
        return {key: self.value.encode(item) for key, item in value.items()}

    def check(self, value: Any, path: str) -> None:
        if not isinstance(value, dict):
            raise self._mismatch(value, path)
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeMismatch(path, "object with string keys", type(key).__name__)
            self.value.check(item, join_path(path, key))


class Model(Codec):
    """A nested protocol object."""

    expected = "object"

    def __init__(self, cls: type[WireModel]) -> None:
        self.cls = cls

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> WireModel:
        if not isinstance(raw, dict):
            raise self._mismatch(raw, path)
        return self.cls._decode_object(raw, path, policy)

    def encode(self, value: Any) -> dict[str, Any]:
        return value.to_json()

    def check(self, value: Any, path: str) -> None:
        if not isinstance(value, self.cls):
            raise TypeMismatch(path, self.cls.__name__, type(value).__name__)


@dataclasses.dataclass(frozen=True)
class Unrecognized:
    """A union member whose discriminator names no known variant.

    Produced only when the policy preserves unknown variants. The raw payload
    is kept verbatim and re-encoded unchanged. Subclasses list the tags of
    their union's defined variants in ``known_tags``; those are refused so
    that a value never re-decodes as a different type.
    """

    tag_field: ClassVar[str] = "type"
    known_tags: ClassVar[frozenset[str]] = frozenset()

    type: str
    raw: dict[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.type, str):
            raise TypeMismatch(self.tag_field, "string", json_type_name(self.type))
        if not isinstance(self.raw, dict):
            raise TypeMismatch("", "object", json_type_name(self.raw))
        clone_json(self.raw)
        if self.tag_field not in self.raw:
            raise MissingField(self.tag_field)
        if self.raw[self.tag_field] != self.type:
            raise ConstraintViolation(self.tag_field, f"must equal {self.type!r}")
        if self.type in self.known_tags:
            raise ConstraintViolation(self.tag_field, f"{self.type!r} names a defined variant")

    def to_json(self) -> dict[str, Any]:
        return clone_json(self.raw)


class TaggedUnion(Codec):
    """A closed union of models discriminated by a string member.

    The discriminator is read first and dispatches to exactly one variant.
    """

    expected = "object"

    def __init__(
        self,
        variants: Sequence[type[WireModel]],
        tag: str = "type",
        fallback: type[Unrecognized] | None = None,
    ) -> None:
        self.tag = tag
        self.variants: Mapping[str, type[WireModel]] = MappingProxyType(
            {variant._tag: variant for variant in variants}
        )
        self.fallback = fallback

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> WireModel | Unrecognized:
        if not isinstance(raw, dict):
            raise self._mismatch(raw, path)
        tag_path = join_path(path, self.tag)
        if self.tag not in raw:
            raise MissingField(tag_path)
        tag = raw[self.tag]
        if not isinstance(tag, str):
            raise TypeMismatch(tag_path, "string", json_type_name(tag))

        variant = self.variants.get(tag)
        if variant is not None:
            return variant._decode_object(raw, path, policy)
        if self.fallback is not None and policy.preserve_unknown_variants:
            return self.fallback(type=tag, raw=clone_json(raw, path))
        raise UnknownVariant(tag_path, tag)

    def encode(self, value: Any) -> dict[str, Any]:
        return value.to_json()

    def check(self, value: Any, path: str) -> None:
        allowed = tuple(self.variants.values())
        if self.fallback is not None:
            allowed += (self.fallback,)
        if not isinstance(value, allowed):
            raise TypeMismatch(path, " | ".join(sorted(self.variants)), type(value).__name__)
        if isinstance(value, Unrecognized) and value.type in self.variants:
            raise ConstraintViolation(
                join_path(path, self.tag), f"{value.type!r} names a defined variant"
            )


class KeyedUnion(Codec):
    """A union whose variant is chosen by which member is present."""

    expected = "object"

    def __init__(self, variants: Mapping[str, type[WireModel]]) -> None:
        self.variants = MappingProxyType(dict(variants))

    def decode(self, raw: Any, path: str, policy: DecodePolicy) -> WireModel:
        if not isinstance(raw, dict):
            raise self._mismatch(raw, path)
        present = [key for key in self.variants if key in raw]
        if not present:
            raise MissingField(join_path(path, next(iter(self.variants))))
        if len(present) > 1:
            names = " and ".join(repr(key) for key in present)
            raise ConstraintViolation(path, f"members {names} are mutually exclusive")
        return self.variants[present[0]]._decode_object(raw, path, policy)

    def encode(self, value: Any) -> dict[str, Any]:
        return value.to_json()

    def check(self, value: Any, path: str) -> None:
        if not isinstance(value, tuple(self.variants.values())):
            names = " | ".join(cls.__name__ for cls in self.variants.values())
            raise TypeMismatch(path, names, type(value).__name__)


def required(codec: Codec, *, wire: str | None = None) -> Any:
    """Declare a required member.

    Args:
        codec: Codec for the member's value.
        wire: Wire name, when it is not the camelCase form of the attribute.
    """
    return dataclasses.field(metadata={"codec": codec, "wire": wire})


def optional(codec: Codec, *, wire: str | None = None) -> Any:
    """Declare an optional member that defaults to ABSENT."""
    return dataclasses.field(default=ABSENT, metadata={"codec": codec, "wire": wire})


def meta() -> Any:
    """Declare the optional ``_meta`` member."""
    return optional(JsonObject(), wire="_meta")


class FieldSpec(NamedTuple):
    name: str
    wire: str
    codec: Codec
    required: bool


@functools.cache
def field_plan(cls: type[WireModel]) -> tuple[FieldSpec, ...]:
    """Compute the encode/decode plan for a model class.

    ``_meta`` is moved after the other members; everything else keeps
    declaration order.
    """
    specs = []
    for f in dataclasses.fields(cls):
        codec = f.metadata.get("codec")
        if codec is None:
            continue
        is_required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        wire = f.metadata.get("wire") or camel_case(f.name)
        specs.append(FieldSpec(f.name, wire, codec, is_required))
    specs.sort(key=lambda spec: spec.wire == "_meta")
    return tuple(specs)


@dataclasses.dataclass(frozen=True, kw_only=True)
class WireModel:
    """Base class for protocol value types.

    Subclasses are frozen, keyword-only dataclasses. Members the schema does
    not declare are kept in ``extra`` and written back on encode, so unknown
    data survives a round trip. Variants of a tagged union set ``_tag``; the
    discriminator is then written before any other member.
    """

    _tag_field: ClassVar[str] = "type"
    _tag: ClassVar[str | None] = None

    extra: dict[str, Any] = dataclasses.field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        plan = field_plan(type(self))
        for spec in plan:
            value = getattr(self, spec.name)
            if value is ABSENT:
                if spec.required:
                    raise MissingField(spec.wire)
                continue
            spec.codec.check(value, spec.wire)

        if not isinstance(self.extra, dict):
            raise TypeMismatch("extra", "object", json_type_name(self.extra))
        clone_json(self.extra)
        declared = {spec.wire for spec in plan}
        if self._tag is not None:
            declared.add(self._tag_field)
        clash = declared.intersection(self.extra)
        if clash:
            raise ConstraintViolation(min(clash), "declared member cannot be set through extra")

        self._validate()

    def _validate(self) -> None:
        """Check rules that span several members. Subclasses override."""

    def to_json(self) -> dict[str, Any]:
        """Encode to a JSON-compatible dictionary.

        Returns:
            Dictionary using the exact wire member names. Absent optional
            members are omitted.
        """
        data: dict[str, Any] = {}
        if self._tag is not None:
            data[self._tag_field] = self._tag
        for spec in field_plan(type(self)):
            value = getattr(self, spec.name)
            if value is not ABSENT:
                data[spec.wire] = spec.codec.encode(value)
        for key, value in self.extra.items():
            data.setdefault(key, clone_json(value))
        return data

    @classmethod
    def from_json(cls: type[M], data: Any, *, policy: DecodePolicy | None = None) -> M:
        """Decode from a JSON-compatible dictionary.

        Args:
            data: Parsed JSON value.
            policy: Decode policy (defaults to rejecting anything unknown).

        Returns:
            Decoded value.

        Raises:
            DecodeError: If the data does not match the schema.
        """
        if not isinstance(data, dict):
            raise TypeMismatch("", "object", json_type_name(data))
        return cls._decode_object(data, "", policy or DEFAULT_POLICY)

    @classmethod
    def _decode_object(cls: type[M], data: dict[str, Any], path: str, policy: DecodePolicy) -> M:
        declared = set()
        if cls._tag is not None:
            tag_path = join_path(path, cls._tag_field)
            if cls._tag_field not in data:
                raise MissingField(tag_path)
            tag = data[cls._tag_field]
            if not isinstance(tag, str):
                raise TypeMismatch(tag_path, "string", json_type_name(tag))
            if tag != cls._tag:
                raise ConstraintViolation(tag_path, f"must be {cls._tag!r}")
            declared.add(cls._tag_field)

        kwargs: dict[str, Any] = {}
        for spec in field_plan(cls):
            declared.add(spec.wire)
            field_path = join_path(path, spec.wire)
            if spec.wire not in data:
                if spec.required:
                    raise MissingField(field_path)
                continue
            kwargs[spec.name] = spec.codec.decode(data[spec.wire], field_path, policy)

        kwargs["extra"] = {
            key: clone_json(value, join_path(path, key))
            for key, value in data.items()
            if key not in declared
        }
        try:
            return cls(**kwargs)
        except DecodeError as e:
            raise e.at(path)


def encode(value: Any) -> Any:
    """Encode a protocol value to a JSON-compatible tree.

    Args:
        value: A WireModel, envelope, enum member, or plain JSON value.

    Returns:
        JSON-compatible tree.
    """
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    return clone_json(value)


def decode(target: type[M] | Codec, data: Any, *, policy: DecodePolicy | None = None) -> Any:
    """Decode a JSON tree into a protocol value.

    Args:
        target: A WireModel subclass, or a codec such as a union.
        data: Parsed JSON value.
        policy: Decode policy (defaults to rejecting anything unknown).

    Returns:
        Decoded value.

    Raises:
        DecodeError: If the data does not match the schema.
    """
    codec = target if isinstance(target, Codec) else Model(target)
    return codec.decode(data, "", policy or DEFAULT_POLICY)
