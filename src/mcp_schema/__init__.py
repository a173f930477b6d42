"""Model Context Protocol schema types with validated JSON encode/decode."""

from mcp_schema.codec import ABSENT, UnknownEnumValue, WireModel, decode, encode, is_set
from mcp_schema.errors import (
    ConstraintViolation,
    DecodeError,
    MissingField,
    TypeMismatch,
    UnknownVariant,
)
from mcp_schema.policy import DEFAULT_POLICY, DecodePolicy, PolicyLoadError, load_policy

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "ConstraintViolation",
    "DEFAULT_POLICY",
    "DecodeError",
    "DecodePolicy",
    "MissingField",
    "PolicyLoadError",
    "TypeMismatch",
    "UnknownEnumValue",
    "UnknownVariant",
    "WireModel",
    "decode",
    "encode",
    "is_set",
    "load_policy",
]
