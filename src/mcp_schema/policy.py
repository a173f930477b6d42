"""Decode policy loader and validation.

This module handles loading decode policies from YAML configuration files.
A policy decides how strictly the schema layer treats input it does not
recognise: unknown union tags, unknown enumeration values, and malformed
JSON Schema documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

REJECT = "reject"
PRESERVE = "preserve"
UNKNOWN_HANDLING = (REJECT, PRESERVE)

# Maximum message size (1 MB)
MAX_MESSAGE_SIZE = 1_048_576


class PolicyLoadError(Exception):
    """Raised when policy loading or validation fails."""

    pass


@dataclass(frozen=True)
class DecodePolicy:
    """Decode policy configuration.

    Immutable configuration shared by every decode call. The defaults reject
    anything the schema does not define.
    """

    unknown_variants: str = REJECT
    unknown_enum_values: str = REJECT
    check_schema_documents: bool = False
    max_message_size: int = MAX_MESSAGE_SIZE

    def __post_init__(self) -> None:
        for name in ("unknown_variants", "unknown_enum_values"):
            value = getattr(self, name)
            if value not in UNKNOWN_HANDLING:
                raise ValueError(f"{name} must be one of {UNKNOWN_HANDLING}, got {value!r}")
        if not isinstance(self.check_schema_documents, bool):
            raise ValueError("check_schema_documents must be a boolean")
        if (
            isinstance(self.max_message_size, bool)
            or not isinstance(self.max_message_size, int)
            or self.max_message_size <= 0
        ):
            raise ValueError("max_message_size must be a positive integer")

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> DecodePolicy:
        """Create a DecodePolicy from a configuration dictionary.

        Args:
            config: Dictionary parsed from YAML configuration.

        Returns:
            DecodePolicy instance with all settings populated.
        """
        decode = config.get("decode") or {}
        limits = config.get("limits") or {}

        return cls(
            unknown_variants=decode.get("unknown_variants", REJECT),
            unknown_enum_values=decode.get("unknown_enum_values", REJECT),
            check_schema_documents=decode.get("check_schema_documents", False),
            max_message_size=limits.get("max_message_size", MAX_MESSAGE_SIZE),
        )

    @property
    def preserve_unknown_variants(self) -> bool:
        """Check if unknown union tags decode to an opaque fallback."""
        return self.unknown_variants == PRESERVE

    @property
    def preserve_unknown_enum_values(self) -> bool:
        """Check if unknown enumeration strings are kept as plain strings."""
        return self.unknown_enum_values == PRESERVE


DEFAULT_POLICY = DecodePolicy()


def load_policy(path: Path) -> DecodePolicy:
    """Load decode policy from a YAML file.

    Args:
        path: Path to the policy YAML file.

    Returns:
        DecodePolicy instance.

    Raises:
        PolicyLoadError: If the file cannot be found, parsed, or validated.
    """
    if not path.exists():
        raise PolicyLoadError(f"Policy file not found: {path}")

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PolicyLoadError(f"Failed to parse policy YAML: {e}") from e

    if not isinstance(config, dict):
        raise PolicyLoadError("Policy must be a YAML mapping")

    if "version" not in config:
        raise PolicyLoadError("Policy must include 'version' field")

    for section in ("decode", "limits"):
        if config.get(section) is not None and not isinstance(config[section], dict):
            raise PolicyLoadError(f"Policy section '{section}' must be a mapping")

    try:
        return DecodePolicy.from_dict(config)
    except ValueError as e:
        raise PolicyLoadError(f"Invalid policy: {e}") from e
