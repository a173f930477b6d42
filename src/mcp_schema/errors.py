"""Decode error taxonomy.

Every failure to turn a JSON tree into a typed protocol value is reported as
one of the exceptions below. All of them carry the path of the offending
field (``params.content[0].type``) so callers can build a precise diagnostic.
"""

from __future__ import annotations


def join_path(prefix: str, key: str) -> str:
    """Join a field path prefix with a member name or index segment.

    Args:
        prefix: Path of the enclosing value (may be empty).
        key: Member name, or an index segment such as ``[3]``.

    Returns:
        Combined path.
    """
    if not prefix:
        return key
    if not key:
        return prefix
    if key.startswith("["):
        return f"{prefix}{key}"
    return f"{prefix}.{key}"


class DecodeError(ValueError):
    """Base exception for all decode and validation failures."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(self._render(path, message))
        self.path = path
        self.message = message

    @staticmethod
    def _render(path: str, message: str) -> str:
        return f"{path}: {message}" if path else message

    @property
    def field(self) -> str:
        """Path of the field that failed."""
        return self.path

    def at(self, prefix: str) -> DecodeError:
        """Re-anchor this error beneath an enclosing path.

        Args:
            prefix: Path of the enclosing value.

        Returns:
            This error, with its path updated.
        """
        if prefix:
            self.path = join_path(prefix, self.path)
            self.args = (self._render(self.path, self.message),)
        return self


class MissingField(DecodeError):
    """Raised when a required member is absent."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "missing required field")


class TypeMismatch(DecodeError):
    """Raised when a member's JSON type disagrees with the schema."""

    def __init__(self, path: str, expected: str, actual: str) -> None:
        super().__init__(path, f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class UnknownVariant(DecodeError):
    """Raised when a discriminator names no known variant of a closed union."""

    def __init__(self, path: str, tag: str) -> None:
        super().__init__(path, f"unknown variant {tag!r}")
        self.tag = tag


class ConstraintViolation(DecodeError):
    """Raised when a value has the right type but breaks a schema rule."""

    def __init__(self, path: str, rule: str) -> None:
        super().__init__(path, rule)
        self.rule = rule
