"""Artifact error type definitions.

Every failure raised by this package derives from ArtifactError, so callers
can catch one type at the boundary while still matching the builtin family
(LookupError, ValueError) each error belongs to.
"""

from __future__ import annotations

from typing import Any


class ArtifactError(Exception):
    """Base class for artifact errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        self.message = message
        self.data = data or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a JSON-friendly dictionary."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "data": self.data,
        }


class ConstructorInputNotFoundError(ArtifactError, LookupError):
    """A binding names a constructor input the artifact does not declare."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            message=f'Constructor input "{name}" not found',
            data={"name": name, "available": available},
        )
        self.name = name


class EncodingError(ArtifactError, ValueError):
    """A value cannot be encoded as the declared primitive type."""

    def __init__(self, type_name: str, reason: str):
        super().__init__(
            message=f"cannot encode argument as {type_name}: {reason}",
            data={"type": type_name, "reason": reason},
        )
        self.type_name = type_name
        self.reason = reason


class FormatError(ArtifactError, ValueError):
    """A persisted artifact document does not have the expected structure."""

    def __init__(self, reason: str, source: str | None = None):
        prefix = f"{source}: " if source else ""
        super().__init__(
            message=f"{prefix}{reason}",
            data={"reason": reason, "source": source},
        )
        self.reason = reason
