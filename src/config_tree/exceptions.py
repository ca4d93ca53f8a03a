from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base config exception."""


class ConfigPathError(ConfigError, ValueError):
    """Raised when a write is attempted on an empty (after normalization) path."""

    def __init__(self, path: Optional[str], msg: str | None = None) -> None:
        self.path = path
        super().__init__(msg or f"Invalid property path: {path!r}")


class ConfigStructureError(ConfigError):
    """Raised when a write path descends through an existing non-mapping value."""

    def __init__(self, path: str, key: str, existing: object) -> None:
        self.path = path
        self.key = key
        self.existing = existing
        super().__init__(
            f"Cannot descend into {key!r} while writing {path!r}: "
            f"existing value is a {type(existing).__name__}, not a mapping"
        )


class ConfigTypeError(ConfigError, TypeError):
    """Raised when a stored value does not match the type requested by the caller."""

    def __init__(self, path: str, expected: object, value: object) -> None:
        self.path = path
        self.expected = expected
        self.value = value
        super().__init__(f"Expected {expected} at {path!r}, got {type(value)}")


class ConfigNotFoundError(ConfigError, KeyError):
    """Raised when a requested path is not present."""


class ConfigValueError(ConfigError, ValueError):
    """Raised when a tree (or a value inside it) cannot be used as configuration."""
