from __future__ import annotations

import re
from typing import Any, List, Optional

from .exceptions import ConfigPathError

__all__ = [
    "normalize_path",
    "split_path",
    "canonical_path",
    "join_path",
    "_redact_for_log",
]

_WHITESPACE = re.compile(r"\s+")
_WORD_SEPARATORS = re.compile(r"[^a-z0-9]+")
_SECRET_MARKERS = frozenset(("secret", "password", "token", "key", "passwd", "apikey"))


def normalize_path(path: Optional[str]) -> str:
    """Strip every whitespace character from ``path``; ``None`` becomes ``""``."""
    if path is None:
        return ""
    return _WHITESPACE.sub("", path)


def split_path(path: Optional[str]) -> List[str]:
    """
    Normalize ``path`` and split it into its dot-separated components.

    Trailing dots are dropped, so ``"a."`` is the same path as ``"a"``.

    Raises ConfigPathError if nothing is left after normalization, or if a
    leading or inner component is empty (``".a"``, ``"a..b"``).
    """
    clean = normalize_path(path).rstrip(".")
    if not clean:
        raise ConfigPathError(path, "The path must not be empty")
    keys = clean.split(".")
    if "" in keys:
        raise ConfigPathError(path, f"Empty component in path {clean!r}")
    return keys


def canonical_path(path: Optional[str]) -> Optional[str]:
    """
    Return the lookup form of ``path``: ``""`` for the root, the dot-joined
    components otherwise, or None if ``path`` cannot address anything.
    """
    if not normalize_path(path):
        return ""
    try:
        return ".".join(split_path(path))
    except ConfigPathError:
        return None


def join_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def _redact_for_log(path: str, value: Any) -> str:
    """
    Redact likely secrets in logs. Each path component is split into words,
    and a word has to equal a marker: ``db.password`` and ``api_key`` are
    redacted, ``monkey`` and ``keys.count`` are not.
    """
    words = _WORD_SEPARATORS.split(path.lower())
    if any(w in _SECRET_MARKERS for w in words):
        return "***"
    try:
        return repr(value)
    except Exception:
        return "<unreprable>"
