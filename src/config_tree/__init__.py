"""
config_tree: hierarchical configuration addressed by dot paths.

- Config is a frozen snapshot of a nested mapping/list tree with O(1) path lookups.
- Builder stages changes on a mutable copy before freezing it into a Config.
- Empty mappings, empty lists and None values are pruned, never stored.
- Paths ignore whitespace: "proxy.port" and " proxy . port " are the same path.
"""

from __future__ import annotations

from config_tree.builder import Builder, get_path, set_path
from config_tree.config import Config
from config_tree.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigPathError,
    ConfigStructureError,
    ConfigTypeError,
    ConfigValueError,
)
from config_tree.freezer import freeze, thaw
from config_tree.sources import TreeSourceProtocol
from config_tree.utils import canonical_path, normalize_path, split_path

__all__ = [
    "Config",
    "Builder",
    "freeze",
    "thaw",
    "get_path",
    "set_path",
    "normalize_path",
    "split_path",
    "canonical_path",
    "TreeSourceProtocol",
    "ConfigError",
    "ConfigPathError",
    "ConfigStructureError",
    "ConfigTypeError",
    "ConfigNotFoundError",
    "ConfigValueError",
]
