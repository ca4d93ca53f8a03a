"""
Deep conversion between mutable and immutable configuration trees.

``freeze`` turns a tree of mappings, sequences and scalars into read-only
``MappingProxyType``/``tuple`` structures and, on the same pass, records every
reachable dot path in a flat index. Empty mappings, empty sequences and
``None`` values are pruned at their parent, so they never show up in either
the frozen tree or the index. Sets become ``frozenset`` and bytearrays become
``bytes``; other scalars are deep-copied as they are.

``thaw`` is the inverse: a deep copy into plain ``dict``/``list`` form.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

from .exceptions import ConfigValueError
from .utils import join_path

logger = logging.getLogger("config_tree.freezer")
logger.addHandler(logging.NullHandler())

__all__ = ["freeze", "thaw", "is_mapping", "is_sequence"]


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    # str and bytes are scalars here
    return isinstance(value, (list, tuple))


def freeze(tree: Mapping[str, Any]) -> Tuple[MappingProxyType, MappingProxyType]:
    """
    Freeze ``tree`` and build its flat path index.

    Returns ``(root, index)``. ``root`` is always a mapping proxy, empty when
    everything was pruned. ``index`` maps each dot path to the frozen value
    found there; intermediate mappings are indexed as well as leaves. Values
    inside sequences are indexed under the path of the sequence itself.
    """
    if not is_mapping(tree):
        raise ConfigValueError(f"The root must be a mapping, got {type(tree).__name__}")
    index: Dict[str, Any] = {}
    root = _freeze_mapping(tree, "", index)
    logger.debug("Froze tree: %d paths indexed", len(index))
    if root is None:
        root = MappingProxyType({})
    return root, MappingProxyType(index)


def _freeze_value(value: Any, path: str, index: Dict[str, Any]) -> Any:
    if value is None:
        return None
    if is_mapping(value):
        return _freeze_mapping(value, path, index)
    if is_sequence(value):
        return _freeze_sequence(value, path, index)
    if isinstance(value, (set, frozenset)):
        return frozenset(_copy_scalar(v, path) for v in value)
    if isinstance(value, bytearray):
        return bytes(value)
    return _copy_scalar(value, path)


def _freeze_mapping(
    mapping: Mapping[str, Any], path: str, index: Dict[str, Any]
) -> Optional[MappingProxyType]:
    copy: Dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise ConfigValueError(
                f"Mapping keys must be str, got {type(key).__name__} {key!r} under {path!r}"
            )
        child_path = join_path(path, key)
        frozen = _freeze_value(value, child_path, index)
        if frozen is None:
            continue
        copy[key] = frozen
        index[child_path] = frozen
    return MappingProxyType(copy) if copy else None


def _freeze_sequence(sequence: Any, path: str, index: Dict[str, Any]) -> Optional[tuple]:
    frozen = tuple(
        item
        for item in (_freeze_value(element, path, index) for element in sequence)
        if item is not None
    )
    return frozen if frozen else None


def _copy_scalar(value: Any, path: str) -> Any:
    try:
        return deepcopy(value)
    except Exception as e:
        raise ConfigValueError(f"Value at {path!r} is not deepcopy-able") from e


def thaw(value: Any) -> Any:
    """
    Deep copy any tree, frozen or not, into plain ``dict``/``list`` form.

    ``None`` mapping entries and sequence elements are dropped.
    """
    if is_mapping(value):
        return {k: thaw(v) for k, v in value.items() if v is not None}
    if is_sequence(value):
        return [thaw(v) for v in value if v is not None]
    if value is None:
        return None
    return _copy_scalar(value, "")


def _mutable_root(tree: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if tree is None:
        return {}
    if not is_mapping(tree):
        raise ConfigValueError(f"The root must be a mapping, got {type(tree).__name__}")
    root: Dict[str, Any] = thaw(tree)
    return root
