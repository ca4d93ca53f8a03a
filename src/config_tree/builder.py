from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Mapping, Optional

from .config import Config
from .exceptions import ConfigError, ConfigStructureError, ConfigTypeError, ConfigValueError
from .freezer import _mutable_root, is_mapping, thaw
from .utils import _redact_for_log, canonical_path, normalize_path, split_path

if TYPE_CHECKING:
    from .sources import TreeSourceProtocol

logger = logging.getLogger("config_tree.builder")
logger.addHandler(logging.NullHandler())

FailureMode = Literal["ignore", "log", "raise"]

__all__ = ["Builder", "get_path", "set_path"]


def get_path(tree: Mapping[str, Any], path: Optional[str]) -> Any:
    """
    Walk ``tree`` along ``path`` and return the value found there, or None.

    The empty path returns ``tree`` itself. A malformed path (see
    ``split_path``) or a missing or non-mapping intermediate node yields None.
    """
    clean = canonical_path(path)
    if clean is None:
        return None
    if not clean:
        return tree
    node: Any = tree
    for key in clean.split("."):
        if not is_mapping(node):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def set_path(tree: MutableMapping[str, Any], path: Optional[str], value: Any) -> Any:
    """
    Set, replace or delete the property at ``path`` in ``tree``.

    - ``value`` is None and nothing is stored at ``path``: no-op, no
      intermediate mappings are created.
    - ``value`` is None and something is stored: the leaf key is removed.
    - otherwise missing intermediate mappings are created and the leaf is
      overwritten with a mutable deep copy of ``value``.

    Returns the stored value, or None when nothing was stored.

    Raises:
    - ConfigPathError: if ``path`` is empty after normalization or has an
      empty leading or inner component.
    - ConfigStructureError: if an intermediate node exists but is not a mapping.
    """
    if value is None and get_path(tree, path) is None:
        return None

    keys = split_path(path)
    parent, leaf = keys[:-1], keys[-1]
    clean = ".".join(keys)

    node = tree
    for key in parent:
        child = node.get(key)
        if child is None:
            child = {}
            node[key] = child
        elif not isinstance(child, MutableMapping):
            raise ConfigStructureError(clean, key, child)
        node = child

    if value is None:
        del node[leaf]
        logger.debug("Deleted %r", clean)
        return None

    node[leaf] = thaw(value)
    logger.debug("Set %r = %s", clean, _redact_for_log(clean, value))
    return node[leaf]


class Builder:
    """
    Mutable staging area for a configuration tree.

    Holds its own deep copy of the source tree, so the caller's data is never
    modified. Chain the write operations and finish with ``build()``:

        config = (
            Builder(tree)
            .put_of("name", os.environ.get("APP_NAME"))   # skipped when unset
            .put_if_empty("proxy.port", 7777)             # keeps an existing port
            .put("proxy.user", "Bob")                     # adds or replaces
            .put("proxy.alias", None)                     # deletes
            .build()
        )

    Write failures (empty path, descending through a non-mapping) are handled
    according to ``failure_mode``: ``"log"`` logs a warning, ``"ignore"`` logs
    at debug level and ``"raise"`` re-raises. In the first two cases the tree
    is left unchanged and the error is kept in ``errors``.
    """

    def __init__(
        self,
        root: Optional[Mapping[str, Any]] = None,
        *,
        failure_mode: FailureMode = "log",
    ) -> None:
        if failure_mode not in ("ignore", "log", "raise"):
            raise ValueError("failure_mode must be one of 'ignore', 'log', 'raise'")
        self._failure_mode = failure_mode
        self._root: Dict[str, Any] = _mutable_root(root)
        self._errors: List[ConfigError] = []
        logger.debug("Builder init failure_mode=%s keys=%d", failure_mode, len(self._root))

    @classmethod
    def build_upon(cls, config: Config, **kwargs: Any) -> "Builder":
        """Return a new Builder seeded with a mutable copy of ``config``."""
        return cls(config.root, **kwargs)

    @classmethod
    def from_source(cls, source: "TreeSourceProtocol", **kwargs: Any) -> "Builder":
        """
        Return a new Builder seeded with the tree loaded from ``source``.

        Raises:
        - ConfigValueError: if ``source.load()`` does not return a mapping.
        - Exception: whatever ``source.load()`` raises, after logging it.
        """
        try:
            tree = source.load()
        except Exception as e:
            logger.error("Error loading tree from source %r: %s", source, e)
            raise
        if not is_mapping(tree):
            logger.error("Source %r returned %s, not a mapping", source, type(tree).__name__)
            raise ConfigValueError("Source load() must return a mapping")
        return cls(tree, **kwargs)

    @property
    def failure_mode(self) -> FailureMode:
        return self._failure_mode

    @property
    def errors(self) -> List[ConfigError]:
        """Write failures swallowed so far, oldest first."""
        return list(self._errors)

    def get(self, path: Optional[str], default: Any = None, *, value_type: Any = None) -> Any:
        """
        Similar to ``Config.get``, but on the mutable tree.

        Containers are returned live: changing them changes what ``build()``
        will freeze.
        """
        value = get_path(self._root, path)
        if value is None:
            return default
        if value_type is not None and not isinstance(value, value_type):
            raise ConfigTypeError(normalize_path(path), value_type, value)
        return value

    def put(self, path: Optional[str], value: Any) -> "Builder":
        """
        The hard way to set or replace a property, or delete it if ``value`` is None.
        """
        self._apply(path, value)
        return self

    def put_if_empty(self, path: Optional[str], value: Any) -> "Builder":
        """
        Set a default: only writes if nothing is stored at ``path`` yet and
        ``value`` is not None. Never deletes. An empty path is not "empty":
        it is handed to the write so ``failure_mode`` applies.
        """
        if value is not None and (not normalize_path(path) or self.get(path) is None):
            self._apply(path, value)
        else:
            logger.debug("put_if_empty(%r) skipped", normalize_path(path))
        return self

    def put_of(self, path: Optional[str], optional: Any) -> "Builder":
        """
        The preferred way to apply a value from a dynamic source such as
        ``os.environ.get(...)``: None means "nothing to contribute" and leaves
        the property untouched instead of deleting it.
        """
        if optional is not None:
            self._apply(path, optional)
        else:
            logger.debug("put_of(%r) skipped: no value", normalize_path(path))
        return self

    def _apply(self, path: Optional[str], value: Any) -> Any:
        try:
            return set_path(self._root, path, value)
        except ConfigError as exc:
            if self._failure_mode == "raise":
                raise
            self._errors.append(exc)
            if self._failure_mode == "log":
                logger.warning("Write to %r failed: %s", path, exc)
            else:
                logger.debug("Write to %r failed but ignored: %s", path, exc)
            return None

    def build(self) -> Config:
        """
        Freeze the current tree into a Config. The Builder stays usable.
        """
        config = Config(self._root)
        logger.debug("Built %r", config)
        return config

    def __repr__(self) -> str:
        return f"<Builder keys={len(self._root)} failure_mode={self._failure_mode} errors={len(self._errors)}>"
