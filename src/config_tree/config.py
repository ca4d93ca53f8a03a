from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Iterator, KeysView, Mapping, Optional

from .exceptions import ConfigNotFoundError, ConfigTypeError, ConfigValueError
from .freezer import freeze, thaw
from .utils import canonical_path, normalize_path

if TYPE_CHECKING:
    from .builder import Builder

logger = logging.getLogger("config_tree.config")
logger.addHandler(logging.NullHandler())


class Config:
    """
    Read-only configuration tree addressed by dot paths.

    The constructor freezes a deep copy of ``root`` and indexes every reachable
    path, so ``get`` is a single dictionary lookup. Mappings come back as
    ``MappingProxyType`` and sequences as ``tuple``; neither can be mutated.

        config = Config({"proxy": {"port": 9999}})
        config.get("proxy.port")                  # 9999
        config.get("proxy.user", "Dale")          # "Dale"
        config.get("proxy.port", value_type=int)  # 9999, or ConfigTypeError

    Use ``Builder`` to change a tree before freezing it.
    """

    def __init__(self, root: Mapping[str, Any]) -> None:
        if root is None:
            raise ConfigValueError("The root mapping cannot be None")
        frozen, index = freeze(root)
        self.__root: MappingProxyType = frozen
        self.__index: MappingProxyType = index
        logger.debug("Config created with %d paths", len(index))

    # forbid attribute mutation once constructed
    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_Config__index"):
            raise AttributeError("Config is immutable. Use Builder to derive a new one.")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Config is immutable. Use Builder to derive a new one.")

    @property
    def root(self) -> MappingProxyType:
        """Return the frozen root mapping."""
        return self.__root

    def get(self, path: Optional[str], default: Any = None, *, value_type: Any = None) -> Any:
        """
        Return the value at ``path``, or ``default`` if nothing is stored there.

        Whitespace and trailing dots in ``path`` are ignored. The empty path
        returns the whole root.
        If ``value_type`` is given the stored value must be an instance of it,
        otherwise ConfigTypeError is raised. Frozen mappings satisfy
        ``collections.abc.Mapping`` and frozen sequences are tuples.
        """
        key = canonical_path(path)
        if key is None:
            return default
        value = self.__index.get(key) if key else self.__root
        if value is None:
            return default
        if value_type is not None and not isinstance(value, value_type):
            logger.debug("Type mismatch at %r: expected %r, got %r", key, value_type, type(value))
            raise ConfigTypeError(key, value_type, value)
        return value

    def paths(self) -> KeysView[str]:
        """Just to inspect what's available: a read-only view of every indexed path."""
        return self.__index.keys()

    def to_builder(self, **builder_kwargs: Any) -> "Builder":
        """Return a new Builder seeded with a mutable copy of this config."""
        from .builder import Builder

        return Builder.build_upon(self, **builder_kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain, mutable deep copy of the root."""
        root: Dict[str, Any] = thaw(self.__root)
        return root

    def __repr__(self) -> str:
        return f"<Config paths={len(self.__index)}>"

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self.__index.keys()))

    def __len__(self) -> int:
        return len(self.__index)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        return canonical_path(path) in self.__index

    def __getitem__(self, path: str) -> Any:
        value = self.get(path)
        if value is None:
            raise ConfigNotFoundError(f"No value at path {normalize_path(path)!r}")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self.__root == other.__root and self.__index == other.__index

    __hash__ = None  # type: ignore[assignment]
