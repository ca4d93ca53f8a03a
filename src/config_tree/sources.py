from typing import Any, Mapping, Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class TreeSourceProtocol(Protocol):
    def load(self) -> Mapping[str, Any]: ...
