from __future__ import annotations

from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable

from .definitions import Definition
from .errors import ErrorRecord


@runtime_checkable
class ArtifactSource(Protocol):
    """Registry-like object that artifacts can be imported from by identifier."""

    def lookup_type(self, identifier: str) -> Optional[Any]: ...

    def lookup_directive(self, identifier: str) -> Optional[Any]: ...


class ArtifactBuilder(Protocol):
    def __call__(self, definition: Definition) -> Any: ...


class RuleCheck(Protocol):
    def __call__(
        self, definitions: List[Definition], errors: List[ErrorRecord]
    ) -> Tuple[List[Definition], List[ErrorRecord]]: ...


__all__ = ["ArtifactSource", "ArtifactBuilder", "RuleCheck"]
