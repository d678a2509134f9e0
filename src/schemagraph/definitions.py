from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from .protocols import ArtifactBuilder, ArtifactSource


class Category(str, Enum):
    TYPE = "type"
    DIRECTIVE = "directive"


FieldImport = Tuple[str, Dict[str, Any]]


@dataclass(frozen=True)
class Definition:
    """One declared type or directive awaiting registration.

    ``attrs`` must carry ``name`` (the externally visible name). Exactly one of
    ``source`` (import the artifact from another registry by identifier) and
    ``builder`` (construct the artifact from this definition) is set.
    """

    category: Category
    identifier: str
    attrs: Dict[str, Any]
    source: Optional["ArtifactSource"] = None
    builder: Optional["ArtifactBuilder"] = None
    file: Optional[str] = None
    line: Optional[int] = None
    opts: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.source is not None and self.builder is not None:
            raise ValueError(f"Definition {self.identifier!r} declares both a source and a builder")
        if self.source is None and self.builder is None:
            raise ValueError(f"Definition {self.identifier!r} declares neither a source nor a builder")
        if "name" not in self.attrs:
            raise ValueError(f"Definition {self.identifier!r} is missing the 'name' attribute")
        object.__setattr__(self, "category", Category(self.category))

    @property
    def name(self) -> str:
        return self.attrs["name"]

    @property
    def interfaces(self) -> List[str]:
        value = self.attrs.get("interfaces")
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    @property
    def fields(self) -> Dict[str, Dict[str, Any]]:
        return dict(self.attrs.get("fields") or {})

    @property
    def field_imports(self) -> List[FieldImport]:
        imports: List[FieldImport] = []
        for entry in self.attrs.get("field_imports") or []:
            if isinstance(entry, str):
                imports.append((entry, {}))
            else:
                identifier, opts = entry
                imports.append((identifier, dict(opts or {})))
        return imports

    def with_attrs(self, **updates: Any) -> "Definition":
        """Return a copy whose attrs are updated with ``updates``."""
        return dataclasses.replace(self, attrs={**self.attrs, **updates})


__all__ = ["Category", "Definition", "FieldImport"]
