from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .definitions import Definition

_STRUCTURAL_ATTRS = {"name", "description", "fields", "interfaces"}


class Artifact(BaseModel):
    """Runtime representation of a registered type or directive."""

    kind: str
    identifier: str
    name: str
    description: Optional[str] = None
    fields: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    interfaces: List[str] = Field(default_factory=list)
    attrs: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class AttrsBuilder:
    """Builds an :class:`Artifact` of a fixed kind straight from definition attrs."""

    def __init__(self, kind: str):
        self.kind = kind

    def __call__(self, definition: Definition) -> Artifact:
        return Artifact(
            kind=self.kind,
            identifier=definition.identifier,
            name=definition.name,
            description=definition.attrs.get("description"),
            fields=definition.fields,
            interfaces=definition.interfaces,
            attrs={k: v for k, v in definition.attrs.items() if k not in _STRUCTURAL_ATTRS},
        )

    def __repr__(self) -> str:
        return f"AttrsBuilder({self.kind!r})"


__all__ = ["Artifact", "AttrsBuilder"]
