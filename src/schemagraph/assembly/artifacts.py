from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union, cast

from ..definitions import Category, Definition
from ..protocols import ArtifactBuilder, ArtifactSource


@dataclass(frozen=True)
class ImportArtifact:
    """Deferred lookup of an existing artifact in another registry."""

    source: ArtifactSource
    category: Category
    identifier: str
    name: str

    def realize(self) -> Optional[Any]:
        if self.category is Category.TYPE:
            return self.source.lookup_type(self.identifier)
        return self.source.lookup_directive(self.identifier)


@dataclass(frozen=True)
class BuildArtifact:
    """Deferred construction of a new artifact from a definition."""

    builder: ArtifactBuilder
    definition: Definition

    @property
    def identifier(self) -> str:
        return self.definition.identifier

    @property
    def name(self) -> str:
        return self.definition.name

    def realize(self) -> Any:
        return self.builder(self.definition)


Producer = Union[ImportArtifact, BuildArtifact]


def resolve_artifact(definition: Definition) -> Producer:
    if definition.source is not None:
        return ImportArtifact(
            source=definition.source,
            category=definition.category,
            identifier=definition.identifier,
            name=definition.name,
        )
    return BuildArtifact(builder=cast(ArtifactBuilder, definition.builder), definition=definition)


__all__ = ["ImportArtifact", "BuildArtifact", "Producer", "resolve_artifact"]
