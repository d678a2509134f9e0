from __future__ import annotations

from typing import Iterable, List, Mapping

from ..definitions import Definition


def apply_descriptions(definitions: Iterable[Definition], descriptions: Mapping[str, str]) -> List[Definition]:
    """Overlay separately collected descriptions onto definitions by identifier."""

    updated: List[Definition] = []
    for definition in definitions:
        description = descriptions.get(definition.identifier)
        if description is None:
            updated.append(definition)
        else:
            updated.append(definition.with_attrs(description=description))
    return updated


__all__ = ["apply_descriptions"]
