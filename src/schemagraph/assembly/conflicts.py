from __future__ import annotations

from typing import List, Mapping

from ..definitions import Definition
from ..errors import ErrorRecord, RuleKind

TYPE_IDENTIFIER = "Type identifier"
TYPE_NAME = "Type name"
DIRECTIVE_IDENTIFIER = "Directive identifier"


def _unique_error(definition: Definition, artifact: str, value: str) -> ErrorRecord:
    return ErrorRecord.for_definition(RuleKind.TYPE_NAMES_ARE_UNIQUE, definition, artifact=artifact, value=value)


def type_conflicts(definition: Definition, type_map: Mapping[str, str]) -> List[ErrorRecord]:
    # Identifier and name collisions are checked independently; both may fire.
    errors: List[ErrorRecord] = []
    if definition.identifier in type_map:
        errors.append(_unique_error(definition, TYPE_IDENTIFIER, definition.identifier))
    if definition.name in type_map.values():
        errors.append(_unique_error(definition, TYPE_NAME, definition.name))
    return errors


def directive_conflicts(definition: Definition, directive_map: Mapping[str, str]) -> List[ErrorRecord]:
    if definition.identifier in directive_map:
        return [_unique_error(definition, DIRECTIVE_IDENTIFIER, definition.identifier)]
    return []


__all__ = [
    "TYPE_IDENTIFIER",
    "TYPE_NAME",
    "DIRECTIVE_IDENTIFIER",
    "type_conflicts",
    "directive_conflicts",
]
