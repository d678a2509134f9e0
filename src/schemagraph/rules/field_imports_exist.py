from __future__ import annotations

from typing import List, Tuple

from ..definitions import Definition
from ..errors import ErrorRecord, RuleKind

FIELD_IMPORT = "Field import"


def field_imports_exist(
    definitions: List[Definition], errors: List[ErrorRecord]
) -> Tuple[List[Definition], List[ErrorRecord]]:
    """Report field imports that reference identifiers no definition declares."""

    known = {definition.identifier for definition in definitions}
    found: List[ErrorRecord] = []
    for definition in definitions:
        for identifier, _opts in definition.field_imports:
            if identifier not in known:
                found.append(
                    ErrorRecord.for_definition(
                        RuleKind.FIELD_IMPORTS_EXIST,
                        definition,
                        artifact=FIELD_IMPORT,
                        value=identifier,
                    )
                )
    return definitions, errors + found
