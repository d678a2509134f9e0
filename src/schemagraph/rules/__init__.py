"""Whole-schema correctness checks run before registration."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from ..definitions import Definition
from ..errors import ErrorRecord
from ..protocols import RuleCheck
from .field_imports_exist import field_imports_exist
from .no_circular_field_imports import no_circular_field_imports

logger = logging.getLogger(__name__)

RULES: Dict[str, RuleCheck] = {
    "field_imports_exist": field_imports_exist,
    "no_circular_field_imports": no_circular_field_imports,
}

DEFAULT_RULES: Tuple[RuleCheck, ...] = (field_imports_exist, no_circular_field_imports)


def resolve_rules(names: Iterable[str]) -> List[RuleCheck]:
    checks: List[RuleCheck] = []
    for name in names:
        if name not in RULES:
            raise ValueError(f"Unknown rule {name!r}; expected one of: {', '.join(RULES)}")
        checks.append(RULES[name])
    return checks


def run_rules(
    definitions: Iterable[Definition], checks: Sequence[RuleCheck]
) -> Tuple[List[Definition], List[ErrorRecord]]:
    current = list(definitions)
    errors: List[ErrorRecord] = []
    for check in checks:
        before = len(errors)
        current, errors = check(current, errors)
        logger.debug(
            "Rule %s: %d definitions, %d new errors",
            getattr(check, "__name__", check),
            len(current),
            len(errors) - before,
        )
    return current, errors


__all__ = [
    "RULES",
    "DEFAULT_RULES",
    "resolve_rules",
    "run_rules",
    "field_imports_exist",
    "no_circular_field_imports",
]
