from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set

from ..builtins import BUILTINS
from ..definitions import Category, Definition
from ..errors import ErrorRecord
from ..protocols import ArtifactSource, RuleCheck
from ..registry import SchemaRegistry
from ..rules import DEFAULT_RULES, run_rules
from .artifacts import ImportArtifact, Producer, resolve_artifact
from .conflicts import directive_conflicts, type_conflicts
from .descriptions import apply_descriptions
from .triggers import link_mutation_triggers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRules:
    conflicts: Callable[[Definition, Mapping[str, str]], List[ErrorRecord]]
    track_implementors: bool


CATEGORY_RULES: Dict[Category, CategoryRules] = {
    Category.TYPE: CategoryRules(conflicts=type_conflicts, track_implementors=True),
    Category.DIRECTIVE: CategoryRules(conflicts=directive_conflicts, track_implementors=False),
}


@dataclass
class RegistryPlan:
    """Result of the registration fold, before any artifact is realized."""

    type_map: Dict[str, str] = field(default_factory=dict)
    directive_map: Dict[str, str] = field(default_factory=dict)
    type_producers: List[Producer] = field(default_factory=list)
    directive_producers: List[Producer] = field(default_factory=list)
    implementors: Dict[str, Set[str]] = field(default_factory=dict)
    exports: Set[str] = field(default_factory=set)
    errors: List[ErrorRecord] = field(default_factory=list)

    def identifier_map(self, category: Category) -> Dict[str, str]:
        return self.type_map if category is Category.TYPE else self.directive_map

    def producers(self, category: Category) -> List[Producer]:
        return self.type_producers if category is Category.TYPE else self.directive_producers

    def materialize(self) -> SchemaRegistry:
        """Realize every producer once and freeze the result."""
        return SchemaRegistry(
            type_map=self.type_map,
            directive_map=self.directive_map,
            types=_realize(self.type_producers),
            directives=_realize(self.directive_producers),
            errors=self.errors,
            exports=self.exports,
            implementors=self.implementors,
        )


def _realize(producers: Iterable[Producer]) -> Dict[str, Any]:
    artifacts: Dict[str, Any] = {}
    for producer in producers:
        artifact = producer.realize()
        if artifact is None and isinstance(producer, ImportArtifact):
            logger.warning("Import of %r resolved to nothing", producer.identifier)
        elif artifact is None:
            logger.warning("Builder for %r returned nothing", producer.identifier)
        else:
            logger.debug("Realized %r via %s", producer.identifier, type(producer).__name__)
        artifacts[producer.identifier] = artifact
    return artifacts


def is_exported(definition: Definition, builtin_source: Optional[ArtifactSource] = BUILTINS) -> bool:
    default = definition.source is None or definition.source is not builtin_source
    return bool(definition.opts.get("export", default))


def register_definition(
    plan: RegistryPlan,
    definition: Definition,
    *,
    builtin_source: Optional[ArtifactSource] = BUILTINS,
) -> RegistryPlan:
    """Fold one definition into ``plan``; conflicts only look at earlier state."""

    rules = CATEGORY_RULES[definition.category]
    identifier_map = plan.identifier_map(definition.category)
    errors = rules.conflicts(definition, identifier_map)

    if not errors:
        identifier_map[definition.identifier] = definition.name
        plan.producers(definition.category).append(resolve_artifact(definition))

    # Implementors are recorded even for definitions that lost a collision.
    if rules.track_implementors:
        for interface in definition.interfaces:
            plan.implementors.setdefault(interface, set()).add(definition.identifier)

    if is_exported(definition, builtin_source):
        plan.exports.add(definition.identifier)

    plan.errors.extend(errors)
    return plan


def plan_registry(
    definitions: Iterable[Definition],
    *,
    descriptions: Optional[Mapping[str, str]] = None,
    rules: Optional[Sequence[RuleCheck]] = None,
    builtin_source: Optional[ArtifactSource] = BUILTINS,
) -> RegistryPlan:
    prepared = apply_descriptions(definitions, descriptions or {})
    prepared = link_mutation_triggers(prepared)
    checked, rule_errors = run_rules(prepared, DEFAULT_RULES if rules is None else rules)

    plan = RegistryPlan(errors=list(rule_errors))
    for definition in checked:
        register_definition(plan, definition, builtin_source=builtin_source)

    logger.info(
        "Assembled %d types, %d directives with %d errors",
        len(plan.type_map),
        len(plan.directive_map),
        len(plan.errors),
    )
    return plan


def build_registry(
    definitions: Iterable[Definition],
    *,
    descriptions: Optional[Mapping[str, str]] = None,
    rules: Optional[Sequence[RuleCheck]] = None,
    builtin_source: Optional[ArtifactSource] = BUILTINS,
) -> SchemaRegistry:
    """Validate ``definitions`` and return the immutable registry.

    Problems are reported through ``registry.errors()``; every
    non-conflicting definition is still registered.
    """

    plan = plan_registry(
        definitions,
        descriptions=descriptions,
        rules=rules,
        builtin_source=builtin_source,
    )
    return plan.materialize()


__all__ = [
    "CategoryRules",
    "CATEGORY_RULES",
    "RegistryPlan",
    "is_exported",
    "register_definition",
    "plan_registry",
    "build_registry",
]
