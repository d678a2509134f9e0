"""Multi-pass assembly of definitions into a validated registry."""

from .artifacts import BuildArtifact, ImportArtifact, Producer, resolve_artifact
from .conflicts import directive_conflicts, type_conflicts
from .descriptions import apply_descriptions
from .triggers import link_mutation_triggers
from .writer import (
    CATEGORY_RULES,
    CategoryRules,
    RegistryPlan,
    build_registry,
    is_exported,
    plan_registry,
    register_definition,
)

__all__ = [
    "BuildArtifact",
    "ImportArtifact",
    "Producer",
    "resolve_artifact",
    "directive_conflicts",
    "type_conflicts",
    "apply_descriptions",
    "link_mutation_triggers",
    "CATEGORY_RULES",
    "CategoryRules",
    "RegistryPlan",
    "build_registry",
    "is_exported",
    "plan_registry",
    "register_definition",
]
