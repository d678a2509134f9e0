from pydantic import __version__ as _pydantic_version

# Schemagraph relies on the Pydantic v2 API (model_validate/model_dump, etc.).
# Import errors should surface early if an incompatible version is installed.
if not _pydantic_version.startswith("2"):
    raise ImportError(
        "schemagraph requires pydantic>=2.0; detected version %s" % _pydantic_version
    )

from .assembly import (
    BuildArtifact,
    ImportArtifact,
    RegistryPlan,
    apply_descriptions,
    build_registry,
    link_mutation_triggers,
    plan_registry,
)
from .builders import Artifact, AttrsBuilder
from .builtins import BUILTINS
from .definitions import Category, Definition
from .errors import ErrorData, ErrorRecord, Location, RuleKind
from .protocols import ArtifactBuilder, ArtifactSource, RuleCheck
from .registry import SchemaRegistry
from .rules import DEFAULT_RULES, RULES, run_rules

__all__ = [
    "BuildArtifact",
    "ImportArtifact",
    "RegistryPlan",
    "apply_descriptions",
    "build_registry",
    "link_mutation_triggers",
    "plan_registry",
    "Artifact",
    "AttrsBuilder",
    "BUILTINS",
    "Category",
    "Definition",
    "ErrorData",
    "ErrorRecord",
    "Location",
    "RuleKind",
    "ArtifactBuilder",
    "ArtifactSource",
    "RuleCheck",
    "SchemaRegistry",
    "DEFAULT_RULES",
    "RULES",
    "run_rules",
]
