from __future__ import annotations

import threading
from typing import Any, List, Optional

from .builders import AttrsBuilder
from .definitions import Category, Definition
from .registry import SchemaRegistry

_SCALARS = [
    ("string", "String", "UTF-8 character sequence."),
    ("integer", "Int", "Signed 32-bit integer."),
    ("float", "Float", "Signed double-precision floating point value."),
    ("boolean", "Boolean", "true or false."),
    ("id", "ID", "Unique identifier, serialized as a string."),
]

_DIRECTIVES = [
    ("include", "include", "Include this field or fragment only when the argument is true."),
    ("skip", "skip", "Skip this field or fragment when the argument is true."),
]

_DIRECTIVE_LOCATIONS = ["field", "fragment_spread", "inline_fragment"]


def builtin_definitions() -> List[Definition]:
    scalar = AttrsBuilder("scalar")
    directive = AttrsBuilder("directive")
    definitions = [
        Definition(
            category=Category.TYPE,
            identifier=identifier,
            attrs={"name": name, "description": description},
            builder=scalar,
            file=__file__,
        )
        for identifier, name, description in _SCALARS
    ]
    definitions.extend(
        Definition(
            category=Category.DIRECTIVE,
            identifier=identifier,
            attrs={
                "name": name,
                "description": description,
                "args": {"if": {"type": "boolean", "non_null": True}},
                "locations": list(_DIRECTIVE_LOCATIONS),
            },
            builder=directive,
            file=__file__,
        )
        for identifier, name, description in _DIRECTIVES
    )
    return definitions


class BuiltinLibrary:
    """The default built-in library; definitions imported from it are not exported by default."""

    def __init__(self) -> None:
        self._registry: Optional[SchemaRegistry] = None
        self._lock = threading.Lock()

    @property
    def registry(self) -> SchemaRegistry:
        if self._registry is None:
            with self._lock:
                if self._registry is None:
                    from .assembly.writer import build_registry  # local import to avoid cycles

                    self._registry = build_registry(builtin_definitions(), rules=(), builtin_source=self)
        return self._registry

    def lookup_type(self, identifier: str) -> Optional[Any]:
        return self.registry.lookup_type(identifier)

    def lookup_directive(self, identifier: str) -> Optional[Any]:
        return self.registry.lookup_directive(identifier)

    def __repr__(self) -> str:
        return "BUILTINS"


BUILTINS = BuiltinLibrary()

__all__ = ["BUILTINS", "BuiltinLibrary", "builtin_definitions"]
