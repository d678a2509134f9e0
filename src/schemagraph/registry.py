from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from .errors import ErrorRecord


class SchemaRegistry:
    """Immutable, validated schema: artifacts by identifier (and name), errors, exports.

    Instances are only produced by :func:`schemagraph.assembly.build_registry`
    and are never mutated afterwards, so they can be shared by any number of
    readers. A registry is itself an artifact source, so definitions can
    import from it.
    """

    def __init__(
        self,
        *,
        type_map: Mapping[str, str],
        directive_map: Mapping[str, str],
        types: Mapping[str, Any],
        directives: Mapping[str, Any],
        errors: Iterable[ErrorRecord],
        exports: Iterable[str],
        implementors: Mapping[str, Iterable[str]],
    ) -> None:
        self._type_map = MappingProxyType(dict(type_map))
        self._directive_map = MappingProxyType(dict(directive_map))
        self._types = MappingProxyType(dict(types))
        self._directives = MappingProxyType(dict(directives))
        self._type_names = MappingProxyType(_name_aliases(self._type_map))
        self._directive_names = MappingProxyType(_name_aliases(self._directive_map))
        self._errors: Tuple[ErrorRecord, ...] = tuple(errors)
        self._exports: FrozenSet[str] = frozenset(exports)
        self._implementors = MappingProxyType(
            {iface: frozenset(idents) for iface, idents in implementors.items()}
        )

    def lookup_type(self, key: str) -> Optional[Any]:
        return _lookup(key, self._types, self._type_names)

    def lookup_directive(self, key: str) -> Optional[Any]:
        return _lookup(key, self._directives, self._directive_names)

    def type_map(self) -> Mapping[str, str]:
        return self._type_map

    def directive_map(self) -> Mapping[str, str]:
        return self._directive_map

    def errors(self) -> Tuple[ErrorRecord, ...]:
        return self._errors

    def has_errors(self) -> bool:
        return bool(self._errors)

    def exports(self) -> FrozenSet[str]:
        return self._exports

    def implementors(self) -> Mapping[str, FrozenSet[str]]:
        return self._implementors

    def __repr__(self) -> str:
        return (
            f"SchemaRegistry(types={len(self._type_map)}, directives={len(self._directive_map)}, "
            f"errors={len(self._errors)})"
        )


def _name_aliases(identifier_map: Mapping[str, str]) -> Dict[str, str]:
    aliases: Dict[str, str] = {}
    for identifier, name in identifier_map.items():
        aliases.setdefault(name, identifier)
    return aliases


def _lookup(key: str, artifacts: Mapping[str, Any], names: Mapping[str, str]) -> Optional[Any]:
    if key in artifacts:
        return artifacts[key]
    identifier = names.get(key)
    if identifier is None:
        return None
    return artifacts.get(identifier)


__all__ = ["SchemaRegistry"]
