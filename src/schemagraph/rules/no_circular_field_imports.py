from __future__ import annotations

import logging
from graphlib import TopologicalSorter
from typing import Any, Dict, Iterator, List, Mapping, Set, Tuple

from ..definitions import Definition
from ..errors import ErrorRecord, RuleKind

logger = logging.getLogger(__name__)

FIELD_IMPORT_CYCLE = "Field import cycle"

Fields = Dict[str, Dict[str, Any]]


def _import_graph(definitions: List[Definition]) -> Dict[str, Set[str]]:
    graph: Dict[str, Set[str]] = {}
    for definition in definitions:
        edges = graph.setdefault(definition.identifier, set())
        for identifier, _opts in definition.field_imports:
            edges.add(identifier)
    # Unknown targets are reported by field_imports_exist.
    return {node: {dep for dep in deps if dep in graph} for node, deps in graph.items()}


def _cyclic_nodes(graph: Mapping[str, Set[str]]) -> Set[str]:
    """Nodes that sit on at least one cycle (Tarjan's strongly connected components)."""

    index: Dict[str, int] = {}
    lowlink: Dict[str, int] = {}
    stack: List[str] = []
    on_stack: Set[str] = set()
    cyclic: Set[str] = set()

    def enter(node: str) -> Tuple[str, Iterator[str]]:
        index[node] = lowlink[node] = len(index)
        stack.append(node)
        on_stack.add(node)
        return node, iter(sorted(graph[node]))

    def close_component(node: str) -> None:
        component: List[str] = []
        while True:
            member = stack.pop()
            on_stack.discard(member)
            component.append(member)
            if member == node:
                break
        if len(component) > 1 or node in graph[node]:
            cyclic.update(component)

    for root in graph:
        if root in index:
            continue
        frames = [enter(root)]
        while frames:
            node, deps = frames[-1]
            dep = next(deps, None)
            if dep is not None:
                if dep not in index:
                    frames.append(enter(dep))
                elif dep in on_stack:
                    lowlink[node] = min(lowlink[node], index[dep])
                continue
            frames.pop()
            if frames:
                parent = frames[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])
            if lowlink[node] == index[node]:
                close_component(node)
    return cyclic


def _select(fields: Fields, opts: Mapping[str, Any]) -> Fields:
    only = opts.get("only")
    excluded = set(opts.get("except") or [])
    selected: Fields = {}
    for name, attrs in fields.items():
        if only is not None and name not in only:
            continue
        if name in excluded:
            continue
        selected[name] = attrs
    return selected


def _merge_imports(definition: Definition, resolved: Mapping[str, Fields]) -> Fields:
    merged: Fields = {}
    for identifier, opts in definition.field_imports:
        imported = resolved.get(identifier)
        if imported is not None:
            merged.update(_select(imported, opts))
    merged.update(definition.fields)
    return merged


def no_circular_field_imports(
    definitions: List[Definition], errors: List[ErrorRecord]
) -> Tuple[List[Definition], List[ErrorRecord]]:
    """Drop definitions on field-import cycles and inline the remaining imports."""

    graph = _import_graph(definitions)
    cyclic = _cyclic_nodes(graph)

    found: List[ErrorRecord] = []
    kept: List[Definition] = []
    for definition in definitions:
        if definition.identifier in cyclic:
            found.append(
                ErrorRecord.for_definition(
                    RuleKind.NO_CIRCULAR_FIELD_IMPORTS,
                    definition,
                    artifact=FIELD_IMPORT_CYCLE,
                    value=definition.identifier,
                )
            )
        else:
            kept.append(definition)

    if cyclic:
        logger.debug("Dropping definitions on field import cycles: %s", sorted(cyclic))

    first_by_identifier: Dict[str, Definition] = {}
    for definition in kept:
        first_by_identifier.setdefault(definition.identifier, definition)

    acyclic = {node: deps - cyclic for node, deps in graph.items() if node not in cyclic}
    resolved: Dict[str, Fields] = {}
    for identifier in TopologicalSorter(acyclic).static_order():
        resolved[identifier] = _merge_imports(first_by_identifier[identifier], resolved)

    result: List[Definition] = []
    for definition in kept:
        if definition.field_imports:
            result.append(definition.with_attrs(fields=_merge_imports(definition, resolved)))
        else:
            result.append(definition)
    return result, errors + found
