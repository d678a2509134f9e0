from __future__ import annotations

from typing import Any, Dict, List, Optional

from schemagraph import AttrsBuilder, Category, Definition

object_builder = AttrsBuilder("object")
directive_builder = AttrsBuilder("directive")


def type_def(
    identifier: str,
    name: str,
    *,
    interfaces: Optional[List[str]] = None,
    fields: Optional[Dict[str, Dict[str, Any]]] = None,
    line: int = 1,
    **kwargs: Any,
) -> Definition:
    attrs: Dict[str, Any] = {"name": name}
    if interfaces is not None:
        attrs["interfaces"] = interfaces
    if fields is not None:
        attrs["fields"] = fields
    attrs.update(kwargs.pop("attrs", {}))
    if "source" not in kwargs:
        kwargs.setdefault("builder", object_builder)
    return Definition(category=Category.TYPE, identifier=identifier, attrs=attrs, file="schema.py", line=line, **kwargs)


def directive_def(identifier: str, name: str, *, line: int = 1, **kwargs: Any) -> Definition:
    if "source" not in kwargs:
        kwargs.setdefault("builder", directive_builder)
    return Definition(
        category=Category.DIRECTIVE,
        identifier=identifier,
        attrs={"name": name},
        file="schema.py",
        line=line,
        **kwargs,
    )
