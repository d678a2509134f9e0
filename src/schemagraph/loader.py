"""JSON declaration front end.

A document looks like::

    {
      "definitions": [
        {"category": "type", "identifier": "user", "name": "User", "kind": "object",
         "fields": {"id": {"type": "id"}}, "interfaces": ["node"]},
        {"category": "type", "identifier": "string", "name": "String", "import": "builtins"}
      ],
      "descriptions": {"user": "A registered account."}
    }

Subscription fields declare triggers as ``{"on": [mutation_field, ...], "config": ...}``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .builders import AttrsBuilder
from .builtins import BUILTINS
from .definitions import Category, Definition


class TriggerSpec(BaseModel):
    on: List[str]
    config: Any = None

    model_config = ConfigDict(extra="forbid")


class FieldImportSpec(BaseModel):
    identifier: str
    only: Optional[List[str]] = None
    except_: Optional[List[str]] = Field(default=None, alias="except")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def as_pair(self) -> tuple[str, Dict[str, Any]]:
        opts: Dict[str, Any] = {}
        if self.only is not None:
            opts["only"] = list(self.only)
        if self.except_ is not None:
            opts["except"] = list(self.except_)
        return self.identifier, opts


class DefinitionSpec(BaseModel):
    category: Category = Category.TYPE
    identifier: str
    name: str
    kind: Optional[str] = None
    description: Optional[str] = None
    fields: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    interfaces: List[str] = Field(default_factory=list)
    field_imports: List[FieldImportSpec] = Field(default_factory=list)
    attrs: Dict[str, Any] = Field(default_factory=dict)
    import_from: Optional[Literal["builtins"]] = Field(default=None, alias="import")
    export: Optional[bool] = None
    line: Optional[int] = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def default_kind(self) -> str:
        if self.kind:
            return self.kind
        return "directive" if self.category is Category.DIRECTIVE else "object"


class SchemaDocumentSpec(BaseModel):
    definitions: List[DefinitionSpec] = Field(default_factory=list)
    descriptions: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


@dataclass
class SchemaDocument:
    definitions: List[Definition] = field(default_factory=list)
    descriptions: Dict[str, str] = field(default_factory=dict)


def _field_attrs(attrs: Dict[str, Any]) -> Dict[str, Any]:
    raw = attrs.get("triggers")
    if not raw:
        return attrs
    triggers = [TriggerSpec.model_validate(item) for item in raw]
    return {**attrs, "triggers": [(frozenset(t.on), t.config) for t in triggers]}


def _to_definition(spec: DefinitionSpec, *, file: Optional[str], builders: Dict[str, AttrsBuilder]) -> Definition:
    attrs: Dict[str, Any] = dict(spec.attrs)
    attrs["name"] = spec.name
    if spec.description is not None:
        attrs["description"] = spec.description
    if spec.fields:
        attrs["fields"] = {name: _field_attrs(dict(f)) for name, f in spec.fields.items()}
    if spec.interfaces:
        attrs["interfaces"] = list(spec.interfaces)
    if spec.field_imports:
        attrs["field_imports"] = [fi.as_pair() for fi in spec.field_imports]

    opts: Dict[str, Any] = {}
    if spec.export is not None:
        opts["export"] = spec.export

    if spec.import_from == "builtins":
        return Definition(
            category=spec.category,
            identifier=spec.identifier,
            attrs=attrs,
            source=BUILTINS,
            file=file,
            line=spec.line,
            opts=opts,
        )

    kind = spec.default_kind()
    builder = builders.setdefault(kind, AttrsBuilder(kind))
    return Definition(
        category=spec.category,
        identifier=spec.identifier,
        attrs=attrs,
        builder=builder,
        file=file,
        line=spec.line,
        opts=opts,
    )


def parse_document(data: Dict[str, Any], *, file: Optional[str] = None) -> SchemaDocument:
    spec = SchemaDocumentSpec.model_validate(data)
    builders: Dict[str, AttrsBuilder] = {}
    definitions = [_to_definition(d, file=file, builders=builders) for d in spec.definitions]
    return SchemaDocument(definitions=definitions, descriptions=dict(spec.descriptions))


def load_document(path: Path) -> SchemaDocument:
    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_document(data, file=str(path))


__all__ = [
    "TriggerSpec",
    "FieldImportSpec",
    "DefinitionSpec",
    "SchemaDocumentSpec",
    "SchemaDocument",
    "parse_document",
    "load_document",
]
