from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .definitions import Definition


class RuleKind(str, Enum):
    TYPE_NAMES_ARE_UNIQUE = "TypeNamesAreUnique"
    FIELD_IMPORTS_EXIST = "FieldImportsExist"
    NO_CIRCULAR_FIELD_IMPORTS = "NoCircularFieldImports"


class Location(BaseModel):
    file: Optional[str] = None
    line: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.file is None:
            return "<unknown>"
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"


class ErrorData(BaseModel):
    artifact: str
    value: str

    model_config = ConfigDict(frozen=True)


class ErrorRecord(BaseModel):
    """A schema problem reported as data; assembly never raises for these."""

    rule: RuleKind
    location: Location
    data: ErrorData

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_definition(cls, rule: RuleKind, definition: Definition, *, artifact: str, value: str) -> "ErrorRecord":
        return cls(
            rule=rule,
            location=Location(file=definition.file, line=definition.line),
            data=ErrorData(artifact=artifact, value=value),
        )

    def message(self) -> str:
        return f"{self.location}: {self.rule.value}: {self.data.artifact} {self.data.value!r}"


__all__ = ["RuleKind", "Location", "ErrorData", "ErrorRecord"]
