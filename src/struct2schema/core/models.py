"""Declaration records produced by the Go parser adapter."""

from dataclasses import dataclass, field
from typing import List, Optional

TYPE_DECLARATION = "type_declaration"
STRUCT_TYPE = "struct_type"
TYPE_IDENTIFIER = "type_identifier"


@dataclass
class FieldSpec:
    """One entry of a struct field list, e.g. `ID, Key int`."""

    names: List[str]
    type_kind: str
    type_name: str
    line: int

    @property
    def is_simple(self) -> bool:
        return self.type_kind == TYPE_IDENTIFIER


@dataclass
class TypeSpec:
    """A single `Name <type>` specification inside a type declaration."""

    name: Optional[str]
    kind: str
    line: int
    fields: List[FieldSpec] = field(default_factory=list)

    @property
    def is_struct(self) -> bool:
        return self.kind == STRUCT_TYPE


@dataclass
class Declaration:
    """Top-level declaration with its doc comment lines."""

    kind: str
    line: int
    doc: List[str] = field(default_factory=list)
    specs: List[TypeSpec] = field(default_factory=list)

    @property
    def is_type_declaration(self) -> bool:
        return self.kind == TYPE_DECLARATION
