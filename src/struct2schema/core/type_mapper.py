"""Go type to database column type mapping."""

from typing import Dict, List, Optional

from struct2schema.core.exceptions import UnknownDialectError
from struct2schema.metadata.tables import SchemaField, SchemaInfo

# Go spellings grouped by the width a database can tell apart
TYPE_CLASSES: Dict[str, str] = {
    "int": "int",
    "uint": "int",
    "int8": "int8",
    "uint8": "int8",
    "byte": "int8",
    "int16": "int16",
    "uint16": "int16",
    "int32": "int32",
    "uint32": "int32",
    "rune": "int32",
    "int64": "int64",
    "uint64": "int64",
    "float32": "float",
    "float64": "float",
    "string": "string",
}

DIALECTS: Dict[str, Dict[str, str]] = {
    "sqlite3": {
        "int": "INTEGER",
        "int8": "INTEGER",
        "int16": "INTEGER",
        "int32": "INTEGER",
        "int64": "INTEGER",
        "float": "REAL",
        "string": "TEXT",
    },
    "mysql": {
        "int": "INT",
        "int8": "TINYINT",
        "int16": "SMALLINT",
        "int32": "INT",
        "int64": "BIGINT",
        "float": "FLOAT",
        "string": "MEDIUMTEXT",
    },
}

DEFAULT_DIALECT = "sqlite3"


def map_type(source_type: str, dialect: str) -> Optional[str]:
    """
    Convert a Go field type to the column type of a dialect.

    Returns None when either the Go type or the dialect has no entry.
    """
    type_class = TYPE_CLASSES.get(source_type)
    if type_class is None:
        return None
    return DIALECTS.get(dialect, {}).get(type_class)


class TypeMapper:
    """Column type lookup bound to one dialect for the whole run."""

    def __init__(self, dialect: str = DEFAULT_DIALECT):
        if dialect not in DIALECTS:
            raise UnknownDialectError(
                f"Unknown dialect {dialect!r}, expected one of: {', '.join(DIALECTS)}"
            )
        self._dialect = dialect

    @property
    def dialect(self) -> str:
        return self._dialect

    def map_type(self, source_type: str) -> Optional[str]:
        return map_type(source_type, self._dialect)

    def apply(self, schema: SchemaInfo) -> List[SchemaField]:
        """Fill column types in place and return the fields left unmapped."""
        unmapped = []
        for schema_field in schema.fields:
            schema_field.column_type = self.map_type(schema_field.source_type)
            if schema_field.column_type is None:
                unmapped.append(schema_field)
        return unmapped

    def table(self) -> Dict[str, str]:
        """Go type -> column type for every known Go type."""
        return {go_type: self.map_type(go_type) for go_type in TYPE_CLASSES}
