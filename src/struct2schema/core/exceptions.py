"""Custom exceptions for schema generation."""


class Struct2SchemaError(Exception):
    """Base exception for struct2schema errors."""

    pass


class ParseError(Struct2SchemaError):
    """Raised when a source file cannot be read or parsed. Aborts the run."""

    pass


class UnsupportedFieldTypeError(Struct2SchemaError):
    """Raised when a struct field's type is not a plain identifier."""

    def __init__(self, table_name: str, field_name: str, type_text: str, line: int):
        self.table_name = table_name
        self.field_name = field_name
        self.type_text = type_text
        self.line = line
        self.path = None
        super().__init__(table_name, field_name, type_text, line)

    def __str__(self) -> str:
        location = f"{self.path}:{self.line}" if self.path else f"line {self.line}"
        return (
            f"{location}: field {self.table_name}.{self.field_name} has unsupported "
            f"type {self.type_text!r} (only named types such as int or string are supported)"
        )


class UnmappedTypeError(Struct2SchemaError):
    """Raised in strict mode when a field type has no column type for the dialect."""

    pass


class UnknownDialectError(Struct2SchemaError):
    """Raised when a dialect has no entry in the type table."""

    pass


class RenderError(Struct2SchemaError):
    """Raised when the DDL template fails for one table."""

    pass
