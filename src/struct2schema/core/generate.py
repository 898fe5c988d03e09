"""Schema generation over Go source files."""

import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

import structlog

from struct2schema.core.exceptions import (
    RenderError,
    UnmappedTypeError,
    UnsupportedFieldTypeError,
)
from struct2schema.core.extract import extract
from struct2schema.core.matcher import matches
from struct2schema.core.parser import parse_file
from struct2schema.core.render import DDLRenderer
from struct2schema.core.type_mapper import TypeMapper
from struct2schema.metadata.tables import SchemaInfo

logger = structlog.get_logger()


class SchemaGenerator:
    """
    Write one CREATE TABLE statement per annotated struct.

    Files are handled in the order given and declarations in source order.
    Parse errors and unsupported field types abort the run; a template
    failure only skips the table it happened on.

    Statements go to stdout unless `out` is given. Call
    `struct2schema.logging.handlers.configure_logging()` first so log lines
    go to stderr instead of structlog's default stdout printer.
    """

    def __init__(
        self,
        mapper: TypeMapper,
        renderer: Optional[DDLRenderer] = None,
        out: Optional[TextIO] = None,
        strict: bool = False,
    ):
        self.mapper = mapper
        self.renderer = renderer or DDLRenderer()
        self.out = out or sys.stdout
        self.strict = strict

    def _map_columns(self, schema: SchemaInfo, path: Path) -> None:
        unmapped = self.mapper.apply(schema)
        for schema_field in unmapped:
            message = (
                f"{path}: no {self.mapper.dialect} column type for "
                f"{schema.table_name}.{schema_field.name} ({schema_field.source_type})"
            )
            if self.strict:
                raise UnmappedTypeError(message)
            logger.warning(
                "No column type for field",
                file=str(path),
                table=schema.table_name,
                field=schema_field.name,
                type=schema_field.source_type,
                dialect=self.mapper.dialect,
            )

    def process_file(self, path: Union[str, Path]) -> int:
        """
        Generate statements for one file.

        Returns:
            Number of statements written
        """
        path = Path(path)
        logger.info("Processing file", file=str(path))
        declarations = parse_file(path)

        written = 0
        for declaration in declarations:
            if not matches(declaration):
                continue

            try:
                schema, found = extract(declaration)
            except UnsupportedFieldTypeError as e:
                e.path = str(path)
                raise
            if not found:
                continue

            self._map_columns(schema, path)

            try:
                statement = self.renderer.render(schema)
            except RenderError as e:
                logger.error(
                    "executing template",
                    file=str(path),
                    table=schema.table_name,
                    error=str(e),
                )
                continue

            self.out.write(statement + "\n")
            self.out.flush()
            written += 1

        return written

    def process_files(self, paths: Iterable[Union[str, Path]]) -> int:
        """Generate statements for each file in order."""
        return sum(self.process_file(path) for path in paths)
