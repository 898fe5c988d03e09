"""Schema extraction from matched type declarations."""

from typing import List, Optional, Tuple

import structlog

from struct2schema.core.exceptions import UnsupportedFieldTypeError
from struct2schema.core.models import Declaration, TypeSpec
from struct2schema.metadata.tables import SchemaField, SchemaInfo

logger = structlog.get_logger()


def _extract_fields(spec: TypeSpec) -> List[SchemaField]:
    fields = []
    for entry in spec.fields:
        if not entry.names:
            logger.warning(
                "Skipping embedded field",
                table=spec.name,
                type=entry.type_name,
                line=entry.line,
            )
            continue

        # `A, B int` binds several names to one type; only the first becomes a column
        name = entry.names[0]
        if len(entry.names) > 1:
            logger.debug(
                "Ignoring extra field names",
                table=spec.name,
                used=name,
                ignored=entry.names[1:],
            )

        if not entry.is_simple:
            raise UnsupportedFieldTypeError(spec.name, name, entry.type_name, entry.line)

        fields.append(SchemaField(name=name, source_type=entry.type_name))
    return fields


def extract(declaration: Declaration) -> Tuple[Optional[SchemaInfo], bool]:
    """
    Build a SchemaInfo from a matched type declaration.

    Every named type spec replaces the table built so far, so in a grouped
    `type ( ... )` block the last spec wins.

    Returns:
        (schema, found); schema is None when no table name was derived

    Raises:
        UnsupportedFieldTypeError: If a field type is not a plain identifier
    """
    schema = None

    for spec in declaration.specs:
        if not spec.name:
            continue
        if schema is not None:
            logger.debug(
                "Type spec replaces previous table",
                previous=schema.table_name,
                table=spec.name,
                line=spec.line,
            )

        fields = _extract_fields(spec) if spec.is_struct else []
        schema = SchemaInfo(
            table_name=spec.name,
            fields=fields,
            last_idx=len(fields) - 1,
        )

    if schema is None or not schema.table_name:
        return None, False
    return schema, True
