"""
DDL rendering.

Substitutes a SchemaInfo into a Jinja2 template. Templates see
`table_name`, `last_idx` and `fields`, where each field has `name`,
`source_type` and `column_type`.
"""

from pathlib import Path
from typing import Optional, Union

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from struct2schema.core.exceptions import RenderError
from struct2schema.metadata.tables import SchemaInfo

SQL_TEMPLATE = """CREATE TABLE IF NOT EXISTS {{ table_name }} (
{%- for field in fields %}
  {{ field.name }} {{ field.column_type }}{% if loop.index0 != last_idx %},{% endif %}
{%- endfor %}
)"""


class DDLRenderer:
    """Render CREATE TABLE statements from a fixed template."""

    def __init__(self, template: str = SQL_TEMPLATE):
        self._env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            undefined=StrictUndefined,
        )
        try:
            self._template = self._env.from_string(template)
        except TemplateError as e:
            raise RenderError(f"Invalid template: {e}") from e

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]]) -> "DDLRenderer":
        """Load a template file, or use the built-in one when path is None."""
        if path is None:
            return cls()
        return cls(Path(path).read_text(encoding="utf-8"))

    def render(self, schema: SchemaInfo) -> str:
        try:
            return self._template.render(schema.to_context())
        except TemplateError as e:
            raise RenderError(f"executing template for {schema.table_name}: {e}") from e
        except Exception as e:
            # Filters and expressions in custom templates can raise anything
            raise RenderError(
                f"executing template for {schema.table_name}: {type(e).__name__}: {e}"
            ) from e
