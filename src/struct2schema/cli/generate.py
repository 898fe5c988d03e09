"""Schema generation command."""
from pathlib import Path
from typing import Optional, Tuple

import click
import structlog

from struct2schema.cli.options import db_type_option
from struct2schema.core.exceptions import Struct2SchemaError
from struct2schema.core.generate import SchemaGenerator
from struct2schema.core.render import DDLRenderer
from struct2schema.core.type_mapper import TypeMapper
from struct2schema.settings import TEMPLATE_PATH

logger = structlog.get_logger()


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@db_type_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write statements to this file instead of stdout.",
)
@click.option(
    "--template",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=TEMPLATE_PATH,
    help="Jinja2 template used instead of the built-in CREATE TABLE template.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when a field type has no column type for the dialect.",
)
def generate(
    files: Tuple[Path, ...],
    db_type: str,
    output: Optional[Path],
    template: Optional[Path],
    strict: bool,
):
    """Generate CREATE TABLE statements for structs marked @struct2schema."""
    try:
        mapper = TypeMapper(db_type)
        renderer = DDLRenderer.from_file(template)

        with click.open_file(str(output) if output else "-", "w", encoding="utf-8") as out:
            generator = SchemaGenerator(mapper, renderer, out, strict=strict)
            count = generator.process_files(files)

        logger.info("Generation complete", files=len(files), tables=count, dialect=db_type)

    except (Struct2SchemaError, OSError) as e:
        logger.error("Generation failed", error=str(e))
        raise click.ClickException(str(e))
