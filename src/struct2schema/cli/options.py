"""Options shared by several commands."""
import click

from struct2schema.core.type_mapper import DIALECTS
from struct2schema.settings import DB_TYPE

db_type_option = click.option(
    "--db-type",
    "--dbType",
    "db_type",
    type=click.Choice(sorted(DIALECTS)),
    default=DB_TYPE,
    show_default=True,
    help="Database used for the generated SQL command.",
)
