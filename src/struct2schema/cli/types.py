"""Type mapping commands."""
import click

from struct2schema.cli.options import db_type_option
from struct2schema.core.type_mapper import TypeMapper


@click.command()
@db_type_option
def types(db_type: str):
    """Show the Go type to column type mapping for a dialect."""
    mapper = TypeMapper(db_type)

    click.echo(f"Dialect: {mapper.dialect}\n")
    click.echo(f"{'Go type':<10} {'Column type'}")
    click.echo("-" * 25)
    for go_type, column_type in mapper.table().items():
        click.echo(f"{go_type:<10} {column_type}")
