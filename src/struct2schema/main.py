import click

from struct2schema.cli import generate, types
from struct2schema.logging.handlers import configure_logging
from struct2schema.settings import LOG_LEVEL


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=LOG_LEVEL,
    help="Minimum level of log lines written to stderr.",
)
def cli(log_level: str):
    """Go struct to SQL schema tools."""
    configure_logging(log_level)


cli.add_command(generate.generate)
cli.add_command(types.types)

if __name__ == "__main__":
    cli()
