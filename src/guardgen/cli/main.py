"""guardgen CLI - guardgen command."""

import click

from guardgen import __version__
from guardgen.cli.generate import generate_command
from guardgen.cli.inspection import inspect_command
from guardgen.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="guardgen")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """guardgen - Generate queue-serialized guard classes for TypeScript classes."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(generate_command, name="generate")
cli.add_command(inspect_command, name="inspect")


if __name__ == "__main__":
    cli()
