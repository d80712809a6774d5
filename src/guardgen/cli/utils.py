"""CLI utilities."""

from pathlib import Path

import click

from guardgen.config import GuardGenConfig, load_config
from guardgen.core.errors import ConfigError, GuardGenError
from guardgen.core.logging import configure_logging
from guardgen.guard.pipeline import GenerateOptions


def load_cli_config(ctx: click.Context, config_root: Path | None) -> GuardGenConfig:
    """Load config for a command and apply its logging section.

    ``-v`` on the group keeps DEBUG logging regardless of the config.

    Raises:
        click.ClickException: If the config cannot be loaded
    """
    try:
        config = load_config(config_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)
    return config


def read_options(input_path: Path, target_class: str, output_path: Path | None = None) -> GenerateOptions:
    """Read the input file into generation options."""
    return GenerateOptions(
        input_file_text=input_path.read_text(encoding="utf-8"),
        input_file_target_class=target_class,
        input_file_name=str(input_path),
        output_file_name=str(output_path) if output_path else "",
    )


def fail(error: GuardGenError) -> click.ClickException:
    """Turn a structured error into a CLI failure (exit code 1)."""
    return click.ClickException(str(error))
