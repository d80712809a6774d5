"""guardgen generate command - write a guard file for one class."""

from pathlib import Path

import click

from guardgen.cli.utils import fail, load_cli_config, read_options
from guardgen.core.errors import TargetNotFoundError
from guardgen.core.progress import status
from guardgen.guard.pipeline import generate


@click.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-t", "--target", "target_class", required=True, help="Name of the class to wrap")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the guard here instead of stdout",
)
@click.option(
    "--config-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory containing .guardgen/config.yaml (default: current directory)",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    input_path: Path,
    target_class: str,
    output_path: Path | None,
    config_root: Path | None,
) -> None:
    """Generate a guard class for TARGET declared in INPUT_PATH.

    The output holds a <TARGET>Like interface and a <TARGET>Guard class that
    serializes calls through a command queue.
    """
    config = load_cli_config(ctx, config_root)
    options = read_options(input_path, target_class, output_path)

    try:
        text = generate(options, config)
    except TargetNotFoundError as e:
        raise fail(e) from e

    if output_path is None:
        click.echo(text, nl=False)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    status(f"Wrote {output_path}", style="success")
