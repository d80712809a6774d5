"""guardgen inspect command - show how each method of a class would be guarded."""

import json
from pathlib import Path

import click
from rich.table import Table

from guardgen.cli.utils import fail, load_cli_config, read_options
from guardgen.core.errors import TargetNotFoundError
from guardgen.core.progress import get_console, pluralize
from guardgen.guard.classify import classify
from guardgen.guard.pipeline import extract_target


@click.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-t", "--target", "target_class", required=True, help="Name of the class to inspect")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--config-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory containing .guardgen/config.yaml (default: current directory)",
)
@click.pass_context
def inspect_command(
    ctx: click.Context,
    input_path: Path,
    target_class: str,
    as_json: bool,
    config_root: Path | None,
) -> None:
    """List the methods of TARGET in INPUT_PATH with their dispatch strategy."""
    load_cli_config(ctx, config_root)
    options = read_options(input_path, target_class)

    try:
        methods = extract_target(options)
    except TargetNotFoundError as e:
        if as_json:
            click.echo(json.dumps(e.to_dict()))
            ctx.exit(1)
        raise fail(e) from e

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "name": m.name,
                        "declaration": m.declaration_text,
                        "return_type": m.return_type,
                        "dispatch": classify(m.return_type).value,
                        "args": [
                            {"name": a.name, "type": a.type, "optional": a.optional, "rest": a.rest}
                            for a in m.args
                        ],
                    }
                    for m in methods
                ]
            )
        )
        return

    table = Table(title=f"{target_class} ({pluralize(len(methods), 'method')})")
    table.add_column("Method")
    table.add_column("Dispatch")
    table.add_column("Signature", overflow="fold")
    for m in methods:
        table.add_row(m.name, classify(m.return_type).value, m.declaration_text)
    get_console().print(table)
