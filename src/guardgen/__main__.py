"""Allow ``python -m guardgen``."""

from guardgen.cli.main import cli

if __name__ == "__main__":
    cli()
