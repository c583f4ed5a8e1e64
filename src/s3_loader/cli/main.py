"""Main CLI entry point."""

from pathlib import Path

import click
from dotenv import load_dotenv

from s3_loader import __version__

# Load .env from cwd
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@click.group()
@click.version_option(version=__version__, prog_name="s3-loader")
def cli():
    """s3-loader CLI - Extract documents from S3 objects."""
    pass


def setup_cli():
    """Register all commands."""
    from .formats import formats
    from .load import load

    cli.add_command(load)
    cli.add_command(formats)


setup_cli()


def main():
    """Entry point for s3-loader CLI."""
    cli()


if __name__ == "__main__":
    main()
