"""Supported formats command."""

import click
from rich.console import Console
from rich.table import Table

from ..loaders import LoaderRegistry

console = Console()


@click.command()
def formats():
    """List object suffixes that can be loaded."""
    registry = LoaderRegistry()

    table = Table(title="Supported Formats")
    table.add_column("Extension", style="cyan")
    table.add_column("Loader")

    for ext in registry.supported_extensions():
        loader = registry.get_loader(f"object{ext}")
        table.add_row(ext, type(loader).__name__ if loader else "-")

    console.print(table)
