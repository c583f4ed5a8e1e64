"""Load command for extracting documents from an S3 object."""

import json
import logging

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config import S3LoaderConfig
from ..exceptions import S3LoaderError
from ..loader import S3FileLoader
from ..splitters import LangChainSplitter
from ..storage import S3Storage

console = Console()


@click.command("load")
@click.argument("bucket")
@click.argument("key")
@click.option("-s", "--split", is_flag=True, help="Split documents into chunks")
@click.option("--chunk-size", type=int, default=1000, show_default=True, help="Characters per chunk")
@click.option("--chunk-overlap", type=int, default=200, show_default=True, help="Characters shared by neighbouring chunks")
@click.option("--preview", type=int, default=80, show_default=True, help="Characters of text shown per document")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def load(
    bucket: str,
    key: str,
    split: bool,
    chunk_size: int,
    chunk_overlap: int,
    preview: int,
    as_json: bool,
) -> None:
    """Load documents from s3://BUCKET/KEY.

    Only .txt and .pdf objects are supported unless a plugin loader is installed.

    \b
    Examples:
      s3-loader load my-bucket notes.txt
      s3-loader load my-bucket reports/q3.pdf --json
      s3-loader load my-bucket reports/q3.pdf --split --chunk-size 500
    """
    try:
        config = S3LoaderConfig()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise click.Abort()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        with S3Storage(config) as storage:
            loader = S3FileLoader(bucket, key, storage=storage)
            if split:
                splitter = LangChainSplitter(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
                docs = loader.load_and_split(splitter)
            else:
                docs = loader.load()
    except (S3LoaderError, ImportError) as e:
        console.print(f"[red]✗[/red] {e}")
        raise click.Abort()

    if as_json:
        payload = [{"text": doc.text, "metadata": doc.metadata} for doc in docs]
        console.print_json(json.dumps(payload, default=str))
        return

    table = Table(title=f"s3://{bucket}/{key}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Page", justify="right")
    table.add_column("Chars", justify="right")
    table.add_column("Text")

    for i, doc in enumerate(docs, start=1):
        text = doc.text.replace("\n", " ")
        if len(text) > preview:
            text = text[:preview] + "..."
        table.add_row(str(i), str(doc.metadata.get("page", "-")), str(len(doc.text)), text)

    console.print(table)
    console.print(f"[green]✓[/green] {len(docs)} document(s)")
