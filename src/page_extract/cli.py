"""Command-line interface for page-extract."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from page_extract import __version__
from page_extract.config import AppConfig
from page_extract.document import StaticDocumentSource
from page_extract.exceptions import FetchError
from page_extract.fetcher import BaseFetcher, HttpFetcher, PlaywrightFetcher
from page_extract.handler import handle_message
from page_extract.output import ResultWriter, format_reply
from page_extract.pdf import PdfminerTextExtractor

app = typer.Typer(
    name="page-extract",
    help="Extract clean article text and metadata from web pages.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()

_EXTRACT_REQUEST = {"action": "extractContent"}


def version_callback(value: bool):
    if value:
        console.print(f"page-extract version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Article text extraction for summarization."""
    pass


@app.command()
def extract(
    target: str = typer.Argument(..., help="URL or local .html/.pdf file"),
    js: Optional[bool] = typer.Option(
        None,
        "--js/--no-js",
        help="Enable/disable JavaScript rendering",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full JSON reply instead of plain text",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to this file (.json for JSON)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file",
    ),
    min_length: Optional[int] = typer.Option(
        None,
        "--min-length",
        help="Minimum characters for a content region to qualify",
    ),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        help="Truncate content beyond this many characters",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
):
    """
    Extract the main text of a page with ads, navigation and boilerplate removed.

    Examples:

        page-extract extract https://news.example.com/story

        page-extract extract https://example.com/paper.pdf --json

        page-extract extract saved_page.html -o article.txt
    """
    config = AppConfig.from_toml(config_file) if config_file else AppConfig()
    if js is not None:
        config.fetcher.use_js = js
    config.verbose = config.verbose or verbose

    overrides: dict[str, int] = {}
    if min_length is not None:
        overrides["min_content_length"] = min_length
    if max_length is not None:
        overrides["max_content_length"] = max_length
    if overrides:
        config.extraction = config.extraction.model_copy(update=overrides)

    _configure_logging(config.verbose)

    try:
        reply = asyncio.run(_run(target, config))
    except FetchError as e:
        console.print(f"[red]Fetch failed: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        raise typer.Exit(130)

    if output:
        path = asyncio.run(ResultWriter(output, as_json=as_json or None).write(reply))
        console.print(f"[green]Written to {path}[/green]")
    elif as_json:
        console.print_json(json.dumps(reply, ensure_ascii=False))
    elif reply.get("success"):
        console.print(reply["content"], markup=False, highlight=False)

    if not reply.get("success"):
        if not as_json:
            console.print(format_reply(reply).strip(), style="red", markup=False)
        raise typer.Exit(1)

    if not as_json:
        _print_summary(reply)


async def _run(target: str, config: AppConfig) -> dict[str, Any]:
    """Open the target and run one extraction request against it."""
    path = Path(target)
    if path.is_file():
        return await _run_local(path, config)

    fetcher: BaseFetcher
    if config.fetcher.use_js:
        fetcher = PlaywrightFetcher(config.fetcher)
    else:
        fetcher = HttpFetcher(config.fetcher)

    async with fetcher:
        opened = await fetcher.open(target)
        return await handle_message(
            _EXTRACT_REQUEST,
            opened.source,
            opened.pdf_extractor,
            config.extraction,
        )


async def _run_local(path: Path, config: AppConfig) -> dict[str, Any]:
    url = path.resolve().as_uri()
    data = path.read_bytes()

    pdf = PdfminerTextExtractor(data, url=url)
    if pdf.is_pdf_page():
        source = StaticDocumentSource("", url=url)
        return await handle_message(_EXTRACT_REQUEST, source, pdf, config.extraction)

    html = data.decode("utf-8", errors="replace")
    source = StaticDocumentSource(html, url=url)
    return await handle_message(_EXTRACT_REQUEST, source, None, config.extraction)


def _print_summary(reply: dict[str, Any]) -> None:
    """Print title, source and size statistics."""
    metadata = reply.get("metadata", {})
    stats = reply.get("stats", {})

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Title", metadata.get("title") or "-")
    table.add_row("Domain", metadata.get("domain") or "-")
    table.add_row("Language", metadata.get("language") or "-")
    if metadata.get("author"):
        table.add_row("Author", metadata["author"])
    if metadata.get("isPDF"):
        table.add_row(
            "PDF pages",
            f"{metadata.get('pdfPages', 0)} of {metadata.get('pdfTotalPages', 0)}",
        )
    table.add_row("Characters", str(stats.get("charCount", 0)))
    table.add_row("Words", str(stats.get("wordCount", 0)))

    console.print()
    console.print(Panel.fit(table, title="Extraction complete", border_style="green"))


if __name__ == "__main__":
    app()
