"""CLI interface for sitesearch.

Typer-based command-line interface with Rich output formatting.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from sitesearch import __version__
from sitesearch.catalog import load_catalog
from sitesearch.config import CONFIG_FILE, default_config, load_config, resolve_path, save_config
from sitesearch.content import loader_from_config
from sitesearch.exceptions import SiteSearchError
from sitesearch.export import search_response, write_index
from sitesearch.index import IndexBuilder
from sitesearch.query import SearchFilter, search as run_search

if TYPE_CHECKING:
    from sitesearch.config import SiteSearchConfig
    from sitesearch.types import SearchIndex

__all__ = ["app"]

app = typer.Typer(
    name="sitesearch",
    help="Full-text search index for documentation topics and code examples.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to sitesearch.toml"),
]

_CATALOG_TEMPLATE = """\
# Topics are loaded from <docs_dir>/<slug>.md
[[topics]]
slug = "getting-started"
title = "Getting Started"
description = "Setup, installation, and your first test"
category = "Fundamentals"

[[example_groups]]
category = "Unit Testing"
base_url = "/examples/unit"

[example_groups.examples]
basic_test = "test('adds numbers', () => { expect(1 + 1).toBe(2); });"
"""


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_config(config_path: Path) -> SiteSearchConfig:
    try:
        return load_config(config_path)
    except SiteSearchError as e:
        console.print(f"[red]{e}[/red]")
        console.print(f"Run [bold]sitesearch init[/bold] to create {CONFIG_FILE}.")
        raise typer.Exit(code=1) from e


def _build(config: SiteSearchConfig, config_path: Path) -> SearchIndex:
    """Load the catalog and build a fresh index, exiting on failure."""
    try:
        catalog = load_catalog(resolve_path(config_path, config.content.catalog))
        builder = IndexBuilder(loader_from_config(config, config_path), config.index)
        return asyncio.run(builder.build(catalog.topics, catalog.example_groups))
    except SiteSearchError as e:
        console.print(f"[red]Failed to build search index:[/red] {e}")
        raise typer.Exit(code=1) from e


@app.command()
def version() -> None:
    """Show sitesearch version."""
    console.print(f"sitesearch {__version__}")


@app.command()
def init(
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Project name"),
    ] = "",
    config_path: ConfigOption = Path(CONFIG_FILE),
) -> None:
    """Create a default sitesearch.toml and catalog in the current directory."""
    if config_path.exists():
        console.print(f"[yellow]{config_path} already exists.[/yellow] Leaving it unchanged.")
        raise typer.Exit(code=0)

    config = default_config()
    config.project.name = name or config_path.resolve().parent.name
    catalog_path = resolve_path(config_path, config.content.catalog)

    try:
        save_config(config, config_path)
        if not catalog_path.exists():
            catalog_path.write_text(_CATALOG_TEMPLATE, encoding="utf-8")
        resolve_path(config_path, config.content.docs_dir).mkdir(parents=True, exist_ok=True)
    except (SiteSearchError, OSError) as e:
        console.print(f"[red]Failed to initialize:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Initialized sitesearch project[/green] {config.project.name}")
    console.print("\nCreated:")
    console.print(f"  {config_path}")
    console.print(f"  {catalog_path}")
    console.print("\nNext steps:")
    console.print("  sitesearch build           Build the index and show a summary")
    console.print("  sitesearch search <query>  Search the index")


@app.command()
def build(config_path: ConfigOption = Path(CONFIG_FILE)) -> None:
    """Build the search index and summarize its contents."""
    config = _load_config(config_path)
    index = _build(config, config_path)

    counts = Counter((item.category, item.type.value) for item in index.items)

    table = Table(title="Search index")
    table.add_column("Category")
    table.add_column("Type", style="dim")
    table.add_column("Items", justify="right", style="bold")
    for (category, item_type), count in counts.items():
        table.add_row(category, item_type, str(count))
    console.print(table)

    console.print(f"[green]Indexed {index.total_items} item(s)[/green] at {index.generated_at}")


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Search query")],
    filter_name: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="all, docs, examples or components"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-k", min=0, help="Maximum number of results"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the search response as JSON"),
    ] = False,
    config_path: ConfigOption = Path(CONFIG_FILE),
) -> None:
    """Search documentation topics and code examples."""
    config = _load_config(config_path)
    selector = filter_name or config.search.default_filter
    max_results = limit if limit is not None else config.search.max_results

    if selector not in {f.value for f in SearchFilter}:
        console.print(f"[yellow]Unknown filter {selector!r}, searching everything.[/yellow]")

    index = _build(config, config_path)
    results = run_search(query, index, selector, max_results=max_results)

    if as_json:
        typer.echo(json.dumps(search_response(query, selector, results), indent=2))
        return

    if not results:
        console.print("[dim]No results.[/dim]")
        return

    for position, result in enumerate(results, start=1):
        console.print(
            f"{position:>2}. [bold]{escape(result.title)}[/bold] "
            f"[dim]({escape(result.category)}, score {result.score})[/dim]"
        )
        console.print(f"    {result.id}  {result.url}", markup=False)


@app.command()
def export(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Destination JSON file"),
    ] = None,
    config_path: ConfigOption = Path(CONFIG_FILE),
) -> None:
    """Write the full search index as JSON."""
    config = _load_config(config_path)
    index = _build(config, config_path)
    destination = output or resolve_path(config_path, config.output.index_file)

    try:
        write_index(index, destination, indent=config.output.indent)
    except SiteSearchError as e:
        console.print(f"[red]Export failed:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Wrote {index.total_items} item(s)[/green] to {destination}")
