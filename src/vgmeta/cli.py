#!/usr/bin/env python3
"""Command-line interface for vgmeta.

This CLI is primarily for debugging and development.
For production use, import vgmeta as a library.
"""

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from vgmeta.client import VGMdbClient
from vgmeta.config import DEFAULT_BASE_URL, APIConfig
from vgmeta.exceptions import VGMetaError
from vgmeta.models.domain import AlbumRecord, AlbumSummary
from vgmeta.services import AlbumExtractorService

logger = logging.getLogger("vgmeta")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers before adding a new one, so it can be called
    again to reconfigure.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def print_section_header(console: Console, title: str, subtitle: str = "") -> None:
    """Print a section header with optional subtitle."""
    header = f"  {title.upper()}"
    if subtitle:
        header += f"  [dim]│[/dim]  {subtitle}"
    console.print()
    console.rule(style="dim")
    console.print(header)
    console.rule(style="dim")


def print_album(console: Console, album: AlbumRecord) -> None:
    """Print an album as an info card followed by one table per disc.

    Args:
        console: Rich console for output.
        album: Album to display.
    """
    print_section_header(console, "Album", album.display_title)

    info = Table(show_header=False, padding=(0, 1))
    info.add_column("Field", style="bold cyan", width=12)
    info.add_column("Value", overflow="fold")
    for language in album.title.languages:
        info.add_row(f"Title ({language})", album.title[language])
    info.add_row("Catalog", album.catalog or "[dim]N/A[/dim]")
    info.add_row("Released", album.release_date)
    if album.link:
        info.add_row("Link", album.link)
    console.print()
    console.print(info)

    for disc in album.discs:
        # Languages in first-seen order across the disc
        languages: list[str] = []
        for track in disc.tracks:
            languages.extend(lang for lang in track.name if lang not in languages)

        table = Table(
            title=f"[bold yellow]{disc.title}[/bold yellow]",
            title_justify="left",
        )
        table.add_column("#", style="dim", justify="right")
        for language in languages:
            table.add_column(language, overflow="fold")
        for number, track in enumerate(disc.tracks, 1):
            names = [
                track.name[lang] if lang in track.name else "" for lang in languages
            ]
            table.add_row(str(number), *names)
        console.print()
        console.print(table)

    console.print(f"\n{len(album.discs)} disc(s), {album.track_count} track(s)")


def print_results(console: Console, query: str, results: list[AlbumSummary]) -> None:
    """Print search results as a table."""
    print_section_header(console, "Search", query)
    if not results:
        console.print("[yellow]No albums found[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", justify="right")
    table.add_column("Catalog", style="cyan")
    table.add_column("Title", overflow="fold")
    table.add_column("Released")
    table.add_column("ID", style="dim")
    for index, summary in enumerate(results):
        table.add_row(
            str(index),
            summary.catalog or "N/A",
            summary.display_title,
            summary.release_date,
            summary.id,
        )
    console.print()
    console.print(table)
    console.print(f"\nFound {len(results)} album(s)")


def dump_json(data: BaseModel | list[BaseModel]) -> None:
    """Write models to stdout as JSON."""
    if isinstance(data, list):
        payload = [item.model_dump() for item in data]
    else:
        payload = data.model_dump()
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")


def _service(ctx: click.Context) -> AlbumExtractorService:
    config = APIConfig(base_url=ctx.obj["base_url"])
    return AlbumExtractorService(VGMdbClient(config=config))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--base-url",
    default=DEFAULT_BASE_URL,
    show_default=True,
    help="VGMdb site root.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, base_url: str) -> None:
    """Extract album metadata from VGMdb."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["base_url"] = base_url
    setup_logging(verbose=verbose)


@main.command(name="album")
@click.argument("album", metavar="ID_OR_URL")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def album_cmd(ctx: click.Context, album: str, as_json: bool) -> None:
    """Fetch an album by ID or URL.

    \b
    Examples:
      vgmeta album 79
      vgmeta album "https://vgmdb.net/album/79"
    """
    console = Console()
    try:
        record = _service(ctx).get_album(album)
    except VGMetaError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        dump_json(record)
    else:
        print_album(console, record)


@main.command(name="search")
@click.argument("query", metavar="QUERY")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--pick",
    type=click.IntRange(min=0),
    default=None,
    help="Fetch the full album at this result index.",
)
@click.pass_context
def search_cmd(ctx: click.Context, query: str, as_json: bool, pick: int | None) -> None:
    """Search albums by title or catalog number.

    \b
    Examples:
      vgmeta search "BNEI-ML"
      vgmeta search "BNEI-ML" --pick 0
    """
    console = Console()
    service = _service(ctx)
    try:
        response = service.search(query)
        if pick is not None or response.album is not None:
            record = service.resolve(response, pick or 0)
            if as_json:
                dump_json(record)
            else:
                print_album(console, record)
            return
    except VGMetaError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        dump_json(response.albums())
    else:
        print_results(console, query, response.results)


@main.command(name="parse")
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    metavar="FILE",
)
@click.option("--link", default="", help="Album page URL to record.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def parse_cmd(ctx: click.Context, file: Path, link: str, as_json: bool) -> None:
    """Parse a saved album page without any network access.

    \b
    Examples:
      vgmeta parse album79.html --link "https://vgmdb.net/album/79"
    """
    console = Console()
    try:
        record = _service(ctx).parse(file.read_text(encoding="utf-8"), link=link)
    except VGMetaError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        dump_json(record)
    else:
        print_album(console, record)


if __name__ == "__main__":
    main()
