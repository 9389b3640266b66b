"""
Command-line interface for the fantasy scraper.
Usage examples:
  python -m fantasy_scraper.apps.cli snapshot pedri
  python -m fantasy_scraper.apps.cli snapshot pedri --no-market
  python -m fantasy_scraper.apps.cli parse market saved/pedri-market.html
  python -m fantasy_scraper.apps.cli candidates "Pedri González"
  python -m fantasy_scraper.apps.cli days "2 días"
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import click

from fantasy_scraper.common.constants import PageKind, normalize_page_kind
from fantasy_scraper.common.logging_utils import configure_logging, get_logger
from fantasy_scraper.common.parsing import build_id_candidates_from_full_name, parse_days
from fantasy_scraper.core.config import Settings, settings
from fantasy_scraper.data_collection.extractors.fantasy_events import parse_fantasy_events_from_html
from fantasy_scraper.data_collection.extractors.market_details import parse_market_details_from_html
from fantasy_scraper.data_collection.extractors.player_details import parse_player_details_from_html
from fantasy_scraper.data_collection.page_gateway import AnaliticaPageGateway
from fantasy_scraper.data_collection.snapshot import FetchPlayerSnapshotUseCase
from fantasy_scraper.domain.errors import InvalidInput, ScrapingError
from fantasy_scraper.domain.models import PlayerSnapshot, SnapshotOptions

logger = get_logger(__name__)


def _dump(payload: Any, indent: Optional[int]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=indent)


async def cmd_snapshot(slug: str, options: SnapshotOptions, cfg: Settings) -> PlayerSnapshot:
    async with AnaliticaPageGateway(cfg) as gateway:
        return await FetchPlayerSnapshotUseCase(gateway).execute(slug, options)


def cmd_parse(kind: PageKind, html: str) -> dict[str, Any]:
    """Run the extractors that apply to *kind* on a saved page."""
    if kind is PageKind.PLAYER_INFO:
        return {
            "fantasyEvents": [row.to_dict() for row in parse_fantasy_events_from_html(html)],
            "playerDetails": parse_player_details_from_html(html).to_dict(),
        }
    return {"marketDetails": parse_market_details_from_html(html).to_dict()}


@click.group()
@click.option("--log-level", default=None, help="Overrides FANTASY_LOG_LEVEL for this run.")
def cli(log_level: Optional[str]):
    """Fantasy stats scraper"""
    configure_logging(service=settings.service_name, level=log_level or settings.log_level)


@cli.command()
@click.argument("slug")
@click.option("--no-info", is_flag=True, help="Skip the player info page.")
@click.option("--no-market", is_flag=True, help="Skip the market page.")
@click.option("--indent", type=int, default=2, show_default=True)
def snapshot(slug: str, no_info: bool, no_market: bool, indent: int):
    """Fetch and print the snapshot of one player"""
    options = SnapshotOptions(include_info=not no_info, include_market=not no_market)
    try:
        result = asyncio.run(cmd_snapshot(slug, options, settings))
    except ScrapingError as e:
        logger.error(f"Snapshot failed for {e.player_slug} at step {e.step}: {e.cause}")
        raise SystemExit(1)
    click.echo(_dump(result.to_dict(), indent))


@cli.command()
@click.argument("kind")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--indent", type=int, default=2, show_default=True)
def parse(kind: str, path: Path, indent: int):
    """Parse a saved HTML page (KIND: playerInfo | market)"""
    try:
        page_kind = normalize_page_kind(kind)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="KIND")
    html = path.read_text(encoding="utf-8")
    click.echo(_dump(cmd_parse(page_kind, html), indent))


@cli.command()
@click.argument("full_name")
def candidates(full_name: str):
    """Print the slug candidates for a player name"""
    for candidate in build_id_candidates_from_full_name(full_name):
        click.echo(candidate)


@cli.command()
@click.argument("text")
def days(text: str):
    """Parse a day duration such as '3', '3d' or '2 días'"""
    try:
        click.echo(parse_days(text))
    except InvalidInput as e:
        click.echo(f"Invalid day duration: {e.raw!r}", err=True)
        raise SystemExit(2)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
