import logging
from typing import Optional

import click
from pydantic import ValidationError

from salesdesk.config import get_settings
from salesdesk.errors import SalesDeskError
from salesdesk.log import configure_logging
from salesdesk.seed_data import default_catalog
from salesdesk.session import SalesSession, SessionContext
from salesdesk.store import SellerRegistry

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--strict/--lenient",
    "strict_numbers",
    default=None,
    help="Exit on a malformed seller ID or quantity instead of asking again.",
)
@click.option(
    "--max-attempts",
    "max_lookup_attempts",
    type=click.IntRange(min=0),
    default=None,
    help="Consecutive seller/product misses allowed (0 = unlimited).",
)
@click.option("--log-level", default=None, help="Log level for stderr output.")
@click.option("--log-json/--log-text", default=None, help="Emit log records as JSON.")
def cli(
    strict_numbers: Optional[bool],
    max_lookup_attempts: Optional[int],
    log_level: Optional[str],
    log_json: Optional[bool],
) -> None:
    """Register sellers, record their sales and print a summary."""
    overrides = {
        "strict_numbers": strict_numbers,
        "max_lookup_attempts": max_lookup_attempts,
        "log_level": log_level,
        "log_json": log_json,
    }
    try:
        settings = get_settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        raise click.UsageError(str(exc))

    configure_logging(settings.log_level, settings.log_json)

    context = SessionContext(
        catalog=default_catalog(),
        registry=SellerRegistry(),
        settings=settings,
    )
    try:
        SalesSession(context).run()
    except SalesDeskError as exc:
        logger.error("Session ended: %s", exc)
        raise click.ClickException(str(exc))


if __name__ == "__main__":
    cli()
