"""
Interactive sales session.

The session walks through a fixed sequence of steps:

  1. register one or more sellers
  2. list the registered sellers
  3. pick the seller who made the sales (by name or ID)
  4. list the catalog
  5. record sales for that seller
  6. print the seller's sales summary

All state lives on a ``SessionContext`` handed to the controller, and all
console I/O goes through click so the whole flow can be driven by
``click.testing.CliRunner``.
"""

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Optional

import click

from salesdesk import report
from salesdesk.config import Settings
from salesdesk.currency import format_cop
from salesdesk.engine import record_sale, summarize
from salesdesk.errors import InvalidNumberError, SessionAborted
from salesdesk.models import Product, SalesSummary, Seller
from salesdesk.seed_data import default_catalog
from salesdesk.store import (
    INT_MAX,
    Catalog,
    SellerRegistry,
    normalize_code,
    parse_int,
    parse_seller_id,
)

logger = logging.getLogger(__name__)

SELLER_NOT_FOUND = "✘ seller not found. Please try again."
PRODUCT_NOT_FOUND = "Product not found."


def parse_quantity(raw: str) -> int:
    quantity = parse_int("quantity", raw, INT_MAX)
    if quantity < 1:
        raise InvalidNumberError("quantity", raw.strip(), expected="a positive integer")
    return quantity


def is_yes(answer: str) -> bool:
    return answer.strip().lower() == "y"


@dataclass
class SessionContext:
    catalog: Catalog = field(default_factory=default_catalog)
    registry: SellerRegistry = field(default_factory=SellerRegistry)
    settings: Settings = field(default_factory=Settings)
    active_seller: Optional[Seller] = None


class SalesSession:
    def __init__(self, context: SessionContext) -> None:
        self.ctx = context
        self.money = partial(
            format_cop,
            symbol=context.settings.currency_symbol,
            decimal_places=context.settings.decimal_places,
        )

    def run(self) -> SalesSummary:
        self.register_sellers()
        self.show_sellers()
        self.resolve_seller()
        self.show_catalog()
        self.record_sales()
        return self.show_summary()

    # ── steps ────────────────────────────────────────────────────────────────

    def register_sellers(self) -> None:
        click.echo("Seller Registration")
        while True:
            name = self._ask("Enter seller name").strip()
            seller_id = self._ask_int("Enter seller ID (long number)", parse_seller_id)
            self.ctx.registry.register(name, seller_id)
            if not is_yes(self._ask("Add another seller? (y/n)")):
                break

    def show_sellers(self) -> None:
        self._echo_lines(report.render_sellers(self.ctx.registry.all()))

    def resolve_seller(self) -> Seller:
        misses = 0
        while True:
            click.echo()
            token = self._ask("Enter seller name or ID to record sales")
            seller = self.ctx.registry.find_by_name_or_id(token)
            if seller is not None:
                self.ctx.active_seller = seller
                logger.info("Active seller: %r (%s)", seller.name, seller.id)
                return seller
            misses += 1
            logger.info("No seller matches %r", token)
            click.echo(SELLER_NOT_FOUND)
            self._check_attempts(misses, "seller")

    def show_catalog(self) -> None:
        self._echo_lines(report.render_catalog(self.ctx.catalog, self.money))

    def record_sales(self) -> None:
        seller = self._require_seller()
        misses = 0
        while True:
            click.echo()
            raw = self._ask("Enter product ID (blank to finish)")
            if not raw.strip():
                logger.info("Sale recording ended by blank product code")
                return
            product = self.ctx.catalog.lookup(normalize_code(raw))
            if product is None:
                misses += 1
                logger.info("No product with code %r", raw)
                click.echo(PRODUCT_NOT_FOUND)
                self._check_attempts(misses, "product")
                continue
            misses = 0
            self._record(seller, product)
            if not is_yes(self._ask("Add another sale? (y/n)")):
                return

    def show_summary(self) -> SalesSummary:
        summary = summarize(self._require_seller())
        self._echo_lines(report.render_summary(summary, self.money))
        return summary

    # ── helpers ──────────────────────────────────────────────────────────────

    def _record(self, seller: Seller, product: Product) -> None:
        quantity = self._ask_int("Enter quantity sold", parse_quantity)
        record_sale(seller, product, quantity)

    def _require_seller(self) -> Seller:
        if self.ctx.active_seller is None:
            raise SessionAborted("No seller selected")
        return self.ctx.active_seller

    def _check_attempts(self, misses: int, what: str) -> None:
        limit = self.ctx.settings.max_lookup_attempts
        if limit and misses >= limit:
            logger.warning("Giving up after %d %s lookup misses", misses, what)
            raise SessionAborted(f"No {what} matched after {misses} attempts")

    def _ask(self, text: str) -> str:
        # blank answers are valid (empty name, "no" to a confirmation)
        return click.prompt(text, default="", show_default=False)

    def _ask_int(self, text: str, parse: Callable[[str], int]) -> int:
        strict = self.ctx.settings.strict_numbers

        def convert(raw: str) -> int:
            try:
                return parse(raw)
            except InvalidNumberError as exc:
                if strict:
                    raise
                raise click.UsageError(str(exc)) from None

        return click.prompt(text, value_proc=convert)

    @staticmethod
    def _echo_lines(lines: list[str]) -> None:
        for line in lines:
            click.echo(line)
