"""
Text rendering for the console session.

Every function returns a list of lines; the session decides where they
are written. Column layouts:

  catalog   Code(10) Description(20) Unit Price(20)
  summary   Product(20) Code(10) Quantity(15) Total Value(15)
"""

from decimal import Decimal
from typing import Callable, Iterable

from salesdesk.currency import format_cop
from salesdesk.models import Product, SalesSummary, Seller

MoneyFormatter = Callable[[Decimal], str]

CATALOG_RULE = "-" * 66
SUMMARY_RULE = "-" * 63


def render_sellers(sellers: Iterable[Seller]) -> list[str]:
    lines = ["", " Registered Vendors:"]
    lines += [f"- {s.name} ({s.id})" for s in sellers]
    return lines


def render_catalog(products: Iterable[Product], money: MoneyFormatter = format_cop) -> list[str]:
    lines = [
        "",
        " Available Products:",
        f"{'Code':<10} {'Description':<20} {'Unit Price':<20}",
        CATALOG_RULE,
    ]
    for p in products:
        lines.append(f"{p.code:<10} {p.name:<20} {money(p.unit_price):<20}")
    return lines


def render_summary(summary: SalesSummary, money: MoneyFormatter = format_cop) -> list[str]:
    lines = [
        "",
        " Sales Summary:",
        f" Seller: {summary.seller_name} | ID: {summary.seller_id}",
    ]
    if not summary.has_sales:
        lines.append("   (No sales recorded)")
        return lines

    lines.append(f"{'Product':<20} {'Code':<10} {'Quantity':<15} {'Total Value':<15}")
    lines.append(SUMMARY_RULE)
    for item in summary.lines:
        lines.append(
            f"{item.product_name:<20} {item.product_code:<10} "
            f"{item.quantity!s:<15} {money(item.subtotal):<15}"
        )
    lines.append(SUMMARY_RULE)
    lines.append(
        f"Total sold: {summary.total_items} items | "
        f"Total value: {money(summary.total_value)}"
    )
    return lines
