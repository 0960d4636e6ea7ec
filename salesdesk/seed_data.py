"""
Default product catalog.

Five grocery staples priced in Colombian pesos:
  P1 Café    8 500
  P2 Azúcar  4 200
  P3 Arroz   3 900
  P4 Aceite  9 800
  P5 Sal     2 500
"""

from decimal import Decimal

from salesdesk.models import Product
from salesdesk.store import Catalog

PRODUCTS: list[tuple[str, str, str]] = [
    ("P1", "Café",   "8500"),
    ("P2", "Azúcar", "4200"),
    ("P3", "Arroz",  "3900"),
    ("P4", "Aceite", "9800"),
    ("P5", "Sal",    "2500"),
]


def seed(catalog: Catalog) -> None:
    for code, name, price in PRODUCTS:
        catalog.add(Product(code=code, name=name, unit_price=Decimal(price)))


def default_catalog() -> Catalog:
    catalog = Catalog()
    seed(catalog)
    return catalog.freeze()
