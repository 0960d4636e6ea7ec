import logging
import re
from typing import Iterator, Optional

from salesdesk.errors import CatalogError, InvalidNumberError
from salesdesk.models import Product, Seller

logger = logging.getLogger(__name__)


def normalize_code(raw: str) -> str:
    return raw.strip().upper()


_INTEGER = re.compile(r"[+-]?[0-9]+")

# signed 64-bit / 32-bit bounds
LONG_MAX = 2**63 - 1
INT_MAX = 2**31 - 1


def parse_int(field: str, raw: str, maximum: int) -> int:
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidNumberError(field, text)
    value = int(text)
    if not -maximum - 1 <= value <= maximum:
        raise InvalidNumberError(field, text, expected=f"within ±{maximum}")
    return value


def parse_seller_id(raw: str) -> int:
    return parse_int("seller ID", raw, LONG_MAX)


class Catalog:
    """Product code → Product, in insertion order. Read-only once frozen."""

    def __init__(self, products: Optional[list[Product]] = None) -> None:
        self._products: dict[str, Product] = {}
        self._frozen = False
        for p in products or []:
            self.add(p)

    # ── writes (seeding only) ────────────────────────────────────────────────

    def add(self, product: Product) -> None:
        if self._frozen:
            raise CatalogError("Catalog is read-only after seeding")
        if product.code in self._products:
            raise CatalogError(f"Duplicate product code '{product.code}'")
        self._products[product.code] = product

    def freeze(self) -> "Catalog":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── reads ────────────────────────────────────────────────────────────────

    def lookup(self, code: str) -> Optional[Product]:
        # exact match; callers pass the code through normalize_code first
        return self._products.get(code)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, code: object) -> bool:
        return code in self._products


class SellerRegistry:
    def __init__(self) -> None:
        self._sellers: list[Seller] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def register(self, name: str, seller_id: int) -> Seller:
        # duplicates are allowed; lookups resolve to the first registration
        for existing in self._sellers:
            if existing.id == seller_id or existing.name.casefold() == name.casefold():
                logger.warning(
                    "Seller %r (%s) duplicates %r (%s); lookups return the first one",
                    name, seller_id, existing.name, existing.id,
                )
                break
        seller = Seller(name=name, id=seller_id)
        self._sellers.append(seller)
        logger.info("Registered seller %r (%s)", name, seller_id)
        return seller

    # ── reads ─────────────────────────────────────────────────────────────────

    def find_by_name_or_id(self, token: str) -> Optional[Seller]:
        needle = token.strip()
        folded = needle.casefold()
        for s in self._sellers:
            if s.name.casefold() == folded or str(s.id) == needle:
                return s
        return None

    def all(self) -> list[Seller]:
        return list(self._sellers)

    def __len__(self) -> int:
        return len(self._sellers)
