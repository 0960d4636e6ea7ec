import logging
from decimal import Decimal

from salesdesk.models import Product, Sale, SaleLine, SalesSummary, Seller

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def record_sale(seller: Seller, product: Product, quantity: int) -> Sale:
    """Append a sale to the seller's ledger. Quantity is taken as given."""
    sale = Sale(product=product, quantity=quantity)
    seller.sales.append(sale)
    logger.info("Recorded %s x %s for seller %s", quantity, product.code, seller.id)
    return sale


def summarize(seller: Seller) -> SalesSummary:
    lines = [
        SaleLine(
            product_name=s.product.name,
            product_code=s.product.code,
            quantity=s.quantity,
            subtotal=s.product.unit_price * s.quantity,
        )
        for s in seller.sales
    ]

    return SalesSummary(
        seller_name=seller.name,
        seller_id=seller.id,
        lines=lines,
        total_items=sum(line.quantity for line in lines),
        total_value=sum((line.subtotal for line in lines), _ZERO),
    )
