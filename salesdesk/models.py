from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    unit_price: Decimal


class Sale(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int


class Seller(BaseModel):
    name: str
    id: int
    sales: list[Sale] = Field(default_factory=list)


# ── Report models ────────────────────────────────────────────────────────────

class SaleLine(BaseModel):
    product_name: str
    product_code: str
    quantity: int
    # unit_price * quantity
    subtotal: Decimal


class SalesSummary(BaseModel):
    seller_name: str
    seller_id: int
    lines: list[SaleLine]
    total_items: int
    total_value: Decimal

    @property
    def has_sales(self) -> bool:
        return bool(self.lines)
