from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# es-CO conventions: "$ 1.234.567,89"
THOUSANDS_SEP = "."
DECIMAL_SEP = ","


def _group(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return THOUSANDS_SEP.join(groups)


def format_cop(
    amount: Union[int, Decimal],
    symbol: str = "$",
    decimal_places: int = 2,
) -> str:
    """Render an amount as Colombian pesos, e.g. 8500 → '$ 8.500,00'."""
    value = Decimal(amount)
    if decimal_places > 0:
        exponent = Decimal(1).scaleb(-decimal_places)
    else:
        exponent = Decimal(1)
    value = value.quantize(exponent, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):f}".partition(".")
    body = _group(integer_part)
    if decimal_places > 0:
        body = f"{body}{DECIMAL_SEP}{fraction}"
    return f"{sign}{symbol} {body}"
