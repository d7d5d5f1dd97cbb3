from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

CENT = Decimal("0.01")
PRICE_DECIMAL_PLACES = 2
# Products store prices as Numeric(12, 2): ten integer digits.
MAX_PRICE = Decimal("1e10")


def parse_price(value) -> Optional[Decimal]:
    """Return ``value`` as an exact two-place Decimal, or None if unusable.

    Floats go through ``str`` so 19.99 stays 19.99 rather than its binary
    expansion. Negative, non-finite, over-precise and out-of-range values
    are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        value = repr(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not amount.is_finite() or amount < 0 or amount >= MAX_PRICE:
        return None
    exponent = amount.normalize().as_tuple().exponent
    if isinstance(exponent, int) and -exponent > PRICE_DECIMAL_PLACES:
        return None
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "MAX_PRICE", "PRICE_DECIMAL_PLACES", "parse_price"]
