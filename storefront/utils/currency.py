"""
Storefront API - Currency Formatting
=====================================

What:  Renders prices as en-US dollar strings ("$1,234.50").
Who:   ProductService log lines; available to any future display code.

Rounding is half-up (away from zero) on the exact binary value of the
number, so 2.675 renders as "$2.67": the float is really 2.67499999...
Non-finite values never raise: they render as "$∞", "-$∞" or "$NaN".
"""

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

_CENTS = Decimal("0.01")


def format_to_dollar_currency(value: Union[int, float, Decimal]) -> str:
    """
    Format a number as US dollars with thousands separators and two decimals.

    Examples:
        >>> format_to_dollar_currency(9.99)
        '$9.99'
        >>> format_to_dollar_currency(1234.5)
        '$1,234.50'
        >>> format_to_dollar_currency(-5)
        '-$5.00'
    """
    amount = value if isinstance(value, Decimal) else Decimal(value)
    if amount.is_nan():
        return "$NaN"
    sign = "-" if amount < 0 else ""
    if amount.is_infinite():
        return f"{sign}$∞"
    # Enough precision for every integer digit plus cents (1e300 is finite)
    context = Context(prec=max(28, amount.adjusted() + 3))
    cents = amount.quantize(_CENTS, rounding=ROUND_HALF_UP, context=context)
    return f"{sign}${cents.copy_abs():,.2f}"
