"""Text formatting for amounts and percentages shown on screen and in exports.

Output matches what a browser prints for en-US dollars and for
``value.toFixed(1) + "%"``. Currency rounds the shortest decimal spelling of
the number (2.675 -> $2.68), percentages round the exact binary value
(1.005 -> 1.0%). Both round half away from zero and keep the sign for
anything that was negative before rounding.
"""
import math
from decimal import ROUND_HALF_UP, Decimal

from sellsheet.utilities.constants import CURRENCY_SYMBOL


def _round_half_up(value: Decimal, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return value.quantize(quantum, rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    amount = float(amount)
    if math.isnan(amount):
        return f"{CURRENCY_SYMBOL}NaN"
    sign = "-" if math.copysign(1.0, amount) < 0 else ""
    if math.isinf(amount):
        return f"{sign}{CURRENCY_SYMBOL}∞"
    rounded = _round_half_up(Decimal(repr(abs(amount))), 2)
    return f"{sign}{CURRENCY_SYMBOL}{rounded:,.2f}"


def format_percentage(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN%"
    if math.isinf(value):
        return ("-" if value < 0 else "") + "Infinity%"
    sign = "-" if value < 0 else ""
    return f"{sign}{_round_half_up(Decimal(abs(value)), 1):.1f}%"


__all__ = ["format_currency", "format_percentage"]
