"""
en-US display formatting for calculator results.

Rounding works on the exact decimal value of the float, so 0.5 dollars shows
as $1 and 1.25 months as 1.3 months.
"""
from decimal import ROUND_HALF_UP, Context, Decimal

_WHOLE = Decimal('1')
_TENTH = Decimal('0.1')
_THOUSANDTH = Decimal('0.001')

# Wide enough for any finite float
_CONTEXT = Context(prec=400)


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators, e.g. $59,400 or -$1,235."""
    rounded = Decimal(amount).quantize(_WHOLE, rounding=ROUND_HALF_UP, context=_CONTEXT)
    sign = '-' if rounded < 0 else ''
    return f"{sign}${abs(rounded):,}"


def format_number(num: float) -> str:
    """Grouped number with up to three decimals, trailing zeros dropped."""
    rounded = Decimal(num).quantize(_THOUSANDTH, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = f"{rounded:,}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text


def format_months(months: float) -> str:
    """Duration with one decimal, e.g. 10.0 months."""
    rounded = Decimal(months).quantize(_TENTH, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return f"{rounded} months"
