"""Human-readable rendering of amounts and ratios for insight messages"""

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_CURRENCY_SYMBOL = "₹"


def _group_indian(digits: str) -> str:
    """1234567 -> 12,34,567 (last three digits, then pairs)"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format an amount as Indian rupees.

    Whole amounts carry no fraction digits, others up to two:
        50 -> ₹50, 1000.5 -> ₹1,000.5, 150000 -> ₹1,50,000
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):.2f}".partition(".")
    fraction = fraction.rstrip("0")

    text = _group_indian(whole)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{sign}{symbol}{text}"


def format_percent(fraction: float) -> str:
    """0.456 -> '46' (whole percent, no sign)"""
    return f"{fraction * 100:.0f}"
