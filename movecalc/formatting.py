# movecalc/formatting.py
from movecalc.model import round_half_up


def format_usd(amount: float) -> str:
    """Whole-dollar USD with thousands separators, e.g. 1118 -> "$1,118", -50 -> "-$50"."""
    n = round_half_up(amount)
    sign = "-" if n < 0 else ""
    return f"{sign}${abs(n):,}"


def format_range(low: float, high: float) -> str:
    return f"{format_usd(low)} – {format_usd(high)}"
