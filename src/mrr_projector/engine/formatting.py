"""Display formatting — currency, growth percentages, period captions.

Currency strings follow the en-US convention for a fixed currency:
symbol first, comma thousands separator, minus sign before the symbol
(``€1,000``, ``€999.00``, ``-€12``).
"""

from __future__ import annotations

from datetime import date


def format_currency(value: float, decimals: int = 0, symbol: str = "€") -> str:
    """Format ``value`` as currency with a fixed number of decimals."""
    text = f"{abs(value):,.{decimals}f}"
    # no "-€0" when a small negative rounds away
    negative = value < 0 and any(ch not in "0.," for ch in text)
    return f"{'-' if negative else ''}{symbol}{text}"


def format_growth(pct: float | None, decimals: int = 1) -> str:
    """Signed percentage, e.g. ``+10.0%`` / ``-3.2%``.  ``None`` → ``n/a``."""
    if pct is None:
        return "n/a"
    if pct == 0:
        pct = 0.0  # folds -0.0
    return f"{pct:+.{decimals}f}%"


def format_period(period: date) -> str:
    """Short month caption, e.g. ``Jan 2023``."""
    return period.strftime("%b %Y")
