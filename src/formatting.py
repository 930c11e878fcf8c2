"""Display formatting for amounts and percentages."""

from typing import Optional

from src.config import LedgerSettings, get_settings


def format_currency(
    amount: float,
    fraction_digits: int = 2,
    settings: Optional[LedgerSettings] = None,
) -> str:
    """
    Format an amount with the configured currency symbol.

    Examples: 1234.5 -> "$1,234.50", -50 -> "-$50.00"
    """
    settings = settings or get_settings().ledger
    sign = "-" if amount < 0 else ""
    return f"{sign}{settings.currency_symbol}{abs(amount):,.{fraction_digits}f}"


def format_percentage(percentage: float) -> str:
    """Whole-number percentage, e.g. 33.4 -> "33%"."""
    return f"{round(percentage)}%"
