"""
Shared Jinja2 template filters.

Used by the markdown and PDF decision report formatters.
"""

from datetime import datetime, date, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from jinja2 import Environment


def format_currency(value: Any, symbol: str = "$") -> str:
    """Format a value as currency, rounding half up to cents."""
    if value is None:
        return "-"
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        return f"{symbol}{amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,.2f}"
    except (ValueError, TypeError, ArithmeticError):
        return str(value)


def format_percent(value: Any, decimals: int = 2) -> str:
    """Format a percentage value, dropping trailing zeros."""
    if value is None:
        return "-"
    try:
        text = f"{Decimal(str(value)):.{decimals}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return f"{text}%"
    except (ValueError, TypeError, ArithmeticError):
        return str(value)


def format_date(value: Any, fmt: str = "%Y-%m-%d %H:%M UTC") -> str:
    """Format a date value. Aware datetimes are shown in UTC."""
    if value is None:
        return "-"
    if isinstance(value, str):
        return value
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    if isinstance(value, (datetime, date)):
        return value.strftime(fmt)
    return str(value)


def format_number(value: Any, decimals: int = 2) -> str:
    """Format a number with thousand separators."""
    if value is None:
        return "-"
    try:
        if isinstance(value, Decimal):
            return f"{value:,.{decimals}f}"
        return f"{float(value):,.{decimals}f}"
    except (ValueError, TypeError):
        return str(value)


def yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def register_filters(env: Environment) -> None:
    """Register all shared filters on a Jinja2 Environment."""
    env.filters["format_currency"] = format_currency
    env.filters["format_percent"] = format_percent
    env.filters["format_date"] = format_date
    env.filters["format_number"] = format_number
    env.filters["yes_no"] = yes_no
