"""
Display formatting for calculator outputs.

Undefined values (NaN or infinite) always render as "-".
"""

import math
from typing import Optional

from app.config import get_settings

UNDEFINED = "-"


def _is_undefined(value: Optional[float]) -> bool:
    return value is None or math.isnan(value) or math.isinf(value)


def format_currency(amount: Optional[float], symbol: Optional[str] = None) -> str:
    """Format as currency with thousands separators, e.g. -$1,234.56."""
    if _is_undefined(amount):
        return UNDEFINED
    if symbol is None:
        symbol = get_settings().currency_symbol
    rounded = round(amount, 2)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_percentage(value: Optional[float]) -> str:
    """Format a value already expressed in percent, e.g. 12.34%."""
    if _is_undefined(value):
        return UNDEFINED
    return f"{value:.2f}%"


def format_ratio(value: Optional[float]) -> str:
    if _is_undefined(value):
        return UNDEFINED
    return f"{value:.2f}"


def format_units(value: Optional[float], label: str = "Units") -> str:
    if _is_undefined(value):
        return UNDEFINED
    return f"{value:.2f} {label}"
