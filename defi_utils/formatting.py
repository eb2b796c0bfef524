"""Utility functions for formatting prices, counts and timestamps."""

import math
import time
from datetime import datetime
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

Number = Union[int, float, Decimal]
Timestamp = Union[datetime, int, float]

# Thresholds for suffix formatting, largest first
_LARGE_NUMBER_SUFFIXES = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)


def to_fixed(value: Number, places: int) -> str:
    """Render a number with a fixed count of decimal places.

    Rounds half away from zero on the exact value of ``value`` (a float is
    taken at its exact binary value, not its repr), which is how browser
    ``toFixed`` output looks.

    Args:
        value: Number to render
        places: Digits after the decimal point

    Returns:
        Fixed-point string, e.g. ``to_fixed(1.005, 2) == "1.00"``
    """
    exact = value if isinstance(value, Decimal) else Decimal(value)
    if not exact.is_finite():
        return str(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + places + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return format(rounded, "f")


def _is_blank(value: Optional[Number]) -> bool:
    return not value or (isinstance(value, (float, Decimal)) and math.isnan(value))


def format_price(price: Optional[Number], decimals: int = 6) -> str:
    """Format a unit price for display.

    Args:
        price: Price value
        decimals: Decimal places for prices below one thousand

    Returns:
        "0", "< 0.000001", a K/M suffixed value or a fixed-point string
    """
    if _is_blank(price):
        return "0"

    price = float(price)
    if price < 0.000001:
        return "< 0.000001"
    if price >= 1_000_000:
        return f"{to_fixed(price / 1_000_000, 2)}M"
    if price >= 1_000:
        return f"{to_fixed(price / 1_000, 2)}K"

    return to_fixed(price, decimals)


def format_large_number(num: Optional[Number]) -> str:
    """Format a large number with a T/B/M/K suffix.

    The suffix is picked from the absolute value; the sign is kept.

    Args:
        num: Number to format

    Returns:
        Formatted number, e.g. "1.50K" or "-2.50M"
    """
    if _is_blank(num):
        return "0"

    num = float(num)
    abs_num = abs(num)
    for threshold, suffix in _LARGE_NUMBER_SUFFIXES:
        if abs_num >= threshold:
            return f"{to_fixed(num / threshold, 2)}{suffix}"

    return to_fixed(num, 2)


def _to_epoch_seconds(value: Timestamp) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def get_relative_time(date: Timestamp, now: Optional[Timestamp] = None) -> str:
    """Get a short relative time string such as "5m ago".

    Args:
        date: datetime or Unix timestamp (seconds)
        now: Reference time, defaults to the current time

    Returns:
        "just now", "{n}m ago", "{n}h ago", "{n}d ago", or the locale's
        date representation for anything a week or older
    """
    now_seconds = time.time() if now is None else _to_epoch_seconds(now)
    diff_sec = int(now_seconds - _to_epoch_seconds(date))
    diff_min = diff_sec // 60
    diff_hour = diff_min // 60
    diff_day = diff_hour // 24

    if diff_sec < 60:
        return "just now"
    if diff_min < 60:
        return f"{diff_min}m ago"
    if diff_hour < 24:
        return f"{diff_hour}h ago"
    if diff_day < 7:
        return f"{diff_day}d ago"

    if not isinstance(date, datetime):
        date = datetime.fromtimestamp(date)
    return date.strftime("%x")


def calculate_percentage_change(old_value: Optional[Number], new_value: Number) -> float:
    """Calculate the percentage change from old_value to new_value.

    Returns 0 when old_value is zero, missing or NaN.
    """
    if _is_blank(old_value):
        return 0
    return (new_value - old_value) / old_value * 100
