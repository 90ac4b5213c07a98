"""Lenient parsing of raw form values into numbers and dates."""

import math
import numbers
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a raw form value into a float.

    Accepts real numbers (int, float, Decimal, Fraction) and numeric strings
    of ASCII digits (surrounding whitespace allowed). Returns None for
    anything else, including NaN and booleans. Currency symbols, thousands
    separators and underscores are not accepted. Values beyond float range
    become +/-inf.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text.isascii() or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, (numbers.Real, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
        except ValueError:
            # signalling NaN
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def parse_date_value(value: Any) -> datetime:
    """
    Parse an ISO date or datetime into a datetime.

    Date-only values ("2025-01-31" or date objects) become midnight of that day.
    A trailing "Z" is read as UTC.

    Raises:
        ValueError: If value is not a date, datetime or ISO-formatted string
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if len(text) == 10:
        return datetime.combine(date.fromisoformat(text), datetime.min.time())
    return datetime.fromisoformat(text.replace("Z", "+00:00"))
