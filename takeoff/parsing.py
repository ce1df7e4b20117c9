"""
Free-text numeric parsing.

Every geometry field arrives as text typed by a user. Blank or garbage
never raises — it reads as zero, and the row simply yields no quantities.
"""

import math


def _normalize(value) -> str:
    text = str(value).strip()
    # Decimal comma ("2,5") — only when there's no dot to conflict with
    if "," in text and "." not in text:
        text = text.replace(",", ".")
    return text


def try_parse_number(value):
    """Strict parse. Returns None for blank, non-numeric, NaN or infinite input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = _normalize(value)
        if not text:
            return None
        try:
            number = float(text)
        except (ValueError, TypeError):
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input. Invalid input reads as `default`."""
    number = try_parse_number(value)
    return default if number is None else number


def parse_dimension(value) -> float:
    """Parse a physical quantity (length, area, count). Negative values read as zero."""
    return max(parse_number(value), 0.0)
