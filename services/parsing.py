"""
Parsing Service

Functions for reading quantities and unit names from user input,
and for formatting numbers for display.
"""

import math
import re
from constants import UNIT_MAPPINGS, UNICODE_FRACTIONS, VALID_UNITS


def format_currency(amount):
    """Format a cost for display, rounding to cents only here."""
    return f"${amount:.2f}"


def normalize_fractions(text):
    """Replace Unicode fraction characters with decimal equivalents."""
    # First, normalize all whitespace (including non-breaking spaces) to regular spaces
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text)

    for char, value in UNICODE_FRACTIONS.items():
        if char in text:
            # Check if preceded by a number (mixed fraction like "1½" or "1 ½")
            pattern = r'(\d+)\s*' + re.escape(char)
            match = re.search(pattern, text)
            if match:
                whole = float(match.group(1))
                replacement = str(whole + value)
                text = re.sub(pattern, replacement, text)
            else:
                text = text.replace(char, str(value))
    return text


def parse_quantity(value, default=0.0):
    """
    Parse a quantity like '2', '0.5', '1/4', '1 1/2' or '1½' into a float.

    Negative or unreadable input gives the default.
    """
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) and value >= 0 else default

    s = normalize_fractions(str(value)).strip()
    if not s:
        return default

    # Check for mixed fraction like "1 1/2"
    mixed_match = re.match(r'^(\d+)\s+(\d+)\s*/\s*(\d+)$', s)
    if mixed_match:
        denom = float(mixed_match.group(3))
        if denom == 0:
            return default
        return float(mixed_match.group(1)) + float(mixed_match.group(2)) / denom

    # Check for simple fraction like "1/2"
    frac_match = re.match(r'^(\d+)\s*/\s*(\d+)$', s)
    if frac_match:
        denom = float(frac_match.group(2))
        if denom == 0:
            return default
        return float(frac_match.group(1)) / denom

    try:
        result = float(s)
    except ValueError:
        return default
    if not math.isfinite(result) or result < 0:
        return default
    return result


def parse_unit(value):
    """
    Resolve a unit tag or free-text unit name to a unit tag.

    Returns None when the text names no supported unit.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    if value in VALID_UNITS:
        return value
    return UNIT_MAPPINGS.get(value.lower().rstrip('.'))


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError, OverflowError):
        return default
