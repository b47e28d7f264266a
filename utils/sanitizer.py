"""
Input Sanitization Module

Cleans free-text names before they are stored or shared.
"""

import re

from constants import MAX_LENGTHS


def sanitize_text(text, max_length=10000):
    """
    Clean a free-text value for storage.

    Removes control characters and null bytes, collapses runs of
    whitespace, and truncates to max_length. HTML escaping is left to
    whatever renders the value.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', text)

    # Collapse multiple spaces
    text = re.sub(r'\s+', ' ', text).strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_recipe_name(name, max_length=MAX_LENGTHS['recipe_name']):
    """
    Sanitize a recipe name for storage and export file names.

    Args:
        name: The recipe name to sanitize
        max_length: Maximum allowed length (default MAX_LENGTHS['recipe_name'])

    Returns:
        Sanitized recipe name, possibly empty
    """
    name = sanitize_text(name, max_length=max_length + 1)

    # Truncate if too long
    if len(name) > max_length:
        name = name[:max_length-3] + '...'

    return name


def sanitize_ingredient_name(name, max_length=MAX_LENGTHS['ingredient_name']):
    """Sanitize an ingredient name. Empty names are kept empty."""
    return sanitize_text(name, max_length=max_length)
