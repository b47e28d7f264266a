"""
Constants Package

Unit tables and validation whitelists shared across the application.
"""

from .units import (
    VOLUME,
    WEIGHT,
    COUNT,
    UNITS_BY_CATEGORY,
    UNIT_CATEGORY,
    ALL_UNITS,
    BASE_UNITS,
    CONVERSION_TO_BASE,
    CATEGORY_DEFAULT_UNITS,
    UNIT_MAPPINGS,
    UNICODE_FRACTIONS,
)

from .validation import (
    VALID_UNITS,
    EDITABLE_FIELDS,
    MIN_SERVINGS,
    MAX_SERVINGS,
    MIN_BATCH_MULTIPLIER,
    MAX_BATCH_MULTIPLIER,
    MAX_LENGTHS,
    MAX_INGREDIENTS,
)

from .defaults import (
    DEFAULT_SERVINGS,
    DEFAULT_BATCH_MULTIPLIER,
    DEFAULT_INGREDIENT_UNIT,
    ID_LENGTH,
    MAX_SHARE_ID_LENGTH,
)
