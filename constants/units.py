"""
Unit Constants and Conversion Tables

Contains the closed set of supported units, their categories,
conversion factors to each category's base unit, and the aliases
used to read free-text unit names.
"""

VOLUME = 'volume'
WEIGHT = 'weight'
COUNT = 'count'

# Units per category, in display order
VOLUME_UNITS = ('tsp', 'tbsp', 'cup', 'ml', 'L')
WEIGHT_UNITS = ('oz', 'lb', 'g', 'kg')
COUNT_UNITS = ('unit',)

UNITS_BY_CATEGORY = {
    VOLUME: VOLUME_UNITS,
    WEIGHT: WEIGHT_UNITS,
    COUNT: COUNT_UNITS,
}

# unit -> category
UNIT_CATEGORY = {
    unit: category
    for category, units in UNITS_BY_CATEGORY.items()
    for unit in units
}

ALL_UNITS = tuple(UNIT_CATEGORY)

# Base unit per category
BASE_UNITS = {VOLUME: 'ml', WEIGHT: 'g', COUNT: 'unit'}

# Conversion factors to base unit (ML for volume, G for weight)
CONVERSION_TO_BASE = {
    # Volume: base = ml
    'tsp': 4.92892,
    'tbsp': 14.7868,
    'cup': 236.588,
    'ml': 1,
    'L': 1000,
    # Weight: base = g
    'oz': 28.3495,
    'lb': 453.592,
    'g': 1,
    'kg': 1000,
    # Count
    'unit': 1,
}

# Package unit chosen when the used unit switches category
CATEGORY_DEFAULT_UNITS = {VOLUME: 'cup', WEIGHT: 'lb', COUNT: 'unit'}

# Unit mappings for free-text input (lowercase input -> unit tag)
UNIT_MAPPINGS = {
    'teaspoon': 'tsp', 'teaspoons': 'tsp', 'tsp': 'tsp', 'ts': 'tsp',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbsp': 'tbsp', 'tbs': 'tbsp', 'tb': 'tbsp',
    'cup': 'cup', 'cups': 'cup', 'c': 'cup',
    'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'ml': 'ml',
    'liter': 'L', 'liters': 'L', 'litre': 'L', 'l': 'L',
    'ounce': 'oz', 'ounces': 'oz', 'oz': 'oz',
    'pound': 'lb', 'pounds': 'lb', 'lb': 'lb', 'lbs': 'lb',
    'gram': 'g', 'grams': 'g', 'g': 'g',
    'kilogram': 'kg', 'kilograms': 'kg', 'kg': 'kg',
    'unit': 'unit', 'units': 'unit', 'ea': 'unit', 'each': 'unit',
    'piece': 'unit', 'pieces': 'unit', 'item': 'unit', 'items': 'unit',
}

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}
