"""
Validation Constants

Contains whitelist values and bounds for validating user input
before it reaches the cost engine or the database.
"""

from .units import ALL_UNITS

# Valid unit tags (whitelist for security)
VALID_UNITS = set(ALL_UNITS)

# Ingredient fields a caller may edit directly (calculatedCost is derived)
EDITABLE_FIELDS = {
    'name', 'used_quantity', 'used_unit',
    'package_cost', 'package_size', 'package_unit',
}

# Bounds for recipe-level numbers
MIN_SERVINGS = 1
MAX_SERVINGS = 10000
MIN_BATCH_MULTIPLIER = 1
MAX_BATCH_MULTIPLIER = 1000

# Maximum field lengths for security
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 255,
}

# Maximum number of ingredients accepted in one record
MAX_INGREDIENTS = 500
