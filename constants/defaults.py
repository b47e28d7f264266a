"""
Default Values

Starting values for new recipes and new ingredient lines.
"""

DEFAULT_SERVINGS = 4
DEFAULT_BATCH_MULTIPLIER = 1

# Unit of a freshly added ingredient (earlier versions started on 'cup')
DEFAULT_INGREDIENT_UNIT = 'unit'

# Length of generated ingredient and share ids
ID_LENGTH = 10

# Width of the shared_recipe.share_id column
MAX_SHARE_ID_LENGTH = 16
