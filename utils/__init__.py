# Utility modules for Recipe Cost Calculator
from .sanitizer import sanitize_text, sanitize_recipe_name, sanitize_ingredient_name
