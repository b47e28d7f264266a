"""
Services Package

Business logic modules for the recipe cost calculator.
"""

from .conversion import (
    IncompatibleUnitsError,
    category_of,
    can_convert,
    convert,
    to_base,
)

from .cost import (
    CostResult,
    DivisionByZeroError,
    derive_cost,
    compute_cost,
    cost_per_base_unit,
)

from .parsing import (
    format_currency,
    normalize_fractions,
    parse_quantity,
    parse_unit,
    safe_int,
)

from .recipe import (
    IngredientLine,
    RecipeSession,
    RecipeSummary,
    generate_id,
    summarize,
)

from .export import (
    export_csv,
    export_filename,
)

__all__ = [
    # Conversion
    'IncompatibleUnitsError',
    'category_of',
    'can_convert',
    'convert',
    'to_base',
    # Cost
    'CostResult',
    'DivisionByZeroError',
    'derive_cost',
    'compute_cost',
    'cost_per_base_unit',
    # Parsing
    'format_currency',
    'normalize_fractions',
    'parse_quantity',
    'parse_unit',
    'safe_int',
    # Recipe
    'IngredientLine',
    'RecipeSession',
    'RecipeSummary',
    'generate_id',
    'summarize',
    # Export
    'export_csv',
    'export_filename',
]
