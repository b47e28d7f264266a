"""
Export Service

Builds the downloadable cost breakdown for a recipe.
"""

import csv
import io
import re

from .parsing import format_currency

HEADER_ROW = [
    'Ingredient Name',
    'Quantity Used',
    'Unit',
    'Package Cost',
    'Package Size',
    'Package Unit',
    'Cost for Recipe',
]


def _number(value):
    """Show whole numbers without a trailing .0"""
    return str(int(value)) if value == int(value) else str(value)


def export_filename(recipe_name, extension='csv'):
    """File name for a breakdown, e.g. 'Pancakes' -> 'Pancakes_cost_breakdown.csv'."""
    base = re.sub(r'[^a-z0-9]', '_', recipe_name or 'recipe', flags=re.IGNORECASE)
    return f'{base}_cost_breakdown.{extension}'


def breakdown_rows(session, recipe_name=None):
    """Rows of the cost breakdown, as lists of strings."""
    summary = session.summary()
    rows = [
        [recipe_name or session.name or 'Recipe Cost Breakdown'],
        [],
        list(HEADER_ROW),
    ]

    for line in session.ingredients:
        rows.append([
            line.name,
            _number(line.used_quantity),
            line.used_unit,
            format_currency(line.package_cost),
            _number(line.package_size),
            line.package_unit,
            format_currency(line.calculated_cost),
        ])

    rows.append([])
    rows.append(['Total Cost', format_currency(summary.total_cost)])
    rows.append(['Servings Per Recipe', str(session.servings)])
    rows.append(['Batches to Make', str(session.batch_multiplier)])
    rows.append(['Total Servings', str(summary.total_servings)])
    rows.append(['Total Cost (All Batches)', format_currency(summary.scaled_total_cost)])
    rows.append(['Cost Per Serving', format_currency(summary.cost_per_serving)])
    return rows


def export_csv(session, recipe_name=None):
    """Render the cost breakdown as CSV text with every cell quoted."""
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerows(breakdown_rows(session, recipe_name))
    return output.getvalue()
