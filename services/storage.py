"""
Recipe Storage Service

Saves, loads and shares recipe records. Records are plain dicts using the
camelCase field names of the JSON API; ingredient lines are stored as a
JSON array in a text column.
"""

import json
import logging
import math

from models import db, SavedRecipe, SharedRecipe
from models.recipe import utcnow
from utils.sanitizer import sanitize_recipe_name, sanitize_ingredient_name
from .recipe import RecipeSession, generate_id

logger = logging.getLogger(__name__)

# Upper bound of the 32-bit total_cost_cents column
MAX_TOTAL_COST_CENTS = 2**31 - 1


def _clean_session(record, **session_options):
    """Normalize a record through a RecipeSession so stored costs are current."""
    session = RecipeSession.from_record(record, **session_options)
    session.name = sanitize_recipe_name(session.name)
    for line in session.ingredients:
        line.name = sanitize_ingredient_name(line.name)
    return session


def _dump_ingredients(session):
    return json.dumps([line.to_record() for line in session.ingredients])


def _load_ingredients(text, owner):
    """Parse a stored ingredient array, treating bad JSON as an empty list."""
    try:
        ingredients = json.loads(text or '[]')
    except (TypeError, ValueError):
        logger.error('Malformed ingredient data for %s; loading it empty', owner)
        return []
    if not isinstance(ingredients, list):
        logger.error('Ingredient data for %s is not a list; loading it empty', owner)
        return []
    return ingredients


# ============================================
# SAVED RECIPES
# ============================================

def saved_recipe_to_record(row):
    return {
        'id': row.id,
        'name': row.name,
        'ingredients': _load_ingredients(row.ingredients, f'recipe {row.id}'),
        'servings': row.servings,
        'batchMultiplier': row.batch_multiplier,
        'savedAt': row.saved_at.isoformat() if row.saved_at else None,
    }


def save_recipe(record, **session_options):
    """
    Insert or replace a saved recipe, keyed on record['id'].

    A record without a usable id gets a new one. Returns the stored record.
    """
    recipe_id = str(record.get('id') or '')
    if not recipe_id or len(recipe_id) > 32:
        recipe_id = generate_id()

    session = _clean_session(record, **session_options)

    row = db.session.get(SavedRecipe, recipe_id)
    if row is None:
        row = SavedRecipe(id=recipe_id)
        db.session.add(row)
    else:
        row.saved_at = utcnow()

    row.name = session.name
    row.ingredients = _dump_ingredients(session)
    row.servings = session.servings
    row.batch_multiplier = session.batch_multiplier
    db.session.commit()

    logger.info('Saved recipe %s (%d ingredients)', recipe_id, len(session.ingredients))
    return saved_recipe_to_record(row)


def list_saved_recipes():
    """All saved recipes, most recently saved first."""
    rows = SavedRecipe.query.order_by(SavedRecipe.saved_at.desc(), SavedRecipe.name).all()
    return [saved_recipe_to_record(row) for row in rows]


def get_saved_recipe(recipe_id):
    row = db.session.get(SavedRecipe, recipe_id)
    return saved_recipe_to_record(row) if row else None


def delete_saved_recipe(recipe_id):
    """Delete a saved recipe. Returns False if there was nothing to delete."""
    row = db.session.get(SavedRecipe, recipe_id)
    if row is None:
        return False
    db.session.delete(row)
    db.session.commit()
    logger.info('Deleted recipe %s', recipe_id)
    return True


# ============================================
# SHARED RECIPES
# ============================================

def shared_recipe_to_record(row):
    return {
        'shareId': row.share_id,
        'name': row.name,
        'ingredients': _load_ingredients(row.ingredients, f'share {row.share_id}'),
        'servings': row.servings,
        'batchMultiplier': row.batch_multiplier,
        'totalCost': row.total_cost_cents / 100,
        'createdAt': row.created_at.isoformat() if row.created_at else None,
    }


def _total_cost_cents(total_cost):
    """Round a total to whole cents, capped to what the column can hold."""
    cents = total_cost * 100
    if not math.isfinite(cents) or cents > MAX_TOTAL_COST_CENTS:
        logger.warning('Recipe total %r is too large to store; capping it', total_cost)
        return MAX_TOTAL_COST_CENTS
    return int(round(cents))


def share_recipe(record, id_length=10, **session_options):
    """Store a snapshot of a recipe under a new share id and return the id."""
    session = _clean_session(record, **session_options)

    share_id = generate_id(id_length)
    while SharedRecipe.query.filter_by(share_id=share_id).first() is not None:
        share_id = generate_id(id_length)

    row = SharedRecipe(
        share_id=share_id,
        name=session.name or 'Untitled Recipe',
        ingredients=_dump_ingredients(session),
        servings=session.servings,
        batch_multiplier=session.batch_multiplier,
        total_cost_cents=_total_cost_cents(session.total_cost),
    )
    db.session.add(row)
    db.session.commit()

    logger.info('Shared recipe as %s', share_id)
    return share_id


def get_shared_recipe(share_id):
    row = SharedRecipe.query.filter_by(share_id=share_id).first()
    return shared_recipe_to_record(row) if row else None
