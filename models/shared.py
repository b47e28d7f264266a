"""
Shared Recipe Model

Contains the SharedRecipe model backing public share links.
"""

from constants import MAX_SHARE_ID_LENGTH
from .base import db
from .recipe import utcnow


class SharedRecipe(db.Model):
    """Recipe snapshot reachable through a short share id."""
    id = db.Column(db.Integer, primary_key=True)
    share_id = db.Column(db.String(MAX_SHARE_ID_LENGTH), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    ingredients = db.Column(db.Text, nullable=False)  # JSON array
    servings = db.Column(db.Integer, nullable=False)
    batch_multiplier = db.Column(db.Integer, nullable=False)
    total_cost_cents = db.Column(db.Integer, nullable=False)  # whole cents
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
