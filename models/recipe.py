"""
Recipe Models

Contains the SavedRecipe model for a user's saved recipe records.
"""

from datetime import datetime, timezone

from .base import db


def utcnow():
    return datetime.now(timezone.utc)


class SavedRecipe(db.Model):
    """Saved recipe with its ingredient lines stored as JSON text."""
    id = db.Column(db.String(32), primary_key=True)
    name = db.Column(db.String(255), nullable=False, default='', index=True)
    ingredients = db.Column(db.Text, nullable=False, default='[]')  # JSON array
    servings = db.Column(db.Integer, nullable=False, default=4)
    batch_multiplier = db.Column(db.Integer, nullable=False, default=1)
    saved_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)
