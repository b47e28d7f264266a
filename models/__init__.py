"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .recipe import SavedRecipe
from .shared import SharedRecipe

__all__ = [
    'db',
    'SavedRecipe',
    'SharedRecipe',
]
