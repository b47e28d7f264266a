"""
Recipe Costing Service

Holds the working list of ingredient lines for one recipe, applies the
unit and package-size rules on every edit, and folds the per-ingredient
costs into recipe totals.
"""

import logging
import secrets
from collections import namedtuple
from dataclasses import dataclass, replace

from constants import (
    CATEGORY_DEFAULT_UNITS,
    DEFAULT_BATCH_MULTIPLIER,
    DEFAULT_INGREDIENT_UNIT,
    DEFAULT_SERVINGS,
    EDITABLE_FIELDS,
    ID_LENGTH,
    MAX_BATCH_MULTIPLIER,
    MAX_SERVINGS,
    MIN_BATCH_MULTIPLIER,
    MIN_SERVINGS,
)
from .conversion import can_convert, category_of
from .cost import compute_cost
from .parsing import parse_quantity, parse_unit, safe_int

logger = logging.getLogger(__name__)

# Provenance of an ingredient's package size
PACKAGE_SIZE_DERIVED = 'derived'
PACKAGE_SIZE_USER = 'user'

NUMERIC_FIELDS = {'used_quantity', 'package_cost', 'package_size'}
UNIT_FIELDS = {'used_unit', 'package_unit'}

RecipeSummary = namedtuple('RecipeSummary', [
    'total_cost',
    'scaled_total_cost',
    'total_servings',
    'cost_per_serving',
    'ingredient_count',
])


def generate_id(length=ID_LENGTH):
    """Return a random URL-safe id of the given length."""
    return secrets.token_urlsafe(length)[:length]


@dataclass
class IngredientLine:
    """One ingredient of the recipe, with the package it was bought in."""
    id: str
    name: str = ''
    used_quantity: float = 0.0
    used_unit: str = DEFAULT_INGREDIENT_UNIT
    package_cost: float = 0.0
    package_size: float = 0.0
    package_unit: str = DEFAULT_INGREDIENT_UNIT
    calculated_cost: float = 0.0
    package_size_source: str = PACKAGE_SIZE_DERIVED

    @property
    def package_size_manually_set(self):
        return self.package_size_source == PACKAGE_SIZE_USER

    def to_record(self):
        return {
            'id': self.id,
            'name': self.name,
            'usedQuantity': self.used_quantity,
            'usedUnit': self.used_unit,
            'packageCost': self.package_cost,
            'packageSize': self.package_size,
            'packageUnit': self.package_unit,
            'calculatedCost': self.calculated_cost,
            'packageSizeManuallySet': self.package_size_manually_set,
        }

    @classmethod
    def from_record(cls, record, ingredient_id):
        """
        Build a line from a stored record.

        Missing numbers read as zero. Unit text is resolved through the
        alias table; unrecognised tags are kept so they fail to convert
        rather than being silently replaced.
        """
        def unit(key):
            raw = record.get(key)
            if raw is None or raw == '':
                return DEFAULT_INGREDIENT_UNIT
            return parse_unit(raw) or str(raw)

        return cls(
            id=ingredient_id,
            name=str(record.get('name') or ''),
            used_quantity=parse_quantity(record.get('usedQuantity')),
            used_unit=unit('usedUnit'),
            package_cost=parse_quantity(record.get('packageCost')),
            package_size=parse_quantity(record.get('packageSize')),
            package_unit=unit('packageUnit'),
            package_size_source=(PACKAGE_SIZE_USER if record.get('packageSizeManuallySet')
                                 else PACKAGE_SIZE_DERIVED),
        )


def summarize(ingredients, servings, batch_multiplier):
    """Recipe totals from the current ingredient costs. Nothing is rounded."""
    total_cost = sum(line.calculated_cost for line in ingredients)
    scaled_total_cost = total_cost * batch_multiplier
    total_servings = servings * batch_multiplier
    cost_per_serving = scaled_total_cost / total_servings if total_servings > 0 else 0.0
    return RecipeSummary(
        total_cost=total_cost,
        scaled_total_cost=scaled_total_cost,
        total_servings=total_servings,
        cost_per_serving=cost_per_serving,
        ingredient_count=len(ingredients),
    )


class RecipeSession:
    """
    Working set of one recipe being costed.

    Every edit finishes with the edited line's cost recomputed, so totals
    read straight after an edit are always current. Unit problems never
    raise out of an edit: they zero the cost and leave a message in
    ``messages`` (and call ``notify`` if one was given).
    """

    def __init__(self, name='', servings=DEFAULT_SERVINGS,
                 batch_multiplier=DEFAULT_BATCH_MULTIPLIER,
                 default_unit=DEFAULT_INGREDIENT_UNIT,
                 id_factory=generate_id, notify=None):
        self.name = name
        self.ingredients = []
        self.servings = DEFAULT_SERVINGS
        self.batch_multiplier = DEFAULT_BATCH_MULTIPLIER
        self.default_unit = default_unit
        self.messages = []
        self._id_factory = id_factory
        self._notify_callback = notify
        self._issued_ids = set()
        self.set_servings(servings)
        self.set_batch_multiplier(batch_multiplier)

    # ---- ids and messages ----

    def _new_id(self):
        while True:
            ingredient_id = self._id_factory()
            if ingredient_id not in self._issued_ids:
                self._issued_ids.add(ingredient_id)
                return ingredient_id

    def _notify(self, level, message):
        self.messages.append((level, message))
        if self._notify_callback is not None:
            self._notify_callback(level, message)

    def _index_of(self, ingredient_id):
        for index, line in enumerate(self.ingredients):
            if line.id == ingredient_id:
                return index
        raise KeyError(ingredient_id)

    def get_ingredient(self, ingredient_id):
        return self.ingredients[self._index_of(ingredient_id)]

    # ---- ingredient operations ----

    def add_ingredient(self, **fields):
        """
        Append a new blank ingredient line and return it.

        Any fields given are applied afterwards as ordinary edits.
        """
        line = IngredientLine(
            id=self._new_id(),
            used_unit=self.default_unit,
            package_unit=self.default_unit,
        )
        self.ingredients.append(line)
        if fields:
            self.update_ingredient_fields(line.id, fields)
        return line

    def update_ingredient(self, ingredient_id, field, value):
        """
        Apply a single field edit to an ingredient and recompute its cost.

        Raises:
            KeyError: no ingredient has this id
            ValueError: field is not user-editable
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f'Field {field!r} cannot be edited')
        line = self.get_ingredient(ingredient_id)

        if field in NUMERIC_FIELDS:
            value = parse_quantity(value)
        elif field in UNIT_FIELDS:
            value = parse_unit(value) or str(value)
        else:
            value = '' if value is None else str(value)

        if field == 'used_unit':
            self._change_used_unit(line, value)
        elif field == 'package_unit':
            self._change_package_unit(line, value)
        elif field == 'used_quantity':
            line.used_quantity = value
            if not line.package_size_manually_set:
                line.package_size = value
        elif field == 'package_size':
            line.package_size = value
            line.package_size_source = PACKAGE_SIZE_USER
        else:
            setattr(line, field, value)

        self._recompute(line)
        return line

    def update_ingredient_fields(self, ingredient_id, fields):
        """Apply several edits to one ingredient, in the order given."""
        line = self.get_ingredient(ingredient_id)
        for field, value in fields.items():
            self.update_ingredient(ingredient_id, field, value)
        return line

    def _change_used_unit(self, line, unit):
        old_category = category_of(line.used_unit)
        new_category = category_of(unit)
        line.used_unit = unit

        if new_category is None:
            self._notify('warning', f'Unknown unit: {unit}')
            return

        if old_category != new_category:
            line.package_unit = CATEGORY_DEFAULT_UNITS[new_category]
            line.package_size = 0.0
            self._notify('info', f'Switched to {new_category} units. Please enter the package size again.')
        else:
            line.package_unit = unit
        line.package_size_source = PACKAGE_SIZE_DERIVED

    def _change_package_unit(self, line, unit):
        if not can_convert(line.used_unit, unit):
            used_category = category_of(line.used_unit)
            line.package_unit = CATEGORY_DEFAULT_UNITS.get(used_category, line.package_unit)
            self._notify('warning', f'Package unit {unit} is not compatible with {line.used_unit}.')
            return
        line.package_unit = unit
        line.package_size_source = PACKAGE_SIZE_USER

    def _recompute(self, line):
        result = compute_cost(line.used_quantity, line.used_unit, line.package_cost,
                              line.package_size, line.package_unit)
        line.calculated_cost = result.cost
        if result.warning:
            logger.warning('Cost for ingredient %s set to zero: %s', line.id, result.warning)
            self._notify('warning', result.warning)
        else:
            logger.debug('Cost for ingredient %s recomputed: %r', line.id, result.cost)

    def delete_ingredient(self, ingredient_id):
        """Remove an ingredient by id and return it."""
        line = self.ingredients.pop(self._index_of(ingredient_id))
        self._notify('success', 'Ingredient removed')
        return line

    def duplicate_ingredient(self, ingredient_id):
        """Copy an ingredient under a new id, directly after the original."""
        index = self._index_of(ingredient_id)
        copy = replace(self.ingredients[index], id=self._new_id())
        self.ingredients.insert(index + 1, copy)
        self._notify('success', 'Ingredient duplicated')
        return copy

    def clear_all(self):
        self.ingredients = []
        self.servings = DEFAULT_SERVINGS
        self.batch_multiplier = DEFAULT_BATCH_MULTIPLIER

    # ---- recipe-level numbers ----

    def set_servings(self, servings):
        self.servings = safe_int(servings, default=DEFAULT_SERVINGS,
                                 min_val=MIN_SERVINGS, max_val=MAX_SERVINGS)

    def set_batch_multiplier(self, batch_multiplier):
        self.batch_multiplier = safe_int(batch_multiplier, default=DEFAULT_BATCH_MULTIPLIER,
                                         min_val=MIN_BATCH_MULTIPLIER, max_val=MAX_BATCH_MULTIPLIER)

    @property
    def total_cost(self):
        return sum(line.calculated_cost for line in self.ingredients)

    def summary(self):
        return summarize(self.ingredients, self.servings, self.batch_multiplier)

    # ---- records ----

    def load(self, record):
        """
        Replace the working set with a stored recipe record.

        Stored costs are not trusted: every line is recomputed.
        """
        self.name = str(record.get('name') or '')
        self.set_servings(record.get('servings'))
        self.set_batch_multiplier(record.get('batchMultiplier'))
        self.ingredients = []
        seen = set()
        for item in record.get('ingredients') or []:
            if not isinstance(item, dict):
                logger.warning('Skipping malformed ingredient entry: %r', item)
                continue
            ingredient_id = str(item.get('id') or '')
            if not ingredient_id or ingredient_id in seen:
                ingredient_id = self._new_id()
            self._issued_ids.add(ingredient_id)
            seen.add(ingredient_id)
            line = IngredientLine.from_record(item, ingredient_id)
            self._recompute(line)
            self.ingredients.append(line)
        return self

    def to_record(self):
        return {
            'name': self.name,
            'ingredients': [line.to_record() for line in self.ingredients],
            'servings': self.servings,
            'batchMultiplier': self.batch_multiplier,
        }

    @classmethod
    def from_record(cls, record, **kwargs):
        return cls(**kwargs).load(record)
