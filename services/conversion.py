"""
Unit Conversion Service

Category lookup and within-category conversion via each category's base unit.
"""

from constants import UNIT_CATEGORY, CONVERSION_TO_BASE


class IncompatibleUnitsError(ValueError):
    """Raised when two units belong to different categories."""

    def __init__(self, from_unit, to_unit):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f'Cannot convert from {from_unit} to {to_unit} - different unit types'
        )


def category_of(unit):
    """Return the category of a unit tag, or None for an unknown tag."""
    return UNIT_CATEGORY.get(unit)


def can_convert(from_unit, to_unit):
    """
    Check whether two units share a category.

    Unknown tags have no category and never convert, not even to themselves.
    """
    from_category = category_of(from_unit)
    if from_category is None:
        return False
    return from_category == category_of(to_unit)


def convert(value, from_unit, to_unit):
    """Convert quantity from one unit to another."""
    if not can_convert(from_unit, to_unit):
        raise IncompatibleUnitsError(from_unit, to_unit)

    # x * f / f can drift by one ulp
    if from_unit == to_unit:
        return value

    # Convert: from_unit -> base -> to_unit
    base_value = value * CONVERSION_TO_BASE[from_unit]
    return base_value / CONVERSION_TO_BASE[to_unit]


def to_base(value, unit):
    """Express a quantity in its category's base unit (ml, g or unit)."""
    if category_of(unit) is None:
        raise IncompatibleUnitsError(unit, unit)
    return value * CONVERSION_TO_BASE[unit]
