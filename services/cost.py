"""
Cost Calculation Service

Functions for deriving the cost of the quantity a recipe uses
from the price and size of the package it was bought in.
"""

import math
from collections import namedtuple

from .conversion import IncompatibleUnitsError, can_convert, convert, to_base


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a package has no size to divide its cost by."""

    def __init__(self, package_size):
        self.package_size = package_size
        super().__init__(f'Package size must be greater than zero (got {package_size})')


# Outcome of a guarded cost computation: warning is None unless units clashed
CostResult = namedtuple('CostResult', ['cost', 'warning'])


def derive_cost(used_quantity, used_unit, package_cost, package_size, package_unit):
    """
    Calculate the cost of the quantity used.

    The used quantity is converted into package units and multiplied by
    the package cost per package unit. No rounding is applied.

    Args:
        used_quantity: How much of the ingredient the recipe consumes
        used_unit: Unit tag of used_quantity
        package_cost: Price paid for one package
        package_size: Size of the package, in package_unit
        package_unit: Unit tag of package_size

    Returns:
        Cost attributable to used_quantity, in the currency of package_cost

    Raises:
        IncompatibleUnitsError: used_unit and package_unit differ in category
        DivisionByZeroError: package_size is zero or negative
    """
    if package_size <= 0:
        raise DivisionByZeroError(package_size)

    used_in_package_units = convert(used_quantity, used_unit, package_unit)
    cost_per_package_unit = package_cost / package_size
    return used_in_package_units * cost_per_package_unit


def cost_per_base_unit(package_cost, package_size, package_unit):
    """Return the package price per ml, per g or per unit."""
    base_quantity = to_base(package_size, package_unit)
    if base_quantity <= 0:
        raise DivisionByZeroError(package_size)
    return package_cost / base_quantity


def incompatible_units_message(used_unit, package_unit):
    return (f'Cannot convert {used_unit} to {package_unit}. Please use compatible '
            f'units (e.g., both weight or both volume).')


def compute_cost(used_quantity, used_unit, package_cost, package_size, package_unit):
    """
    Cost with every precondition checked; never raises.

    Any non-positive numeric input gives a zero cost and no warning, since
    that is the normal state of a half-filled ingredient. A unit mismatch
    gives a zero cost and a warning message for the user.
    """
    if not (used_quantity > 0 and package_cost > 0 and package_size > 0):
        return CostResult(0.0, None)

    if not can_convert(used_unit, package_unit):
        return CostResult(0.0, incompatible_units_message(used_unit, package_unit))

    try:
        cost = derive_cost(used_quantity, used_unit, package_cost, package_size, package_unit)
    except IncompatibleUnitsError as e:
        return CostResult(0.0, incompatible_units_message(e.from_unit, e.to_unit))
    except DivisionByZeroError:
        return CostResult(0.0, None)

    # Huge inputs can overflow the product
    if not math.isfinite(cost):
        return CostResult(0.0, None)

    return CostResult(cost, None)
