import pytest

from services.conversion import IncompatibleUnitsError
from services.cost import DivisionByZeroError, compute_cost, cost_per_base_unit, derive_cost


def test_half_package_same_unit():
    assert derive_cost(8, 'oz', 1.49, 16, 'oz') == pytest.approx(0.745)


def test_full_package_across_units():
    assert derive_cost(1, 'lb', 1.49, 16, 'oz') == pytest.approx(1.49, rel=1e-4)


def test_volume_into_larger_package_unit():
    # 2 tbsp of a 1 L bottle costing $6
    expected = 2 * 14.7868 / 1000 * 6
    assert derive_cost(2, 'tbsp', 6.0, 1, 'L') == pytest.approx(expected)


def test_no_rounding_applied():
    cost = derive_cost(1, 'oz', 1.0, 3, 'oz')
    assert cost == pytest.approx(1 / 3)
    assert cost != round(cost, 2)


def test_incompatible_units_raise():
    with pytest.raises(IncompatibleUnitsError):
        derive_cost(1, 'cup', 2.0, 1, 'lb')


@pytest.mark.parametrize('size', [0, -1])
def test_zero_package_size_raises(size):
    with pytest.raises(DivisionByZeroError):
        derive_cost(1, 'cup', 2.0, size, 'cup')


def test_division_by_zero_error_is_zero_division():
    assert issubclass(DivisionByZeroError, ZeroDivisionError)


@pytest.mark.parametrize('used, price, size', [
    (0, 1.49, 16),
    (8, 0, 16),
    (8, 1.49, 0),
    (-1, 1.49, 16),
])
def test_compute_cost_failed_precondition_is_silent_zero(used, price, size):
    result = compute_cost(used, 'oz', price, size, 'oz')
    assert result.cost == 0
    assert result.warning is None


def test_compute_cost_unit_mismatch_warns():
    result = compute_cost(1, 'cup', 2.0, 1, 'lb')
    assert result.cost == 0
    assert 'cup' in result.warning and 'lb' in result.warning


def test_compute_cost_success():
    result = compute_cost(8, 'oz', 1.49, 16, 'oz')
    assert result.cost == pytest.approx(0.745)
    assert result.warning is None


def test_cost_per_base_unit():
    assert cost_per_base_unit(4.54, 1, 'kg') == pytest.approx(0.00454)
    with pytest.raises(DivisionByZeroError):
        cost_per_base_unit(4.54, 0, 'kg')


def test_overflowing_cost_is_absorbed():
    assert compute_cost(1e300, 'kg', 1e300, 1, 'g') == (0.0, None)
