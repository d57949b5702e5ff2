import numpy as np
import pytest

from calculators.cell_calculator import CellCalculator
from functions.coordinate_transforms import angstrom_to_fractional, fractional_to_angstrom
from utilities.exceptions import ScanConfigurationError


def test_cubic_cell_vectors_volume_and_widths():
    calc = CellCalculator()
    vectors = calc.calculate_vectors([4.0, 4.0, 4.0, 90.0, 90.0, 90.0])
    assert np.array_equal(vectors, np.diag([4.0, 4.0, 4.0]))
    assert calc.calculate_metric(vectors)['volume'] == pytest.approx(64.0)
    assert np.allclose(calc.calculate_widths(vectors), [4.0, 4.0, 4.0])


def test_hexagonal_cell_widths():
    calc = CellCalculator()
    vectors = calc.calculate_vectors([3.0, 3.0, 5.0, 90.0, 90.0, 120.0])
    assert np.allclose(vectors[1], [-1.5, 3.0 * np.sqrt(3) / 2, 0.0])
    widths = calc.calculate_widths(vectors)
    assert np.allclose(widths, [3.0 * np.sin(np.radians(120)), 3.0 * np.sin(np.radians(120)), 5.0])


def test_wrong_parameter_count_and_degenerate_cell():
    calc = CellCalculator()
    with pytest.raises(ValueError):
        calc.calculate_vectors([1.0, 2.0])
    with pytest.raises(ValueError):
        calc.calculate_metric(np.array([[1.0, 0, 0], [2.0, 0, 0], [0, 0, 1.0]]))


def test_fractional_cartesian_conversion_is_consistent():
    vectors = CellCalculator().calculate_vectors([3.0, 4.0, 5.0, 80.0, 95.0, 110.0])
    frac = np.array([[0.1, 0.2, 0.3], [0.5, 0.5, 0.5]])
    cart = fractional_to_angstrom(frac, vectors)
    assert np.allclose(angstrom_to_fractional(cart, vectors), frac)


@pytest.mark.parametrize("cell_params", [
    [10.0, 10.0, 10.0, 90.0, 90.0, 0.0],
    [10.0, 10.0, 10.0, 120.0, 120.0, 120.0],
    [10.0, 10.0, 10.0, 170.0, 10.0, 90.0],
])
def test_impossible_cells_are_configuration_errors(cell_params):
    with pytest.raises(ScanConfigurationError):
        CellCalculator().calculate_vectors(cell_params)


def test_coplanar_vectors_are_configuration_errors():
    with pytest.raises(ScanConfigurationError, match="degenerate"):
        CellCalculator().calculate_metric(np.array([[1.0, 0, 0], [0, 1.0, 0], [1.0, 1.0, 0]]))
