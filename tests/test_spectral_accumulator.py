import logging
from math import log

import numpy as np
import pytest

from calculators.distance_calculator import DistanceCalculator
from calculators.gaussian_weight_calculator import GaussianWeightCalculator
from data_structures.extended_atoms import ExtendedAtoms
from data_structures.spectrum import SpectralAxis
from processors.spectral_accumulator import SpectralAccumulator, accumulate_point
from utilities.exceptions import SpectrumMismatchError

from conftest import make_atoms, make_points

AXIS = SpectralAxis(0.0, 3.0, 4)
SPECTRA = np.array([
    [1.0, 2.0, 3.0, 4.0],
    [4.0, 3.0, 2.0, 1.0],
    [100.0, 100.0, 100.0, 100.0],
])
INDEX = {1: 0, 2: 1, 3: 2}


def run(points, atoms, **kwargs):
    accumulator = SpectralAccumulator(GaussianWeightCalculator(3.0), **kwargs)
    return accumulator.accumulate(points, atoms, AXIS, SPECTRA, INDEX)


def test_three_atoms_two_inside_cutoff():
    atoms = make_atoms([[0.5, 0.0, 0.0], [0.0, 1.0, 0.0], [10.0, 0.0, 0.0]], [1, 2, 3])
    result = run(make_points([[0.0, 0.0, 0.0]]), atoms, limit_dist=4.0)

    alpha = 4.0 * log(2.0) / 9.0
    w1, w2 = np.exp(-alpha * 0.25), np.exp(-alpha * 1.0)
    expected = (w1 * SPECTRA[0] + w2 * SPECTRA[1]) / (w1 + w2)
    assert result.num_contributors.tolist() == [2]
    assert np.allclose(result.intensities[0], expected, atol=1e-6)


def test_single_atom_at_the_point_reproduces_its_spectrum():
    atoms = make_atoms([[1.0, 1.0, 1.0], [9.0, 9.0, 9.0]], [2, 3])
    result = run(make_points([[1.0, 1.0, 1.0]]), atoms)
    assert np.array_equal(result.intensities[0], SPECTRA[1])


def test_equidistant_atoms_are_averaged():
    atoms = make_atoms([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]], [1, 2])
    point = accumulate_point(np.array([1.0, 1.0]), np.array([0, 1]), SPECTRA,
                             GaussianWeightCalculator(3.0), 4.0)
    assert np.allclose(point.weights, [0.5, 0.5])
    result = run(make_points([[0.0, 0.0, 0.0]]), atoms)
    assert np.allclose(result.intensities[0], (SPECTRA[0] + SPECTRA[1]) / 2)


def test_weights_of_a_point_sum_to_one_and_decay():
    distances = np.array([3.5, 0.2, 2.0, 4.5, 1.1])
    point = accumulate_point(distances, np.array([0, 1, 2, 0, 1]), SPECTRA,
                             GaussianWeightCalculator(3.0), 4.0)
    assert point.contributors.tolist() == [0, 1, 2, 4]
    assert abs(point.weights.sum() - 1.0) < 1e-9
    order = np.argsort(distances[point.contributors])
    assert np.all(np.diff(point.weights[order]) <= 0)


def test_point_without_atoms_is_flagged(caplog):
    atoms = make_atoms([[0.0, 0.0, 0.0]], [1])
    points = make_points([[0.0, 0.0, 0.0], [0.0, 0.0, 8.0]])
    with caplog.at_level(logging.WARNING):
        result = run(points, atoms)
    assert result.has_contribution.tolist() == [True, False]
    assert np.array_equal(result.intensities[1], np.zeros(4))
    assert result.empty_point_indices().tolist() == [1]
    assert any("no atom within" in r.message for r in caplog.records)


def test_chunking_keeps_point_order():
    rng = np.random.default_rng(7)
    atoms = make_atoms(rng.uniform(0, 6, size=(12, 3)), rng.integers(1, 4, size=12))
    points = make_points(rng.uniform(0, 6, size=(23, 3)))
    serial = run(points, atoms, num_chunks=1)
    chunked = run(points, atoms, num_chunks=4)
    assert np.allclose(serial.intensities, chunked.intensities, rtol=0, atol=1e-12)
    assert serial.num_contributors.tolist() == chunked.num_contributors.tolist()


def test_missing_spectrum_for_an_atom_is_fatal():
    atoms = make_atoms([[0.0, 0.0, 0.0]], [9])
    with pytest.raises(SpectrumMismatchError):
        run(make_points([[0.0, 0.0, 0.0]]), atoms)


def test_atom_order_does_not_change_the_result():
    rng = np.random.default_rng(11)
    atoms = make_atoms(rng.uniform(0, 6, size=(15, 3)), rng.integers(1, 4, size=15))
    points = make_points(rng.uniform(0, 6, size=(30, 3)))
    order = rng.permutation(atoms.num_atoms)
    shuffled = ExtendedAtoms(
        positions=atoms.positions[order],
        central_ids=atoms.central_ids[order],
        elements=atoms.elements[order],
        species=atoms.species[order],
        translations=atoms.translations[order],
    )
    reference = run(points, atoms)
    permuted = run(points, shuffled)
    assert np.allclose(reference.intensities, permuted.intensities, rtol=0, atol=1e-12)
    assert reference.num_contributors.tolist() == permuted.num_contributors.tolist()


@pytest.mark.parametrize("num_chunks", [1, 3])
def test_distance_blocks_stay_within_budget(monkeypatch, num_chunks):
    rng = np.random.default_rng(3)
    atoms = make_atoms(rng.uniform(0, 6, size=(40, 3)), rng.integers(1, 4, size=40))
    points = make_points(rng.uniform(0, 6, size=(200, 3)))
    reference = run(points, atoms)

    shapes = []
    build = DistanceCalculator.build

    def recording_build(self, points_xyz, atoms_xyz):
        table = build(self, points_xyz, atoms_xyz)
        shapes.append(table.shape)
        return table

    monkeypatch.setattr(DistanceCalculator, 'build', recording_build)
    blocked = run(points, atoms, num_chunks=num_chunks, max_table_entries=400)

    assert sum(rows for rows, _ in shapes) == 200
    assert all(rows * cols <= 400 for rows, cols in shapes)
    assert np.allclose(reference.intensities, blocked.intensities, rtol=0, atol=1e-12)
