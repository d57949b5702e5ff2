import numpy as np
import pytest

from data_structures.extended_atoms import ExtendedAtoms
from data_structures.sample_points import SamplePoints


CUBIC_SKELETON = """title
iron oxide test cell
end
cell
10.0 10.0 10.0 90.0 90.0 90.0
fractional 3
fe1 0.00 0.00 0.00
fe1 0.50 0.50 0.50
o2 0.25 0.25 0.25
space 1_a
supercell 1 1 1
full
"""


def write_spectrum(path, energies, total):
    """Per-atom spectrum file: energy, total, x, y, z."""
    with open(path, 'w') as fh:
        fh.write("# test spectrum\n")
        fh.write("Energy Total X Y Z\n")
        for e, t in zip(energies, total):
            fh.write(f"{e:12.4f}{t:12.6f}{t / 3:12.6f}{t / 3:12.6f}{t / 3:12.6f}\n")
    return path


def make_points(coordinates, mode='line'):
    coordinates = np.asarray(coordinates, dtype=float)
    return SamplePoints(coordinates=coordinates, fractional=coordinates / 10.0, mode=mode)


def make_atoms(positions, central_ids, element='fe'):
    positions = np.asarray(positions, dtype=float)
    n = positions.shape[0]
    return ExtendedAtoms(
        positions=positions,
        central_ids=np.asarray(central_ids),
        elements=np.array([element] * n),
        species=np.ones(n, dtype=int),
        translations=np.zeros((n, 3), dtype=int),
    )


@pytest.fixture
def skeleton_file(tmp_path):
    path = tmp_path / "cell.skl"
    path.write_text(CUBIC_SKELETON)
    return str(path)


@pytest.fixture
def spectra_dir(tmp_path):
    directory = tmp_path / "spectra"
    directory.mkdir()
    energies = np.linspace(7100.0, 7110.0, 6)
    write_spectrum(directory / "fe1_k.plot", energies, np.arange(6, dtype=float))
    write_spectrum(directory / "fe2_k.plot", energies, np.arange(6, dtype=float)[::-1])
    return str(directory)
