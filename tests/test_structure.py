import numpy as np
import pytest

from factories.configuration_processor_factory import ConfigurationProcessorFactoryProvider
from utilities.exceptions import ScanConfigurationError
from utilities.utils import determine_configuration_file_type

RMC6F = """(Version 6f format configuration file)
Metadata owner:     test
Number of atoms:    2
Supercell dimensions:   1  1  1
Cell (Ang/deg):   6.0  6.0  8.0  90.0  90.0  90.0
Atoms:
     1   Fe  [1]   0.000000  0.000000  0.000000     1   0   0   0
     2   O   [1]   0.500000  0.500000  0.250000     2   0   0   0
"""

CARTESIAN_SKELETON = """title
cartesian input
end
cell
5.0 5.0 5.0 90.0 90.0 90.0
cartesian 2
ti 0.0 0.0 0.0
O3 2.5 2.5 1.0
space 1_a
supercell 1 1 1
full
"""


def process(path):
    proc = ConfigurationProcessorFactoryProvider.get_factory(
        determine_configuration_file_type(path)).create_processor(path)
    proc.process()
    return proc


def test_skeleton_fractional_file(skeleton_file):
    proc = process(skeleton_file)
    atoms = proc.get_atoms()
    assert atoms['atomNumber'].tolist() == [1, 2, 3]
    assert atoms['element'].tolist() == ['fe', 'fe', 'o']
    assert atoms['species'].tolist() == [1, 1, 2]
    assert np.allclose(proc.get_vectors(), np.eye(3) * 10.0)
    assert np.allclose(proc.get_cartesian_coordinates()[1], [5.0, 5.0, 5.0])
    assert proc.get_elements().tolist() == ['fe', 'fe', 'o']
    assert proc.get_atom_ids().tolist() == [1, 2, 3]


def test_skeleton_cartesian_file(tmp_path):
    path = tmp_path / "cart.skl"
    path.write_text(CARTESIAN_SKELETON)
    proc = process(str(path))
    atoms = proc.get_atoms()
    assert atoms['element'].tolist() == ['ti', 'o']
    assert atoms['species'].tolist() == [1, 3]
    assert np.allclose(atoms[['x', 'y', 'z']].to_numpy()[1], [0.5, 0.5, 0.2])
    assert np.allclose(proc.get_cartesian_coordinates()[1], [2.5, 2.5, 1.0])


def test_rmc6f_file(tmp_path):
    path = tmp_path / "model.rmc6f"
    path.write_text(RMC6F)
    proc = process(str(path))
    atoms = proc.get_atoms()
    assert atoms['element'].tolist() == ['fe', 'o']
    assert atoms['species'].tolist() == [1, 2]
    assert np.allclose(proc.get_cartesian_coordinates()[1], [3.0, 3.0, 2.0])
    assert proc.get_metric()['volume'] == pytest.approx(288.0)


def test_unsupported_extension():
    with pytest.raises(ScanConfigurationError):
        determine_configuration_file_type("structure.cif")


def test_missing_structure_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="nothing.skl"):
        process(str(tmp_path / "nothing.skl"))


def test_skeleton_without_cell_block(tmp_path):
    path = tmp_path / "bad.skl"
    path.write_text("fractional 1\nfe 0 0 0\n")
    with pytest.raises(ScanConfigurationError, match="cell"):
        process(str(path))


@pytest.mark.parametrize("content, message", [
    ("cell\n10 10 10 90 90 90\nfractional 1\nfe1 0.0 abc 0.0\n", "coordinates"),
    ("cell\n10 10 10 90 90 0\nfractional 1\nfe1 0.0 0.0 0.0\n", "gamma"),
    ("cell\n10 10 10 90 90 90\nfractional 1\nfe1 0.0 0.0 0.0\nsupercell 1 x 1\n", "supercell"),
])
def test_bad_skeleton_content_is_a_configuration_error(tmp_path, content, message):
    path = tmp_path / "bad.skl"
    path.write_text(content)
    with pytest.raises(ScanConfigurationError, match=message):
        process(str(path))


def test_bad_rmc6f_atom_line_is_a_configuration_error(tmp_path):
    path = tmp_path / "bad.rmc6f"
    path.write_text(RMC6F.replace("0.500000  0.500000  0.250000", "0.500000  half  0.250000"))
    with pytest.raises(ScanConfigurationError, match="RMC6f"):
        process(str(path))


def test_bad_rmc6f_header_value_is_a_configuration_error(tmp_path):
    path = tmp_path / "bad.rmc6f"
    path.write_text(RMC6F.replace("Number of atoms:    2", "Number of atoms:    two"))
    with pytest.raises(ScanConfigurationError, match="Number of atoms"):
        process(str(path))
