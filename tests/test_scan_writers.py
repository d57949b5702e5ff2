import os
import stat

import numpy as np
import pytest

from data_structures.sample_points import SamplePoints
from data_structures.spectrum import ScanResult, SpectralAxis
from factories.scan_writer_factory import ScanWriterFactory
from data_storage.line_scan_writer import LineScanWriter
from data_storage.opendx_scan_writer import OpenDXScanWriter
from processors.mesh_point_processor import MeshPointProcessor
from utilities.exceptions import ScanConfigurationError

from conftest import make_points

VECTORS = np.diag([4.0, 6.0, 8.0])


def mesh_result():
    proc = MeshPointProcessor([2, 2, 1], VECTORS)
    proc.process_parameters()
    intensities = np.arange(12, dtype=float).reshape(4, 3)
    has_contribution = np.array([True, True, False, True])
    intensities[2] = 0.0
    return ScanResult(proc.get_point_data(), SpectralAxis(1.0, 2.0, 3), intensities,
                      has_contribution, has_contribution.astype(int))


def line_result():
    intensities = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    has_contribution = np.ones(3, dtype=bool)
    return ScanResult(make_points([[0, 0, 0], [1, 0, 0], [2, 0, 0]]), SpectralAxis(0.0, 1.0, 2),
                      intensities, has_contribution, np.ones(3, dtype=int))


def data_values(lines):
    return [float(v) for line in lines for v in line.split()]


def test_opendx_header_data_and_trailer(tmp_path):
    path = tmp_path / "mesh.dx"
    OpenDXScanWriter(VECTORS).write(mesh_result(), str(path))
    lines = path.read_text().splitlines()

    assert lines[0] == "# spectra scan: 3 energy points x 4 space points"
    assert "# points without contributing atoms: 1" in lines
    assert "# empty point indices: 2" in lines
    assert "object 1 class gridpositions counts 2 2 1" in lines
    assert "delta 2.00000000 0.00000000 0.00000000" in lines
    assert "delta 0.00000000 3.00000000 0.00000000" in lines
    assert "delta 0.00000000 0.00000000 8.00000000" in lines
    header_end = lines.index("object 3 class array type float rank 1 shape 3 items 4 data follows")
    trailer_start = lines.index('attribute "dep" string "positions"')
    data = lines[header_end + 1:trailer_start]
    assert len(data) == 3
    assert all(len(line) == 80 for line in data[:-1])
    assert data_values(data) == [0, 1, 2, 3, 4, 5, 0, 0, 0, 9, 10, 11]
    assert lines[-1] == "end"
    assert 'component "data" value 3' in lines


def test_line_table_is_energy_major(tmp_path):
    path = tmp_path / "line.dat"
    LineScanWriter(VECTORS).write(line_result(), str(path))
    lines = path.read_text().splitlines()

    assert lines[0] == "NUM_POINTS 3"
    assert lines[1] == "LATTICE"
    assert "NUM_ENERGY_POINTS 2" in lines
    assert "NUM_EMPTY_POINTS 0" in lines
    assert not any(line.startswith("EMPTY_POINTS") for line in lines)
    data = lines[lines.index("NUM_EMPTY_POINTS 0") + 1:]
    assert data[0] == "      1.00000000      3.00000000      5.00000000      2.00000000      4.00000000"
    assert data_values(data) == [1, 3, 5, 2, 4, 6]


def test_line_table_of_a_mesh_lists_mesh_counts(tmp_path):
    path = tmp_path / "mesh.dat"
    LineScanWriter(VECTORS).write(mesh_result(), str(path))
    lines = path.read_text().splitlines()
    assert lines[:2] == ["NUM_POINTS 4", "MESH 2 2 1"]
    assert "NUM_EMPTY_POINTS 1" in lines
    assert "EMPTY_POINTS 2" in lines
    data = lines[lines.index("EMPTY_POINTS 2") + 1:]
    assert data_values(data)[:4] == [0, 3, 0, 9]


def test_opendx_needs_a_mesh(tmp_path):
    path = tmp_path / "line.dx"
    with pytest.raises(ScanConfigurationError):
        OpenDXScanWriter(VECTORS).write(line_result(), str(path))
    assert not path.exists()
    assert list(tmp_path.iterdir()) == []


def test_writer_factory():
    assert isinstance(ScanWriterFactory.create_writer('mesh', VECTORS), OpenDXScanWriter)
    assert isinstance(ScanWriterFactory.create_writer('line', VECTORS), LineScanWriter)
    with pytest.raises(ScanConfigurationError):
        ScanWriterFactory.create_writer('plane', VECTORS)


def test_result_shape_must_match_points_and_axis():
    with pytest.raises(ValueError):
        ScanResult(make_points([[0, 0, 0]]), SpectralAxis(0.0, 1.0, 3), np.zeros((1, 2)),
                   np.ones(1, dtype=bool), np.ones(1, dtype=int))


@pytest.mark.skipif(os.name != 'posix', reason="permission bits are POSIX only")
def test_written_files_follow_the_umask(tmp_path):
    path = tmp_path / "line.dat"
    previous = os.umask(0o022)
    try:
        LineScanWriter(VECTORS).write(line_result(), str(path))
    finally:
        os.umask(previous)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644
