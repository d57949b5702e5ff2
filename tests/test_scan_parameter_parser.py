import json

import pytest

from factories.parameters_processor_factory import ParametersProcessorFactoryProvider
from parsers.scan_parameter_parser import ScanParameterParser
from utilities.exceptions import ScanConfigurationError


def parse(**kwargs):
    return ScanParameterParser().parse(kwargs)


def test_defaults_for_a_line_scan():
    params = parse(element='Fe', edge='k', start=[0, 0, 0], end=[1, 1, 1])
    assert params['element'] == 'fe'
    assert params['num_points'] == 10
    assert params['fwhm'] == 3.0
    assert params['limit_dist'] == 4.0
    assert params['output'] == 'output.dat'
    assert params['mesh'] is None


def test_mesh_and_line_are_mutually_exclusive():
    with pytest.raises(ScanConfigurationError, match="mutually exclusive"):
        parse(element='fe', edge='k', mesh=[2, 2, 2], start=[0, 0, 0], end=[1, 1, 1])


@pytest.mark.parametrize("kwargs, message", [
    ({'edge': 'k', 'mesh': [1, 1, 1]}, "-elem"),
    ({'element': 'fe', 'mesh': [1, 1, 1]}, "-edge"),
    ({'element': 'fe', 'edge': 'k'}, "-mesh"),
    ({'element': 'fe', 'edge': 'k', 'start': [0, 0, 0], 'end': [1, 0, 0], 'num_points': 1}, "at least 2"),
    ({'element': 'fe', 'edge': 'k', 'mesh': [1, 0, 1]}, "positive"),
    ({'element': 'fe', 'edge': 'k', 'mesh': [1, 1, 1], 'fwhm': 0}, "FWHM"),
    ({'element': 'fe', 'spectra_source': 'pdos', 'pdos_file': 'p.dat', 'mesh': [1, 1, 1]}, "-emin"),
    ({'element': 'fe', 'edge': 'k', 'mesh': [1, 1, 1], 'colour': 'red'}, "Unknown"),
])
def test_invalid_configurations(kwargs, message):
    with pytest.raises(ScanConfigurationError, match=message):
        ScanParameterParser().parse(kwargs)


def test_pdos_mode_does_not_need_an_edge():
    params = parse(element='fe', spectra_source='pdos', pdos_file='p.dat',
                   min_energy=1, max_energy=5, mesh=[1, 1, 1])
    assert params['min_energy'] == 1.0 and params['max_energy'] == 5.0


def test_command_line_overrides_parameter_file(tmp_path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({'element': 'o', 'edge': 'k', 'mesh': [3, 3, 3], 'fwhm': 2.0}))
    proc = ParametersProcessorFactoryProvider.get_factory().create_processor(
        str(path), overrides={'element': 'fe', 'fwhm': None})
    proc.process()
    params = proc.get_parameters()
    assert params['element'] == 'fe'
    assert params['fwhm'] == 2.0
    assert params['mesh'] == [3, 3, 3]
