# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 09:40:27 2026
"""

# parsers/scan_parameter_parser.py

from interfaces.parameter_interfaces import IParameterParser
from utilities.exceptions import ScanConfigurationError

DEFAULT_PARAMETERS = {
    'structure': 'olcao.skl',
    'element': None,
    'edge': None,
    'start': None,
    'end': None,
    'num_points': 10,
    'mesh': None,
    'fwhm': 3.0,
    'limit_dist': 4.0,
    'output': 'output.dat',
    'spectra_source': 'file',
    'spectra_dir': '.',
    'spectrum_template': None,
    'pdos_file': None,
    'min_energy': None,
    'max_energy': None,
    'num_energy_points': None,
    'num_chunks': 1,
    'hdf5_output': None,
}

class ScanParameterParser(IParameterParser):
    """
    Applies defaults to a raw parameter dict and rejects inconsistent runs.

    Nothing here touches the file system, so every configuration error is
    raised before any input is read.
    """

    def parse(self, data: dict) -> dict:
        unknown = sorted(set(data) - set(DEFAULT_PARAMETERS))
        if unknown:
            raise ScanConfigurationError(f"Unknown parameters: {', '.join(unknown)}")

        params = dict(DEFAULT_PARAMETERS)
        params.update({k: v for k, v in data.items() if v is not None})

        if not params['element']:
            raise ScanConfigurationError("The target element (-elem) is required.")
        params['element'] = str(params['element']).lower()

        if params['spectra_source'] not in ('file', 'pdos'):
            raise ScanConfigurationError(f"Unsupported spectrum source: {params['spectra_source']}")
        if params['spectra_source'] == 'file' and not params['edge']:
            raise ScanConfigurationError("The target edge (-edge) is required.")
        if params['spectra_source'] == 'pdos':
            if not params['pdos_file']:
                raise ScanConfigurationError("PDOS mode needs the table file (-pdos).")
            if params['min_energy'] is None or params['max_energy'] is None:
                raise ScanConfigurationError("PDOS mode needs both -emin and -emax.")
            params['min_energy'] = float(params['min_energy'])
            params['max_energy'] = float(params['max_energy'])
            if params['min_energy'] >= params['max_energy']:
                raise ScanConfigurationError("-emin must be below -emax.")

        self._parse_geometry(params)

        params['fwhm'] = float(params['fwhm'])
        params['limit_dist'] = float(params['limit_dist'])
        if params['fwhm'] <= 0:
            raise ScanConfigurationError(f"Gaussian FWHM must be positive (got {params['fwhm']}).")
        if params['limit_dist'] <= 0:
            raise ScanConfigurationError(f"Cutoff radius must be positive (got {params['limit_dist']}).")

        params['num_chunks'] = self._as_int(params['num_chunks'], 'num_chunks')
        if params['num_chunks'] < 1:
            raise ScanConfigurationError("The number of chunks must be at least 1.")
        if params['num_energy_points'] is not None:
            params['num_energy_points'] = self._as_int(params['num_energy_points'], 'num_energy_points')
            if params['num_energy_points'] < 2:
                raise ScanConfigurationError("At least 2 energy points are needed.")
        return params

    def _parse_geometry(self, params: dict):
        mesh, start, end = params['mesh'], params['start'], params['end']
        if mesh is not None and (start is not None or end is not None):
            raise ScanConfigurationError("Mesh and line scans are mutually exclusive; give either -mesh or -s/-e.")

        if mesh is not None:
            mesh = [self._as_int(n, 'mesh') for n in self._triple(mesh, 'mesh')]
            if any(n < 1 for n in mesh):
                raise ScanConfigurationError(f"Mesh counts must be positive (got {mesh}).")
            params['mesh'] = mesh
            return

        if start is None or end is None:
            raise ScanConfigurationError("Give either -mesh na nb nc or both -s x y z and -e x y z.")
        params['start'] = [float(v) for v in self._triple(start, 'start')]
        params['end'] = [float(v) for v in self._triple(end, 'end')]
        params['num_points'] = self._as_int(params['num_points'], 'num_points')
        if params['num_points'] < 2:
            raise ScanConfigurationError(
                f"A line scan needs at least 2 points (got {params['num_points']}).")

    def _triple(self, value, name):
        value = list(value)
        if len(value) != 3:
            raise ScanConfigurationError(f"'{name}' needs three values (got {value}).")
        return value

    def _as_int(self, value, name) -> int:
        try:
            as_float = float(value)
        except (TypeError, ValueError):
            raise ScanConfigurationError(f"'{name}' must be an integer (got {value!r}).")
        if as_float != int(as_float):
            raise ScanConfigurationError(f"'{name}' must be an integer (got {value!r}).")
        return int(as_float)
