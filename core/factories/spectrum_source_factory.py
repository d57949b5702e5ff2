# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 17:20:48 2026
"""

# factories/spectrum_source_factory.py

from interfaces.spectrum_source import ISpectrumSource
from readers.file_spectrum_source import FileSpectrumSource
from readers.column_spectrum_source import ColumnSpectrumSource
from utilities.exceptions import ScanConfigurationError

class SpectrumSourceFactory:
    @staticmethod
    def create_source(parameters: dict) -> ISpectrumSource:
        source_type = parameters.get('spectra_source', 'file')
        if source_type == 'file':
            return FileSpectrumSource(
                directory=parameters.get('spectra_dir', '.'),
                element=parameters['element'],
                edge=parameters['edge'],
                template=parameters.get('spectrum_template'),
            )
        elif source_type == 'pdos':
            return ColumnSpectrumSource(
                table_path=parameters['pdos_file'],
                element=parameters['element'],
                min_energy=parameters['min_energy'],
                max_energy=parameters['max_energy'],
                num_points=parameters.get('num_energy_points'),
            )
        else:
            raise ScanConfigurationError(f"Unsupported spectrum source: {source_type}")
