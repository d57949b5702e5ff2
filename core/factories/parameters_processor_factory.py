# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 10:35:51 2026
"""

# factories/parameters_processor_factory.py

import os
from typing import Optional

from processors.parameters_processor import ParametersProcessor
from readers.json_parameter_reader import JSONParameterReader
from readers.hdf5_parameter_reader import HDF5ParameterReader
from parsers.scan_parameter_parser import ScanParameterParser
from utilities.exceptions import ScanConfigurationError

class ParametersProcessorFactory:
    def create_processor(self,
                         source: Optional[str] = None,
                         source_type: Optional[str] = None,
                         overrides: Optional[dict] = None) -> ParametersProcessor:
        if source is None:
            reader = None
        else:
            source_type = source_type or self._source_type(source)
            if source_type == 'file':
                reader = JSONParameterReader(source)
            elif source_type == 'hdf5':
                reader = HDF5ParameterReader(source)
            else:
                raise ScanConfigurationError(f"Unsupported source type: {source_type}")

        return ParametersProcessor(reader, ScanParameterParser(), overrides)

    def _source_type(self, source: str) -> str:
        ext = os.path.splitext(source)[1].lower()
        return 'hdf5' if ext in ('.h5', '.hdf5') else 'file'

class ParametersProcessorFactoryProvider:
    _factory = ParametersProcessorFactory()

    @staticmethod
    def get_factory() -> ParametersProcessorFactory:
        return ParametersProcessorFactoryProvider._factory
