# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 09:31:08 2026
"""
# utilities/rmc6f_metadata_extractor.py

import re
from typing import List, Dict
import numpy as np
from interfaces.base_interfaces import IMetadataExtractor
from utilities.exceptions import ScanConfigurationError

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

class RMC6fMetadataExtractor(IMetadataExtractor):
    """
    Reads the 'Key: values' header of an RMC6f file. Only the keys the scan
    uses are kept; the cell line is mandatory downstream.
    """

    def extract(self, header_lines: List[str]) -> Dict:
        metadata = {}
        for line in header_lines:
            key, sep, value = line.partition(':')
            if sep:
                self._extract_value(key.strip().lower(), value, line, metadata)
        return metadata

    def _extract_value(self, key: str, value: str, line: str, metadata: Dict):
        try:
            if key.startswith('supercell'):
                metadata['supercell'] = np.array([int(v) for v in value.split()])
            elif key.startswith('cell'):
                cell_params = [float(v) for v in _NUMBER.findall(value)]
                if len(cell_params) != 6:
                    raise ScanConfigurationError(f"Invalid cell parameters: {line.strip()}")
                metadata['cell_params'] = cell_params
            elif key == 'number of atoms':
                metadata['num_atoms'] = int(value.split()[0])
            elif key == 'atom types present':
                metadata['atom_types'] = [t.lower() for t in value.split()]
            elif key == 'number of each atom type':
                metadata['atom_type_counts'] = [int(v) for v in value.split()]
        except ScanConfigurationError:
            raise
        except (ValueError, IndexError):
            raise ScanConfigurationError(f"Invalid RMC6f header line: {line.strip()}")
