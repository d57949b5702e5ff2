# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 13:15:50 2026
"""

# parsers/rmc6f_data_parser.py

from io import StringIO
from typing import Tuple
import pandas as pd
from interfaces.base_interfaces import IConfigurationFileParser
from utilities.rmc6f_metadata_extractor import RMC6fMetadataExtractor
from utilities.exceptions import ScanConfigurationError

# Atom line layouts, with and without the bracketed site id after the element
_COLUMNS = {
    10: ['atomNumber', 'element', 'id', 'x', 'y', 'z', 'refNumber', 'cellX', 'cellY', 'cellZ'],
    9: ['atomNumber', 'element', 'x', 'y', 'z', 'refNumber', 'cellX', 'cellY', 'cellZ'],
}

class RMC6fDataParser(IConfigurationFileParser):
    """
    RMC6f configuration parser. Returns the header metadata and one row per
    atom with its fractional position and reference (species) number.
    """

    def __init__(self):
        self.metadata_extractor = RMC6fMetadataExtractor()

    def parse(self, content: str) -> Tuple[dict, pd.DataFrame]:
        lines = content.splitlines()
        start = next((i for i, line in enumerate(lines) if line.strip().startswith("Atoms:")), None)
        if start is None:
            raise ScanConfigurationError("Could not find 'Atoms:' section in the file.")

        metadata = self.metadata_extractor.extract(lines[:start])
        if 'cell_params' not in metadata:
            raise ScanConfigurationError("Cell parameters are missing in the metadata.")

        atom_lines = [line for line in lines[start + 1:] if line.strip()]
        if not atom_lines:
            raise ScanConfigurationError("The 'Atoms:' section is empty.")

        try:
            table = pd.read_csv(StringIO('\n'.join(atom_lines)), header=None, sep=r'\s+')
        except pd.errors.ParserError as e:
            raise ScanConfigurationError(f"Unreadable RMC6f atom lines: {e}")
        columns = _COLUMNS.get(table.shape[1])
        if columns is None:
            raise ScanConfigurationError(f"Unsupported RMC6f format ({table.shape[1]} atom columns).")
        table.columns = columns

        try:
            atoms = pd.DataFrame({
                'atomNumber': table['atomNumber'].astype(int),
                'element': table['element'].astype(str).str.lower(),
                'species': table['refNumber'].astype(int),
                'x': table['x'].astype(float),
                'y': table['y'].astype(float),
                'z': table['z'].astype(float),
            })
        except ValueError as e:
            raise ScanConfigurationError(f"Invalid RMC6f atom line: {e}")
        return metadata, atoms
