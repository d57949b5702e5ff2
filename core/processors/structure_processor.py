# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 15:02:44 2026
"""

# processors/structure_processor.py

import logging
from interfaces.base_interfaces import IConfigurationFileProcessor, IConfigurationFileParser
from readers.structure_file_reader import StructureFileReader
from calculators.cell_calculator import CellCalculator
from functions.coordinate_transforms import angstrom_to_fractional, fractional_to_angstrom
import pandas as pd
import numpy as np
from typing import Dict

class StructureProcessor(IConfigurationFileProcessor):
    def __init__(self, file_path: str, parser: IConfigurationFileParser):
        self.file_path = file_path
        self.reader = StructureFileReader(self.file_path)
        self.parser = parser
        self.cell_calculator = CellCalculator()
        self.logger = logging.getLogger(self.__class__.__name__)
        self.metadata = None
        self.atoms = None
        self.vectors = None
        self.metric = None
        self.cartesian_coordinates = None

    def process(self):
        content = self.reader.read()
        self.metadata, atoms = self.parser.parse(content)

        self.vectors = self.cell_calculator.calculate_vectors(self.metadata['cell_params'])
        self.metric = self.cell_calculator.calculate_metric(self.vectors)

        xyz = atoms[['x', 'y', 'z']].to_numpy(dtype=float)
        if self.metadata.get('coordinate_type') == 'cartesian':
            self.cartesian_coordinates = xyz
            atoms[['x', 'y', 'z']] = angstrom_to_fractional(xyz, self.vectors)
        else:
            self.cartesian_coordinates = fractional_to_angstrom(xyz, self.vectors)
        self.atoms = atoms

        self.logger.info("Loaded %d atoms from %s (cell volume %.4f)",
                         len(self.atoms), self.file_path, self.metric['volume'])

    def _require(self, value, name):
        if value is None:
            raise ValueError(f"{name} is not available. Ensure that 'process()' has been called.")
        return value

    def get_atoms(self) -> pd.DataFrame:
        """Atom table with fractional x, y, z columns."""
        return self._require(self.atoms, "Atom table")

    def get_cartesian_coordinates(self) -> np.ndarray:
        return self._require(self.cartesian_coordinates, "Cartesian coordinates")

    def get_elements(self) -> pd.Series:
        return self.get_atoms()['element']

    def get_atom_ids(self) -> np.ndarray:
        return self.get_atoms()['atomNumber'].to_numpy()

    def get_vectors(self) -> np.ndarray:
        return self._require(self.vectors, "Lattice vectors")

    def get_metric(self) -> Dict:
        return self._require(self.metric, "Cell metric")
