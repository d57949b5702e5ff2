# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 14:25:10 2026
"""
# readers/file_spectrum_source.py

import os
import logging
import pandas as pd
from io import StringIO
from interfaces.spectrum_source import ISpectrumSource
from data_structures.spectrum import Spectrum
from utilities.exceptions import SpectrumMismatchError

DEFAULT_SPECTRUM_TEMPLATE = '{element}{atom_id}_{edge}.plot'

class FileSpectrumSource(ISpectrumSource):
    """
    One spectrum file per atom: whitespace columns energy, total, x, y, z.

    Lines starting with '#' and non-numeric header lines are skipped; only the
    total intensity (second column) is used.
    """

    def __init__(self, directory: str, element: str, edge: str, template: str = DEFAULT_SPECTRUM_TEMPLATE):
        self.directory = directory
        self.element = element.lower()
        self.edge = edge
        self.template = template or DEFAULT_SPECTRUM_TEMPLATE
        self.logger = logging.getLogger(self.__class__.__name__)

    def path_for(self, atom_id: int) -> str:
        filename = self.template.format(element=self.element, atom_id=atom_id, edge=self.edge)
        return os.path.join(self.directory, filename)

    def load(self, atom_id: int) -> Spectrum:
        file_path = self.path_for(atom_id)
        if not os.path.isfile(file_path):
            self.logger.error("Spectrum file not found for atom %d: %s", atom_id, file_path)
            raise FileNotFoundError(f"Spectrum file not found: {file_path}")

        with open(file_path, 'r') as file:
            data_lines = [line for line in file if self._is_data_line(line)]
        if not data_lines:
            raise SpectrumMismatchError(f"No energy/total columns found in {file_path}")

        table = pd.read_csv(StringIO(''.join(data_lines)), sep=r'\s+', header=None)
        if table.shape[1] < 2:
            raise SpectrumMismatchError(f"No energy/total columns found in {file_path}")

        self.logger.debug("Read %d energy points from %s", len(table), file_path)
        return Spectrum(
            atom_id=atom_id,
            energies=table.iloc[:, 0].to_numpy(dtype=float),
            intensities=table.iloc[:, 1].to_numpy(dtype=float),
            source=file_path,
        )

    def _is_data_line(self, line: str) -> bool:
        fields = line.split()
        if not fields or fields[0].startswith('#'):
            return False
        try:
            float(fields[0])
            return True
        except ValueError:
            return False
