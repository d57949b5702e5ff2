# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 16:52:33 2026
"""
# readers/column_spectrum_source.py

import os
import re
import logging
import numpy as np
import pandas as pd
from io import StringIO
from typing import Optional
from interfaces.spectrum_source import ISpectrumSource
from data_structures.spectrum import Spectrum
from utilities.exceptions import SpectrumMismatchError

class ColumnSpectrumSource(ISpectrumSource):
    """
    PDOS-style table: one header row, energy in the first column and one
    column per atom whose label ends in the atom number (``fe12``, ``Fe_12``
    or ``12``).

    Every column is resampled onto linspace(min_energy, max_energy, n), n
    defaulting to the number of table rows inside the energy window.
    """

    _LABEL = re.compile(r"^([A-Za-z]*)_?(\d+)$")

    def __init__(self, table_path: str, element: str, min_energy: float, max_energy: float,
                 num_points: Optional[int] = None):
        self.table_path = table_path
        self.element = element.lower()
        self.min_energy = float(min_energy)
        self.max_energy = float(max_energy)
        self.num_points = num_points
        self.logger = logging.getLogger(self.__class__.__name__)
        self._table = None
        self._axis = None

    def _load_table(self):
        if self._table is not None:
            return
        if not os.path.isfile(self.table_path):
            raise FileNotFoundError(f"PDOS table not found: {self.table_path}")

        table = self._read_table()
        energies = table.iloc[:, 0].to_numpy(dtype=float)
        if energies.size < 2 or np.any(np.diff(energies) <= 0):
            raise SpectrumMismatchError(f"Energies in {self.table_path} are not strictly increasing")
        if self.min_energy >= self.max_energy:
            raise SpectrumMismatchError(
                f"Energy window is empty: {self.min_energy} >= {self.max_energy}")
        if self.min_energy < energies[0] or self.max_energy > energies[-1]:
            raise SpectrumMismatchError(
                f"Energy window [{self.min_energy}, {self.max_energy}] lies outside "
                f"the table range [{energies[0]}, {energies[-1]}] of {self.table_path}")

        num_points = self.num_points
        if num_points is None:
            num_points = int(np.count_nonzero((energies >= self.min_energy) & (energies <= self.max_energy)))
        if num_points < 2:
            raise SpectrumMismatchError("The energy window must hold at least 2 points")

        self._table = table
        self._axis = np.linspace(self.min_energy, self.max_energy, num_points)
        self.logger.info("Loaded PDOS table %s with %d columns, resampled to %d points",
                         self.table_path, table.shape[1] - 1, num_points)

    def _read_table(self) -> pd.DataFrame:
        """
        The header is the last non-blank line before the first numeric row;
        a leading '#' on it is dropped, other '#' lines are comments.
        """
        with open(self.table_path, 'r') as file:
            lines = [line.strip() for line in file]

        first = next((i for i, line in enumerate(lines) if self._is_numeric(line)), None)
        header = next((line for line in reversed(lines[:first or 0]) if line), None)
        if first is None or header is None:
            raise SpectrumMismatchError(f"No header row followed by numeric rows in {self.table_path}")
        labels = header.lstrip('#').split()

        rows = [line for line in lines[first:] if line and not line.startswith('#')]
        table = pd.read_csv(StringIO('\n'.join(rows)), sep=r'\s+', header=None)
        if table.shape[1] != len(labels):
            raise SpectrumMismatchError(
                f"Header of {self.table_path} names {len(labels)} columns, rows hold {table.shape[1]}")
        table.columns = labels
        return table

    @staticmethod
    def _is_numeric(line: str) -> bool:
        fields = line.split()
        if not fields:
            return False
        try:
            float(fields[0])
            return True
        except ValueError:
            return False

    def column_for(self, atom_id: int) -> str:
        self._load_table()
        matches = []
        for label in self._table.columns[1:]:
            match = self._LABEL.match(str(label))
            if match is None or int(match.group(2)) != atom_id:
                continue
            prefix = match.group(1).lower()
            if prefix in ('', self.element):
                matches.append(label)

        if not matches:
            raise SpectrumMismatchError(f"No column for atom {atom_id} in {self.table_path}")
        if len(matches) > 1:
            raise SpectrumMismatchError(f"Atom {atom_id} matches several columns in {self.table_path}: {matches}")
        return matches[0]

    def load(self, atom_id: int) -> Spectrum:
        label = self.column_for(atom_id)
        energies = self._table.iloc[:, 0].to_numpy(dtype=float)
        values = self._table[label].to_numpy(dtype=float)
        return Spectrum(
            atom_id=atom_id,
            energies=self._axis.copy(),
            intensities=np.interp(self._axis, energies, values),
            source=f"{self.table_path}:{label}",
        )
