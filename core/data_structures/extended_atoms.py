# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 10:26:03 2026
"""
# data_structures/extended_atoms.py

import numpy as np
from dataclasses import dataclass

@dataclass
class ExtendedAtoms:
    positions: np.ndarray       # Shape: (M, 3), cartesian
    central_ids: np.ndarray     # Shape: (M,), atom number of the central-cell atom
    elements: np.ndarray        # Shape: (M,), lower-case element names
    species: np.ndarray         # Shape: (M,)
    translations: np.ndarray    # Shape: (M, 3), integer cell offsets

    @property
    def num_atoms(self) -> int:
        return self.positions.shape[0]

    def select_element(self, element: str) -> 'ExtendedAtoms':
        """Return the images whose element matches ``element`` (case-insensitive)."""
        mask = self.elements == element.lower()
        return ExtendedAtoms(
            positions=self.positions[mask],
            central_ids=self.central_ids[mask],
            elements=self.elements[mask],
            species=self.species[mask],
            translations=self.translations[mask],
        )
