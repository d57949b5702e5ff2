# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 11:05:39 2026
"""

# calculators/distance_calculator.py

import logging
import numpy as np
from utilities.exceptions import ScanConfigurationError

class DistanceCalculator:
    """
    Builds the point x atom Euclidean distance table.

    No cutoff is applied here; filtering happens at accumulation time so the
    cutoff can change without recomputing geometry.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def build(self, points: np.ndarray, atoms: np.ndarray) -> np.ndarray:
        """
        Args:
            points (np.ndarray): Cartesian sample points, shape (N, 3).
            atoms (np.ndarray): Cartesian atom (image) positions, shape (M, 3).

        Returns:
            np.ndarray: Distances, shape (N, M).
        """
        points = self._validate(points, 'sample point')
        atoms = self._validate(atoms, 'atom')

        diff = points[:, np.newaxis, :] - atoms[np.newaxis, :, :]
        table = np.sqrt(np.einsum('ijk,ijk->ij', diff, diff))
        self.logger.debug("Distance table built with shape %s", table.shape)
        return table

    def _validate(self, coords, label: str) -> np.ndarray:
        coords = np.asarray(coords, dtype=float)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ScanConfigurationError(f"Every {label} needs three cartesian coordinates (got shape {coords.shape})")
        bad = ~np.all(np.isfinite(coords), axis=1)
        if np.any(bad):
            raise ScanConfigurationError(
                f"{label.capitalize()} {int(np.flatnonzero(bad)[0])} has missing or non-finite coordinates")
        return coords
