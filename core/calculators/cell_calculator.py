# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:21:47 2026
"""

# calculators/cell_calculator.py

import numpy as np
from typing import List, Dict
from utilities.exceptions import ScanConfigurationError

class CellCalculator:
    def calculate_vectors(self, cell_params: List[float]) -> np.ndarray:
        """
        Calculate lattice vectors from cell parameters.

        Args:
            cell_params (List[float]): [a, b, c, alpha_deg, beta_deg, gamma_deg]

        Returns:
            np.ndarray: Lattice vectors a, b, c as rows, shape (3, 3).
                a lies along x, b in the xy plane.
        """
        if len(cell_params) != 6:
            raise ScanConfigurationError("Unsupported number of cell parameters. Provide a, b, c, alpha, beta, gamma.")

        a, b, c, alpha_deg, beta_deg, gamma_deg = cell_params
        alpha = np.radians(alpha_deg)
        beta = np.radians(beta_deg)
        gamma = np.radians(gamma_deg)

        if np.isclose(np.sin(gamma), 0.0):
            raise ScanConfigurationError(f"Cell angle gamma = {gamma_deg} collapses a onto b")

        vectors = np.zeros((3, 3))
        vectors[0, 0] = a
        vectors[1, 0] = b * np.cos(gamma)
        vectors[1, 1] = b * np.sin(gamma)
        vectors[2, 0] = c * np.cos(beta)
        vectors[2, 1] = c * (np.cos(alpha) - np.cos(beta) * np.cos(gamma)) / np.sin(gamma)
        c_z2 = c**2 - vectors[2, 0]**2 - vectors[2, 1]**2
        if not np.all(np.isfinite(vectors)) or not c_z2 > 1e-12 * c**2:
            raise ScanConfigurationError(f"Cell parameters {list(cell_params)} do not describe a cell")
        vectors[2, 2] = np.sqrt(c_z2)

        # Clean round-off from right angles so orthogonal cells stay exact
        vectors[np.abs(vectors) < 1e-12] = 0.0
        return vectors

    def calculate_metric(self, vectors: np.ndarray) -> Dict:
        """
        Calculate the reciprocal lattice vectors and cell volume.

        Args:
            vectors (np.ndarray): Lattice vectors as rows.

        Returns:
            Dict: Contains 'reciprocal_vectors' (rows, with the 2*pi factor) and 'volume'.
        """
        av, bv, cv = vectors

        volume = np.dot(av, np.cross(bv, cv))
        if np.isclose(volume, 0.0):
            raise ScanConfigurationError("Vectors are degenerate; volume is zero.")

        a_star = 2 * np.pi * np.cross(bv, cv) / volume
        b_star = 2 * np.pi * np.cross(cv, av) / volume
        c_star = 2 * np.pi * np.cross(av, bv) / volume

        return {
            'reciprocal_vectors': np.array([a_star, b_star, c_star]),
            'volume': abs(volume)
        }

    def calculate_widths(self, vectors: np.ndarray) -> np.ndarray:
        """
        Perpendicular distance between opposite faces of the cell along a, b, c.

        Args:
            vectors (np.ndarray): Lattice vectors as rows.

        Returns:
            np.ndarray: Shape (3,), in the length unit of ``vectors``.
        """
        reciprocal = self.calculate_metric(vectors)['reciprocal_vectors']
        return 2 * np.pi / np.linalg.norm(reciprocal, axis=1)
