# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 10:41:55 2026
"""

# processors/structure_extender.py

import logging
import numpy as np
import pandas as pd
from calculators.cell_calculator import CellCalculator
from data_structures.extended_atoms import ExtendedAtoms
from data_structures.sample_points import SamplePoints
from functions.coordinate_transforms import fractional_to_angstrom
from utilities.exceptions import ScanConfigurationError

class StructureExtender:
    """
    Adds periodic images of the central-cell atoms around the sampled region.

    An image is kept when its fractional coordinates lie inside the fractional
    extent of the sample points grown by ``radius / width`` along each axis,
    which contains every image closer than ``radius`` to some sample point.
    """

    def __init__(self, radius: float):
        if not radius > 0:
            raise ScanConfigurationError(f"Image radius must be positive (got {radius})")
        self.radius = float(radius)
        self.cell_calculator = CellCalculator()
        self.logger = logging.getLogger(self.__class__.__name__)

    def extend(self, atoms: pd.DataFrame, vectors: np.ndarray, points: SamplePoints) -> ExtendedAtoms:
        """
        Args:
            atoms (pd.DataFrame): Central-cell atoms with fractional x, y, z.
            vectors (np.ndarray): Lattice vectors as rows.
            points (SamplePoints): The sample points the images must cover.

        Returns:
            ExtendedAtoms: Central atoms (zero translation) followed by their images.
        """
        fractional = atoms[['x', 'y', 'z']].to_numpy(dtype=float)
        margin = self.radius / self.cell_calculator.calculate_widths(vectors)
        lower = points.fractional.min(axis=0) - margin
        upper = points.fractional.max(axis=0) + margin

        t_min = np.floor(lower - fractional.max(axis=0)).astype(int)
        t_max = np.ceil(upper - fractional.min(axis=0)).astype(int)
        ranges = [np.arange(lo, hi + 1) for lo, hi in zip(t_min, t_max)]
        mesh = np.meshgrid(*ranges, indexing='ij')
        translations = np.vstack([m.flatten() for m in mesh]).T
        # Zero translation first so the central atoms lead the table
        order = np.argsort(np.any(translations != 0, axis=1), kind='stable')
        translations = translations[order]

        images = fractional[np.newaxis, :, :] + translations[:, np.newaxis, :]     # (T, A, 3)
        inside = np.all((images >= lower) & (images <= upper), axis=2)
        inside |= np.all(translations == 0, axis=1)[:, np.newaxis]

        t_index, a_index = np.nonzero(inside)
        extended = ExtendedAtoms(
            positions=fractional_to_angstrom(images[t_index, a_index], vectors),
            central_ids=atoms['atomNumber'].to_numpy()[a_index],
            elements=atoms['element'].to_numpy()[a_index],
            species=atoms['species'].to_numpy()[a_index],
            translations=translations[t_index],
        )
        self.logger.info("Extended %d central atoms to %d atoms within %.3f of the sampled region",
                         len(atoms), extended.num_atoms, self.radius)
        return extended
