# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:34:12 2026
"""

import numpy as np

def angstrom_to_fractional(coords: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    """
    Convert cartesian coordinates (Angstrom) to fractional coordinates.

    :param coords: Coordinates in Angstroms, shape (3,) or (N, 3)
    :param vectors: Lattice vectors as rows a, b, c, shape (3, 3)
    :return: Fractional coordinates, shape (N, 3)
    """
    coords = np.atleast_2d(np.asarray(coords, dtype=float))
    vectors = np.asarray(vectors, dtype=float)

    if vectors.shape != (3, 3):
        raise ValueError(f"Lattice vectors must have shape (3, 3) (got {vectors.shape})")
    if coords.shape[1] != 3:
        raise ValueError(f"Coordinate dimension mismatch: {coords.shape[1]} vs 3")

    return coords @ np.linalg.inv(vectors)


def fractional_to_angstrom(fractional: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    """
    Convert fractional coordinates to cartesian coordinates (Angstrom).

    :param fractional: Fractional coordinates, shape (3,) or (N, 3)
    :param vectors: Lattice vectors as rows a, b, c, shape (3, 3)
    :return: Cartesian coordinates, shape (N, 3)
    """
    fractional = np.atleast_2d(np.asarray(fractional, dtype=float))
    vectors = np.asarray(vectors, dtype=float)

    if vectors.shape != (3, 3):
        raise ValueError(f"Lattice vectors must have shape (3, 3) (got {vectors.shape})")
    if fractional.shape[1] != 3:
        raise ValueError(f"Coordinate dimension mismatch: {fractional.shape[1]} vs 3")

    return fractional @ vectors
