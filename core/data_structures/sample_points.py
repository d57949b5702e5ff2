# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:15:40 2026
"""
# data_structures/sample_points.py

import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class SamplePoints:
    coordinates: np.ndarray                     # Shape: (N, 3), cartesian
    fractional: np.ndarray                      # Shape: (N, 3)
    mode: str                                   # 'line' or 'mesh'
    grid_indices: Optional[np.ndarray] = None   # Shape: (N, 3), mesh only
    mesh_counts: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        for array in (self.coordinates, self.fractional, self.grid_indices):
            if array is not None:
                array.setflags(write=False)

    @property
    def num_points(self) -> int:
        return self.coordinates.shape[0]

    @property
    def is_mesh(self) -> bool:
        return self.mode == 'mesh'
