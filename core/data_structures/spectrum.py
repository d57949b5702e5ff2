# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 13:58:21 2026
"""
# data_structures/spectrum.py

import numpy as np
from dataclasses import dataclass
from data_structures.sample_points import SamplePoints

@dataclass
class Spectrum:
    atom_id: int
    energies: np.ndarray        # Shape: (E,), strictly increasing
    intensities: np.ndarray     # Shape: (E,)
    source: str = ''

    @property
    def num_points(self) -> int:
        return self.energies.shape[0]


@dataclass(frozen=True)
class SpectralAxis:
    initial_energy: float
    final_energy: float
    num_points: int

    @property
    def delta(self) -> float:
        return (self.final_energy - self.initial_energy) / (self.num_points - 1)

    def energies(self) -> np.ndarray:
        return np.linspace(self.initial_energy, self.final_energy, self.num_points)

    @classmethod
    def from_spectrum(cls, spectrum: Spectrum) -> 'SpectralAxis':
        return cls(float(spectrum.energies[0]), float(spectrum.energies[-1]), spectrum.num_points)


@dataclass
class ScanResult:
    points: SamplePoints
    axis: SpectralAxis
    intensities: np.ndarray         # Shape: (N, E), one accumulated spectrum per point
    has_contribution: np.ndarray    # Shape: (N,), False where no atom lies inside the cutoff
    num_contributors: np.ndarray    # Shape: (N,)

    def __post_init__(self):
        expected = (self.points.num_points, self.axis.num_points)
        if self.intensities.shape != expected:
            raise ValueError(f"Intensity grid has shape {self.intensities.shape}, expected {expected}")

    def empty_point_indices(self) -> np.ndarray:
        return np.flatnonzero(~self.has_contribution)
