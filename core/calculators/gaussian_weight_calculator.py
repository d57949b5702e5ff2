# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 15:40:11 2026
"""

# calculators/gaussian_weight_calculator.py

from math import sqrt, log
import numpy as np
from utilities.exceptions import ScanConfigurationError

class GaussianWeightCalculator:
    def __init__(self, fwhm: float = 3.0):
        """
        Gaussian distance weighting, w(d) = exp(-alpha * d**2).

        Args:
            fwhm (float): Full width at half maximum of the gaussian, in the
                length unit of the distances.
        """
        if not fwhm > 0:
            raise ScanConfigurationError(f"Gaussian FWHM must be positive (got {fwhm})")
        self.fwhm = float(fwhm)
        self.sigma = self.fwhm / (2.0 * sqrt(2.0 * log(2.0)))
        self.alpha = 1.0 / (2.0 * self.sigma ** 2)

    def weights(self, distances: np.ndarray) -> np.ndarray:
        distances = np.asarray(distances, dtype=float)
        return np.exp(-self.alpha * distances ** 2)

    def normalized_weights(self, distances: np.ndarray) -> np.ndarray:
        """Weights rescaled to sum to one. An empty input gives an empty result."""
        distances = np.asarray(distances, dtype=float)
        if distances.size == 0:
            return np.empty(0)
        # Shift by the nearest distance; the ratio is unchanged and the
        # largest weight is exactly 1, so narrow gaussians cannot underflow.
        squared = distances ** 2
        raw = np.exp(-self.alpha * (squared - squared.min()))
        return raw / raw.sum()
