# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 09:12:36 2026
"""

# processors/spectrum_loader.py

import logging
import numpy as np
from typing import Dict, Iterable, Tuple
from interfaces.spectrum_source import ISpectrumSource
from data_structures.spectrum import Spectrum, SpectralAxis
from utilities.exceptions import SpectrumMismatchError

class SpectrumLoader:
    """
    Loads the spectra of every contributing central atom and checks that they
    share one energy axis (same point count, same first and last energy).
    """

    def __init__(self, source: ISpectrumSource, energy_tolerance: float = 1e-6):
        self.source = source
        self.energy_tolerance = energy_tolerance
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_all(self, atom_ids: Iterable[int]) -> Tuple[SpectralAxis, np.ndarray, Dict[int, int]]:
        """
        Args:
            atom_ids (Iterable[int]): Central atom numbers, in the order the rows are wanted.

        Returns:
            Tuple: (shared SpectralAxis, intensity matrix of shape (K, E),
                    mapping atom number -> matrix row)
        """
        atom_ids = list(dict.fromkeys(int(a) for a in atom_ids))
        if not atom_ids:
            raise SpectrumMismatchError("No atoms of the target element to load spectra for.")

        spectra = []
        first = None
        for atom_id in atom_ids:
            spectrum = self.source.load(atom_id)
            self._check_monotonic(spectrum)
            if first is None:
                first = spectrum
            else:
                self._check_same_axis(first, spectrum, spectra[-1])
            spectra.append(spectrum)

        axis = SpectralAxis.from_spectrum(first)
        matrix = np.vstack([s.intensities for s in spectra])
        index = {atom_id: row for row, atom_id in enumerate(atom_ids)}
        self.logger.info("Loaded %d spectra with %d energy points from %.4f to %.4f (delta %.6f)",
                         len(spectra), axis.num_points, axis.initial_energy, axis.final_energy, axis.delta)
        return axis, matrix, index

    def _check_monotonic(self, spectrum: Spectrum):
        if spectrum.num_points < 2:
            raise SpectrumMismatchError(f"Spectrum {spectrum.source} has fewer than 2 energy points")
        if np.any(np.diff(spectrum.energies) <= 0):
            raise SpectrumMismatchError(f"Energies in {spectrum.source} are not strictly increasing")

    def _check_same_axis(self, first: Spectrum, spectrum: Spectrum, last: Spectrum):
        for reference in (first, last):
            if spectrum.num_points != reference.num_points:
                message = (f"Spectrum {spectrum.source} has {spectrum.num_points} energy points, "
                           f"but {reference.source} has {reference.num_points}")
                self.logger.error(message)
                raise SpectrumMismatchError(message)
            bounds = (spectrum.energies[0], spectrum.energies[-1])
            reference_bounds = (reference.energies[0], reference.energies[-1])
            if not np.allclose(bounds, reference_bounds, rtol=0.0, atol=self.energy_tolerance):
                message = (f"Spectrum {spectrum.source} spans {bounds[0]}..{bounds[1]}, "
                           f"but {reference.source} spans {reference_bounds[0]}..{reference_bounds[1]}")
                self.logger.error(message)
                raise SpectrumMismatchError(message)
