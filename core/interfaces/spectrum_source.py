# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 14:12:57 2026
"""

# interfaces/spectrum_source.py

from abc import ABC, abstractmethod
from data_structures.spectrum import Spectrum

class ISpectrumSource(ABC):
    """
    Source of per-atom absorption spectra.

    Implementations differ only in where the intensities come from: one file
    per atom, or one column per atom of a shared table.
    """

    @abstractmethod
    def load(self, atom_id: int) -> Spectrum:
        """
        Load the spectrum of one central-cell atom.

        Args:
            atom_id (int): Atom number as given in the structure file.

        Returns:
            Spectrum: Energies (strictly increasing) and total intensities.
        """
        pass
