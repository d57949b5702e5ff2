# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:04:31 2026
"""

# utilities/exceptions.py


class SpectraScanError(Exception):
    """Base class for every fatal scan error."""


class ScanConfigurationError(SpectraScanError, ValueError):
    """Conflicting, missing or degenerate run parameters and geometry."""


class SpectrumMismatchError(SpectraScanError, ValueError):
    """Per-atom spectra that do not share one energy axis."""
