# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 11:47:02 2026
"""
# processors/spectral_accumulator.py

from __future__ import annotations

import logging
from time import perf_counter
from typing import Dict, NamedTuple, Optional

import numpy as np
from dask import delayed, compute

from calculators.distance_calculator import DistanceCalculator
from calculators.gaussian_weight_calculator import GaussianWeightCalculator
from data_structures.extended_atoms import ExtendedAtoms
from data_structures.sample_points import SamplePoints
from data_structures.spectrum import ScanResult, SpectralAxis
from utilities.exceptions import ScanConfigurationError, SpectrumMismatchError
from utilities.utils import chunk_bounds

# --------------------------------------------------------------------------- #
logger = logging.getLogger(__name__)
# --------------------------------------------------------------------------- #


class PointAccumulation(NamedTuple):
    intensities: np.ndarray     # (E,)
    weights: np.ndarray         # (C,), sums to 1 when C > 0
    contributors: np.ndarray    # (C,), atom columns inside the cutoff


def accumulate_point(
        distances: np.ndarray,
        spectrum_rows: np.ndarray,
        spectra: np.ndarray,
        weight_calculator: GaussianWeightCalculator,
        limit_dist: float,
) -> PointAccumulation:
    """
    Gaussian-weighted average spectrum at one sample point.

    Args:
        distances: distance from the point to every atom, shape (M,)
        spectrum_rows: row of ``spectra`` holding each atom's central-atom spectrum, shape (M,)
        spectra: intensity matrix, shape (K, E)
        weight_calculator: gaussian weighting
        limit_dist: cutoff radius, atoms with distance <= limit_dist contribute

    A point without contributors gets an all-zero spectrum and no weights.
    """
    contributors = np.flatnonzero(distances <= limit_dist)
    if contributors.size == 0:
        return PointAccumulation(np.zeros(spectra.shape[1]), np.empty(0), contributors)

    weights = weight_calculator.normalized_weights(distances[contributors])
    intensities = weights @ spectra[spectrum_rows[contributors]]
    return PointAccumulation(intensities, weights, contributors)


def _accumulate_chunk(
        chunk_id: int,
        offset: int,
        total_points: int,
        points_xyz: np.ndarray,
        atoms_xyz: np.ndarray,
        spectrum_rows: np.ndarray,
        spectra: np.ndarray,
        weight_calculator: GaussianWeightCalculator,
        limit_dist: float,
        progress_every: int,
        max_table_entries: int,
):
    t0 = perf_counter()
    calculator = DistanceCalculator()

    num_points = points_xyz.shape[0]
    intensities = np.zeros((num_points, spectra.shape[1]))
    counts = np.zeros(num_points, dtype=int)
    # Distance tables are built block by block, at most max_table_entries cells each
    block_rows = max(1, max_table_entries // max(1, atoms_xyz.shape[0]))
    for start in range(0, num_points, block_rows):
        stop = min(start + block_rows, num_points)
        table = calculator.build(points_xyz[start:stop], atoms_xyz)
        for i in range(start, stop):
            point = accumulate_point(table[i - start], spectrum_rows, spectra, weight_calculator, limit_dist)
            intensities[i] = point.intensities
            counts[i] = point.contributors.size
            if progress_every and (offset + i + 1) % progress_every == 0:
                logger.info("Accumulated point %d of %d", offset + i + 1, total_points)

    logger.debug("chunk %d | points %d-%d in blocks of %d took %.3f s",
                 chunk_id, offset, offset + num_points - 1, block_rows, perf_counter() - t0)
    return intensities, counts


class SpectralAccumulator:
    def __init__(self, weight_calculator: GaussianWeightCalculator, limit_dist: float = 4.0,
                 num_chunks: int = 1, scheduler: Optional[str] = None, progress_every: int = 1000,
                 max_table_entries: int = 2_000_000):
        """
        Args:
            weight_calculator: gaussian distance weighting
            limit_dist: cutoff radius
            num_chunks: number of dask tasks the point loop is split into
            scheduler: dask scheduler name; 'threads' for several chunks, 'sync' otherwise
            progress_every: log a progress marker every this many points (0 disables)
            max_table_entries: largest point x atom distance block held in memory at once
        """
        if not limit_dist > 0:
            raise ScanConfigurationError(f"Cutoff radius must be positive (got {limit_dist})")
        if num_chunks < 1:
            raise ScanConfigurationError(f"Number of chunks must be at least 1 (got {num_chunks})")
        self.weight_calculator = weight_calculator
        self.limit_dist = float(limit_dist)
        self.num_chunks = int(num_chunks)
        self.scheduler = scheduler
        self.progress_every = progress_every
        self.max_table_entries = int(max_table_entries)

    def accumulate(self, points: SamplePoints, atoms: ExtendedAtoms, axis: SpectralAxis,
                   spectra: np.ndarray, spectrum_index: Dict[int, int]) -> ScanResult:
        """
        Args:
            points: sample points
            atoms: extended atoms of the target element only
            axis: shared energy axis of ``spectra``
            spectra: intensity matrix (K, E)
            spectrum_index: central atom number -> row of ``spectra``
        """
        if spectra.shape[1] != axis.num_points:
            raise SpectrumMismatchError(
                f"Spectra have {spectra.shape[1]} energy points, axis declares {axis.num_points}")
        missing = sorted(set(int(c) for c in atoms.central_ids) - set(spectrum_index))
        if missing:
            raise SpectrumMismatchError(f"No spectrum loaded for central atoms {missing}")
        spectrum_rows = np.array([spectrum_index[int(c)] for c in atoms.central_ids], dtype=int)

        total = points.num_points
        bounds = chunk_bounds(total, self.num_chunks)
        logger.info("Accumulating %d points against %d atoms in %d chunk(s) "
                    "(cutoff %.3f, FWHM %.3f, alpha %.6f)",
                    total, atoms.num_atoms, len(bounds), self.limit_dist,
                    self.weight_calculator.fwhm, self.weight_calculator.alpha)

        # Chunks may run side by side, so they share the block budget
        chunk_budget = max(1, self.max_table_entries // len(bounds))
        tasks = [
            delayed(_accumulate_chunk, pure=False)(
                chunk_id, start, total,
                points.coordinates[start:stop], atoms.positions, spectrum_rows, spectra,
                self.weight_calculator, self.limit_dist, self.progress_every, chunk_budget,
            )
            for chunk_id, (start, stop) in enumerate(bounds)
        ]
        scheduler = self.scheduler or ('threads' if len(tasks) > 1 else 'sync')
        results = compute(*tasks, scheduler=scheduler)

        intensities = np.vstack([r[0] for r in results])
        counts = np.concatenate([r[1] for r in results])
        result = ScanResult(
            points=points,
            axis=axis,
            intensities=intensities,
            has_contribution=counts > 0,
            num_contributors=counts,
        )

        empty = result.empty_point_indices()
        if empty.size:
            shown = ', '.join(str(i) for i in empty[:20])
            logger.warning("%d of %d points have no atom within %.3f; their spectra are zero "
                           "(points %s%s)", empty.size, total, self.limit_dist, shown,
                           ', ...' if empty.size > 20 else '')
        logger.info("Accumulation finished")
        return result
