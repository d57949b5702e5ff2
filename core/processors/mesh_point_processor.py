# processors/mesh_point_processor.py

import logging
import numpy as np
from interfaces.point_parameters_processor_interface import IPointParametersProcessor
from data_structures.sample_points import SamplePoints
from functions.coordinate_transforms import fractional_to_angstrom
from utilities.exceptions import ScanConfigurationError

logger = logging.getLogger(__name__)

class MeshPointProcessor(IPointParametersProcessor):
    def __init__(self, mesh_counts, vectors: np.ndarray):
        """
        Regular mesh over the unit cell at fractional (i/Na, j/Nb, k/Nc).

        Points are ordered with i outermost and k innermost, which is also
        the order the OpenDX writer expects.

        Args:
            mesh_counts (array-like): (Na, Nb, Nc), each at least 1.
            vectors (np.ndarray): Lattice vectors as rows.
        """
        self.mesh_counts = mesh_counts
        self.vectors = vectors
        self.point_data: SamplePoints = None

    def process_parameters(self):
        counts = np.asarray(self.mesh_counts)
        if counts.shape != (3,) or np.any(counts != np.round(counts)) or np.any(counts < 1):
            raise ScanConfigurationError(f"Mesh counts must be three positive integers (got {self.mesh_counts}).")
        counts = counts.astype(int)

        axes = [np.arange(n) for n in counts]
        mesh = np.meshgrid(*axes, indexing='ij')
        grid_indices = np.vstack([m.flatten() for m in mesh]).T
        fractional = grid_indices / counts

        self.point_data = SamplePoints(
            coordinates=fractional_to_angstrom(fractional, self.vectors),
            fractional=fractional,
            mode='mesh',
            grid_indices=grid_indices,
            mesh_counts=tuple(int(n) for n in counts),
        )
        logger.info("Generated %d mesh points (%d x %d x %d)", self.point_data.num_points, *counts)

    def get_point_data(self) -> SamplePoints:
        return self.point_data
