# processors/line_point_processor.py

import logging
import numpy as np
from interfaces.point_parameters_processor_interface import IPointParametersProcessor
from data_structures.sample_points import SamplePoints
from functions.coordinate_transforms import angstrom_to_fractional
from utilities.exceptions import ScanConfigurationError

logger = logging.getLogger(__name__)

class LinePointProcessor(IPointParametersProcessor):
    def __init__(self, start, end, num_points: int, vectors: np.ndarray):
        """
        Sample points spaced uniformly on the segment start -> end, both ends included.

        Args:
            start (array-like): Cartesian start point (Angstrom).
            end (array-like): Cartesian end point (Angstrom).
            num_points (int): Number of points, at least 2.
            vectors (np.ndarray): Lattice vectors as rows.
        """
        self.start = start
        self.end = end
        self.num_points = num_points
        self.vectors = vectors
        self.point_data: SamplePoints = None

    def process_parameters(self):
        start = np.asarray(self.start, dtype=float)
        end = np.asarray(self.end, dtype=float)
        if start.shape != (3,) or end.shape != (3,):
            raise ScanConfigurationError("Line scan start and end points need three coordinates each.")
        if int(self.num_points) != self.num_points or self.num_points < 2:
            raise ScanConfigurationError(
                f"A line scan needs at least 2 points (got {self.num_points}).")

        fraction = np.linspace(0.0, 1.0, int(self.num_points))[:, np.newaxis]
        coordinates = start + fraction * (end - start)
        # Both endpoints are reproduced exactly
        coordinates[0] = start
        coordinates[-1] = end

        self.point_data = SamplePoints(
            coordinates=coordinates,
            fractional=angstrom_to_fractional(coordinates, self.vectors),
            mode='line',
        )
        logger.info("Generated %d line-scan points from %s to %s", self.point_data.num_points, start, end)

    def get_point_data(self) -> SamplePoints:
        return self.point_data
