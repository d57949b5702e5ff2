# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:02:45 2026
"""

# interfaces/point_parameters_processor_interface.py

from abc import ABC, abstractmethod
from data_structures.sample_points import SamplePoints

class IPointParametersProcessor(ABC):
    @abstractmethod
    def process_parameters(self):
        """Validate the sampling parameters and generate the sample points."""
        pass

    @abstractmethod
    def get_point_data(self) -> SamplePoints:
        """Return the generated SamplePoints."""
        pass
