# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 16:44:10 2026
"""

# factories/point_processor_factory.py

import numpy as np
from interfaces.point_parameters_processor_interface import IPointParametersProcessor
from processors.line_point_processor import LinePointProcessor
from processors.mesh_point_processor import MeshPointProcessor
from utilities.exceptions import ScanConfigurationError

class PointProcessorFactory:
    @staticmethod
    def create_processor(parameters: dict, vectors: np.ndarray) -> IPointParametersProcessor:
        mesh = parameters.get('mesh')
        start = parameters.get('start')
        end = parameters.get('end')

        if mesh is not None and (start is not None or end is not None):
            raise ScanConfigurationError("Mesh and line scans are mutually exclusive; give either -mesh or -s/-e.")
        if mesh is not None:
            return MeshPointProcessor(mesh, vectors)
        if start is not None and end is not None:
            return LinePointProcessor(start, end, parameters.get('num_points', 10), vectors)
        raise ScanConfigurationError("Give either -mesh na nb nc or both -s x y z and -e x y z.")
