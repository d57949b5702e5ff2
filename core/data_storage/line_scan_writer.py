# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 11:26:14 2026
"""
# data_storage/line_scan_writer.py

import logging
import numpy as np
from interfaces.base_interfaces import IScanWriter
from data_structures.spectrum import ScanResult
from utilities.file_utils import atomic_output, format_values

class LineScanWriter(IScanWriter):
    """
    Plain-text scan table: a short header, then the intensities energy by
    energy (all points of the first energy, then all points of the next).
    """

    def __init__(self, vectors: np.ndarray):
        self.vectors = np.asarray(vectors, dtype=float)
        self.logger = logging.getLogger(self.__class__.__name__)

    def header_lines(self, result: ScanResult):
        axis = result.axis
        empty = result.empty_point_indices()
        lines = [f"NUM_POINTS {result.points.num_points}"]
        if result.points.mesh_counts is not None:
            lines.append("MESH " + " ".join(str(n) for n in result.points.mesh_counts))
        lines.append("LATTICE")
        for vector in self.vectors:
            lines.append("".join(f"{v:16.8f}" for v in vector))
        lines += [
            f"NUM_ENERGY_POINTS {axis.num_points}",
            f"ENERGY_RANGE {axis.initial_energy:16.8f}{axis.final_energy:16.8f}{axis.delta:16.8f}",
            f"NUM_EMPTY_POINTS {empty.size}",
        ]
        if empty.size:
            lines.append("EMPTY_POINTS " + " ".join(str(i) for i in empty))
        return lines

    def write(self, result: ScanResult, output_path: str) -> str:
        with atomic_output(output_path) as handle:
            for line in self.header_lines(result):
                handle.write(line + '\n')
            # Transposed so the point index varies fastest
            for line in format_values(result.intensities.T.ravel(order='C')):
                handle.write(line + '\n')
        self.logger.info("Wrote line scan to %s", output_path)
        return output_path
