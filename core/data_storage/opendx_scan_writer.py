# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 10:40:57 2026
"""
# data_storage/opendx_scan_writer.py

import logging
import numpy as np
from interfaces.base_interfaces import IScanWriter
from data_structures.spectrum import ScanResult
from utilities.exceptions import ScanConfigurationError
from utilities.file_utils import atomic_output, format_values

class OpenDXScanWriter(IScanWriter):
    """
    Writes a mesh scan as an OpenDX field: a regular grid over the unit cell
    whose data at every position is the accumulated spectrum (rank 1, one
    component per energy point). Data run point by point with the energy
    index varying fastest.
    """

    def __init__(self, vectors: np.ndarray):
        self.vectors = np.asarray(vectors, dtype=float)
        self.logger = logging.getLogger(self.__class__.__name__)

    def header_lines(self, result: ScanResult):
        if not result.points.is_mesh:
            raise ScanConfigurationError("The OpenDX format needs a mesh scan.")
        na, nb, nc = result.points.mesh_counts
        counts = f"{na} {nb} {nc}"
        axis = result.axis
        empty = result.empty_point_indices()
        lines = [
            f"# spectra scan: {axis.num_points} energy points x {result.points.num_points} space points",
            f"# energy range {axis.initial_energy:.8f} {axis.final_energy:.8f} delta {axis.delta:.8f}",
            f"# points without contributing atoms: {empty.size}",
        ]
        if empty.size:
            lines.append("# empty point indices: " + " ".join(str(i) for i in empty))
        lines += [
            f"object 1 class gridpositions counts {counts}",
            "origin 0.00000000 0.00000000 0.00000000",
        ]
        for vector, n in zip(self.vectors, (na, nb, nc)):
            delta = vector / n
            lines.append("delta " + " ".join(f"{d:.8f}" for d in delta))
        lines += [
            f"object 2 class gridconnections counts {counts}",
            f"object 3 class array type float rank 1 shape {axis.num_points} "
            f"items {result.points.num_points} data follows",
        ]
        return lines

    def trailer_lines(self):
        return [
            'attribute "dep" string "positions"',
            'object "spectra" class field',
            'component "positions" value 1',
            'component "connections" value 2',
            'component "data" value 3',
            'end',
        ]

    def write(self, result: ScanResult, output_path: str) -> str:
        with atomic_output(output_path) as handle:
            for line in self.header_lines(result):
                handle.write(line + '\n')
            for line in format_values(result.intensities.ravel(order='C')):
                handle.write(line + '\n')
            for line in self.trailer_lines():
                handle.write(line + '\n')
        self.logger.info("Wrote OpenDX mesh scan to %s", output_path)
        return output_path
