# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 11:58:40 2026
"""

# factories/scan_writer_factory.py

import numpy as np
from interfaces.base_interfaces import IScanWriter
from data_storage.opendx_scan_writer import OpenDXScanWriter
from data_storage.line_scan_writer import LineScanWriter
from utilities.exceptions import ScanConfigurationError

class ScanWriterFactory:
    _writers = {
        'mesh': OpenDXScanWriter,
        'line': LineScanWriter,
    }

    @staticmethod
    def create_writer(mode: str, vectors: np.ndarray) -> IScanWriter:
        writer_cls = ScanWriterFactory._writers.get(mode)
        if writer_cls is None:
            raise ScanConfigurationError(f"Unsupported scan mode: {mode}")
        return writer_cls(vectors)
