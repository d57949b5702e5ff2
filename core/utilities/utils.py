# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:20:36 2026
"""

# utilities/utils.py

import os
from utilities.exceptions import ScanConfigurationError

_STRUCTURE_EXTENSIONS = {
    '.rmc6f': 'rmc6f',
    '.skl': 'skl',
}


def determine_configuration_file_type(file_path: str) -> str:
    _, ext = os.path.splitext(file_path)
    ext = ext.lower()
    if ext in _STRUCTURE_EXTENSIONS:
        return _STRUCTURE_EXTENSIONS[ext]
    raise ScanConfigurationError(f"Unsupported structure file extension: {ext or file_path}")


def chunk_bounds(num_items: int, num_chunks: int):
    """
    Split ``num_items`` consecutive indices into at most ``num_chunks`` runs.

    Earlier chunks take the remainder, the same way point chunks are sized
    elsewhere. Returns a list of (start, stop) pairs covering every index once.
    """
    num_chunks = max(1, min(num_chunks, num_items)) if num_items else 1
    base_chunk_size = num_items // num_chunks
    remainder = num_items % num_chunks

    bounds = []
    start = 0
    for i in range(num_chunks):
        size = base_chunk_size + 1 if i < remainder else base_chunk_size
        bounds.append((start, start + size))
        start += size
    return bounds
