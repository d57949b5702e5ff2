# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 13:44:09 2026
"""

import h5py
import logging
from interfaces.base_interfaces import IConfigDataSaver, IConfigDataLoader
import os
import json

logger = logging.getLogger(__name__)

class HDF5ParameterSaver(IConfigDataSaver):
    def __init__(self, hdf5_file_path: str, dataset_name: str = 'parameters'):
        self.hdf5_file_path = hdf5_file_path
        self.dataset_name = dataset_name

    def save_data(self, data: dict):
        """Store the run parameters as one UTF-8 JSON string dataset, replacing an older copy."""
        with h5py.File(self.hdf5_file_path, 'a') as hdf5_file:
            if self.dataset_name in hdf5_file:
                del hdf5_file[self.dataset_name]
            dt = h5py.string_dtype(encoding='utf-8')
            hdf5_file.create_dataset(self.dataset_name, data=json.dumps(data), dtype=dt)
        logger.debug("Parameters saved to %s", self.hdf5_file_path)

class HDF5ParameterLoader(IConfigDataLoader):
    def __init__(self, hdf5_file_path: str, dataset_name: str = 'parameters'):
        self.hdf5_file_path = hdf5_file_path
        self.dataset_name = dataset_name

    def can_load_data(self) -> bool:
        if not os.path.exists(self.hdf5_file_path):
            return False
        with h5py.File(self.hdf5_file_path, 'r') as hdf5_file:
            return self.dataset_name in hdf5_file

    def load_data(self) -> dict:
        with h5py.File(self.hdf5_file_path, 'r') as hdf5_file:
            json_str = hdf5_file[self.dataset_name][()]
        if isinstance(json_str, bytes):
            json_str = json_str.decode('utf-8')
        return json.loads(json_str)
