# data_storage/scan_hdf5_saver.py

import os
import h5py
import numpy as np
import logging
from typing import Optional
from data_structures.spectrum import ScanResult
from data_storage.hdf5_parameter_storage import HDF5ParameterSaver, HDF5ParameterLoader
from utilities.file_utils import atomic_path

class ScanHDF5Saver:
    """
    Mirrors a ScanResult into an HDF5 file, together with the run parameters.
    """

    def __init__(self, hdf5_file_path: str):
        """
        Args:
            hdf5_file_path (str): Path of the HDF5 file; an existing file is replaced.
        """
        self.hdf5_file_path = hdf5_file_path
        self.logger = logging.getLogger(self.__class__.__name__)

    def save(self, result: ScanResult, parameters: Optional[dict] = None) -> str:
        data = {
            'intensities': result.intensities,
            'energies': result.axis.energies(),
            'coordinates': np.asarray(result.points.coordinates),
            'fractional': np.asarray(result.points.fractional),
            'has_contribution': result.has_contribution.astype(int),
            'num_contributors': result.num_contributors,
        }
        try:
            with atomic_path(self.hdf5_file_path) as tmp_path:
                with h5py.File(tmp_path, 'w') as h5file:
                    for dataset_name, dataset_data in data.items():
                        h5file.create_dataset(dataset_name, data=dataset_data)
                        self.logger.debug("Dataset '%s' created with shape %s", dataset_name, dataset_data.shape)
                    h5file.attrs['mode'] = result.points.mode
                    h5file.attrs['initial_energy'] = result.axis.initial_energy
                    h5file.attrs['final_energy'] = result.axis.final_energy
                    if result.points.mesh_counts is not None:
                        h5file.attrs['mesh_counts'] = np.array(result.points.mesh_counts)
                # Parameters live in the same temporary file
                if parameters is not None:
                    HDF5ParameterSaver(tmp_path).save_data(parameters)
        except OSError as e:
            self.logger.error("Failed to save scan to HDF5 file %s: %s", self.hdf5_file_path, e)
            raise
        self.logger.info("Scan saved to HDF5 file: %s", self.hdf5_file_path)
        return self.hdf5_file_path

    def load(self) -> dict:
        """
        Returns:
            dict: Every dataset as an array, plus 'attrs' and, when stored, 'parameters'.
        """
        if not os.path.exists(self.hdf5_file_path):
            raise FileNotFoundError(f"File not found: {self.hdf5_file_path}")

        data = {}
        with h5py.File(self.hdf5_file_path, 'r') as h5file:
            for dataset_name in h5file.keys():
                if dataset_name == 'parameters':
                    continue
                data[dataset_name] = h5file[dataset_name][:]
            data['attrs'] = dict(h5file.attrs)
        data['has_contribution'] = data['has_contribution'].astype(bool)

        loader = HDF5ParameterLoader(self.hdf5_file_path)
        if loader.can_load_data():
            data['parameters'] = loader.load_data()
        return data
