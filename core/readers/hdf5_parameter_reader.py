# readers/hdf5_parameter_reader.py

from interfaces.parameter_interfaces import IParameterReader
from data_storage.hdf5_parameter_storage import HDF5ParameterLoader

class HDF5ParameterReader(IParameterReader):
    """Reads the parameters stored alongside an earlier scan, to repeat it."""

    def __init__(self, hdf5_file_path: str):
        self.hdf5_file_path = hdf5_file_path
        self.loader = HDF5ParameterLoader(hdf5_file_path)

    def read(self) -> dict:
        if not self.loader.can_load_data():
            raise FileNotFoundError(f"No stored parameters in {self.hdf5_file_path}")
        return self.loader.load_data()
