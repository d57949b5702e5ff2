# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:42:04 2026
"""

# interfaces/base_interfaces.py

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple
import pandas as pd
import numpy as np

class IFileReader(ABC):
    @abstractmethod
    def read(self) -> str:
        pass


class IConfigurationFileParser(ABC):
    @abstractmethod
    def parse(self, content: str) -> Tuple[dict, pd.DataFrame]:
        pass

class IMetadataExtractor(ABC):
    @abstractmethod
    def extract(self, header_lines: List[str]) -> Dict:
        pass

class IConfigurationFileProcessor(ABC):
    @abstractmethod
    def process(self):
        pass

    @abstractmethod
    def get_atoms(self) -> pd.DataFrame:
        pass

    @abstractmethod
    def get_cartesian_coordinates(self) -> np.ndarray:
        pass

    @abstractmethod
    def get_elements(self) -> pd.Series:
        pass

    @abstractmethod
    def get_atom_ids(self) -> np.ndarray:
        pass

    @abstractmethod
    def get_vectors(self) -> np.ndarray:
        pass

    @abstractmethod
    def get_metric(self) -> Dict:
        pass

class IConfigurationProcessorFactory(ABC):
    @abstractmethod
    def create_processor(self, file_path: str) -> 'IConfigurationFileProcessor':
        pass

class IConfigDataSaver(ABC):
    @abstractmethod
    def save_data(self, data):
        pass

class IConfigDataLoader(ABC):
    @abstractmethod
    def can_load_data(self) -> bool:
        pass

    @abstractmethod
    def load_data(self):
        pass

class IScanWriter(ABC):
    @abstractmethod
    def write(self, result, output_path: str) -> str:
        """Write a ScanResult to ``output_path`` and return the path."""
        pass
