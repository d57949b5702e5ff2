# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 09:18:40 2026
"""

# readers/json_parameter_reader.py

import json
import logging
import os
from interfaces.parameter_interfaces import IParameterReader

logger = logging.getLogger(__name__)

class JSONParameterReader(IParameterReader):
    def __init__(self, json_file_path: str):
        self.json_file_path = json_file_path

    def read(self) -> dict:
        if not os.path.isfile(self.json_file_path):
            raise FileNotFoundError(f"Parameter file not found: {self.json_file_path}")
        try:
            with open(self.json_file_path, 'r') as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            logger.error("Failed to read JSON file %s: %s", self.json_file_path, e)
            raise
        if not isinstance(data, dict):
            raise ValueError(f"Parameter file {self.json_file_path} must hold a JSON object")
        return data
