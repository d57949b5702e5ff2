# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 13:07:26 2026
"""
# readers/structure_file_reader.py

import os
from interfaces.base_interfaces import IFileReader

class StructureFileReader(IFileReader):
    def __init__(self, file_path: str):
        self.file_path = file_path

    def read(self) -> str:
        if not os.path.isfile(self.file_path):
            raise FileNotFoundError(f"Structure file not found: {self.file_path}")
        with open(self.file_path, 'r') as file:
            content = file.read()
        return content
