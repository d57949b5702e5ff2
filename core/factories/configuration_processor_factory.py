# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 15:31:19 2026
"""

# factories/configuration_processor_factory.py

from interfaces.base_interfaces import IConfigurationProcessorFactory
from processors.structure_processor import StructureProcessor
from parsers.rmc6f_data_parser import RMC6fDataParser
from parsers.skeleton_data_parser import SkeletonDataParser
from utilities.exceptions import ScanConfigurationError

class RMC6fProcessorFactory(IConfigurationProcessorFactory):
    def create_processor(self, file_path: str) -> StructureProcessor:
        return StructureProcessor(file_path, RMC6fDataParser())

class SkeletonProcessorFactory(IConfigurationProcessorFactory):
    def create_processor(self, file_path: str) -> StructureProcessor:
        return StructureProcessor(file_path, SkeletonDataParser())

class ConfigurationProcessorFactoryProvider:
    _factories = {
        'rmc6f': RMC6fProcessorFactory(),
        'skl': SkeletonProcessorFactory(),
    }

    @staticmethod
    def get_factory(file_type: str) -> IConfigurationProcessorFactory:
        factory = ConfigurationProcessorFactoryProvider._factories.get(file_type)
        if factory:
            return factory
        else:
            raise ScanConfigurationError(f"Unsupported file type: {file_type}")
