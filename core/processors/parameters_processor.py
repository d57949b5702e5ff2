# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 10:22:05 2026
"""

import logging
from interfaces.parameter_interfaces import IParameterReader, IParameterParser
from typing import Optional

logger = logging.getLogger(__name__)

class ParametersProcessor:
    def __init__(self,
                 reader: Optional[IParameterReader] = None,
                 parser: Optional[IParameterParser] = None,
                 overrides: Optional[dict] = None):
        self.reader = reader
        self.parser = parser
        self.overrides = overrides or {}
        self.data = None

    def process(self):
        data = {}
        if self.reader:
            logger.info("Reading parameters using %s", self.reader.__class__.__name__)
            data.update(self.reader.read())
        # Command-line values win over the parameter file
        data.update({k: v for k, v in self.overrides.items() if v is not None})
        self.data = self.parser.parse(data) if self.parser else data

    def get_parameters(self) -> dict:
        return self.data
