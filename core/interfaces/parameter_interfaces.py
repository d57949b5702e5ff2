# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:47:19 2026
"""

from abc import ABC, abstractmethod

class IParameterReader(ABC):
    @abstractmethod
    def read(self) -> dict:
        pass

class IParameterParser(ABC):
    @abstractmethod
    def parse(self, data: dict) -> dict:
        pass
