# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 14:28:03 2026
"""
#parsers/skeleton_data_parser.py

from interfaces.base_interfaces import IConfigurationFileParser
from utilities.exceptions import ScanConfigurationError
import pandas as pd
import re
from typing import Tuple

class SkeletonDataParser(IConfigurationFileParser):
    """
    Parser for OLCAO skeleton (.skl) structure files::

        title
        ...
        end
        cell
        5.43 5.43 5.43 90.0 90.0 90.0
        fractional 2
        si1 0.00 0.00 0.00
        si1 0.25 0.25 0.25
        space 1_a
        supercell 1 1 1
        full

    Atom names carry the element followed by an optional species number.
    """

    _ATOM_NAME = re.compile(r"^([A-Za-z]+)(\d*)$")

    def parse(self, content: str) -> Tuple[dict, pd.DataFrame]:
        lines = [line.strip() for line in content.splitlines()]
        metadata = {}
        rows = []

        i = 0
        while i < len(lines):
            keyword = lines[i].split()[0].lower() if lines[i] else ''
            if keyword == 'title':
                # Free text up to the closing 'end'
                while i < len(lines) and lines[i].lower() != 'end':
                    i += 1
            elif keyword == 'cell':
                metadata['cell_params'] = self._extract_cell_params(lines, i + 1)
                i += 1
            elif keyword in ('fractional', 'frac', 'cartesian', 'cart'):
                metadata['coordinate_type'] = 'cartesian' if keyword.startswith('cart') else 'fractional'
                rows = self._extract_atoms(lines, i)
                i += len(rows)
            elif keyword == 'supercell':
                try:
                    metadata['supercell'] = [int(s) for s in lines[i].split()[1:4]]
                except ValueError:
                    raise ScanConfigurationError(f"Invalid supercell line: '{lines[i]}'")
            i += 1

        if 'cell_params' not in metadata:
            raise ScanConfigurationError("Skeleton file has no 'cell' block.")
        if not rows:
            raise ScanConfigurationError("Skeleton file has no atom list.")

        df = pd.DataFrame(rows, columns=['atomNumber', 'element', 'species', 'x', 'y', 'z'])
        return metadata, df

    def _extract_cell_params(self, lines, index) -> list:
        try:
            cell_params = [float(s) for s in lines[index].split()[:6]]
        except (IndexError, ValueError):
            raise ScanConfigurationError("Invalid cell parameters in skeleton file.")
        if len(cell_params) != 6:
            raise ScanConfigurationError("Invalid cell parameters in skeleton file.")
        return cell_params

    def _extract_atoms(self, lines, index) -> list:
        header = lines[index].split()
        try:
            num_atoms = int(header[1])
        except (IndexError, ValueError):
            raise ScanConfigurationError(f"Invalid atom count line: '{lines[index]}'")

        rows = []
        for atom_number, line in enumerate(lines[index + 1:index + 1 + num_atoms], start=1):
            fields = line.split()
            match = self._ATOM_NAME.match(fields[0]) if fields else None
            if match is None or len(fields) < 4:
                raise ScanConfigurationError(f"Invalid atom line {atom_number}: '{line}'")
            element, species = match.groups()
            try:
                xyz = [float(v) for v in fields[1:4]]
            except ValueError:
                raise ScanConfigurationError(f"Invalid coordinates on atom line {atom_number}: '{line}'")
            rows.append((atom_number, element.lower(), int(species) if species else 1, *xyz))

        if len(rows) != num_atoms:
            raise ScanConfigurationError(f"Expected {num_atoms} atoms, found {len(rows)}.")
        return rows
