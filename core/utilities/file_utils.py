# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 10:03:22 2026
"""

# utilities/file_utils.py

import os
import tempfile
from contextlib import contextmanager

def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@contextmanager
def atomic_path(file_path: str):
    """
    Yield the path of a temporary sibling of ``file_path``. The caller writes
    it; it replaces ``file_path`` only when the block finishes without an
    exception, with the permissions a plain ``open`` would have given.
    """
    directory = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix='.' + os.path.basename(file_path) + '.', dir=directory)
    os.close(fd)
    try:
        yield tmp_path
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, file_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


@contextmanager
def atomic_output(file_path: str, mode: str = 'w'):
    """Open a temporary sibling of ``file_path``; see :func:`atomic_path`."""
    with atomic_path(file_path) as tmp_path:
        with open(tmp_path, mode) as handle:
            yield handle


def format_values(values, per_line: int = 5, fmt: str = '{:16.8f}'):
    """Yield text lines holding ``per_line`` fixed-width values each."""
    values = list(values)
    for start in range(0, len(values), per_line):
        yield ''.join(fmt.format(v) for v in values[start:start + per_line])
