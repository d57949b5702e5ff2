# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:11:52 2026
"""

# utilities/logger_config.py
import os
import sys
import logging
import logging.config
from typing import Optional

LOG_FORMAT = '%(asctime)s - [%(levelname)s] - %(name)s - (%(filename)s:%(lineno)d) - %(message)s'


def setup_logging(default_path='logging.conf', default_level=logging.INFO,
                  env_key='SPECTRA_SCAN_LOG_CFG', log_file: Optional[str] = None):
    """
    Setup logging configuration.

    A logging.conf file (or the file named by $SPECTRA_SCAN_LOG_CFG) wins;
    otherwise log to stdout and, if requested, append to ``log_file``.
    """
    path = default_path
    value = os.getenv(env_key, None)
    if value:
        path = value

    if os.path.exists(path):
        logging.config.fileConfig(path, disable_existing_loggers=False)
        logging.getLogger(__name__).debug("Logging configuration loaded from %s", path)
        return

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file, 'a', 'utf8'))

    logging.basicConfig(level=default_level, format=LOG_FORMAT, handlers=handlers)
    logging.getLogger(__name__).debug("Basic logging configuration set with level %s", default_level)
