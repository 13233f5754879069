#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration module for pypafr.

Library code only creates module loggers; setup_logging is called by the
command line entry point. Debug output can be enabled for every module or
for a few modules named by their file name (e.g. 'tag_decoder').
"""

import os
import logging
from datetime import datetime
from typing import Dict, List, Optional, Union

from .exceptions import LoggingConfigError

PACKAGE_MODULES = (
    'pypafr.main',
    'pypafr.core.tokenizer',
    'pypafr.core.record_decoder',
    'pypafr.core.tag_decoder',
    'pypafr.core.schema_unifier',
    'pypafr.core.table_assembler',
    'pypafr.core.paf_table',
    'pypafr.core.alignment_filter',
    'pypafr.utils.file_io',
    'pypafr.config.config',
)

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DEBUG_FORMAT = '%(levelname)-8s [%(name)s] %(message)s'


class ModuleLevelFilter(logging.Filter):
    """
    Filter that applies a minimum level per logger name.

    Loggers not listed (and not below a listed name) pass at INFO and above.

    Example:
        >>> handler.addFilter(ModuleLevelFilter({'pypafr.core': logging.DEBUG}))
    """

    def __init__(self, module_levels: Dict[str, int]):
        super().__init__()
        self.module_levels = module_levels

    def filter(self, record):
        module_name = record.name
        for module_pattern, level in self.module_levels.items():
            if module_name == module_pattern or module_name.startswith(module_pattern + '.'):
                return record.levelno >= level
        return record.levelno >= logging.INFO


def _resolve_module_name(name: str) -> Optional[str]:
    """
    Resolve a file name such as 'tag_decoder' to its full module path.

    Returns:
        Full module path or None if not found
    """
    if name in PACKAGE_MODULES:
        return name
    for module in PACKAGE_MODULES:
        if module.rsplit('.', 1)[-1] == name:
            return module
    return None


def _normalize_debug_input(debug: Union[bool, List[str], str]) -> tuple:
    """
    Normalize various debug input formats to (debug_enabled, debug_modules).

    Example:
        >>> _normalize_debug_input(['tag_decoder'])
        (True, ['tag_decoder'])
    """
    if isinstance(debug, bool):
        return debug, None
    if isinstance(debug, str):
        return True, [debug]
    if isinstance(debug, list):
        return True, debug
    return False, None


def setup_logging(debug: Union[bool, List[str], str] = False,
                  log_dir: Optional[str] = None) -> str:
    """
    Configure a log file and console output.

    Args:
        debug: False for INFO output, True for DEBUG everywhere, or one or
               more module file names to debug
        log_dir: Directory for the log file (defaults to ~/.pypafr/logs)

    Returns:
        str: Path to the created log file

    Raises:
        LoggingConfigError: If the log directory or file cannot be created
    """
    debug_enabled, debug_modules = _normalize_debug_input(debug)

    if debug_modules:
        module_levels = {}
        for name in debug_modules:
            module = _resolve_module_name(name)
            if module:
                module_levels[module] = logging.DEBUG
    else:
        level = logging.DEBUG if debug_enabled else logging.INFO
        module_levels = {'pypafr': level}

    if log_dir is None:
        log_dir = os.path.join(os.path.expanduser("~"), ".pypafr", "logs")
    log_file = os.path.join(log_dir, f"pypafr_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
    except OSError as e:
        error_msg = f"Failed to create log file in {log_dir}"
        print(f"ERROR: {error_msg}: {str(e)}")  # Can't use logger here since setup failed
        raise LoggingConfigError(error_msg) from e

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug_enabled else '%(message)s'))
    console_handler.addFilter(ModuleLevelFilter(module_levels))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    main_logger = logging.getLogger("pypafr")
    if debug_enabled:
        main_logger.debug(f"Debug logging enabled, log file: {log_file}")
    if debug_modules:
        unresolved = [m for m in debug_modules if _resolve_module_name(m) is None]
        if unresolved:
            main_logger.warning(f"Unknown module names: {', '.join(unresolved)}")

    return log_file
