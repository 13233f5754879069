#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration package for pypafr.
"""

from .config import Config
from .logging_config import setup_logging
from .exceptions import (
    PafrError, FileError, FileFormatError,
    ConfigError, LoggingConfigError, ParseError, MalformedRecord, InvalidFieldType,
    MalformedTag, ReservedTagName, InvalidTagValue, IntervalFormatError,
    TableError, MissingRequiredColumn, RowCountMismatch
)

__all__ = [
    'Config',
    'setup_logging',
    'PafrError',
    'FileError',
    'FileFormatError',
    'ConfigError',
    'LoggingConfigError',
    'ParseError',
    'MalformedRecord',
    'InvalidFieldType',
    'MalformedTag',
    'ReservedTagName',
    'InvalidTagValue',
    'IntervalFormatError',
    'TableError',
    'MissingRequiredColumn',
    'RowCountMismatch',
]
