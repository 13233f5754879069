#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Custom exceptions for pypafr.

This module defines exception classes used throughout pypafr to provide
more specific error information for parsing and table access failures.
"""


class PafrError(Exception):
    """Base exception class for all pypafr-specific errors."""
    pass


class FileError(PafrError):
    """Base class for file-related errors."""
    pass


class FileFormatError(FileError):
    """Error with file formatting or parsing."""
    pass


class ConfigError(PafrError):
    """Error with configuration parameters."""
    pass


class ParseError(FileFormatError):
    """
    Base class for errors raised while parsing PAF input.

    Any ParseError aborts the whole parse; no partial table is returned.
    """

    def __init__(self, message, line_number=None):
        """
        Initialize with the offending line number.

        Args:
            message (str): Error message
            line_number (int, optional): 1-based line number in the input
        """
        self.line_number = line_number

        detailed_message = message
        if line_number is not None:
            detailed_message = f"line {line_number}: {message}"

        super().__init__(detailed_message)


class MalformedRecord(ParseError):
    """A line carries fewer than the 12 mandatory PAF fields."""

    def __init__(self, message, line_number=None, token_count=None):
        self.token_count = token_count
        super().__init__(message, line_number)


class InvalidFieldType(ParseError):
    """A numeric core field could not be parsed as an integer."""

    def __init__(self, message, line_number=None, field=None, value=None):
        self.field = field
        self.value = value
        super().__init__(message, line_number)


class MalformedTag(ParseError):
    """An optional field is not in NAME:TYPECODE:VALUE form."""

    def __init__(self, message, line_number=None, token=None):
        self.token = token
        super().__init__(message, line_number)


class ReservedTagName(MalformedTag):
    """An optional field reuses the name of one of the 12 core columns."""
    pass


class InvalidTagValue(ParseError):
    """A tag declared numeric could not be parsed as a number."""

    def __init__(self, message, line_number=None, tag=None, type_code=None, value=None):
        self.tag = tag
        self.type_code = type_code
        self.value = value
        super().__init__(message, line_number)


class LoggingConfigError(ConfigError):
    """Error during logging configuration setup."""
    pass


class IntervalFormatError(FileFormatError):
    """Error with a BED interval file."""
    pass


class TableError(PafrError):
    """Base class for errors raised by operations on a parsed table."""
    pass


class MissingRequiredColumn(TableError):
    """A consumer requested a column the table does not have."""

    def __init__(self, message, column=None):
        self.column = column
        super().__init__(message)


class RowCountMismatch(TableError):
    """A single-row operation was invoked on a table without exactly one row."""

    def __init__(self, message, row_count=None):
        self.row_count = row_count
        super().__init__(message)
