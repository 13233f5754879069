#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line tokenizer for PAF input.

Splits a raw line into its tab-delimited fields without interpreting them.
"""

from typing import List

FIELD_SEPARATOR = "\t"


def split_line(line: str) -> List[str]:
    """
    Split one PAF line into field strings.

    Only the line terminator is removed. Fields are not trimmed and empty
    fields (including trailing ones) are kept as empty strings.

    Args:
        line: Raw line, with or without its terminator

    Returns:
        List of field strings in input order

    Example:
        >>> split_line("q1\\t100\\t\\n")
        ['q1', '100', '']
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line.split(FIELD_SEPARATOR)
