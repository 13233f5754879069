#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File input module for pypafr.

Contains functionality for:
1. Reading PAF alignment files (plain or gzip-compressed) into a PafTable
2. Reading BED interval files into a pandas DataFrame

Files are read into memory in full before parsing.
"""

import gzip
import logging
import os
from pathlib import Path
from typing import Union

import pandas as pd

from ..config import Config, FileError, IntervalFormatError
from ..core import PafTable, parse_paf_lines

# Type alias for path inputs
PathLike = Union[str, Path]

# Set up module logger
logger = logging.getLogger(__name__)

BED_COLUMNS = ["chrom", "start", "end"]


def _open_text(path: str):
    """Open a plain or gzip-compressed text file for reading."""
    if path.endswith('.gz'):
        return gzip.open(path, 'rt', encoding=Config.FILE_ENCODING)
    return open(path, 'r', encoding=Config.FILE_ENCODING)


def read_paf(file_name: PathLike) -> PafTable:
    """
    Read a PAF alignment file.

    Args:
        file_name: Path to the .paf or .paf.gz file

    Returns:
        PafTable with one row per alignment

    Raises:
        FileError: If the file does not exist or cannot be read
        ParseError: If any line is malformed (no partial table is returned)

    Example:
        >>> ali = read_paf("fungi.paf")
        >>> print(ali)
    """
    path = str(file_name)

    if not os.path.exists(path):
        error_msg = f"PAF file not found: {path}"
        logger.error(error_msg)
        raise FileError(error_msg)

    try:
        with _open_text(path) as f:
            lines = f.readlines()
    except (OSError, EOFError, UnicodeDecodeError) as e:  # EOFError: truncated gzip stream
        error_msg = f"Failed to read PAF file {path}: {str(e)}"
        logger.error(error_msg)
        logger.debug(f"Error details: {str(e)}", exc_info=True)
        raise FileError(error_msg) from e

    logger.debug(f"Read {len(lines)} lines from {path}")
    table = parse_paf_lines(lines)
    logger.info(f"Loaded {table.row_count} alignments from {path}")
    return table


def read_paf_text(text: str) -> PafTable:
    """
    Parse PAF content held in memory.

    Args:
        text: PAF content, one record per line

    Returns:
        PafTable with one row per alignment
    """
    return parse_paf_lines(text.split("\n"))


def read_bed(file_name: PathLike, **kwargs) -> pd.DataFrame:
    """
    Read genomic intervals in BED format.

    The first three columns must hold a 0-based half-open interval
    (sequence id, start, end) and are renamed 'chrom', 'start' and 'end'.
    Any other columns are left unmodified.

    Args:
        file_name: Path to the BED file
        **kwargs: Extra arguments passed to pandas.read_csv (e.g. skiprows)

    Returns:
        DataFrame with at least the columns 'chrom', 'start' and 'end'

    Raises:
        FileError: If the file does not exist
        IntervalFormatError: If the file is empty or has fewer than three columns

    Example:
        >>> centro = read_bed("Q_centro.bed")
        >>> centro[["chrom", "start", "end"]]
    """
    path = str(file_name)

    if not os.path.exists(path):
        error_msg = f"BED file not found: {path}"
        logger.error(error_msg)
        raise FileError(error_msg)

    options = {"sep": "\t", "header": None, "comment": "#"}
    options.update(kwargs)

    try:
        intervals = pd.read_csv(path, **options)
    except pd.errors.EmptyDataError as e:
        error_msg = f"BED file has no intervals: {path}"
        logger.error(error_msg)
        raise IntervalFormatError(error_msg) from e
    except pd.errors.ParserError as e:
        error_msg = f"Failed to parse BED file {path}: {str(e)}"
        logger.error(error_msg)
        raise IntervalFormatError(error_msg) from e

    if intervals.shape[1] < 3:
        error_msg = f"BED file must have at least three columns, data has {intervals.shape[1]}"
        logger.error(error_msg)
        raise IntervalFormatError(error_msg)

    intervals = intervals.rename(columns=dict(zip(intervals.columns[:3], BED_COLUMNS)))
    logger.debug(f"Loaded {len(intervals)} intervals from {path}")
    return intervals
