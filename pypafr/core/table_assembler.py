#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Table assembly for parsed PAF records.

Contains functionality for:
1. Converting core fields and unified tag columns into pandas columns
2. Resolving the value kind of each tag column
3. The single-pass driver from raw lines to a finished PafTable

Core columns always come first in their fixed order. Tag columns follow
in order of first appearance. Missing tags are pandas.NA.
"""

import logging
from typing import Iterable, List, Sequence, Set

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..config import Config
from .tokenizer import split_line
from .record_decoder import AlignmentRecord, CORE_COLUMNS, NUM_CORE_FIELDS, TEXT_COLUMNS, decode_record
from .tag_decoder import TagKind, decode_tags
from .schema_unifier import ABSENT, TagColumns, column_kinds, unify_tags
from .paf_table import PafTable

# Set up module logger
logger = logging.getLogger(__name__)


def _core_frame(records: Sequence[AlignmentRecord]) -> pd.DataFrame:
    frame = pd.DataFrame([record.core_values() for record in records], columns=list(CORE_COLUMNS))
    return frame.astype({column: object if column in TEXT_COLUMNS else "int64"
                         for column in CORE_COLUMNS})


def _tag_series(name: str, cells: List, kinds: Set[TagKind]) -> pd.Series:
    """
    Convert one unified tag column into a pandas Series.

    All-numeric columns become nullable Float64 and all-text columns become
    the pandas string dtype. A column mixing kinds keeps each cell's raw
    text in a string column.
    """
    if kinds == {TagKind.NUMERIC}:
        # The mask marks absent cells only, so a written 'nan' stays NaN
        values = np.array([0.0 if cell is ABSENT else cell.value for cell in cells], dtype="float64")
        mask = np.array([cell is ABSENT for cell in cells], dtype=bool)
        return pd.Series(pd.arrays.FloatingArray(values, mask))

    if len(kinds) > 1:
        codes = sorted({cell.type_code for cell in cells if cell is not ABSENT})
        logger.warning(f"Tag '{name}' has both numeric and text values "
                       f"(type codes {', '.join(codes)}); storing it as text")
        return pd.Series([pd.NA if cell is ABSENT else cell.raw for cell in cells],
                         dtype="string")

    return pd.Series([pd.NA if cell is ABSENT else cell.value for cell in cells],
                     dtype="string")


def assemble_table(records: Sequence[AlignmentRecord], tag_columns: TagColumns) -> PafTable:
    """
    Build the final table from decoded records and unified tag columns.

    Args:
        records: Decoded records in input order
        tag_columns: Output of unify_tags for the same records

    Returns:
        PafTable with one row per record
    """
    frame = _core_frame(records)

    if tag_columns:
        kinds = column_kinds(tag_columns)
        tags = pd.DataFrame({name: _tag_series(name, cells, kinds[name])
                             for name, cells in tag_columns.items()},
                            columns=list(tag_columns))
        frame = pd.concat([frame, tags], axis=1)

    logger.debug(f"Assembled table with {len(frame)} rows and {len(frame.columns)} columns")
    return PafTable(frame)


def parse_paf_lines(lines: Iterable[str]) -> PafTable:
    """
    Parse PAF lines into a PafTable in a single pass.

    Blank lines are skipped. Line numbers in error reports count every
    physical line, blank ones included. The first bad line aborts the
    parse and no table is returned.

    Args:
        lines: Raw PAF lines, with or without terminators

    Returns:
        PafTable holding every record in input order

    Raises:
        MalformedRecord: If a line has fewer than 12 fields
        InvalidFieldType: If a numeric core field is not an integer
        MalformedTag: If an optional field is not NAME:TYPE:VALUE
        ReservedTagName: If a tag reuses a core column name
        InvalidTagValue: If a numeric tag value cannot be parsed
    """
    lines = list(lines)
    show_progress = Config.SHOW_PROGRESS and len(lines) >= Config.PROGRESS_MIN_LINES

    records = []
    with tqdm(total=len(lines), desc="Parsing PAF records", unit="line",
              disable=not show_progress) as progress:
        for line_number, line in enumerate(lines, start=1):
            progress.update()
            if not line.rstrip("\r\n"):
                continue
            tokens = split_line(line)
            record = decode_record(tokens, line_number)
            record.tags = decode_tags(tokens[NUM_CORE_FIELDS:], line_number)
            records.append(record)

    tag_columns = unify_tags([record.tags for record in records])
    table = assemble_table(records, tag_columns)

    logger.debug(f"Parsed {table.row_count} alignments with {len(table.tag_names)} tag columns")
    return table
