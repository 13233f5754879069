#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Read-only facade over a parsed PAF table.

Contains functionality for:
1. Row and column accessors
2. Human-readable summaries and single-alignment descriptions
3. Row subsetting that returns new tables
4. Distinct (name, length) enumeration per alignment axis

The wrapped DataFrame is never handed out directly; accessors return
copies so a table stays unchanged after it is built.
"""

import logging
from typing import List

import pandas as pd

from ..config import Config, MissingRequiredColumn, RowCountMismatch
from .record_decoder import CORE_COLUMNS, NUM_CORE_FIELDS

# Set up module logger
logger = logging.getLogger(__name__)

_AXIS_COLUMNS = {
    "query": ("qname", "qlen"),
    "target": ("tname", "tlen"),
}


class PafTable:
    """
    Immutable table of PAF alignments.

    The 12 core columns come first, followed by one column per tag name.
    A row missing a tag holds pandas.NA in that column.

    Example:
        >>> table = read_paf("alignments.paf")
        >>> print(table.summarize())
        >>> table.column("NM")
    """

    def __init__(self, frame: pd.DataFrame):
        """
        Wrap a DataFrame holding at least the 12 core PAF columns.

        Args:
            frame: DataFrame with core columns first

        Raises:
            MissingRequiredColumn: If a core column is missing
        """
        missing = [name for name in CORE_COLUMNS if name not in frame.columns]
        if missing:
            error_msg = f"Table is missing core columns: {', '.join(missing)}"
            logger.error(error_msg)
            raise MissingRequiredColumn(error_msg, column=missing[0])

        self._frame = frame.reset_index(drop=True)

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return f"<PafTable: {self.row_count} alignments, {len(self.tag_names)} tags>"

    def __str__(self) -> str:
        if self.row_count == 1:
            return f"Single alignment:\n {self.describe_single()}"
        return self.summarize()

    @property
    def row_count(self) -> int:
        return len(self._frame)

    @property
    def column_names(self) -> List[str]:
        return list(self._frame.columns)

    @property
    def tag_names(self) -> List[str]:
        return list(self._frame.columns[NUM_CORE_FIELDS:])

    def has_column(self, name: str) -> bool:
        return name in self._frame.columns

    def column(self, name: str) -> pd.Series:
        """
        Return a copy of one column.

        Raises:
            MissingRequiredColumn: If the table has no such column
        """
        if not self.has_column(name):
            error_msg = f"No '{name}' column in alignment table"
            logger.error(error_msg)
            raise MissingRequiredColumn(error_msg, column=name)
        return self._frame[name].copy()

    def to_dataframe(self) -> pd.DataFrame:
        """Return a copy of the underlying DataFrame."""
        return self._frame.copy()

    def subset(self, mask) -> 'PafTable':
        """
        Return a new table with the rows selected by a boolean mask.

        Column set and row order are preserved.

        Args:
            mask: Boolean sequence or Series with one entry per row
        """
        mask = pd.Series(mask, index=self._frame.index).fillna(False).astype(bool)
        return PafTable(self._frame.loc[mask])

    def summarize(self) -> str:
        """
        Build a short text report of the table.

        Reports the number of alignments with the summed block length in
        megabases, the number of distinct query and target sequences, and
        the tag columns.

        Returns:
            Multi-line summary string
        """
        total_mb = round(self._frame["alen"].sum() / 1e6, 1)
        n_queries = self._frame["qname"].nunique()
        n_targets = self._frame["tname"].nunique()

        tags = self.tag_names
        limit = Config.TAG_SUMMARY_LIMIT
        tag_list = ", ".join(tags[:limit])
        if len(tags) > limit:
            tag_list += " ..."

        return (
            f"PafTable with {self.row_count} alignments ({total_mb:.1f}Mb)\n"
            f" {n_queries} query seqs\n"
            f" {n_targets} target seqs\n"
            f" {len(tags)} tags: {tag_list}"
        )

    def describe_single(self) -> str:
        """
        Describe the only alignment in a one-row table.

        Returns:
            String of the form "qname:qstart-qend v tname:tstart-tend"

        Raises:
            RowCountMismatch: If the table does not have exactly one row
        """
        if self.row_count != 1:
            error_msg = f"describe_single requires exactly one alignment, table has {self.row_count}"
            logger.error(error_msg)
            raise RowCountMismatch(error_msg, row_count=self.row_count)

        row = self._frame.iloc[0]
        return (f"{row['qname']}:{row['qstart']}-{row['qend']} v "
                f"{row['tname']}:{row['tstart']}-{row['tend']}")

    def sequence_lengths(self, axis: str = "target") -> pd.DataFrame:
        """
        List the distinct sequences on one alignment axis with their lengths.

        Args:
            axis: "query" or "target"

        Returns:
            DataFrame with 'name' and 'length' columns in order of first appearance

        Raises:
            ValueError: If axis is not "query" or "target"
        """
        if axis not in _AXIS_COLUMNS:
            raise ValueError(f"axis must be 'query' or 'target', got {axis!r}")

        name_col, len_col = _AXIS_COLUMNS[axis]
        sizes = self._frame[[name_col, len_col]].drop_duplicates()
        sizes.columns = ["name", "length"]
        return sizes.reset_index(drop=True)
