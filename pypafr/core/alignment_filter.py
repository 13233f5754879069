#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tag-based row filters for PAF tables.

Every filter returns a new PafTable with the same columns and the kept rows
in their original order.
"""

import logging
from typing import Iterable

from ..config import Config, MissingRequiredColumn
from .paf_table import PafTable

# Set up module logger
logger = logging.getLogger(__name__)


def filter_by_tag(table: PafTable, tag: str, values: Iterable) -> PafTable:
    """
    Keep rows whose tag value is one of the given values.

    Rows that do not carry the tag are dropped.

    Args:
        table: Table to filter
        tag: Tag column name
        values: Accepted tag values

    Returns:
        New PafTable with the matching rows

    Raises:
        MissingRequiredColumn: If the table has no such tag column
    """
    if not table.has_column(tag):
        error_msg = f"No '{tag}' tag in alignment table, cannot filter on it"
        logger.error(error_msg)
        raise MissingRequiredColumn(error_msg, column=tag)

    values = list(values)
    mask = table.column(tag).isin(values)
    result = table.subset(mask)

    logger.debug(f"Kept {result.row_count} of {table.row_count} alignments with {tag} in {values}")
    return result


def filter_secondary_alignments(table: PafTable, remove_inversions: bool = False) -> PafTable:
    """
    Remove secondary alignments using the 'tp' tag.

    Args:
        table: Table to filter
        remove_inversions: Also remove inversions (tp I or i), keeping
            primary alignments only

    Returns:
        New PafTable without secondary alignments

    Raises:
        MissingRequiredColumn: If the table has no 'tp' tag column
    """
    if not table.has_column("tp"):
        error_msg = "No 'tp' tag in alignment table, cannot filter secondary alignments"
        logger.error(error_msg)
        raise MissingRequiredColumn(error_msg, column="tp")

    codes = Config.PRIMARY_CODES if remove_inversions else Config.SECONDARY_KEEP_CODES
    return filter_by_tag(table, "tp", codes)
