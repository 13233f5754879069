#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schema unification for per-record tag maps.

Records carry different tag sets. This module pivots the list of per-record
maps into one column per tag name, in order of first appearance, writing
an explicit absent marker wherever a record lacked the tag.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set

from .tag_decoder import TagKind, TagValue

# Set up module logger
logger = logging.getLogger(__name__)

# Marks a record that did not carry a tag
ABSENT = None

TagColumns = Dict[str, List[Optional[TagValue]]]


def unify_tags(tag_maps: Sequence[Dict[str, TagValue]]) -> TagColumns:
    """
    Merge per-record tag maps into aligned tag columns.

    Cells are stored as-is; columns whose rows disagree on value kind are
    not coerced here.

    Args:
        tag_maps: One tag map per record, in record order

    Returns:
        Ordered dictionary mapping each tag name to a list with one entry
        per record, ABSENT where the record lacked the tag

    Example:
        >>> cols = unify_tags([{"cg": v1}, {}])
        >>> cols["cg"]
        [v1, None]
    """
    n_records = len(tag_maps)
    columns: TagColumns = {}

    for row, tags in enumerate(tag_maps):
        for name, value in tags.items():
            column = columns.get(name)
            if column is None:
                column = [ABSENT] * n_records
                columns[name] = column
            column[row] = value

    logger.debug(f"Unified {len(columns)} tag columns across {n_records} records")
    return columns


def column_kinds(columns: TagColumns) -> Dict[str, Set[TagKind]]:
    """
    Report the value kinds observed in each tag column.

    Args:
        columns: Output of unify_tags

    Returns:
        Dictionary mapping tag name to the set of TagKind seen in that column
    """
    return {
        name: {cell.kind for cell in cells if cell is not ABSENT}
        for name, cells in columns.items()
    }
