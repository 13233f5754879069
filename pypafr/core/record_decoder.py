#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Fixed-field decoder for PAF records.

Contains functionality for:
1. The 12 mandatory PAF column names and their order
2. The AlignmentRecord container for one parsed line
3. Casting the numeric core fields with fail-fast error reporting

PAF mandatory columns:
    Col 1:  Query name
    Col 2:  Query length
    Col 3:  Query start (0-based)
    Col 4:  Query end
    Col 5:  Strand (+/-)
    Col 6:  Target name
    Col 7:  Target length
    Col 8:  Target start
    Col 9:  Target end
    Col 10: Number of matching bases
    Col 11: Alignment block length
    Col 12: Mapping quality
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import MalformedRecord, InvalidFieldType

# Set up module logger
logger = logging.getLogger(__name__)

CORE_COLUMNS = (
    "qname", "qlen", "qstart", "qend", "strand",
    "tname", "tlen", "tstart", "tend", "nmatch",
    "alen", "mapq",
)

NUM_CORE_FIELDS = len(CORE_COLUMNS)

TEXT_COLUMNS = frozenset(("qname", "strand", "tname"))

INTEGER_PATTERN = re.compile(r"-?[0-9]+\Z")

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


@dataclass
class AlignmentRecord:
    """
    One parsed PAF line.

    Coordinates are 0-based and half-open. Tags keep the order in which
    they appeared on the line.
    """
    qname: str
    qlen: int
    qstart: int
    qend: int
    strand: str
    tname: str
    tlen: int
    tstart: int
    tend: int
    nmatch: int
    alen: int
    mapq: int
    tags: Dict[str, "TagValue"] = field(default_factory=dict)
    line_number: Optional[int] = None

    def core_values(self) -> tuple:
        """Return the 12 core fields in column order."""
        return tuple(getattr(self, name) for name in CORE_COLUMNS)


def _parse_int(token: str, column: str, line_number: Optional[int]) -> int:
    # int() alone would also accept ' 12', '1_000' and values past int64
    value = int(token) if INTEGER_PATTERN.match(token) else None
    if value is None or not INT64_MIN <= value <= INT64_MAX:
        error_msg = f"field '{column}' is not a 64-bit integer: {token!r}"
        logger.error(f"Line {line_number}: {error_msg}")
        raise InvalidFieldType(error_msg, line_number=line_number,
                               field=column, value=token)
    return value


def decode_record(tokens: List[str], line_number: Optional[int] = None) -> AlignmentRecord:
    """
    Decode the 12 mandatory fields of a tokenized PAF line.

    Tokens past the 12th are ignored here; they are tags and are decoded
    separately.

    Args:
        tokens: Field strings of one line
        line_number: 1-based line number used in error reports

    Returns:
        AlignmentRecord with core fields populated and an empty tag map

    Raises:
        MalformedRecord: If fewer than 12 tokens are present
        InvalidFieldType: If a numeric core field is not an integer
    """
    if len(tokens) < NUM_CORE_FIELDS:
        error_msg = f"expected at least {NUM_CORE_FIELDS} tab-separated fields, found {len(tokens)}"
        logger.error(f"Line {line_number}: {error_msg}")
        raise MalformedRecord(error_msg, line_number=line_number, token_count=len(tokens))

    values = {}
    for column, token in zip(CORE_COLUMNS, tokens):
        if column in TEXT_COLUMNS:
            values[column] = token
        else:
            values[column] = _parse_int(token, column, line_number)

    return AlignmentRecord(line_number=line_number, **values)
