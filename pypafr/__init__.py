"""
pypafr: read pairwise genomic alignments in PAF format.

This package parses PAF files, including their typed optional tags, into
an immutable pandas-backed table for filtering, summarizing and plotting.
"""

__version__ = "1.0.0"

from .config import (
    Config, PafrError, ParseError, MalformedRecord, InvalidFieldType,
    MalformedTag, InvalidTagValue, MissingRequiredColumn, RowCountMismatch
)
from .core import PafTable, TagKind, TagValue, filter_by_tag, filter_secondary_alignments
from .utils import read_paf, read_paf_text, read_bed

__all__ = [
    'Config',
    'PafrError',
    'ParseError',
    'MalformedRecord',
    'InvalidFieldType',
    'MalformedTag',
    'InvalidTagValue',
    'MissingRequiredColumn',
    'RowCountMismatch',
    'PafTable',
    'TagKind',
    'TagValue',
    'filter_by_tag',
    'filter_secondary_alignments',
    'read_paf',
    'read_paf_text',
    'read_bed',
]
