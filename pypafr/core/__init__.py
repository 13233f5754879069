"""
Core parsing modules for pypafr.

This subpackage contains the PAF parsing stages:
- tokenizer: line splitting
- record_decoder: the 12 mandatory fields
- tag_decoder: typed optional fields
- schema_unifier: per-record tags into shared columns
- table_assembler: final table construction
- paf_table: the read-only table facade
- alignment_filter: tag-based row filters
"""

from .record_decoder import AlignmentRecord, CORE_COLUMNS, decode_record
from .tag_decoder import TagKind, TagValue, decode_tag, decode_tags
from .schema_unifier import ABSENT, unify_tags
from .paf_table import PafTable
from .table_assembler import assemble_table, parse_paf_lines
from .alignment_filter import filter_by_tag, filter_secondary_alignments

__all__ = [
    'AlignmentRecord',
    'CORE_COLUMNS',
    'decode_record',
    'TagKind',
    'TagValue',
    'decode_tag',
    'decode_tags',
    'ABSENT',
    'unify_tags',
    'PafTable',
    'assemble_table',
    'parse_paf_lines',
    'filter_by_tag',
    'filter_secondary_alignments',
]
