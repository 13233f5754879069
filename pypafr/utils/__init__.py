"""
Utility modules for pypafr.

This subpackage contains:
- file_io: PAF and BED file readers
"""

from .file_io import read_paf, read_paf_text, read_bed

__all__ = [
    'read_paf',
    'read_paf_text',
    'read_bed',
]
