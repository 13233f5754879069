#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit tests for tag-based alignment filters.
"""

import pytest

from pypafr.core.alignment_filter import filter_by_tag, filter_secondary_alignments
from pypafr.core.table_assembler import parse_paf_lines
from pypafr.config.exceptions import MissingRequiredColumn


@pytest.fixture
def tp_table(make_paf_line):
    """Rows with tp P, S, I and one row without tp."""
    return parse_paf_lines([
        make_paf_line(qname="primary", tags=["tp:A:P", "NM:i:1"]),
        make_paf_line(qname="secondary", tags=["tp:A:S", "NM:i:2"]),
        make_paf_line(qname="inversion", tags=["tp:A:I"]),
        make_paf_line(qname="untagged"),
    ])


class TestFilterSecondaryAlignments:
    """Test class for filter_secondary_alignments."""

    def test_keeps_primary_and_inversions(self, tp_table):
        """tp in {I, i, P} keeps the P and I rows in order."""
        result = filter_secondary_alignments(tp_table)

        assert list(result.column("qname")) == ["primary", "inversion"]
        assert result.column_names == tp_table.column_names

    def test_remove_inversions(self, tp_table):
        result = filter_secondary_alignments(tp_table, remove_inversions=True)
        assert list(result.column("qname")) == ["primary"]

    def test_input_table_is_unchanged(self, tp_table):
        filter_secondary_alignments(tp_table)
        assert tp_table.row_count == 4

    def test_missing_tp_column(self, make_paf_line):
        table = parse_paf_lines([make_paf_line(tags=["NM:i:0"])])

        with pytest.raises(MissingRequiredColumn) as excinfo:
            filter_secondary_alignments(table)
        assert excinfo.value.column == "tp"

    def test_keep_codes_follow_config(self, tp_table, reset_config):
        reset_config.SECONDARY_KEEP_CODES = ["S"]
        result = filter_secondary_alignments(tp_table)
        assert list(result.column("qname")) == ["secondary"]


class TestFilterByTag:
    """Test class for filter_by_tag."""

    def test_numeric_tag(self, tp_table):
        result = filter_by_tag(tp_table, "NM", [2])
        assert list(result.column("qname")) == ["secondary"]

    def test_absent_cells_never_match(self, tp_table):
        result = filter_by_tag(tp_table, "tp", ["P", "S", "I"])
        assert "untagged" not in list(result.column("qname"))

    def test_no_match_gives_empty_table(self, tp_table):
        result = filter_by_tag(tp_table, "tp", ["x"])

        assert result.row_count == 0
        assert result.column_names == tp_table.column_names

    def test_unknown_tag(self, tp_table):
        with pytest.raises(MissingRequiredColumn):
            filter_by_tag(tp_table, "AS", [1])
