#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit tests for the PAF line tokenizer.
"""

from pypafr.core.tokenizer import split_line


class TestSplitLine:
    """Tests for split_line."""

    def test_splits_on_tabs(self):
        """Fields are returned in input order."""
        assert split_line("a\tb\tc") == ["a", "b", "c"]

    def test_strips_line_terminators(self):
        """Both LF and CRLF terminators are removed."""
        assert split_line("a\tb\n") == ["a", "b"]
        assert split_line("a\tb\r\n") == ["a", "b"]

    def test_keeps_empty_trailing_fields(self):
        """Empty fields survive, including trailing ones."""
        assert split_line("a\t\tb\t\n") == ["a", "", "b", ""]

    def test_does_not_trim_whitespace(self):
        """Spaces inside fields are not interpreted."""
        assert split_line(" a \tb c") == [" a ", "b c"]

    def test_empty_line(self):
        """An empty line is a single empty field."""
        assert split_line("") == [""]
