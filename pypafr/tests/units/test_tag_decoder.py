#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit tests for the PAF tag decoder.
"""

import pytest

from pypafr.core.tag_decoder import (
    TAG_DECODERS, TagKind, TagValue, decode_tag, decode_tags
)
from pypafr.config.exceptions import MalformedTag, ReservedTagName, InvalidTagValue


class TestDecodeTag:
    """Test class for decode_tag."""

    def test_integer_tag_is_numeric(self):
        """NM:i:5 decodes to the number 5."""
        name, value = decode_tag("NM:i:5")

        assert name == "NM"
        assert value.kind is TagKind.NUMERIC
        assert value.value == 5.0
        assert value.type_code == "i"
        assert value.raw == "5"

    def test_float_tag_is_numeric(self):
        name, value = decode_tag("de:f:0.0125")
        assert name == "de"
        assert value.value == pytest.approx(0.0125)

    def test_h_code_is_numeric(self):
        """H is in the numeric dispatch set."""
        _, value = decode_tag("xx:H:42")
        assert value.kind is TagKind.NUMERIC
        assert value.value == 42.0

    def test_character_tag_is_text(self):
        """tp:A:P decodes to the text 'P'."""
        name, value = decode_tag("tp:A:P")

        assert name == "tp"
        assert value.kind is TagKind.TEXT
        assert value.value == "P"

    def test_unknown_code_falls_back_to_text(self):
        """Codes outside the numeric table keep their value verbatim."""
        _, value = decode_tag("zz:Q:12")
        assert value.kind is TagKind.TEXT
        assert value.value == "12"

    def test_value_may_contain_colons(self):
        """Only the first two colons separate the parts."""
        name, value = decode_tag("ds:Z:a:b:c")
        assert name == "ds"
        assert value.value == "a:b:c"

    def test_empty_text_value_is_kept(self):
        _, value = decode_tag("xs:Z:")
        assert value.value == ""

    @pytest.mark.parametrize("token", ["NM", "NM:i", "", "plain-text"])
    def test_too_few_parts_is_malformed(self, token):
        """Tokens with fewer than three parts raise MalformedTag."""
        with pytest.raises(MalformedTag) as excinfo:
            decode_tag(token, line_number=4)

        assert excinfo.value.token == token
        assert excinfo.value.line_number == 4

    @pytest.mark.parametrize("token", ["alen:i:7", "qname:Z:other", "mapq:f:1.5"])
    def test_core_column_name_is_reserved(self, token):
        """A tag may not reuse the name of a core column."""
        with pytest.raises(ReservedTagName) as excinfo:
            decode_tag(token, line_number=6)

        assert isinstance(excinfo.value, MalformedTag)
        assert excinfo.value.token == token
        assert excinfo.value.line_number == 6

    def test_core_names_are_case_sensitive(self):
        name, value = decode_tag("ALEN:i:7")
        assert name == "ALEN"
        assert value.value == 7.0

    def test_bad_numeric_value(self):
        """A numeric code with a text value raises InvalidTagValue."""
        with pytest.raises(InvalidTagValue) as excinfo:
            decode_tag("NM:i:five", line_number=2)

        err = excinfo.value
        assert err.tag == "NM"
        assert err.type_code == "i"
        assert err.value == "five"
        assert err.line_number == 2

    def test_dispatch_table(self):
        """Exactly f, H and i are registered as numeric decoders."""
        assert set(TAG_DECODERS) == {"f", "H", "i"}


class TestDecodeTags:
    """Test class for decode_tags."""

    def test_keeps_order_of_appearance(self):
        tags = decode_tags(["tp:A:P", "NM:i:3", "cg:Z:10M"])
        assert list(tags) == ["tp", "NM", "cg"]

    def test_no_tokens(self):
        assert decode_tags([]) == {}

    def test_repeated_tag_last_value_wins(self):
        """A repeated name keeps the value written last."""
        tags = decode_tags(["NM:i:1", "tp:A:P", "NM:i:9"])

        assert list(tags) == ["NM", "tp"]
        assert tags["NM"] == TagValue(TagKind.NUMERIC, 9.0, "i", "9")

    def test_error_aborts_whole_record(self):
        """One bad tag fails the whole record."""
        with pytest.raises(MalformedTag):
            decode_tags(["NM:i:1", "oops"])
