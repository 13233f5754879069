#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tag decoder for the optional PAF fields.

Contains functionality for:
1. The TagValue container (numeric or text)
2. Type-code dispatch through an explicit decoder table
3. Building the ordered per-record tag map

Optional fields follow the SAM convention NAME:TYPECODE:VALUE, for example
``NM:i:5``, ``tp:A:P`` or ``cg:Z:10M2I5M``. Codes f, H and i decode to a
number; every other code keeps the value text as-is.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from ..config import MalformedTag, ReservedTagName, InvalidTagValue
from .record_decoder import CORE_COLUMNS

# Set up module logger
logger = logging.getLogger(__name__)

TAG_SEPARATOR = ":"


class TagKind(Enum):
    """Value kind of a decoded tag."""
    NUMERIC = "numeric"
    TEXT = "text"


@dataclass(frozen=True)
class TagValue:
    """
    A decoded tag value.

    Attributes:
        kind: NUMERIC or TEXT
        value: float for NUMERIC tags, str for TEXT tags
        type_code: Type code as written in the file
        raw: Value text as written in the file
    """
    kind: TagKind
    value: Union[float, str]
    type_code: str
    raw: str


def _decode_numeric(name: str, type_code: str, raw: str,
                    line_number: Optional[int] = None) -> TagValue:
    try:
        value = float(raw)
    except ValueError as e:
        error_msg = f"tag '{name}' declared numeric (type '{type_code}') has value {raw!r}"
        logger.error(f"Line {line_number}: {error_msg}")
        raise InvalidTagValue(error_msg, line_number=line_number, tag=name,
                              type_code=type_code, value=raw) from e
    return TagValue(TagKind.NUMERIC, value, type_code, raw)


def _decode_text(name: str, type_code: str, raw: str,
                 line_number: Optional[int] = None) -> TagValue:
    return TagValue(TagKind.TEXT, raw, type_code, raw)


# Type code -> decoder. Codes missing from this table use _decode_text.
TAG_DECODERS: Dict[str, Callable[..., TagValue]] = {
    "f": _decode_numeric,
    "H": _decode_numeric,
    "i": _decode_numeric,
}

DEFAULT_DECODER = _decode_text


def decode_tag(token: str, line_number: Optional[int] = None) -> Tuple[str, TagValue]:
    """
    Decode one NAME:TYPECODE:VALUE token.

    The token is split on the first two colons only, so values may
    themselves contain colons.

    Args:
        token: Raw optional field
        line_number: 1-based line number used in error reports

    Returns:
        Tuple of (tag name, TagValue)

    Raises:
        MalformedTag: If the token has fewer than three colon-separated parts
        ReservedTagName: If the tag name is one of the 12 core column names
        InvalidTagValue: If a numeric tag value cannot be parsed

    Example:
        >>> decode_tag("NM:i:5")
        ('NM', TagValue(kind=<TagKind.NUMERIC: 'numeric'>, value=5.0, type_code='i', raw='5'))
    """
    parts = token.split(TAG_SEPARATOR, 2)
    if len(parts) < 3:
        error_msg = f"optional field {token!r} is not in NAME:TYPE:VALUE form"
        logger.error(f"Line {line_number}: {error_msg}")
        raise MalformedTag(error_msg, line_number=line_number, token=token)

    name, type_code, raw = parts
    if name in CORE_COLUMNS:
        error_msg = f"optional field {token!r} reuses the core column name '{name}'"
        logger.error(f"Line {line_number}: {error_msg}")
        raise ReservedTagName(error_msg, line_number=line_number, token=token)

    decoder = TAG_DECODERS.get(type_code, DEFAULT_DECODER)
    return name, decoder(name, type_code, raw, line_number)


def decode_tags(tokens: Iterable[str], line_number: Optional[int] = None) -> Dict[str, TagValue]:
    """
    Decode all optional fields of one record into an ordered map.

    A tag name repeated within one record keeps its first position in the
    map but takes the last value written.

    Args:
        tokens: Optional fields of one line (positions 13 and beyond)
        line_number: 1-based line number used in error reports

    Returns:
        Dictionary mapping tag names to TagValue in order of appearance
    """
    tags = {}
    for token in tokens:
        name, value = decode_tag(token, line_number)
        if name in tags:
            logger.debug(f"Line {line_number}: tag '{name}' repeated, keeping last value {value.raw!r}")
        tags[name] = value
    return tags
