"""
Text rendering for sitemap fields: XML escaping, W3C datetimes,
priorities and changefreq tokens.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from decimal import Decimal
from xml.sax.saxutils import escape

from .entry import ChangeFreq
from .errors import SitemapEncodingError

# saxutils.escape always handles &, < and >
_EXTRA_ENTITIES = {"'": "&apos;", '"': "&quot;"}

# Code points that may not appear anywhere in an XML 1.0 document
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def escape_text(text: str) -> str:
    """
    Escape &, <, >, ' and " for use in element text or attribute values.

    Raises:
        SitemapEncodingError: text contains a character XML 1.0 forbids.
    """
    match = _ILLEGAL_XML_CHARS.search(text)
    if match:
        raise SitemapEncodingError(
            f"Character U+{ord(match.group()):04X} at position {match.start()} "
            f"is not allowed in XML: {text!r}"
        )
    return escape(text, _EXTRA_ENTITIES)


def format_lastmod(value: date) -> str:
    """
    Render lastmod in W3C Datetime form.

    Datetimes are converted to UTC and written with second precision and
    a 'Z' designator, e.g. 2020-11-22T15:10:15Z. Plain dates are written
    as YYYY-MM-DD.
    """
    if isinstance(value, datetime):
        utc = value.astimezone(timezone.utc)
        return utc.replace(microsecond=0, tzinfo=None).isoformat() + "Z"
    return value.isoformat()


def format_priority(value: float) -> str:
    """
    Render priority as a plain decimal with at least one fractional digit.

    Uses the shortest repr of the float, so 0.8 stays '0.8' and 1e-05
    becomes '0.00001' rather than scientific notation.
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." not in text:
        text += ".0"
    return text


def format_changefreq(value: ChangeFreq) -> str:
    return value.token
