"""
条目与配置验证工具
Validation helpers for sitemap entries and writer configuration.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from numbers import Real
from typing import Any, List, Tuple
from urllib.parse import urlparse

# <loc> values must be shorter than this
MAX_URL_LENGTH = 2048

PRIORITY_MIN = 0.0
PRIORITY_MAX = 1.0

_INDENT_CHARS = (" ", "\t")
_NEWLINES = ("\n", "\r\n")


def validate_url(url: str) -> Tuple[bool, str]:
    """
    验证 URL 是否有效

    Returns:
        (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL must not be empty"

    url = url.strip()
    if not url:
        return False, "URL must not be empty"

    if len(url) >= MAX_URL_LENGTH:
        return False, f"URL must be shorter than {MAX_URL_LENGTH} characters"

    if any(ch.isspace() for ch in url):
        return False, "URL contains whitespace"

    try:
        parsed = urlparse(url)
        if not parsed.scheme:
            return False, "URL is missing a scheme"
        if parsed.scheme.lower() not in ("http", "https"):
            return False, f"URL scheme must be http or https, got {parsed.scheme!r}"
        if not parsed.netloc or not parsed.hostname:
            return False, "URL is missing a host"
        # Raises ValueError for ports like ':abc' or ':99999'
        parsed.port
        return True, ""
    except ValueError as e:
        return False, f"URL is malformed: {e}"


def validate_priority(value: Any) -> Tuple[bool, str]:
    """
    验证 priority 是否在 [0.0, 1.0] 之间

    NaN is never in range.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False, f"priority must be a number, got {type(value).__name__}"
    value = float(value)
    if math.isnan(value) or not PRIORITY_MIN <= value <= PRIORITY_MAX:
        return False, f"priority {value!r} is outside [{PRIORITY_MIN}, {PRIORITY_MAX}]"
    return True, ""


def validate_lastmod(value: Any) -> Tuple[bool, str]:
    """lastmod must be a date or a timezone-aware datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return False, "lastmod datetime must be timezone-aware"
        try:
            value.astimezone(timezone.utc)
        except OverflowError:
            return False, "lastmod datetime is out of range when converted to UTC"
        return True, ""
    if isinstance(value, date):
        return True, ""
    return False, f"lastmod must be a date or datetime, got {type(value).__name__}"


def validate_config_basic(config_dict: Any) -> List[str]:
    """
    验证 writer 配置的基本结构

    Returns:
        错误消息列表（空列表表示无错误）
    """
    errors: List[str] = []

    if not isinstance(config_dict, dict):
        errors.append("Config must be a YAML mapping")
        return errors

    known = {"indent", "indent_char", "newline", "stylesheet"}
    for key in config_dict:
        if key not in known:
            errors.append(f"Unknown option {key!r}")

    if "indent" in config_dict:
        indent = config_dict["indent"]
        if indent is not None and (
            isinstance(indent, bool) or not isinstance(indent, int) or indent < 0
        ):
            errors.append("'indent' must be a non-negative integer or null")

    if "indent_char" in config_dict:
        if config_dict["indent_char"] not in _INDENT_CHARS:
            errors.append("'indent_char' must be a space or a tab")

    if "newline" in config_dict:
        if config_dict["newline"] not in _NEWLINES:
            errors.append("'newline' must be '\\n' or '\\r\\n'")

    stylesheet = config_dict.get("stylesheet")
    if stylesheet is not None:
        if not isinstance(stylesheet, str) or not stylesheet.strip():
            errors.append("'stylesheet' must be a non-empty string")

    return errors
