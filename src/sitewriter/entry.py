"""
Sitemap entry model.

`UrlEntry` is one <url> element of a sitemap. It is an immutable value
object: priority and lastmod are checked when it is constructed and the
writer never checks them again. The location is only checked on the
validating paths (`UrlEntry.parse` and `UrlEntryDraft.build`); the plain
constructor accepts any string, which the writer escapes on output.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from numbers import Real
from typing import Optional, Union

from .errors import (
    InvalidUrlError,
    MissingRequiredFieldError,
    NaiveTimestampError,
    OutOfRangeError,
)
from .validators import (
    PRIORITY_MAX,
    PRIORITY_MIN,
    validate_lastmod,
    validate_priority,
    validate_url,
)


class ChangeFreq(Enum):
    """
    How frequently the page is likely to change.

    This is a hint for crawlers and may not match how often they actually
    crawl the page. The member value is the token written to <changefreq>.
    """

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"

    @property
    def token(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


ChangeFreqLike = Union[ChangeFreq, str]

# Datetimes must stay representable after conversion to UTC
LASTMOD_MIN = datetime.min.replace(tzinfo=timezone.utc)
LASTMOD_MAX = datetime.max.replace(tzinfo=timezone.utc)


def _coerce_changefreq(value: ChangeFreqLike) -> ChangeFreq:
    if isinstance(value, ChangeFreq):
        return value
    if isinstance(value, str):
        # ChangeFreq("montly") raises ValueError
        return ChangeFreq(value.strip().lower())
    raise TypeError(f"changefreq must be a ChangeFreq or str, got {type(value).__name__}")


def _check_priority(value) -> float:
    is_valid, msg = validate_priority(value)
    if not is_valid:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(msg)
        raise OutOfRangeError(value, PRIORITY_MIN, PRIORITY_MAX)
    # -0.0 + 0.0 == 0.0, so "-0.0" is never written
    return float(value) + 0.0


def _check_lastmod(value: date) -> None:
    is_valid, msg = validate_lastmod(value)
    if not is_valid:
        if not isinstance(value, date):
            raise TypeError(msg)
        if isinstance(value, datetime) and value.utcoffset() is not None:
            raise OutOfRangeError(value, LASTMOD_MIN, LASTMOD_MAX)
        raise NaiveTimestampError(msg)


def _check_loc(loc: str) -> str:
    is_valid, msg = validate_url(loc)
    if not is_valid:
        raise InvalidUrlError(loc, msg)
    return loc.strip()


@dataclass(frozen=True)
class UrlEntry:
    """A sitemap url entry."""

    # URL of the page, including the scheme
    loc: str
    # date (YYYY-MM-DD) or timezone-aware datetime
    lastmod: Optional[date] = None
    changefreq: Optional[ChangeFreq] = None
    # Relative priority among URLs of the same site, 0.0 to 1.0
    priority: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.loc, str):
            raise TypeError(f"loc must be a str, got {type(self.loc).__name__}")
        if self.lastmod is not None:
            _check_lastmod(self.lastmod)
        if self.changefreq is not None:
            object.__setattr__(self, "changefreq", _coerce_changefreq(self.changefreq))
        if self.priority is not None:
            object.__setattr__(self, "priority", _check_priority(self.priority))

    @classmethod
    def parse(
        cls,
        loc: str,
        lastmod: Optional[date] = None,
        changefreq: Optional[ChangeFreqLike] = None,
        priority: Optional[float] = None,
    ) -> "UrlEntry":
        """
        Create an entry after validating `loc` as an absolute http(s) URL.

        Raises:
            InvalidUrlError: `loc` is empty, relative, not http(s), has no
                host or a bad port, or is 2048 characters or longer.
        """
        return cls(
            loc=_check_loc(loc),
            lastmod=lastmod,
            changefreq=changefreq,
            priority=priority,
        )


@dataclass
class UrlEntryDraft:
    """
    Incremental builder for `UrlEntry`.

    All fields start unset. Setters return the draft so calls can be chained:

        entry = UrlEntryDraft().set_loc("https://example.com/").set_priority(0.8).build()
    """

    loc: Optional[str] = None
    lastmod: Optional[date] = None
    changefreq: Optional[ChangeFreqLike] = None
    priority: Optional[float] = None

    def set_loc(self, loc: str) -> "UrlEntryDraft":
        self.loc = loc
        return self

    def set_lastmod(self, lastmod: Optional[date]) -> "UrlEntryDraft":
        self.lastmod = lastmod
        return self

    def set_changefreq(self, changefreq: Optional[ChangeFreqLike]) -> "UrlEntryDraft":
        self.changefreq = changefreq
        return self

    def set_priority(self, priority: Optional[float]) -> "UrlEntryDraft":
        self.priority = priority
        return self

    def build(self) -> UrlEntry:
        """
        Finalize the draft.

        Raises:
            MissingRequiredFieldError: loc was never set.
            InvalidUrlError: loc is not an absolute http(s) URL.
            OutOfRangeError: priority is outside [0.0, 1.0].
            NaiveTimestampError: lastmod is a datetime without tzinfo.
        """
        if self.loc is None:
            raise MissingRequiredFieldError("loc")
        return UrlEntry.parse(
            self.loc,
            lastmod=self.lastmod,
            changefreq=self.changefreq,
            priority=self.priority,
        )
