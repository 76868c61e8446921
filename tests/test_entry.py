"""
条目模型测试
Tests for UrlEntry, UrlEntryDraft and ChangeFreq.
Run with: pytest tests/test_entry.py -v
"""

import dataclasses
import math
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sitewriter.entry import ChangeFreq, UrlEntry, UrlEntryDraft
from sitewriter.errors import (
    InvalidUrlError,
    MissingRequiredFieldError,
    NaiveTimestampError,
    OutOfRangeError,
    SitemapError,
)


class TestChangeFreq:
    def test_tokens(self):
        """每个枚举值对应唯一的小写 token"""
        expected = {
            ChangeFreq.ALWAYS: "always",
            ChangeFreq.HOURLY: "hourly",
            ChangeFreq.DAILY: "daily",
            ChangeFreq.WEEKLY: "weekly",
            ChangeFreq.MONTHLY: "monthly",
            ChangeFreq.YEARLY: "yearly",
            ChangeFreq.NEVER: "never",
        }
        assert set(expected) == set(ChangeFreq)
        for member, token in expected.items():
            assert member.token == token
            assert str(member) == token

    def test_string_coercion(self):
        entry = UrlEntry("https://example.com/", changefreq="Weekly")
        assert entry.changefreq is ChangeFreq.WEEKLY

    def test_unknown_token(self):
        with pytest.raises(ValueError):
            UrlEntry("https://example.com/", changefreq="montly")

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            UrlEntry("https://example.com/", changefreq=3)


class TestUrlEntry:
    def test_only_loc(self):
        entry = UrlEntry("https://example.com/")
        assert entry.loc == "https://example.com/"
        assert entry.lastmod is None
        assert entry.changefreq is None
        assert entry.priority is None

    def test_plain_constructor_accepts_any_string(self):
        """直接构造不校验 URL，留给输出时转义"""
        entry = UrlEntry("not a url & <stuff>")
        assert entry.loc == "not a url & <stuff>"

    def test_loc_must_be_str(self):
        with pytest.raises(TypeError):
            UrlEntry(None)

    def test_value_object(self):
        a = UrlEntry("https://example.com/", priority=0.5)
        b = UrlEntry("https://example.com/", priority=0.5)
        assert a == b
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.priority = 0.9

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0, 0, 1])
    def test_priority_in_range(self, value):
        entry = UrlEntry("https://example.com/", priority=value)
        assert entry.priority == float(value)
        assert isinstance(entry.priority, float)

    @pytest.mark.parametrize("value", [-0.1, 1.1, 2, float("inf")])
    def test_priority_out_of_range(self, value):
        with pytest.raises(OutOfRangeError) as exc_info:
            UrlEntry("https://example.com/", priority=value)
        err = exc_info.value
        assert err.value == value
        assert err.minimum == 0.0
        assert err.maximum == 1.0

    def test_priority_nan(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            UrlEntry("https://example.com/", priority=float("nan"))
        assert math.isnan(exc_info.value.value)

    def test_negative_zero_priority(self):
        entry = UrlEntry("https://example.com/", priority=-0.0)
        assert math.copysign(1.0, entry.priority) == 1.0

    @pytest.mark.parametrize("value", ["high", True, "0.5"])
    def test_priority_wrong_type(self, value):
        with pytest.raises(TypeError):
            UrlEntry("https://example.com/", priority=value)

    def test_aware_lastmod(self):
        ts = datetime(2020, 11, 22, 15, 10, 15, tzinfo=timezone(timedelta(hours=2)))
        entry = UrlEntry("https://example.com/", lastmod=ts)
        assert entry.lastmod == ts

    def test_date_lastmod(self):
        entry = UrlEntry("https://example.com/", lastmod=date(2020, 11, 22))
        assert entry.lastmod == date(2020, 11, 22)

    def test_naive_lastmod(self):
        with pytest.raises(NaiveTimestampError):
            UrlEntry("https://example.com/", lastmod=datetime(2020, 11, 22, 15, 10, 15))

    @pytest.mark.parametrize(
        "ts",
        [
            datetime.max.replace(tzinfo=timezone(timedelta(hours=-1))),
            datetime.min.replace(tzinfo=timezone(timedelta(hours=1))),
        ],
    )
    def test_lastmod_overflows_utc(self, ts):
        """换算成 UTC 后超出范围的时间在构造时拒绝"""
        with pytest.raises(OutOfRangeError) as exc_info:
            UrlEntry("https://example.com/", lastmod=ts)
        assert exc_info.value.value == ts

    def test_lastmod_at_utc_bounds(self):
        ts = datetime.max.replace(tzinfo=timezone.utc)
        assert UrlEntry("https://example.com/", lastmod=ts).lastmod == ts

    def test_lastmod_wrong_type(self):
        with pytest.raises(TypeError):
            UrlEntry("https://example.com/", lastmod="2020-11-22")


class TestParse:
    def test_valid(self):
        entry = UrlEntry.parse("https://example.com/blog", priority=0.8, changefreq=ChangeFreq.DAILY)
        assert entry.loc == "https://example.com/blog"
        assert entry.priority == 0.8
        assert entry.changefreq is ChangeFreq.DAILY

    def test_strips_whitespace(self):
        entry = UrlEntry.parse("  https://example.com/  ")
        assert entry.loc == "https://example.com/"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not-a-url",
            "example.com/page",
            "ftp://example.com/file",
            "https://",
            "http://example.com:abc/",
            "https://exa mple.com/",
            "https://example.com/" + "a" * 2048,
        ],
    )
    def test_invalid(self, url):
        with pytest.raises(InvalidUrlError) as exc_info:
            UrlEntry.parse(url)
        assert exc_info.value.url == url
        assert exc_info.value.reason

    @pytest.mark.parametrize("length, accepted", [(2047, True), (2048, False), (2049, False)])
    def test_loc_length_limit(self, length, accepted):
        """<loc> 必须少于 2048 个字符"""
        base = "https://example.com/"
        url = base + "a" * (length - len(base))
        assert len(url) == length
        if accepted:
            assert UrlEntry.parse(url).loc == url
        else:
            with pytest.raises(InvalidUrlError):
                UrlEntry.parse(url)

    def test_error_hierarchy(self):
        with pytest.raises(SitemapError):
            UrlEntry.parse("not-a-url")
        with pytest.raises(ValueError):
            UrlEntry.parse("not-a-url")


class TestUrlEntryDraft:
    def test_starts_unset(self):
        draft = UrlEntryDraft()
        assert draft.loc is None
        assert draft.lastmod is None
        assert draft.changefreq is None
        assert draft.priority is None

    def test_build_chained(self):
        ts = datetime(2020, 11, 22, 15, 10, 15, tzinfo=timezone.utc)
        entry = (
            UrlEntryDraft()
            .set_loc("https://example.com/")
            .set_lastmod(ts)
            .set_changefreq("daily")
            .set_priority(1.0)
            .build()
        )
        assert entry == UrlEntry.parse(
            "https://example.com/", lastmod=ts, changefreq=ChangeFreq.DAILY, priority=1.0
        )

    def test_build_only_loc(self):
        entry = UrlEntryDraft(loc="https://example.com/").build()
        assert entry == UrlEntry("https://example.com/")

    def test_missing_loc(self):
        draft = UrlEntryDraft().set_priority(0.5)
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            draft.build()
        assert exc_info.value.field == "loc"

    def test_invalid_loc(self):
        with pytest.raises(InvalidUrlError):
            UrlEntryDraft().set_loc("example.com").build()

    @pytest.mark.parametrize("value", [-0.1, 1.1])
    def test_priority_out_of_range(self, value):
        draft = UrlEntryDraft().set_loc("https://example.com/").set_priority(value)
        with pytest.raises(OutOfRangeError):
            draft.build()

    def test_build_does_not_change_draft(self):
        draft = UrlEntryDraft().set_loc("  https://example.com/ ")
        draft.build()
        assert draft.loc == "  https://example.com/ "
