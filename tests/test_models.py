"""Tests for models, pacing and sources.dates."""

import time
from datetime import datetime, timezone

import pytest

from config import PLACEHOLDER_IMAGE
from models import Article, is_valid_image_url
from pacing import RequestPacer
from sources.dates import parse_date, parse_date_or_now


def _article(content: str) -> Article:
    return Article(title="T", url="https://x.com/1", content=content, source="X")


class TestArticle:
    def test_defaults(self):
        a = _article("Body")

        assert a.image == PLACEHOLDER_IMAGE
        assert a.translated is False
        assert a.date.tzinfo is not None

    def test_preview_first_sentence(self):
        assert _article("Primeira frase. Segunda frase.").preview() == "Primeira frase."

    def test_preview_truncates_without_sentence_end(self):
        content = "a" * 200

        assert _article(content).preview(150) == "a" * 150 + "..."

    def test_preview_short_text_without_punctuation(self):
        assert _article("sem ponto").preview() == "sem ponto"

    def test_to_dict_serializes_date(self):
        date = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        a = Article(title="T", url="https://x.com/1", content="C", source="X", date=date)

        d = a.to_dict()

        assert d["date"] == "2024-01-02T03:04:05+00:00"
        assert set(d) == {"title", "url", "content", "source", "date", "image", "translated"}

    def test_with_changes_returns_new_record(self):
        a = _article("Body")
        b = a.with_changes(translated=True)

        assert b.translated is True
        assert a.translated is False


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://cdn.example.com/a.jpg", True),
        ("http://cdn.example.com/a.jpg", True),
        ("/relative/a.jpg", False),
        ("data:image/png;base64,xx", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_image_url(url, expected):
    assert is_valid_image_url(url) is expected


class FakeTime:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def clock(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class TestRequestPacer:
    def test_first_call_does_not_wait(self):
        t = FakeTime()
        pacer = RequestPacer(0.3, sleep=t.sleep, clock=t.clock)

        assert pacer.wait() == 0.0
        assert t.sleeps == []

    def test_enforces_minimum_interval(self):
        t = FakeTime()
        pacer = RequestPacer(0.3, sleep=t.sleep, clock=t.clock)

        pacer.wait()
        t.now += 0.1
        slept = pacer.wait()

        assert slept == pytest.approx(0.2)
        assert t.sleeps == [pytest.approx(0.2)]

    def test_no_wait_when_interval_already_passed(self):
        t = FakeTime()
        pacer = RequestPacer(0.3, sleep=t.sleep, clock=t.clock)

        pacer.wait()
        t.now += 1.0

        assert pacer.wait() == 0.0

    def test_reset(self):
        t = FakeTime()
        pacer = RequestPacer(0.3, sleep=t.sleep, clock=t.clock)
        pacer.wait()

        pacer.reset()

        assert pacer.wait() == 0.0


class TestParseDate:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-03-01T10:00:00Z",
            "2024-03-01T10:00:00+00:00",
            "2024-03-01T07:00:00-03:00",
            "Fri, 01 Mar 2024 10:00:00 GMT",
            "2024-03-01 10:00:00",
            "Published: 2024-03-01 10:00",
            "Mar 01, 2024 10:00 AM",
            1709287200,
            1709287200000,
        ],
    )
    def test_known_formats(self, value):
        assert parse_date(value) == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_struct_time(self):
        st = time.struct_time((2024, 3, 1, 10, 0, 0, 4, 61, 0))

        assert parse_date(st) == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_date_only(self):
        assert parse_date("March 1, 2024") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "yesterday-ish", object()])
    def test_unparseable_returns_none(self, value):
        assert parse_date(value) is None

    def test_or_now_never_returns_none(self):
        result = parse_date_or_now("garbage")

        assert result.tzinfo is not None
