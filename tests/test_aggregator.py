"""Tests for aggregator module."""

from datetime import datetime, timedelta, timezone
from functools import partial
from unittest.mock import patch

import requests

from aggregator import build_sources, collect_news, dedupe_by_url, merge_articles
from config import PLACEHOLDER_CONTENT, PLACEHOLDER_IMAGE
from models import Article
from sources.html_scraper import ScrapeProfile, scrape_listing

T0 = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _draft(url: str, date: datetime = T0, content: str = "Body", title: str = "Title", **kw) -> Article:
    return Article(title=title, url=url, content=content, source="Test", date=date, **kw)


def _mark_translated(articles):
    return [a.with_changes(translated=True) for a in articles]


class TestDedupeByUrl:
    def test_keeps_one_record_per_url(self):
        drafts = [
            _draft("https://x.com/a", content="short"),
            _draft("https://x.com/a", content="a much longer body text"),
        ]

        result = dedupe_by_url(drafts)

        assert len(result) == 1
        assert result[0].content == "a much longer body text"

    def test_real_content_beats_placeholder(self):
        drafts = [
            _draft("https://x.com/a", content="real text"),
            _draft("https://x.com/a", content=PLACEHOLDER_CONTENT),
        ]

        assert dedupe_by_url(drafts)[0].content == "real text"

    def test_tie_keeps_the_last(self):
        drafts = [
            _draft("https://x.com/a", content="same", title="first"),
            _draft("https://x.com/a", content="same", title="last"),
        ]

        assert dedupe_by_url(drafts)[0].title == "last"


class TestMergeArticles:
    def test_orders_by_date_descending(self):
        drafts = [
            _draft("https://x.com/2h", date=T0 - timedelta(hours=2)),
            _draft("https://x.com/0h", date=T0),
            _draft("https://x.com/1h", date=T0 - timedelta(hours=1)),
        ]

        result = merge_articles(drafts, limit=10)

        assert [a.url for a in result] == ["https://x.com/0h", "https://x.com/1h", "https://x.com/2h"]

    def test_truncates_to_limit(self):
        drafts = [_draft(f"https://x.com/{i}", date=T0 - timedelta(minutes=i)) for i in range(15)]

        result = merge_articles(drafts, limit=5)

        assert [a.url for a in result] == [f"https://x.com/{i}" for i in range(5)]

    def test_drops_records_without_title_or_url(self):
        drafts = [_draft("", title="No url"), _draft("https://x.com/ok"), _draft("https://x.com/nt", title="")]

        assert [a.url for a in merge_articles(drafts)] == ["https://x.com/ok"]


class TestCollectNews:
    @patch("aggregator.translate_articles", side_effect=_mark_translated)
    def test_merges_sources_dedupes_and_translates(self, mock_translate):
        sources = [
            ("a", "Source A", lambda: [_draft("https://x.com/1", content="one"), _draft("https://x.com/2", date=T0 - timedelta(hours=3))]),
            ("b", "Source B", lambda: [_draft("https://x.com/1", content="one, but longer")]),
        ]

        result = collect_news(sources, limit=10)

        assert result.fallback is False
        assert [a.url for a in result.articles] == ["https://x.com/1", "https://x.com/2"]
        assert result.articles[0].content == "one, but longer"
        assert all(a.translated for a in result.articles)
        mock_translate.assert_called_once()

    @patch("aggregator.translate_articles")
    def test_failing_source_does_not_abort_others(self, mock_translate):
        def broken():
            raise RuntimeError("site down")

        sources = [("bad", "Bad", broken), ("ok", "Ok", lambda: [_draft("https://x.com/ok")])]

        result = collect_news(sources, translate=False)

        assert [a.url for a in result.articles] == ["https://x.com/ok"]
        mock_translate.assert_not_called()

    @patch("aggregator.translate_articles")
    def test_all_sources_empty_serves_static_news(self, mock_translate):
        def broken():
            raise RuntimeError("site down")

        sources = [("a", "A", lambda: []), ("b", "B", broken)]

        result = collect_news(sources)

        assert result.fallback is True
        assert len(result.articles) > 0
        for a in result.articles:
            assert isinstance(a.title, str) and a.title
            assert isinstance(a.url, str) and a.url.startswith("https://")
            assert isinstance(a.source, str) and a.source
            assert a.translated is True
        mock_translate.assert_not_called()

    def test_invalid_image_replaced_by_placeholder(self):
        sources = [("a", "A", lambda: [_draft("https://x.com/1", image="not-a-url")])]

        result = collect_news(sources, translate=False)

        assert result.articles[0].image == PLACEHOLDER_IMAGE

    @patch("translate_news.requests.get")
    @patch("sources.html_scraper.fetch_text")
    def test_unstructured_scrape_keeps_record_with_placeholder(self, mock_fetch, mock_translate_get):
        listing = '<html><body><a href="/lol/articles/1/empty">An article with an empty page</a></body></html>'
        empty_page = "<html><body><div>Nothing useful.</div></body></html>"
        mock_fetch.side_effect = lambda url: listing if url == "https://example.com/lol" else empty_page
        mock_translate_get.side_effect = requests.ConnectionError("no network")
        profile = ScrapeProfile(
            source_name="Example",
            list_url="https://example.com/lol",
            link_patterns=(r"/lol/articles/\d+",),
        )

        result = collect_news([("example", "Example", partial(scrape_listing, profile))])

        assert result.fallback is False
        assert len(result.articles) == 1
        article = result.articles[0]
        assert article.url == "https://example.com/lol/articles/1/empty"
        assert article.content == PLACEHOLDER_CONTENT
        assert article.translated is True


class TestBuildSources:
    @patch("aggregator.NEWS_JSON_URL", "https://api.example.com/news")
    @patch("aggregator.RSS_FEEDS", ["Dot Esports|https://dotesports.com/league-of-legends/feed", "https://feeds.example.org/lol.xml"])
    def test_builds_scraper_rss_and_json_sources(self):
        sources = build_sources()

        assert [sid for sid, _, _ in sources] == [
            "invenglobal",
            "rss:dotesports.com",
            "rss:feeds.example.org",
            "json",
        ]
        assert sources[1][1] == "Dot Esports"
        assert sources[2][1] == "feeds.example.org"
        assert all(callable(fn) for _, _, fn in sources)

    @patch("aggregator.NEWS_JSON_URL", "")
    @patch("aggregator.RSS_FEEDS", [])
    def test_json_source_is_optional(self):
        assert [sid for sid, _, _ in build_sources()] == ["invenglobal"]
