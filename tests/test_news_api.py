"""Tests for news_api module (FastAPI endpoint)."""

import logging
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

import news_api
from config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from models import Article, NewsResult
from news_api import STALE_NOTE, app
from static_news import STATIC_NOTE, get_static_news

T0 = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _result(n: int = 2) -> NewsResult:
    articles = [
        Article(
            title=f"Notícia {i}",
            url=f"https://x.com/{i}",
            content="Conteúdo",
            source="Test",
            date=T0,
            translated=True,
        )
        for i in range(n)
    ]
    return NewsResult(articles=articles, generated_at=T0)


@pytest.fixture
def client():
    news_api.news_cache.invalidate()
    yield TestClient(app)
    news_api.news_cache.invalidate()


class TestGetNews:
    @patch("news_api.collect_news")
    def test_returns_news_payload(self, mock_collect, client):
        mock_collect.return_value = _result(2)

        response = client.get("/api/news")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["total"] == 2
        assert body["cached"] is False
        assert body["timestamp"] == T0.isoformat()
        assert body["news"][0] == {
            "title": "Notícia 0",
            "url": "https://x.com/0",
            "content": "Conteúdo",
            "source": "Test",
            "date": T0.isoformat(),
            "image": body["news"][0]["image"],
            "translated": True,
        }
        assert "note" not in body

    @patch("news_api.collect_news")
    def test_second_request_served_from_cache(self, mock_collect, client):
        mock_collect.return_value = _result()

        client.get("/api/news")
        body = client.get("/api/news").json()

        assert body["cached"] is True
        assert mock_collect.call_count == 1

    @patch("news_api.collect_news")
    def test_refresh_bypasses_cache(self, mock_collect, client):
        mock_collect.return_value = _result()

        client.get("/api/news")
        body = client.get("/api/news", params={"refresh": "true"}).json()

        assert body["cached"] is False
        assert mock_collect.call_count == 2

    @patch("news_api.collect_news")
    def test_static_fallback_adds_note(self, mock_collect, client):
        mock_collect.return_value = NewsResult(articles=get_static_news(), fallback=True)

        body = client.get("/api/news").json()

        assert body["success"] is True
        assert body["total"] == 3
        assert body["note"] == STATIC_NOTE

    @patch("news_api.collect_news")
    def test_failed_refresh_serves_stale_cache(self, mock_collect, client):
        mock_collect.return_value = _result(1)
        client.get("/api/news")
        mock_collect.side_effect = RuntimeError("all sources down")

        body = client.get("/api/news", params={"refresh": "true"}).json()

        assert body["success"] is True
        assert body["cached"] is True
        assert body["total"] == 1
        assert body["note"] == STALE_NOTE

    @patch("news_api.collect_news")
    def test_failure_without_cache_returns_500(self, mock_collect, client):
        mock_collect.side_effect = RuntimeError("boom")

        response = client.get("/api/news")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "boom"
        assert "timestamp" in body


class TestOtherMethods:
    def test_options_returns_empty_200(self, client):
        response = client.options("/api/news")

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.parametrize("requested", ["GET", "POST", "DELETE"])
    def test_browser_preflight_returns_empty_200(self, client, requested):
        response = client.options(
            "/api/news",
            headers={
                "Origin": "https://frontend.example.com",
                "Access-Control-Request-Method": requested,
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert requested in response.headers["access-control-allow-methods"]

    @pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
    def test_write_methods_are_rejected(self, client, method):
        response = getattr(client, method)("/api/news")

        assert response.status_code == 405
        assert response.json() == {"success": False, "error": "Método não permitido"}

    def test_cors_header_present(self, client):
        with patch("news_api.collect_news", return_value=_result()):
            response = client.get("/api/news", headers={"Origin": "https://frontend.example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestLogging:
    @patch("news_api.logging.basicConfig")
    def test_configures_root_logger_with_project_format(self, mock_basic_config):
        news_api._setup_logging()

        kwargs = mock_basic_config.call_args.kwargs
        assert kwargs["format"] == LOG_FORMAT
        assert kwargs["datefmt"] == LOG_DATEFMT
        assert kwargs["level"] == getattr(logging, LOG_LEVEL, logging.INFO)
