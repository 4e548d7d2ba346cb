import pytest

import translate_news
from sources import html_scraper


@pytest.fixture(autouse=True)
def no_pacing_and_clean_translation_cache(monkeypatch):
    """Sem espera entre requests e sem cache de tradução vazando entre testes."""
    monkeypatch.setattr(translate_news.translation_pacer, "min_interval", 0.0)
    monkeypatch.setattr(html_scraper.page_pacer, "min_interval", 0.0)
    monkeypatch.setattr(translate_news, "TRANSLATION_PROVIDER", "mymemory")
    translate_news.clear_cache()
    yield
    translate_news.clear_cache()
