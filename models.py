"""
Modelos compartilhados: Article (registro de notícia) e NewsResult (saída do agregador).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from urllib.parse import urlparse

from config import PLACEHOLDER_IMAGE

_FIRST_SENTENCE_RE = re.compile(r"^[^.!?]*[.!?]")


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def is_valid_image_url(url: str | None) -> bool:
    """URL absoluta http(s) com host."""
    if not url or not isinstance(url, str):
        return False
    parsed = urlparse(url.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True)
class Article:
    """
    Notícia no formato consumido pelo front-end.

    Antes da tradução/deduplicação é um rascunho (translated=False).
    """

    title: str
    url: str
    content: str
    source: str
    date: datetime = field(default_factory=now_utc)
    image: str = PLACEHOLDER_IMAGE
    translated: bool = False

    def with_changes(self, **changes) -> "Article":
        return replace(self, **changes)

    def preview(self, max_chars: int = 150) -> str:
        """Primeira frase do conteúdo ou os primeiros max_chars caracteres."""
        content = (self.content or "").strip()
        if not content:
            return ""
        m = _FIRST_SENTENCE_RE.match(content)
        if m and m.group(0).strip():
            return m.group(0).strip()
        if len(content) > max_chars:
            return content[:max_chars] + "..."
        return content

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "content": self.content,
            "source": self.source,
            "date": self.date.isoformat(),
            "image": self.image,
            "translated": self.translated,
        }


@dataclass
class NewsResult:
    """Resultado de uma execução do agregador."""

    articles: list[Article]
    fallback: bool = False
    generated_at: datetime = field(default_factory=now_utc)
