"""
Limpeza de texto extraído de feeds e páginas: remove CDATA e tags HTML,
decodifica entidades e normaliza espaços.
"""

import html
import re

_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)
_BLOCK_TAG_RE = re.compile(r"<\s*(?:br|/p|/div|/li|/h[1-6]|/tr|/blockquote)\b[^>]*>", re.IGNORECASE)
_SCRIPT_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_COMMENT_RE = re.compile(r"<!--.*?-->|<![^>]*>", re.DOTALL)
# Só o que parece tag de verdade (<b>, </p>, <img src=...>); "3 < 5" e "a < b > c" não casam
_MARKUP_RE = re.compile(r"<(?:/\s*)?[a-zA-Z][\w:-]*(?:\s[^<>]*)?/?\s*>")
_HSPACE_RE = re.compile(r"[ \t\f\v\xa0]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")

# Entidades decodificadas explicitamente (as demais via html.unescape)
ENTITIES = {
    "&nbsp;": " ",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&amp;": "&",
}


def strip_cdata(text: str | None) -> str:
    """Remove os wrappers <![CDATA[...]]> mantendo o conteúdo."""
    if not text:
        return ""
    return _CDATA_RE.sub(r"\1", text)


def strip_tags(text: str) -> str:
    text = _SCRIPT_RE.sub("", text)
    text = _BLOCK_TAG_RE.sub("\n", text)
    text = _COMMENT_RE.sub("", text)
    return _MARKUP_RE.sub("", text)


def decode_entities(text: str) -> str:
    for entity, char in ENTITIES.items():
        text = text.replace(entity, char)
    return html.unescape(text)


def normalize_text(text: str | None) -> str:
    """
    Converte texto bruto (HTML/CDATA/entidades) em texto puro.

    Tags reais saem antes da decodificação; depois as entidades são
    decodificadas em passadas até estabilizar (&amp;lt;b&amp;gt; também some).
    Um "<" ou ">" solto vira nada, mas o texto em volta fica.
    Parágrafos ficam separados por uma linha em branco.
    """
    if not text:
        return ""
    out = strip_tags(strip_cdata(str(text)))
    # cada passada só encurta o texto, então termina
    while True:
        previous = out
        out = strip_tags(decode_entities(out))
        if out == previous:
            break
    out = out.replace("<", "").replace(">", "")
    out = out.replace("\r\n", "\n").replace("\r", "\n")
    out = _HSPACE_RE.sub(" ", out)
    lines = [line.strip() for line in out.split("\n")]
    out = "\n".join(lines)
    out = _BLANK_LINES_RE.sub("\n\n", out)
    # linhas simples viram quebra de parágrafo
    out = re.sub(r"(?<!\n)\n(?!\n)", "\n\n", out)
    return out.strip()
