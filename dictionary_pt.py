"""
Tradução básica EN -> PT por dicionário de termos de esports.

Usada como fallback quando a API de tradução falha e como passada de
enriquecimento sobre o texto já traduzido (termos que a API deixa em inglês).
"""

import re

TERMS: dict[str, str] = {
    "League of Legends": "League of Legends",
    "Worlds": "Mundial",
    "World Championship": "Campeonato Mundial",
    "Championship": "Campeonato",
    "Esports": "Esports",
    "Teams": "Equipes",
    "Team": "Equipe",
    "Players": "Jogadores",
    "Player": "Jogador",
    "Matches": "Partidas",
    "Match": "Partida",
    "Games": "Jogos",
    "Game": "Jogo",
    "Tournament": "Torneio",
    "Finals": "Finais",
    "Semifinals": "Semifinais",
    "Quarterfinals": "Quartas de Final",
    "Season": "Temporada",
    "Split": "Split",
    "Playoff": "Playoff",
    "Playoffs": "Playoffs",
    "Victory": "Vitória",
    "Defeat": "Derrota",
    "Win": "Vitória",
    "Loss": "Derrota",
    "Draft": "Draft",
    "Pick": "Escolha",
    "Ban": "Banimento",
    "Champion": "Campeão",
    "Champions": "Campeões",
    "Skin": "Skin",
    "Skins": "Skins",
    "Update": "Atualização",
    "Patch": "Patch",
    "Release": "Lançamento",
    "New": "Novo",
    "Latest": "Mais recente",
    "Announces": "anuncia",
    "Reveals": "revela",
    "Launches": "lança",
    "Sets": "define",
    "January": "janeiro",
    "February": "fevereiro",
    "March": "março",
    "April": "abril",
    "May": "maio",
    "June": "junho",
    "July": "julho",
    "August": "agosto",
    "September": "setembro",
    "October": "outubro",
    "November": "novembro",
    "December": "dezembro",
}


def _build_pattern(terms: dict[str, str]) -> re.Pattern:
    # chaves mais longas primeiro: "League of Legends" antes de "Legends", "Teams" antes de "Team"
    keys = sorted(terms, key=lambda k: (-len(k), k))
    alternation = "|".join(re.escape(k) for k in keys)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


_LOOKUP = {k.lower(): v for k, v in TERMS.items()}
_PATTERN = _build_pattern(TERMS)


def _match_case(original: str, replacement: str) -> str:
    if not replacement:
        return replacement
    if len(original) > 1 and original.isupper():
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement[0].lower() + replacement[1:]


def _substitute(m: re.Match) -> str:
    found = m.group(0)
    return _match_case(found, _LOOKUP[found.lower()])


def translate_with_dictionary(text: str | None) -> str | None:
    """Substitui termos inteiros (sem diferenciar maiúsculas) numa única passada."""
    if not text:
        return text
    return _PATTERN.sub(_substitute, text)
