"""
Notícias estáticas (já em português) servidas quando nenhuma fonte retorna artigos.
"""

from datetime import timedelta

from config import PLACEHOLDER_IMAGE
from models import Article, now_utc

STATIC_NOTE = "Fontes indisponíveis: exibindo notícias estáticas em português"

_STATIC_ITEMS = (
    (
        "Riot Games Define Lançamento das Skins do T1 para Setembro",
        "https://www.invenglobal.com/lol/articles/19564/riot-games-sets-september-launch-for-t1-worlds-skins",
        "A Riot Games anunciou que as novas skins do T1, campeão mundial, serão lançadas em setembro. "
        "As skins celebram a vitória histórica da equipe no Mundial, onde derrotaram adversários de peso "
        "em uma final emocionante. Cada skin reflete a identidade de um jogador do T1, com efeitos visuais "
        "únicos que homenageiam suas performances no torneio. Parte da receita das vendas será destinada "
        "à equipe, apoiando o crescimento dos esports na Coreia do Sul.",
    ),
    (
        "LazyFeel do DRX Participa de Banquete Oficial Coreia-Vietnã, Fazendo História na LCK",
        "https://www.invenglobal.com/lol/articles/19562/drxs-lazyfeel-attends-koreavietnam-state-banquet-making-lck-history",
        "O jogador LazyFeel, da equipe DRX, marcou um momento histórico ao se tornar o primeiro jogador "
        "profissional de League of Legends a participar de um banquete oficial entre Coreia do Sul e Vietnã. "
        "O evento celebrou as relações diplomáticas entre os dois países e destacou a crescente influência "
        "dos esports na cultura global.",
    ),
    (
        "LCK e Ministério dos Veteranos da Coreia do Sul Lançam Evento do 80º Aniversário da Libertação no LoL PARK",
        "https://www.invenglobal.com/lol/articles/19561/lck-and-south-koreas-veterans-affairs-ministry-launch-80th-liberation-anniversary-event-at-lol-park",
        "A LCK, em parceria com o Ministério dos Veteranos da Coreia do Sul, lançou um evento especial no "
        "LoL PARK para celebrar o 80º aniversário da libertação da Coreia. O evento combina esports e "
        "história, com partidas de exibição com jogadores profissionais e exposições interativas.",
    ),
)


def get_static_news() -> list[Article]:
    """Três notícias fixas do Inven Global, datadas de agora, -1h e -2h."""
    now = now_utc()
    return [
        Article(
            title=title,
            url=url,
            content=content,
            source="Inven Global",
            date=now - timedelta(hours=i),
            image=PLACEHOLDER_IMAGE,
            translated=True,
        )
        for i, (title, url, content) in enumerate(_STATIC_ITEMS)
    ]
