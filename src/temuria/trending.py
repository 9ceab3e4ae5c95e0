"""Hardcoded trending topics shown on the home screen."""

from temuria.data import LanguageCode

TRENDING_TOPICS: dict[LanguageCode, tuple[str, ...]] = {
    LanguageCode.EN: (
        "Artificial Intelligence",
        "Mars Colonization",
        "Quantum Computing",
        "Global Economy 2025",
        "Latest Nobel Prize",
    ),
    LanguageCode.RU: (
        "Искусственный интеллект",
        "Колонизация Марса",
        "Квантовые вычисления",
        "Мировая экономика 2025",
        "Нобелевская премия",
    ),
    LanguageCode.ES: (
        "Inteligencia Artificial",
        "Colonización de Marte",
        "Computación Cuántica",
        "Economía Global 2025",
        "Premio Nobel",
    ),
    LanguageCode.FR: (
        "Intelligence Artificielle",
        "Colonisation de Mars",
        "Informatique Quantique",
        "Économie Mondiale 2025",
        "Prix Nobel",
    ),
    LanguageCode.DE: (
        "Künstliche Intelligenz",
        "Besiedlung des Mars",
        "Quantencomputing",
        "Weltwirtschaft 2025",
        "Nobelpreis",
    ),
    LanguageCode.ZH: (
        "人工智能",
        "火星殖民",
        "量子计算",
        "2025年全球经济",
        "诺贝尔奖",
    ),
}


def get_trending_topics(language: LanguageCode | str) -> list[str]:
    """Return the five trending topics for a language (English for unknown codes)."""
    return list(TRENDING_TOPICS[LanguageCode.parse(language)])
