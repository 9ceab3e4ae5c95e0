"""Core data models for Temuria."""

from dataclasses import dataclass, field
from enum import StrEnum


class LanguageCode(StrEnum):
    """Languages an article can be written in."""

    EN = "en"
    RU = "ru"
    ES = "es"
    FR = "fr"
    DE = "de"
    ZH = "zh"

    @classmethod
    def parse(cls, value: "str | LanguageCode") -> "LanguageCode":
        """Resolve a language code, falling back to English for unknown codes."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.EN


@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for a supported language.

    - ``name``: English name, used in UI menus.
    - ``native_name``: Name of the language in itself.
    - ``prompt_name``: Name used inside generation prompts.
    - ``locale``: Babel locale identifier for date formatting.
    """

    name: str
    native_name: str
    prompt_name: str
    locale: str


LANGUAGES: dict[LanguageCode, LanguageInfo] = {
    LanguageCode.EN: LanguageInfo("English", "English", "English", "en"),
    LanguageCode.RU: LanguageInfo("Russian", "Русский", "Russian", "ru"),
    LanguageCode.ES: LanguageInfo("Spanish", "Español", "Spanish", "es"),
    LanguageCode.FR: LanguageInfo("French", "Français", "French", "fr"),
    LanguageCode.DE: LanguageInfo("German", "Deutsch", "German", "de"),
    LanguageCode.ZH: LanguageInfo("Chinese", "中文", "Simplified Chinese", "zh"),
}


@dataclass(frozen=True)
class ArticleRequest:
    """A single user search: topic plus target language."""

    topic: str
    language: LanguageCode = LanguageCode.EN


@dataclass(frozen=True)
class Source:
    """A grounding citation reported by the upstream service."""

    title: str
    uri: str


@dataclass(frozen=True)
class ArticleResult:
    """A generated encyclopedia article.

    ``title`` echoes the requested topic verbatim. ``sources`` never holds
    two entries with the same ``uri``. ``images`` are unvalidated URLs.
    """

    title: str
    content: str
    last_updated_display: str
    sources: tuple[Source, ...] = ()
    images: tuple[str, ...] = ()


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single API call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    web_searches: int = 0


@dataclass
class Usage:
    """Accumulated API usage across upstream calls."""

    api_calls: list[APICallUsage] = field(default_factory=list)

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    @property
    def web_searches(self) -> int:
        return sum(c.web_searches for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(api_calls=self.api_calls + other.api_calls)

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        return self
