"""Tests for data models."""

import dataclasses

import pytest

from temuria.data import (
    LANGUAGES,
    APICallUsage,
    ArticleRequest,
    ArticleResult,
    LanguageCode,
    Source,
    Usage,
)


class TestLanguageCode:
    def test_parse_known_code(self) -> None:
        assert LanguageCode.parse("ru") is LanguageCode.RU

    def test_parse_is_case_and_space_insensitive(self) -> None:
        assert LanguageCode.parse(" DE ") is LanguageCode.DE

    def test_parse_unknown_code_falls_back_to_english(self) -> None:
        assert LanguageCode.parse("pt") is LanguageCode.EN
        assert LanguageCode.parse("") is LanguageCode.EN

    def test_parse_accepts_enum_member(self) -> None:
        assert LanguageCode.parse(LanguageCode.ZH) is LanguageCode.ZH

    def test_every_language_has_info(self) -> None:
        assert set(LANGUAGES) == set(LanguageCode)

    def test_chinese_prompt_name(self) -> None:
        assert LANGUAGES[LanguageCode.ZH].prompt_name == "Simplified Chinese"
        assert LANGUAGES[LanguageCode.ZH].native_name == "中文"


def test_article_result_is_frozen() -> None:
    result = ArticleResult(title="T", content="C", last_updated_display="now")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.title = "Other"  # type: ignore[misc]


def test_article_result_defaults_are_empty() -> None:
    result = ArticleResult(title="T", content="C", last_updated_display="now")
    assert result.sources == ()
    assert result.images == ()


def test_article_request_defaults_to_english() -> None:
    assert ArticleRequest(topic="Mars").language is LanguageCode.EN


def test_source_equality() -> None:
    assert Source(title="A", uri="https://a") == Source(title="A", uri="https://a")


class TestUsage:
    def test_computed_totals(self) -> None:
        usage = Usage(
            api_calls=[
                APICallUsage(model="m1", input_tokens=100, output_tokens=50, web_searches=1),
                APICallUsage(model="m2", input_tokens=200, output_tokens=75, web_searches=2),
            ]
        )
        assert usage.input_tokens == 300
        assert usage.output_tokens == 125
        assert usage.web_searches == 3

    def test_add_returns_new_usage(self) -> None:
        a = Usage(api_calls=[APICallUsage(model="m1", input_tokens=1)])
        b = Usage(api_calls=[APICallUsage(model="m2", input_tokens=2)])
        total = a + b
        assert total.input_tokens == 3
        assert len(a.api_calls) == 1

    def test_iadd_extends_in_place(self) -> None:
        total = Usage()
        total += Usage(api_calls=[APICallUsage(model="m", output_tokens=7)])
        assert total.output_tokens == 7
