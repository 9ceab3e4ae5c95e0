"""Tests for RunLogger and serialization helpers."""

import json
from pathlib import Path

from temuria.data import (
    APICallUsage,
    ArticleRequest,
    ArticleResult,
    LanguageCode,
    Source,
    Usage,
)
from temuria.run_logger import RunLogger, _serialize

# -- _serialize tests --


def test_serialize_none() -> None:
    assert _serialize(None) is None


def test_serialize_primitive() -> None:
    assert _serialize(42) == 42
    assert _serialize("hello") == "hello"
    assert _serialize(True) is True


def test_serialize_tuple_as_list() -> None:
    assert _serialize(("a", "b")) == ["a", "b"]


def test_serialize_dataclass() -> None:
    result = _serialize(ArticleRequest(topic="Mars", language=LanguageCode.FR))
    assert result == {"topic": "Mars", "language": "fr"}


def test_serialize_nested_dataclass() -> None:
    article = ArticleResult(
        title="Mars",
        content="text",
        last_updated_display="now",
        sources=(Source(title="S", uri="https://s.example"),),
    )
    result = _serialize(article)
    assert result["sources"] == [{"title": "S", "uri": "https://s.example"}]


def test_serialize_usage_includes_computed_properties() -> None:
    usage = Usage(
        api_calls=[
            APICallUsage(model="m1", input_tokens=100, output_tokens=50, web_searches=1),
            APICallUsage(model="m2", input_tokens=200, output_tokens=75, web_searches=2),
        ],
    )
    result = _serialize(usage)
    assert result["input_tokens"] == 300
    assert result["output_tokens"] == 125
    assert result["web_searches"] == 3
    assert len(result["api_calls"]) == 2


# -- RunLogger tests --


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path / "logs", enabled=False)
    record = run_logger.start_run(ArticleRequest(topic="Mars"))
    run_logger.log_stage(record, "text_generation", "X", None, None, None, 0.1)

    assert record is None
    assert run_logger.finish_run(record, None, None) is None
    assert not (tmp_path / "logs").exists()


def test_full_run_writes_json(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path / "logs")
    record = run_logger.start_run(ArticleRequest(topic="Mars"))
    usage = Usage(api_calls=[APICallUsage(model="m", input_tokens=10)])
    run_logger.log_stage(
        record,
        stage="image_discovery",
        component="ImageFinder",
        input_data=ArticleRequest(topic="Mars"),
        output_data=["https://x.example/a.jpg"],
        usage=usage,
        duration_seconds=0.123456,
    )
    article = ArticleResult(
        title="Mars",
        content="text",
        last_updated_display="now",
        images=("https://x.example/a.jpg",),
    )

    path = run_logger.finish_run(record, article, usage)

    assert path is not None
    assert path == run_logger.last_log_path
    assert path.name.startswith("run_")
    data = json.loads(path.read_text())
    assert data["succeeded"] is True
    assert data["image_count"] == 1
    assert data["source_count"] == 0
    assert data["stages"][0]["duration_seconds"] == 0.1235
    assert data["stages"][0]["output"] == ["https://x.example/a.jpg"]
    assert data["total_usage"]["input_tokens"] == 10


def test_overlapping_runs_write_separate_files(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    first = run_logger.start_run(ArticleRequest(topic="A"))
    second = run_logger.start_run(ArticleRequest(topic="B"))

    path_b = run_logger.finish_run(second, None, None, error="boom")
    path_a = run_logger.finish_run(first, None, None)

    assert path_a is not None and path_b is not None
    assert path_a != path_b
    assert json.loads(path_b.read_text())["error"] == "boom"
    assert json.loads(path_a.read_text())["request"]["topic"] == "A"
