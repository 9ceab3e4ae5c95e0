"""Run logger for recording article requests to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from temuria.data import Usage


class StageRecord(BaseModel):
    """Record of a single upstream stage (image discovery or text generation)."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    usage: dict[str, Any] | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of one article request."""

    run_id: str
    request: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    succeeded: bool = False
    error: str | None = None
    source_count: int = 0
    image_count: int = 0
    total_usage: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, lists, tuples, dicts, and primitives.
    For Usage objects, includes computed property summaries.
    """
    if obj is None:
        return None
    if isinstance(obj, Usage):
        # Include computed properties alongside raw data
        return {
            "api_calls": [_serialize(c) for c in obj.api_calls],
            "input_tokens": obj.input_tokens,
            "output_tokens": obj.output_tokens,
            "web_searches": obj.web_searches,
        }
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates stage records and writes a JSON log file per request.

    Each request gets its own ``RunRecord`` so overlapping requests on the
    same requester do not interleave. When ``enabled=False``, all methods
    are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, request: Any) -> RunRecord | None:
        """Create a new run record for a request.

        Args:
            request: The article request being served.

        Returns:
            The record to pass to ``log_stage``/``finish_run``, or None if
            logging is disabled.
        """
        if not self._enabled:
            return None

        return RunRecord(
            run_id=str(uuid.uuid4()),
            request=_serialize(request),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        record: RunRecord | None,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        usage: Usage | None,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to a run.

        Args:
            record: Record returned by ``start_run``.
            stage: Stage name ("image_discovery" or "text_generation").
            component: Component class name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            usage: Usage object for this stage.
            duration_seconds: Wall-clock time for this stage.
        """
        if not self._enabled or record is None:
            return

        record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                usage=_serialize(usage) if usage is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        record: RunRecord | None,
        result: Any,
        usage: Usage | None,
        *,
        error: str | None = None,
    ) -> Path | None:
        """Write a run record to a JSON file.

        Args:
            record: Record returned by ``start_run``.
            result: The ArticleResult, or None if the request failed.
            usage: Total accumulated usage.
            error: Error description for failed requests.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.succeeded = result is not None
        record.error = error
        if result is not None:
            record.source_count = len(result.sources)
            record.image_count = len(result.images)
        record.total_usage = _serialize(usage) if usage is not None else None

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # Build filename: run_2026-02-12T14-30-00_<id>.json (colons → dashes)
        ts = record.started_at.replace(":", "-")
        # Remove microseconds and timezone info for cleaner filename
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"run_{ts}_{record.run_id[:8]}.json"

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
