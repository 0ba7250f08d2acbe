"""Append-only JSONL journal for weather analysis runs."""

from __future__ import annotations

import json
from collections.abc import Iterator
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .exceptions import JournalError
from .redaction import sanitize_for_logging, sanitize_text

JOURNAL_PREFIX = "analysis"


def _json_default(value: Any) -> Any:
    """Serialize timestamps, dates and paths that ``json`` cannot handle natively."""
    if isinstance(value, datetime):
        aware = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
        return aware.astimezone(UTC).isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Path):
        return str(value)
    # URL-like values (AnyUrl) serialize via __str__; anything else is rejected.
    if type(value).__str__ is not object.__str__:
        return sanitize_text(str(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _plain(value: Any) -> Any:
    """Dump pydantic models so redaction can see their nested keys."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {key: _plain(child) for key, child in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def read_events(path: Path) -> Iterator[dict[str, Any]]:
    """Yield journal records from ``path`` in write order."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise JournalError(f"Failed reading event journal {path}: {exc}") from exc
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield json.loads(line)
        except ValueError as exc:
            raise JournalError(f"Corrupt journal record at {path}:{line_no}: {exc}") from exc


class JournalWriter:
    """Appends analysis events to a daily JSONL file and stores raw provider payloads.

    Every record carries the session id and a per-session sequence number so
    interleaved runs sharing one daily file can be separated again.
    """

    def __init__(self, journal_dir: Path, raw_payload_dir: Path, session_id: str) -> None:
        for directory in (journal_dir, raw_payload_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise JournalError(f"Failed creating journal directory {directory}: {exc}") from exc
        self.journal_dir = journal_dir
        self.raw_payload_dir = raw_payload_dir
        self.session_id = session_id
        self.events_path = journal_dir / f"{JOURNAL_PREFIX}-{datetime.now(UTC):%Y%m%d}.jsonl"
        self._seq = 0

    def write_event(
        self,
        event_type: str,
        payload: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Append one event record; pydantic models in ``payload`` are dumped first."""
        self._seq += 1
        record: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "seq": self._seq,
            "event_type": event_type,
            "session_id": self.session_id,
            "payload": sanitize_for_logging(_plain(payload)),
            "metadata": sanitize_for_logging(_plain(metadata or {})),
        }
        try:
            line = json.dumps(record, default=_json_default)
            with self.events_path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except (OSError, TypeError, ValueError) as exc:
            raise JournalError(f"Failed writing event journal: {exc}") from exc

    def write_raw_snapshot(self, name: str, payload: Any) -> Path:
        """Store a redacted provider payload as pretty JSON and return its path."""
        stamp = f"{datetime.now(UTC):%Y%m%dT%H%M%SZ}"
        safe_name = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in name)
        output_path = self.raw_payload_dir / f"{stamp}_{self.session_id}_{safe_name}.json"
        try:
            text = json.dumps(
                sanitize_for_logging(_plain(payload)),
                ensure_ascii=False,
                indent=2,
                default=_json_default,
            )
            output_path.write_text(text + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise JournalError(f"Failed writing raw payload snapshot: {exc}") from exc
        return output_path
