"""Batch result files: one TranslationRecord per JSONL line."""

from __future__ import annotations

import asyncio
import logging
import os
from collections import Counter
from pathlib import Path

from pydantic import ValidationError

from youdao_translate.schemas import TranslationRecord

logger = logging.getLogger(__name__)


class RecordWriter:
    """Appends records to a JSONL file; safe to share between batch tasks.

    Each record is flushed and fsynced before ``write`` returns, so a crash
    loses at most the line being written.
    """

    def __init__(self, path: str):
        self.path = path
        self.written = 0
        self._lock = asyncio.Lock()
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._file = open(path, "a", encoding="utf-8")

    async def write(self, record: TranslationRecord) -> None:
        line = record.model_dump_json() + "\n"
        async with self._lock:
            self._file.write(line)
            self._file.flush()
            os.fsync(self._file.fileno())
            self.written += 1

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> RecordWriter:
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def read_records(path: str) -> list[TranslationRecord]:
    """Read a batch output file, ordered by input line.

    Lines that do not parse (e.g. truncated by a crash mid-write) are
    skipped with a warning.
    """
    records: list[TranslationRecord] = []
    if not Path(path).exists():
        return records

    with open(path, encoding="utf-8") as f:
        for file_line, raw in enumerate(f, 1):
            raw = raw.strip()
            if not raw:
                continue
            try:
                records.append(TranslationRecord.model_validate_json(raw))
            except ValidationError:
                logger.warning(f"Skipping unreadable record at {path}:{file_line}")

    records.sort(key=lambda r: r.line_no)
    return records


def summarize(records: list[TranslationRecord]) -> dict:
    """Counts of succeeded/failed records and of each failure message."""
    failures = Counter(r.message for r in records if not r.success)
    return {
        "total": len(records),
        "succeeded": sum(1 for r in records if r.success),
        "failed": sum(failures.values()),
        "failure_messages": dict(failures.most_common()),
    }
