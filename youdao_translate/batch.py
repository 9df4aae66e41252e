"""Batch translation: one request per input line, bounded concurrency."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone

from youdao_translate.client import YoudaoTranslator
from youdao_translate.io import RecordWriter
from youdao_translate.schemas import TranslationKind, TranslationRecord

logger = logging.getLogger(__name__)


class BatchTranslator:
    def __init__(self, translator: YoudaoTranslator, concurrency: int = 4):
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self.translator = translator
        self.concurrency = concurrency

    async def run(
        self,
        lines: list[str],
        writer: RecordWriter,
        kind: TranslationKind = "text",
    ) -> tuple[int, int]:
        """Translate every non-blank line and write one record per line.

        A write failure cancels the lines still in flight and is re-raised.

        Returns:
            (succeeded, failed) counts
        """
        semaphore = asyncio.Semaphore(self.concurrency)
        counts = {"succeeded": 0, "failed": 0}

        async def process_line(line_no: int, text: str) -> None:
            async with semaphore:
                start_time = time.monotonic()
                result = await self.translator.translate(text, kind)
                latency_ms = int((time.monotonic() - start_time) * 1000)

                record = TranslationRecord(
                    line_no=line_no,
                    kind=kind,
                    original=text,
                    success=result.success,
                    translation=result.translation,
                    message=result.message,
                    timestamp=datetime.now(timezone.utc),
                    latency_ms=latency_ms,
                )
                await writer.write(record)
                counts["succeeded" if result.success else "failed"] += 1

        tasks = [
            asyncio.ensure_future(process_line(line_no, line.strip()))
            for line_no, line in enumerate(lines, 1)
            if line.strip()
        ]
        logger.info(f"Translating {len(tasks)} lines with concurrency {self.concurrency}")
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return counts["succeeded"], counts["failed"]
