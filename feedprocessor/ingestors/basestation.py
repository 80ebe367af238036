"""Ingestion loop feeding BaseStation lines through the decoder."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import AsyncIterator, Awaitable, Callable

from feedprocessor.basestation.decoder import decode_message
from feedprocessor.basestation.errors import MessageFormatError
from feedprocessor.config import settings
from feedprocessor.domain.policy import MessageTypePolicy, default_policy
from feedprocessor.models.messages import BaseStationMessage

logger = logging.getLogger("feedprocessor.ingestors.basestation")

MessageSink = Callable[[BaseStationMessage], Awaitable[None]]


@dataclass
class IngestStats:
    """Counts of line outcomes seen by an ingestor run."""

    decoded: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.decoded + self.skipped + self.failed


class BaseStationIngestor:
    """Decode lines from a feed source and hand each message to a sink.

    The line source is an async iterator supplied by the caller; reading from
    the receiver socket is its job. Lines are decoded in the order they arrive.
    """

    def __init__(
        self,
        *,
        line_source: Callable[[], AsyncIterator[str]],
        sink: MessageSink,
        policy: MessageTypePolicy | None = None,
        stop_on_error: bool | None = None,
    ) -> None:
        self.line_source = line_source
        self.sink = sink
        self.policy = policy or default_policy()
        self.stop_on_error = (
            settings.stop_on_error if stop_on_error is None else stop_on_error
        )
        self.stats = IngestStats()

    async def run(self) -> IngestStats:
        """Consume the line source until it is exhausted."""

        try:
            async for line in self.line_source():
                await self._handle_line(line)
        except asyncio.CancelledError:
            logger.info("BaseStation ingestor cancelled")
            raise

        logger.info(
            "Processed %s lines: %s decoded, %s skipped, %s failed",
            self.stats.total,
            self.stats.decoded,
            self.stats.skipped,
            self.stats.failed,
        )
        return self.stats

    async def _handle_line(self, line: str) -> None:
        try:
            message = decode_message(line, self.policy)
        except MessageFormatError as exc:
            self.stats.failed += 1
            if self.stop_on_error:
                logger.error("Stopping on malformed line %r: %s", line.strip(), exc)
                raise
            logger.warning("Dropping malformed line %r: %s", line.strip(), exc)
            return

        if message is None:
            self.stats.skipped += 1
            return

        self.stats.decoded += 1
        await self.sink(message)


__all__ = ["BaseStationIngestor", "IngestStats", "MessageSink"]
