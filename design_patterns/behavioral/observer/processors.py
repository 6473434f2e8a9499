"""Async observers that simulate work with a fixed delay."""

import asyncio
from typing import Any

import click
import structlog

logger = structlog.get_logger(__name__)


class AsyncProcessor:
    """Async observer that sleeps for ``processing_time`` seconds per update."""

    def __init__(self, processor_id: str, processing_time: float = 0.1):
        self._id = processor_id
        self.processing_time = processing_time
        self.processed = 0

    async def update_async(self, data: Any) -> None:
        click.echo(f"[{self._id}] Starting async processing...")
        await asyncio.sleep(self.processing_time)
        self.processed += 1
        logger.debug("async_processing_complete", processor_id=self._id, seconds=self.processing_time)
        click.echo(f"[{self._id}] Completed async processing of data")

    def get_id(self) -> str:
        return self._id
