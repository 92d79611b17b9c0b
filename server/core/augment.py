"""Asynchronous description augmentation against a document store."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .llm import DescriptionGenerator, GenerationError, build_description_prompt
from .models import Document
from .store import DocumentStore


LOGGER = logging.getLogger(__name__)


class GenerationInProgressError(RuntimeError):
    """Raised when a generation is requested while another one is still running."""


class GenerationCancelledError(GenerationError):
    """Raised to the caller whose generation was cancelled through :meth:`DescriptionAugmenter.cancel`."""


class DescriptionAugmenter:
    """Runs one description generation at a time and applies the result as a single patch.

    The store stays usable while the generator call is outstanding. If the
    call fails, returns nothing or is cancelled, the document is left untouched.
    """

    def __init__(self, store: DocumentStore, generator: DescriptionGenerator) -> None:
        self.store = store
        self.generator = generator
        self._task: Optional[asyncio.Future] = None
        self._cancel_requested = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run(self, notes: Optional[str] = None) -> Document:
        if self.running:
            raise GenerationInProgressError("A description generation is already running")

        prompt = build_description_prompt(self.store.get(), notes)
        task = asyncio.ensure_future(self.generator.generate(prompt))
        self._task = task
        self._cancel_requested = False
        try:
            text = await task
        except asyncio.CancelledError:
            if self._cancel_requested:
                LOGGER.info("Description generation cancelled")
                raise GenerationCancelledError("Description generation was cancelled") from None
            raise
        finally:
            self._task = None

        if not text or not text.strip():
            raise GenerationError("No content generated")

        LOGGER.info("Applying generated description")
        return self.store.patch(description=text)

    def cancel(self) -> bool:
        """Cancel the in-flight generation. Returns False when nothing is running."""

        if not self.running:
            return False
        self._cancel_requested = True
        self._task.cancel()
        return True
