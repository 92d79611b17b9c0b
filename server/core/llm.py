"""LLM interaction module for generating README descriptions with Claude."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Sequence

from anthropic import Anthropic, APIError, RateLimitError
from fastapi.concurrency import run_in_threadpool

from .config import (
    ANTHROPIC_API_KEY,
    CLAUDE_MODEL,
    DESCRIPTION_MAX_TOKENS,
    GENERATION_MAX_RETRIES,
    LLM_TIMEOUT_SECONDS,
    RATE_LIMIT_BACKOFF_SECONDS,
    TEMPERATURE,
)
from .models import Document

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You write README files for software projects. "
    "Reply with the description text only, in Markdown, without a title heading."
)


class GenerationError(RuntimeError):
    """Raised when the description could not be generated."""


def build_description_prompt(document: Document, notes: Optional[str] = None) -> str:
    """Build the generation prompt from the project name, description and every section."""

    section_lines = "\n".join(
        f"- **{section.title}**: {section.content}" for section in document.sections
    )
    prompt = f"""Generate a README description for a project with the following details:
Project Name: {document.project_name}
Description: {document.description}

**Sections:**
{section_lines}
"""
    if notes and notes.strip():
        prompt += f"\nAdditional details from the author:\n{notes.strip()}\n"
    prompt += (
        "\nThe description should be concise, informative, and follow best practices "
        "for README files."
    )
    return prompt


class DescriptionGenerator:
    """Text-in/text-out wrapper around the Claude Messages API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        client: Any = None,
        model: str = CLAUDE_MODEL,
        max_retries: int = GENERATION_MAX_RETRIES,
        backoff_seconds: Sequence[float] = RATE_LIMIT_BACKOFF_SECONDS,
    ):
        self.api_key = api_key or ANTHROPIC_API_KEY
        self.model = model
        self.max_retries = max_retries
        self.backoff_seconds = tuple(backoff_seconds) or (0,)
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("ANTHROPIC_API_KEY not found. Please set it in .env file")
            self._client = Anthropic(api_key=self.api_key, timeout=LLM_TIMEOUT_SECONDS)
        return self._client

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Rate-limited calls are retried with backoff; any other API failure or
        an empty reply raises :class:`GenerationError`.
        """
        client = self.client
        attempt = 0
        while True:
            try:
                response = await run_in_threadpool(
                    client.messages.create,
                    model=self.model,
                    max_tokens=DESCRIPTION_MAX_TOKENS,
                    temperature=TEMPERATURE,
                    system=SYSTEM_PROMPT,
                    messages=[{"role": "user", "content": prompt}],
                )
            except RateLimitError as exc:
                attempt += 1
                if attempt >= self.max_retries:
                    logger.error("Description generation failed after %s attempts", attempt)
                    raise GenerationError("Rate limited by the generation API") from exc
                wait = self.backoff_seconds[min(attempt - 1, len(self.backoff_seconds) - 1)]
                logger.warning("Rate limit on generation. Retrying in %ss (attempt %s)", wait, attempt)
                await asyncio.sleep(wait)
                continue
            except APIError as exc:
                logger.error("Claude API call failed: %s", exc)
                raise GenerationError(f"Generation API call failed: {exc}") from exc

            text = self._extract_text_from_response(response).strip()
            if not text:
                raise GenerationError("No content generated")
            logger.info("Generated description (%s chars)", len(text))
            return text

    def _extract_text_from_response(self, response: Any) -> str:
        """Extract text content from Claude response, handling multiple content blocks."""
        if not hasattr(response, "content"):
            return ""

        text_parts = []
        for block in response.content:
            if getattr(block, "type", None) == "text" and hasattr(block, "text"):
                text_parts.append(block.text)

        return "\n".join(text_parts)
