"""Transformation client: turns a job page into an adapted CV or a cover letter."""

from __future__ import annotations

import logging
import time

from clayface.clients.base import Completion
from clayface.errors import EmptyInputError, classify_error
from clayface.logging.cost_calculator import calculate_cost
from clayface.logging.models import UsageLog
from clayface.logging.usage_store import UsageStore
from clayface.pipeline.prompts import (
    MAX_SOURCE_CHARS,
    build_document_prompt,
    build_letter_prompt,
)
from clayface.session import ModelSession

logger = logging.getLogger(__name__)


class TransformationClient:
    """Builds prompts, calls the model through the session, classifies failures.

    The client keeps no per-call state, so ``adapt_document`` and
    ``generate_companion_letter`` can be awaited concurrently.
    """

    def __init__(
        self,
        session: ModelSession,
        *,
        model: str = "claude-sonnet-4-20250514",
        max_source_chars: int = MAX_SOURCE_CHARS,
        resume_max_tokens: int = 4000,
        letter_max_tokens: int = 1000,
        temperature: float | None = None,
        usage_store: UsageStore | None = None,
    ):
        self.session = session
        self.model = model
        self.max_source_chars = max_source_chars
        self.resume_max_tokens = resume_max_tokens
        self.letter_max_tokens = letter_max_tokens
        self.temperature = temperature
        self.usage_store = usage_store

    async def adapt_document(
        self,
        source_content: str,
        existing_document: str | None = None,
    ) -> str:
        """Adapt ``existing_document`` to the job page, or draft a CV template.

        Args:
            source_content: Full markup of the job posting page.
            existing_document: Current CV as plain text. When missing or empty
                a fresh CV template is generated instead.

        Returns:
            The model's text, verbatim.
        """
        logger.info("Starting CV adaptation (existing CV: %s)", bool(existing_document))
        self._check_input(source_content)
        transport = self.session.require_ready()
        prompt = build_document_prompt(source_content, existing_document, self.max_source_chars)
        return await self._invoke(
            transport,
            prompt,
            operation="adapt_document",
            action="adapt CV",
            source_chars=len(source_content),
            max_tokens=self.resume_max_tokens,
        )

    async def generate_companion_letter(self, source_content: str) -> str:
        """Write a short cover letter for the job page."""
        logger.info("Starting cover letter generation")
        self._check_input(source_content)
        transport = self.session.require_ready()
        prompt = build_letter_prompt(source_content, self.max_source_chars)
        return await self._invoke(
            transport,
            prompt,
            operation="generate_companion_letter",
            action="generate cover letter",
            source_chars=len(source_content),
            max_tokens=self.letter_max_tokens,
        )

    @staticmethod
    def _check_input(source_content: str) -> None:
        if not source_content:
            raise EmptyInputError()

    async def _invoke(
        self,
        transport,
        prompt: str,
        *,
        operation: str,
        action: str,
        source_chars: int,
        max_tokens: int,
    ) -> str:
        truncated = source_chars > self.max_source_chars
        if truncated:
            logger.info(
                "Page content truncated from %d to %d characters", source_chars, self.max_source_chars
            )
        logger.debug("Invoking %s with page content length %d", operation, source_chars)

        start = time.monotonic()
        try:
            completion = await transport.complete(
                prompt,
                model=self.model,
                max_tokens=max_tokens,
                temperature=self.temperature,
            )
        except Exception as exc:
            error = classify_error(exc, action)
            logger.error("Error in %s: %s", operation, error, exc_info=True)
            self._record(
                operation, source_chars, truncated, time.monotonic() - start, error=error
            )
            raise error from exc

        self._record(
            operation, source_chars, truncated, time.monotonic() - start, completion=completion
        )
        logger.info("%s completed successfully", operation)
        return completion.text

    def _record(
        self,
        operation: str,
        source_chars: int,
        truncated: bool,
        elapsed: float,
        *,
        completion: Completion | None = None,
        error: Exception | None = None,
    ) -> None:
        if self.usage_store is None:
            return
        log = UsageLog(
            operation=operation,
            model=self.model,
            source_chars=source_chars,
            truncated=truncated,
            elapsed_seconds=elapsed,
        )
        if completion is not None:
            log.input_tokens = completion.input_tokens
            log.output_tokens = completion.output_tokens
            log.estimated_cost_usd = calculate_cost(
                [(self.model, completion.input_tokens, completion.output_tokens)]
            )
        if error is not None:
            log.success = False
            log.error_kind = type(error).__name__
            log.error_message = str(error)
        try:
            self.usage_store.save_log(log)
        except Exception:
            logger.exception("Failed to save usage log")
