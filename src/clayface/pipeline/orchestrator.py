"""Tailoring workflow - runs CV adaptation and cover letter generation together."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass

from clayface.models.page import PageContent
from clayface.pipeline.transformer import TransformationClient


@dataclass
class TailoringResult:
    """Both artifacts produced for one job page."""

    page: PageContent
    adapted_document: str
    cover_letter: str
    elapsed_seconds: float = 0.0


class TailoringOrchestrator:
    """Issues both transformations for a page concurrently."""

    def __init__(self, client: TransformationClient):
        self.client = client

    async def run(
        self,
        page: PageContent,
        existing_document: str | None = None,
        *,
        on_phase: callable | None = None,
    ) -> TailoringResult:
        """Produce an adapted CV and a cover letter for ``page``.

        Args:
            page: Captured job posting.
            existing_document: Current CV text, if any.
            on_phase: Optional callback(phase_name, detail) for progress.

        Either failure propagates; no partial result is returned.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        _notify("start", f"Tailoring for {page.title or page.url or 'page'}")
        adapted, letter = await asyncio.gather(
            self.client.adapt_document(page.html, existing_document),
            self.client.generate_companion_letter(page.html),
        )

        elapsed = time.monotonic() - start
        _notify("done", f"Done in {elapsed:.1f}s")

        return TailoringResult(
            page=page,
            adapted_document=adapted,
            cover_letter=letter,
            elapsed_seconds=elapsed,
        )
