"""Claude API transport built on the official async SDK."""

from __future__ import annotations

import logging

import anthropic

from clayface.clients.base import Completion, build_request
from clayface.errors import RemoteServiceError

logger = logging.getLogger(__name__)


def first_text_segment(blocks) -> str:
    """Return the text of the first text block in a Messages API response."""
    for block in blocks or []:
        if getattr(block, "type", "text") == "text" and hasattr(block, "text"):
            return block.text
    raise RemoteServiceError("Response contained no text content")


class AnthropicTransport:
    """Async Claude API client. Makes exactly one request per call."""

    def __init__(self, api_key: str, timeout: float | None = None):
        if not api_key:
            raise ValueError("Claude API key must be a non-empty string")
        kwargs: dict = {"api_key": api_key, "max_retries": 0}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        max_tokens: int,
        temperature: float | None = None,
    ) -> Completion:
        """Send a prompt to Claude and return the first text segment with usage."""
        logger.debug("LLM call: model=%s, prompt=%d chars", model, len(prompt))
        message = await self.client.messages.create(
            **build_request(prompt, model, max_tokens, temperature)
        )
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        return Completion(
            text=first_text_segment(message.content),
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    async def aclose(self) -> None:
        await self.client.close()
