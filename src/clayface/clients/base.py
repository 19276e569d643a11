"""Transport interface shared by every way of reaching the model service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Completion:
    """Text returned by the model for one prompt, with usage metadata."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class Transport(Protocol):
    """Send a single user prompt to the model and get text back."""

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        max_tokens: int,
        temperature: float | None = None,
    ) -> Completion: ...

    async def aclose(self) -> None: ...


def build_request(
    prompt: str,
    model: str,
    max_tokens: int,
    temperature: float | None = None,
) -> dict:
    """Assemble the Messages API request body for a single user turn."""
    body: dict = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }
    if temperature is not None:
        body["temperature"] = temperature
    return body
