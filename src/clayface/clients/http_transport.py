"""Direct HTTP transport for the Claude Messages API."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import httpx

from clayface.clients.base import Completion, build_request
from clayface.clients.llm_client import first_text_segment
from clayface.errors import RemoteServiceError

logger = logging.getLogger(__name__)

MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class HTTPTransport:
    """Posts the request body straight to ``/v1/messages`` with httpx."""

    def __init__(
        self,
        api_key: str,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        url: str = MESSAGES_URL,
    ):
        if not api_key:
            raise ValueError("Claude API key must be a non-empty string")
        self.url = url
        self._headers = {
            "Content-Type": "application/json",
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=timeout) if timeout is not None else httpx.AsyncClient()
        self.client = http_client

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        max_tokens: int,
        temperature: float | None = None,
    ) -> Completion:
        logger.debug("HTTP call: model=%s, prompt=%d chars", model, len(prompt))
        response = await self.client.post(
            self.url,
            headers=self._headers,
            json=build_request(prompt, model, max_tokens, temperature),
        )
        if response.is_error:
            raise RemoteServiceError(
                f"API request failed: {response.status_code} {response.text}",
                status_code=response.status_code,
                error_type=_error_type(response),
            )

        data = response.json()
        blocks = [SimpleNamespace(**b) for b in data.get("content", []) if isinstance(b, dict)]
        usage = data.get("usage") or {}
        return Completion(
            text=first_text_segment(blocks),
            model=model,
            input_tokens=usage.get("input_tokens", 0),
            output_tokens=usage.get("output_tokens", 0),
        )

    async def aclose(self) -> None:
        await self.client.aclose()


def _error_type(response: httpx.Response) -> str | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"].get("type")
    return None
