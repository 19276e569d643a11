"""Model session: the one credential-bearing handle used for remote calls."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from clayface.clients.base import Transport
from clayface.clients.http_transport import HTTPTransport
from clayface.clients.llm_client import AnthropicTransport
from clayface.config import LLMConfig
from clayface.errors import InitializationError, NotInitializedError

logger = logging.getLogger(__name__)

TransportFactory = Callable[[str], Transport]


class ModelSession:
    """Holds the model handle built from a credential.

    The session is either uninitialized or ready. ``initialize`` only builds
    the handle; an invalid credential is discovered on the first real call.
    ``initialize`` and ``clear`` must not run while calls are in flight.
    """

    def __init__(
        self,
        transport_factory: TransportFactory | None = None,
        *,
        timeout: float | None = None,
    ):
        self._factory = transport_factory or partial(AnthropicTransport, timeout=timeout)
        self._transport: Transport | None = None

    def initialize(self, credential: str) -> None:
        """Build a new handle from ``credential``.

        A previous handle is replaced, not closed; call ``aclose`` first to
        release its connections.
        """
        try:
            transport = self._factory(credential)
        except Exception as exc:
            logger.error("Failed to initialize model session: %s", type(exc).__name__)
            raise InitializationError("Failed to initialize Claude API") from exc
        self._transport = transport
        logger.info("Model session initialized")

    def require_ready(self) -> Transport:
        if self._transport is None:
            raise NotInitializedError()
        return self._transport

    def is_ready(self) -> bool:
        return self._transport is not None

    def clear(self) -> None:
        """Drop the handle without closing it; use ``aclose`` to release connections."""
        self._transport = None

    async def aclose(self) -> None:
        """Release the handle's connections and return to uninitialized."""
        transport, self._transport = self._transport, None
        if transport is not None:
            await transport.aclose()

    async def __aenter__(self) -> ModelSession:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def build_session(config: LLMConfig) -> ModelSession:
    """Create an uninitialized session using the transport named in config."""
    if config.transport == "http":
        return ModelSession(partial(HTTPTransport, timeout=config.timeout))
    return ModelSession(timeout=config.timeout)
