"""Error taxonomy and the translation of remote failures into it.

Every failure surfaced by the transformation client is a ``ClayfaceError``.
Remote failures are funnelled through :func:`classify_error`, which prefers the
status code and error type reported by the transport and only falls back to
matching substrings of the failure message when neither is recognised.
"""

from __future__ import annotations


class ClayfaceError(Exception):
    """Base class for all errors raised by clayface."""


class NotInitializedError(ClayfaceError):
    """Raised when a transformation is requested before a credential is set."""

    def __init__(self, message: str = "Claude API not initialized. Please provide API key first."):
        super().__init__(message)


class InitializationError(ClayfaceError):
    """Raised when the model handle cannot be constructed from a credential."""


class EmptyInputError(ClayfaceError, ValueError):
    """Raised when no page content is supplied."""

    def __init__(self, message: str = "No page HTML content provided"):
        super().__init__(message)


class RemoteCallError(ClayfaceError):
    """Base class for classified failures of a remote model call."""


class InvalidCredentialError(RemoteCallError):
    pass


class RateLimitedError(RemoteCallError):
    pass


class ContentTooLargeError(RemoteCallError):
    pass


class ModelUnavailableError(RemoteCallError):
    pass


class TransformationFailedError(RemoteCallError):
    """Catch-all for remote failures that match no known category."""

    def __init__(self, message: str, original_message: str = ""):
        super().__init__(message)
        self.original_message = original_message


class RemoteServiceError(Exception):
    """Non-success response from the model service, as seen by a transport."""

    def __init__(self, message: str, status_code: int | None = None, error_type: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type


INVALID_CREDENTIAL_MESSAGE = "Invalid API key. Please check your Claude API key."
RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."
CONTENT_TOO_LARGE_MESSAGE = "Content too long. Please try with a shorter page."
MODEL_UNAVAILABLE_MESSAGE = "Model not found. Please check your API access."

# (status code, machine-readable error type, error class, message)
_STRUCTURED_TABLE: list[tuple[int, str, type[RemoteCallError], str]] = [
    (401, "authentication_error", InvalidCredentialError, INVALID_CREDENTIAL_MESSAGE),
    (429, "rate_limit_error", RateLimitedError, RATE_LIMITED_MESSAGE),
    (413, "request_too_large", ContentTooLargeError, CONTENT_TOO_LARGE_MESSAGE),
    (404, "not_found_error", ModelUnavailableError, MODEL_UNAVAILABLE_MESSAGE),
]

# Order matters: the first matching row wins.
_SUBSTRING_TABLE: list[tuple[tuple[str, ...], type[RemoteCallError], str]] = [
    (("api key",), InvalidCredentialError, INVALID_CREDENTIAL_MESSAGE),
    (("rate limit",), RateLimitedError, RATE_LIMITED_MESSAGE),
    (("token",), ContentTooLargeError, CONTENT_TOO_LARGE_MESSAGE),
    (("404", "not_found"), ModelUnavailableError, MODEL_UNAVAILABLE_MESSAGE),
]


def _error_type(exc: BaseException) -> str | None:
    """Pull the machine-readable error type off a transport exception."""
    error_type = getattr(exc, "error_type", None)
    if error_type:
        return error_type
    # anthropic.APIStatusError keeps the decoded response JSON on ``body``
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        inner = body.get("error")
        if isinstance(inner, dict) and isinstance(inner.get("type"), str):
            return inner["type"]
        if isinstance(body.get("type"), str) and body["type"] != "error":
            return body["type"]
    return None


def classify_error(exc: BaseException, action: str) -> RemoteCallError:
    """Translate a failed remote call into the error taxonomy.

    Args:
        exc: Exception raised by the transport.
        action: Human-readable description of the failed operation, used in
            the catch-all message (e.g. "adapt CV").

    Returns:
        The classified error; callers raise it ``from exc``.
    """
    status_code = getattr(exc, "status_code", None)
    error_type = _error_type(exc)
    for code, type_name, error_cls, message in _STRUCTURED_TABLE:
        if status_code == code or error_type == type_name:
            return error_cls(message)

    raw = str(exc)
    lowered = raw.lower()
    for needles, error_cls, message in _SUBSTRING_TABLE:
        if any(needle in lowered for needle in needles):
            return error_cls(message)

    return TransformationFailedError(f"Failed to {action}: {raw}", original_message=raw)
