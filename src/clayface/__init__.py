"""clayface - tailor a CV and cover letter to a job posting page with Claude."""

from clayface.errors import (
    ClayfaceError,
    ContentTooLargeError,
    EmptyInputError,
    InitializationError,
    InvalidCredentialError,
    ModelUnavailableError,
    NotInitializedError,
    RateLimitedError,
    RemoteCallError,
    TransformationFailedError,
)
from clayface.pipeline.transformer import TransformationClient
from clayface.session import ModelSession, build_session

__version__ = "0.1.0"

__all__ = [
    "ClayfaceError",
    "ContentTooLargeError",
    "EmptyInputError",
    "InitializationError",
    "InvalidCredentialError",
    "ModelSession",
    "ModelUnavailableError",
    "NotInitializedError",
    "RateLimitedError",
    "RemoteCallError",
    "TransformationClient",
    "TransformationFailedError",
    "build_session",
]
