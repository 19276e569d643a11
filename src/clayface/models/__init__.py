"""Data models for clayface."""

from clayface.models.page import PageContent

__all__ = ["PageContent"]
