"""Pydantic model for captured job posting pages."""

from __future__ import annotations

from pydantic import BaseModel


class PageContent(BaseModel):
    title: str = ""
    url: str | None = None  # None when loaded from a saved file
    html: str
