"""Load job posting pages from disk or over HTTP."""

from __future__ import annotations

import html as html_lib
import logging
import re
from pathlib import Path

import httpx

from clayface.models.page import PageContent
from clayface.utils.url_validator import validate_url

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)

USER_AGENT = "Mozilla/5.0 (compatible; clayface/0.1)"


def extract_title(markup: str) -> str:
    """Return the text of the page's <title> element, or an empty string."""
    match = _TITLE_RE.search(markup)
    if not match:
        return ""
    return " ".join(html_lib.unescape(match.group(1)).split())


def load_page_file(file_path: str | Path) -> PageContent:
    """Load a saved page (HTML or plain text) from a file."""
    markup = Path(file_path).read_text(encoding="utf-8")
    logger.info("Loaded page %s (%d chars)", file_path, len(markup))
    return PageContent(title=extract_title(markup), url=None, html=markup)


async def fetch_page(url: str, timeout: float = 30.0) -> PageContent:
    """Fetch the full markup of a job posting page.

    The URL is checked against private/internal addresses first.
    Raises httpx.HTTPStatusError on a non-success response.
    """
    validate_url(url)
    async with httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    ) as client:
        response = await client.get(url)
        response.raise_for_status()
    markup = response.text
    logger.info("Fetched page %s (%d chars)", url, len(markup))
    return PageContent(title=extract_title(markup), url=str(response.url), html=markup)
