"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from clayface.clients.base import Completion
from clayface.session import ModelSession


@pytest.fixture
def sample_page_html() -> str:
    return """<html><head><title>Senior Backend Engineer - Acme</title></head>
<body>
<h1>Senior Backend Engineer</h1>
<h2>Requirements</h2>
<ul>
  <li>5+ years of Python experience</li>
  <li>Experience with PostgreSQL and Redis</li>
  <li>Familiarity with Kubernetes</li>
</ul>
</body></html>
"""


@pytest.fixture
def sample_cv_text() -> str:
    return """Jane Doe
Backend Developer

Experience:
- Widget Co (2019 - present): Python/Django APIs, PostgreSQL tuning
- Startup Inc (2016 - 2019): Node.js services, Redis caching

Skills: Python, Django, PostgreSQL, Redis, Docker
"""


@pytest.fixture
def mock_transport() -> AsyncMock:
    """Transport stub that answers every prompt with the same text."""
    transport = AsyncMock()
    transport.complete = AsyncMock(
        return_value=Completion(
            text="stub response",
            model="claude-sonnet-4-20250514",
            input_tokens=100,
            output_tokens=50,
        )
    )
    return transport


@pytest.fixture
def ready_session(mock_transport) -> ModelSession:
    session = ModelSession(lambda credential: mock_transport)
    session.initialize("k1")
    return session
