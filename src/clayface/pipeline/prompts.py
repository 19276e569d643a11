"""Prompt templates for CV adaptation and cover letter generation."""

from __future__ import annotations

MAX_SOURCE_CHARS = 50_000

ADAPT_CV_TEMPLATE = """\
You are an expert CV/resume writer. I will provide you with the HTML content of a job posting page and an existing CV. Please adapt the CV to better match the job requirements found in the page content.

Page HTML Content:
{page_html}

Current CV:
{cv_content}

Please analyze the job posting from the HTML content and adapt the CV to:
1. Highlight relevant skills and experience that match the job requirements
2. Use keywords and terminology from the job posting
3. Emphasize achievements and experience that align with the role
4. Maintain a professional tone and structure
5. Focus on the most relevant aspects for this specific position

Provide the adapted CV in a clear, well-formatted structure."""

GENERATE_CV_TEMPLATE = """\
You are an expert CV/resume writer. I will provide you with the HTML content of a job posting page. Please create a CV template that would be well-suited for this job.

Page HTML Content:
{page_html}

Please analyze the job posting from the HTML content and create a CV template that:
1. Highlights the key skills and experience mentioned in the job posting
2. Uses appropriate keywords and terminology from the job description
3. Includes relevant sections (Summary, Experience, Skills, Education, etc.)
4. Focuses on the most important requirements for this role
5. Maintains a professional structure and format

Provide a comprehensive CV template that would be ideal for this position."""

COVER_LETTER_TEMPLATE = """\
You are an expert cover letter writer. I will provide you with the HTML content of a job posting page. Please write a concise, professional cover letter for this position.

Page HTML Content:
{page_html}

Please write a cover letter that:
1. Is 150-200 words maximum
2. Uses simple, clear language
3. Shows enthusiasm for the specific role
4. Mentions 1-2 relevant skills or experiences
5. Has basic formatting only (paragraphs, no fancy styling)
6. Is professional but not overly formal
7. Focuses on why you're interested in this specific position

Write a brief, compelling cover letter that gets straight to the point."""


def truncate_source(source_content: str, max_chars: int = MAX_SOURCE_CHARS) -> str:
    """Clip page content to its first ``max_chars`` characters."""
    return source_content[:max_chars]


def build_adapt_prompt(page_html: str, cv_content: str) -> str:
    return ADAPT_CV_TEMPLATE.format(page_html=page_html, cv_content=cv_content)


def build_generate_prompt(page_html: str) -> str:
    return GENERATE_CV_TEMPLATE.format(page_html=page_html)


def build_document_prompt(
    source_content: str,
    existing_document: str | None = None,
    max_chars: int = MAX_SOURCE_CHARS,
) -> str:
    """Pick the adapt or generate variant and fill it in.

    Only the page content is truncated; the existing CV goes in whole.
    An empty ``existing_document`` counts as absent.
    """
    page_html = truncate_source(source_content, max_chars)
    if existing_document:
        return build_adapt_prompt(page_html, existing_document)
    return build_generate_prompt(page_html)


def build_letter_prompt(source_content: str, max_chars: int = MAX_SOURCE_CHARS) -> str:
    return COVER_LETTER_TEMPLATE.format(page_html=truncate_source(source_content, max_chars))
