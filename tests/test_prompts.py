"""Tests for prompt construction."""

from clayface.pipeline.prompts import (
    MAX_SOURCE_CHARS,
    build_document_prompt,
    build_letter_prompt,
    truncate_source,
)


class TestTruncateSource:
    def test_short_content_unchanged(self):
        assert truncate_source("<p>hi</p>") == "<p>hi</p>"

    def test_clips_to_limit(self):
        content = "a" * MAX_SOURCE_CHARS + "TAIL"
        assert truncate_source(content) == "a" * MAX_SOURCE_CHARS

    def test_custom_limit(self):
        assert truncate_source("abcdef", 3) == "abc"


class TestDocumentPrompt:
    def test_adapt_and_generate_variants_differ(self, sample_page_html, sample_cv_text):
        adapt = build_document_prompt(sample_page_html, sample_cv_text)
        generate = build_document_prompt(sample_page_html, None)
        assert adapt != generate
        assert "adapt the CV" in adapt
        assert "Current CV:" in adapt
        assert "create a CV template" in generate
        assert "Current CV:" not in generate

    def test_adapt_variant_contains_both_inputs(self, sample_page_html, sample_cv_text):
        prompt = build_document_prompt(sample_page_html, sample_cv_text)
        assert sample_page_html in prompt
        assert sample_cv_text in prompt

    def test_generate_variant_lists_sections(self, sample_page_html):
        prompt = build_document_prompt(sample_page_html)
        assert "Summary, Experience, Skills, Education" in prompt

    def test_empty_existing_document_selects_generate(self, sample_page_html):
        assert build_document_prompt(sample_page_html, "") == build_document_prompt(sample_page_html)

    def test_page_is_truncated_but_cv_is_not(self):
        page = "p" * (MAX_SOURCE_CHARS + 10)
        cv = "c" * (MAX_SOURCE_CHARS + 10)
        prompt = build_document_prompt(page, cv)
        assert "p" * MAX_SOURCE_CHARS in prompt
        assert "p" * (MAX_SOURCE_CHARS + 1) not in prompt
        assert cv in prompt

    def test_braces_in_page_are_kept_verbatim(self):
        page = "<script>var x = {page_html};</script>"
        assert page in build_document_prompt(page)


class TestLetterPrompt:
    def test_contains_page_and_constraints(self, sample_page_html):
        prompt = build_letter_prompt(sample_page_html)
        assert sample_page_html in prompt
        assert "150-200 words" in prompt
        assert "1-2 relevant skills" in prompt
        assert "basic formatting only" in prompt

    def test_truncates_page(self):
        page = "x" * MAX_SOURCE_CHARS + "y" * 5
        prompt = build_letter_prompt(page)
        assert "x" * MAX_SOURCE_CHARS in prompt
        assert "y" not in prompt.split("Page HTML Content:")[1].split("Please write")[0]
