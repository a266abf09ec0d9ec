"""Tests for question markdown rendering."""

from __future__ import annotations

from quiz_preview.core.markdown_renderer import MarkdownRenderer
from quiz_preview.core.models import Choice, Question, QuestionType


def _question(text: str, image_urls: list[str] | None = None) -> Question:
    return Question(
        id="q",
        text=text,
        type=QuestionType.FREE_TEXT,
        choices=[Choice(id="a", text="x")],
        image_urls=image_urls or [],
    )


def test_markdown_is_rendered():
    html = MarkdownRenderer().render_fragment("Capital of **France**?")
    assert "<strong>France</strong>" in html


def test_blank_text_gets_placeholder():
    assert "No question text" in MarkdownRenderer().render_fragment("   ")


def test_raw_html_is_escaped_by_default():
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_only_first_image_is_shown():
    html = MarkdownRenderer().render_question(
        _question("Look", ["https://example.com/a.png", "https://example.com/b.png"])
    )
    assert 'src="https://example.com/a.png"' in html
    assert "b.png" not in html


def test_image_url_is_escaped():
    html = MarkdownRenderer().render_question(_question("Look", ['x" onerror="boom']))
    assert 'onerror="boom"' not in html


def test_document_embeds_body_and_font_size():
    renderer = MarkdownRenderer()
    document = renderer.render_document("<p>Hi</p>", font_size=18)
    assert '<div class="question-html"><p>Hi</p></div>' in document
    assert "font-size: 18pt" in document
    assert "mathjax" in document.lower()
