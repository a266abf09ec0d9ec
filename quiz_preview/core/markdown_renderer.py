"""Markdown rendering for question text shown in the preview window.

Question text is authored as markdown and may contain ``$...$`` math, which
MathJax typesets when the page is displayed in ``QWebEngineView``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

from quiz_preview.core.models import Question

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts question markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No question text.</em></p>"
        return self._markdown.render(sanitized)

    def render_question(self, question: Question) -> str:
        """Render the question text followed by its first image, if any."""
        body = self.render_fragment(question.text)
        if question.image_urls:
            src = escape(question.image_urls[0], quote=True)
            body += f'<div class="question-image"><img src="{src}" alt="Question" /></div>'
        return body

    def render_document(self, body_html: str, *, font_size: int = 14, title: str = "Question") -> str:
        """Wrap a fragment inside a minimal HTML page that loads MathJax."""
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; }}
      .question-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      .question-image {{ text-align: center; margin-top: 1rem; }}
      .question-image img {{ max-height: 16rem; object-fit: contain; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }} }};
    </script>
    <script defer src="{_MATHJAX_SCRIPT}"></script>
  </head>
  <body>
    <div class="question-html">{body_html}</div>
  </body>
</html>"""


renderer = MarkdownRenderer()
# Shared instance; the preview window renders from the Qt thread only.
