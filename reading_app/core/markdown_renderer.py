"""Markdown rendering helpers for passage bodies and question prompts.

Architecture note:
    Passage bodies are plain prose with blank lines between paragraphs and the
    occasional emphasis. Rendering them through markdown-it keeps paragraph
    breaks and single line breaks intact (``breaks`` mode) while producing
    HTML that ``QTextBrowser`` understands without a web engine. Raw HTML in
    the source is disabled so catalog text can never inject markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown text into HTML fragments or styled documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html, "breaks": True})
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_document(self, markdown_text: str, title: str = "", font_size: int = 13) -> str:
        """Render a passage body as a complete HTML document with a heading."""

        heading = f"<h2>{escape(title)}</h2>" if title else ""
        return f"""<html>
  <head>
    <style>
      body {{ font-size: {font_size}pt; line-height: 150%; }}
      p {{ margin-bottom: 0.8em; }}
    </style>
  </head>
  <body>{heading}{self.render_fragment(markdown_text)}</body>
</html>"""


# Shared by the Qt views and the catalog API.
renderer = MarkdownRenderer()
