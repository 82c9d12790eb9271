"""Markdown rendering helpers for question and option text.

Architecture note:
    Qt labels understand a subset of HTML, so question text is converted with
    markdown-it once per render and handed to ``QLabel`` as rich text. Raw HTML
    in the source is disabled so quiz files cannot inject markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments suitable for Qt rich text."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line of markdown without the surrounding paragraph."""

        return self._markdown.renderInline(markdown_text.strip())


renderer = MarkdownRenderer()
# Shared instance; Qt rendering happens on the GUI thread only.
