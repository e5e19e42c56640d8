"""Markdown to HTML rendering with shifted heading levels.

Pages are embedded below the surrounding page chrome, whose own headings
occupy levels 1 to 3. Every heading of a source document is therefore moved
down by HEADING_LEVEL_OFFSET and clamped to h6, for ATX (``## Title``) and
Setext (underlined) headings alike. A dash line under a list item stays a
list followed by a thematic break.
"""

import logging
from typing import Any

import mistune
from mistune.util import escape as escape_html

logger = logging.getLogger(__name__)

HEADING_LEVEL_OFFSET = 3
MAX_HEADING_LEVEL = 6


def shift_heading_level(level: int, offset: int = HEADING_LEVEL_OFFSET) -> int:
    """Return the rendered level of a source heading, at most h6."""
    return min(level + offset, MAX_HEADING_LEVEL)


def render_heading(text: str, level: int, *, heading_id: str | None = None) -> str:
    """Render a heading tag at its shifted level.

    Args:
        text: Heading body, already rendered as inline HTML
        level: Heading level in the Markdown source
        heading_id: Optional id attribute

    Returns:
        HTML heading element
    """
    shifted = shift_heading_level(level)
    attrs = f' id="{escape_html(heading_id)}"' if heading_id else ""
    return f"<h{shifted}{attrs}>{text}</h{shifted}>\n"


class ShiftedHeadingRenderer(mistune.HTMLRenderer):
    """HTML renderer emitting headings at shifted levels."""

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        return render_heading(text, level, heading_id=attrs.get("id"))


class MarkdownRenderer:
    """Convert documentation Markdown to HTML fragments."""

    def __init__(self) -> None:
        """Initialize the converter with the shifted heading renderer."""
        self._markdown = mistune.create_markdown(
            renderer=ShiftedHeadingRenderer(escape=False),
            plugins=["table", "strikethrough", "url"],
        )

    def render(self, markdown_text: str) -> str:
        """Convert Markdown text to HTML.

        Args:
            markdown_text: Markdown source text

        Returns:
            HTML fragment
        """
        logger.debug(f"Rendering {len(markdown_text)} characters of markdown")
        html = str(self._markdown(markdown_text))
        logger.debug(f"Rendered {len(html)} characters of HTML")
        return html
