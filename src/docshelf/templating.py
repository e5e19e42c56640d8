"""Jinja2 templating for pages, search results and directory listings.

Templates ship inside the package (``docshelf/templates``). HTML templates
are autoescaped; the directory listing template produces Markdown.
"""

import logging
import re
from collections.abc import Callable, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from docshelf.core.breadcrumbs import BreadcrumbItem
from docshelf.core.documents import DirectoryListing, DocumentEntry, MarkdownPage
from docshelf.core.renderer import MarkdownRenderer
from docshelf.core.types import URLPath

logger = logging.getLogger(__name__)

EXCERPT_WORDS = 160
DEFAULT_SEARCH_PATH = "/search"

_TAG = re.compile(r"<[^>]*>")
_WORD = re.compile(r"[^\W\d_](?:[^\W\d_]|['-])*")


def doc_excerpt(content: str | None, words: int = EXCERPT_WORDS) -> str | None:
    """Shorten long content to its first words.

    Tags are stripped before counting.

    Args:
        content: Markdown or HTML text
        words: Number of words to keep

    Returns:
        First ``words`` words joined by spaces, or None when the content
        is not longer than that
    """
    if not content:
        return None
    found = _WORD.findall(_TAG.sub("", content))
    if len(found) <= words:
        return None
    return " ".join(found[:words])


class TemplateRenderer:
    """Renders documents through the bundled templates."""

    def __init__(
        self,
        markdown: MarkdownRenderer,
        *,
        doc_uri: Callable[[str], URLPath | None] | None = None,
        search_path: str = DEFAULT_SEARCH_PATH,
    ) -> None:
        """Initialize template environment.

        Args:
            markdown: Converter used by the ``markdown`` filter
            doc_uri: Route-to-documentation lookup exposed as ``doc_uri``
            search_path: URI the search form submits to
        """
        self._markdown = markdown
        self.environment = Environment(
            loader=PackageLoader("docshelf", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.environment.filters["markdown"] = self._render_markdown
        self.environment.filters["doc_excerpt"] = doc_excerpt
        self.environment.globals["doc_uri"] = doc_uri or (lambda route_id: None)
        self.environment.globals["search_path"] = search_path

    def render_listing(
        self,
        title: str,
        path: URLPath,
        entries: Sequence[DocumentEntry],
    ) -> str:
        """Render a directory listing as Markdown."""
        template = self.environment.get_template("directory-listing.md")
        return template.render(title=title, path=path, entries=entries)

    def render_page(
        self,
        document: MarkdownPage | DirectoryListing,
        breadcrumbs: Sequence[BreadcrumbItem],
        *,
        error: str | None = None,
    ) -> str:
        """Render a Markdown page or directory listing as HTML."""
        template = self.environment.get_template("page.html")
        return template.render(document=document, breadcrumbs=breadcrumbs, error=error)

    def render_search(
        self,
        documents: Sequence[MarkdownPage],
        query: str,
        breadcrumbs: Sequence[BreadcrumbItem],
    ) -> str:
        """Render search results as HTML."""
        template = self.environment.get_template("search.html")
        return template.render(documents=documents, query=query, breadcrumbs=breadcrumbs)

    def _render_markdown(self, text: str) -> Markup:
        return Markup(self._markdown.render(text))
