"""Resolution of URL paths onto the document tree.

Rules are tried in a fixed order and the first match wins:

1. ``<root>/<path>`` is a file: served raw.
2. ``<root>/<path>.md`` exists: rendered as a Markdown page.
3. ``<root>/<path>`` is a directory with ``index.md``: that file is rendered.
4. ``<root>/<path>`` is a directory: a listing of its children is synthesized.

Anything else is a PageNotFoundError.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from docshelf.core.documents import (
    INDEX_FILENAME,
    DirectoryListing,
    DocumentEntry,
    DocumentFactory,
    RawFile,
    Resolution,
)
from docshelf.core.errors import PageNotFoundError
from docshelf.core.paths import sanitize_path
from docshelf.core.types import URLPath

logger = logging.getLogger(__name__)


class ListingRenderer(Protocol):
    """Renders a directory listing as Markdown."""

    def render_listing(
        self,
        title: str,
        path: URLPath,
        entries: Sequence[DocumentEntry],
    ) -> str: ...


class DocumentResolver:
    """Resolves path strings to raw files, Markdown pages or listings.

    Holds no state besides its collaborators, so one instance can serve
    concurrent requests.
    """

    def __init__(self, documents: DocumentFactory, listing_renderer: ListingRenderer) -> None:
        """Initialize resolver.

        Args:
            documents: Factory building documents under the document root
            listing_renderer: Template capability producing listing Markdown
        """
        self._documents = documents
        self._listing_renderer = listing_renderer

    @property
    def source_dir(self) -> Path:
        """Document root directory."""
        return self._documents.source_dir

    def resolve(self, path: str | None) -> Resolution:
        """Resolve a raw URL path.

        Args:
            path: Path from the URL (e.g., "guide/setup", "/guide/setup.md")

        Returns:
            RawFile, MarkdownPage or DirectoryListing

        Raises:
            PageNotFoundError: If no rule matches
        """
        key = sanitize_path(path)
        if ".." in key.split("/"):
            logger.warning(f"Rejected path outside document root: '{key}'")
            raise PageNotFoundError(key)

        absolute = self._documents.absolute_path(key)
        markdown = self._documents.absolute_path(f"{key}.md")
        index = absolute / INDEX_FILENAME

        if absolute.exists() and not absolute.is_dir():
            logger.debug(f"Resolved '{key}' to raw file {absolute}")
            return RawFile(absolute_path=absolute)
        if markdown.is_file():
            logger.debug(f"Resolved '{key}' to markdown file {markdown}")
            return self._documents.markdown_page(markdown)
        if absolute.is_dir() and index.is_file():
            logger.debug(f"Resolved '{key}' to directory index {index}")
            return self._documents.markdown_page(index)
        if absolute.is_dir():
            logger.debug(f"Resolved '{key}' to directory listing {absolute}")
            return self._directory_listing(absolute)

        logger.debug(f"No document for '{key}'")
        raise PageNotFoundError(key)

    def _directory_listing(self, directory: Path) -> DirectoryListing:
        entries = self._documents.listing_entries(directory)
        title = self._documents.title_for(directory)
        path = self._documents.path_for(directory)
        return DirectoryListing(
            absolute_path=directory,
            path=path,
            title=title,
            entries=entries,
            content=self._listing_renderer.render_listing(title, path, entries),
        )
