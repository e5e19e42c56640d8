"""Full-text search over the Markdown documents of the tree.

A linear scan: every ``.md`` file is loaded and matched by case-insensitive
substring against its content and title. Results keep discovery order.
"""

import logging
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

from docshelf.core.documents import DocumentFactory, MarkdownPage
from docshelf.core.errors import InvalidQueryError

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10


def validate_query(query: str | None) -> str:
    """Check a search query received at a boundary.

    Args:
        query: Raw query, None when the parameter was absent

    Returns:
        Query with surrounding whitespace removed

    Raises:
        InvalidQueryError: If the query is absent or blank
    """
    if query is None or not query.strip():
        raise InvalidQueryError("Invalid search term")
    return query.strip()


def iter_markdown_files(root: Path) -> Iterator[Path]:
    """Yield every ``*.md`` file below root.

    Depth first, entries of each directory in ascending name order.
    Symlinked directories are not descended into.
    """
    for child in sorted(root.iterdir()):
        if child.is_dir():
            if not child.is_symlink():
                yield from iter_markdown_files(child)
        elif child.name.endswith(".md"):
            yield child


class SearchEngine:
    """Substring search across all Markdown documents."""

    def __init__(self, documents: DocumentFactory) -> None:
        self._documents = documents

    def iter_matches(self, query: str) -> Iterator[MarkdownPage]:
        needle = query.casefold()
        for source_path in iter_markdown_files(self._documents.source_dir):
            page = self._documents.markdown_page(source_path)
            if needle in page.content.casefold() or needle in page.title.casefold():
                yield page

    def search(self, query: str, limit: int = MAX_SEARCH_RESULTS) -> list[MarkdownPage]:
        """Find documents containing the query.

        Args:
            query: Text to look for in content or title
            limit: Maximum number of results

        Returns:
            Matching pages in filesystem order, at most ``limit``
        """
        results = list(islice(self.iter_matches(query), limit))
        logger.debug(f"Search for '{query}' returned {len(results)} documents")
        return results
