"""Breadcrumb trails for documentation and search pages."""

from dataclasses import dataclass
from pathlib import Path

from docshelf.core.documents import derive_title
from docshelf.core.paths import sanitize_path
from docshelf.core.types import UrlFor

DOCUMENTATION_TITLE = "Documentation"
SEARCH_TITLE = "Search"


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item."""

    title: str
    path: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "path": self.path}


class BreadcrumbBuilder:
    """Builds breadcrumbs starting at the configured home page."""

    def __init__(
        self,
        home: BreadcrumbItem,
        url_for: UrlFor,
        source_dir: Path,
        search_path: str,
    ) -> None:
        """Initialize builder.

        Args:
            home: Leading item pointing at the host application's home
            url_for: Formats a path key into a public URI
            source_dir: Document root directory, for title derivation
            search_path: URI of the search page
        """
        self._home = home
        self._url_for = url_for
        self._source_dir = source_dir
        self._search_path = search_path

    def for_page(self, path: str) -> list[BreadcrumbItem]:
        """Build breadcrumbs for a documentation path.

        Home and the documentation root come first, followed by one item per
        path segment, the requested page included.

        Args:
            path: Raw documentation path (e.g., "guide/setup")

        Returns:
            List of BreadcrumbItem, root first
        """
        breadcrumbs = self._base()
        key = sanitize_path(path)
        if not key:
            return breadcrumbs

        segments = key.split("/")
        for depth in range(1, len(segments) + 1):
            item_path = "/".join(segments[:depth])
            breadcrumbs.append(
                BreadcrumbItem(
                    title=derive_title(item_path, self._source_dir),
                    path=self._url_for(item_path),
                )
            )
        return breadcrumbs

    def for_search(self) -> list[BreadcrumbItem]:
        """Build breadcrumbs for the search page."""
        breadcrumbs = self._base()
        breadcrumbs.append(BreadcrumbItem(title=SEARCH_TITLE, path=self._search_path))
        return breadcrumbs

    def _base(self) -> list[BreadcrumbItem]:
        return [
            self._home,
            BreadcrumbItem(title=DOCUMENTATION_TITLE, path=self._url_for("")),
        ]
