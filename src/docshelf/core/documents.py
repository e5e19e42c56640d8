"""Document model produced by resolution and consumed by templates.

Resolution yields exactly one of RawFile, MarkdownPage or DirectoryListing.
Each variant carries the absolute filesystem location it was built from;
pages and listings also carry the public path and title derived from it.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from docshelf.core.paths import sanitize_path
from docshelf.core.types import URLPath, UrlFor

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.md"
INDEX_TITLE = "Index"

_MD_EXTENSION = re.compile(r"\.md", re.IGNORECASE)


@dataclass(frozen=True)
class DocumentEntry:
    """Child entry of a directory listing."""

    absolute_path: Path
    path: URLPath
    title: str


@dataclass(frozen=True)
class RawFile:
    """Non-Markdown file served as-is."""

    absolute_path: Path
    kind: Literal["raw"] = field(default="raw", init=False)


@dataclass(frozen=True)
class MarkdownPage:
    """Markdown source read from disk."""

    absolute_path: Path
    path: URLPath
    title: str
    content: str
    kind: Literal["markdown"] = field(default="markdown", init=False)


@dataclass(frozen=True)
class DirectoryListing:
    """Directory without index page, listed as synthesized Markdown."""

    absolute_path: Path
    path: URLPath
    title: str
    entries: tuple[DocumentEntry, ...]
    content: str
    kind: Literal["listing"] = field(default="listing", init=False)


Resolution = RawFile | MarkdownPage | DirectoryListing


def derive_title(absolute_path: str | os.PathLike[str], doc_root: str | os.PathLike[str]) -> str:
    """Derive the display title of a document from its filesystem path.

    The document root, its index.md and the empty path are all titled
    "Index". An index.md elsewhere takes the name of its directory. Any
    other path takes its basename. Afterwards ``.md`` is removed and
    underscores become spaces.

    Args:
        absolute_path: Filesystem path of the document
        doc_root: Document root directory

    Returns:
        Display title
    """
    absolute = os.fspath(absolute_path)
    root = os.fspath(doc_root).rstrip("/")

    if absolute == "":
        return INDEX_TITLE
    if absolute.rstrip("/") == root or absolute == f"{root}/{INDEX_FILENAME}":
        return INDEX_TITLE

    if absolute.endswith(f"/{INDEX_FILENAME}"):
        absolute = absolute[: -len(INDEX_FILENAME) - 1]
    title = os.path.basename(absolute.rstrip("/"))
    title = _MD_EXTENSION.sub("", title)
    return title.replace("_", " ")


class DocumentFactory:
    """Builds documents for files under a document root.

    Public paths and titles depend on the absolute path only, so two documents
    built from the same file always agree on both.
    """

    def __init__(self, source_dir: Path, url_for: UrlFor) -> None:
        """Initialize factory.

        Args:
            source_dir: Document root directory, made absolute so the root
                prefix of every document path can be removed
            url_for: Formats a path key into a public URI
        """
        self._source_dir = source_dir.absolute()
        self._url_for = url_for

    @property
    def source_dir(self) -> Path:
        """Document root directory."""
        return self._source_dir

    def absolute_path(self, key: str) -> Path:
        """Return the filesystem location of a sanitized path key."""
        return Path(f"{self._source_dir}/{key}")

    def title_for(self, absolute_path: Path) -> str:
        return derive_title(absolute_path, self._source_dir)

    def path_for(self, absolute_path: Path) -> URLPath:
        """Derive the public URI of a file or directory.

        The document root prefix is removed (first occurrence only) and the
        remainder sanitized. An index.md maps to its directory.
        """
        relative = os.fspath(absolute_path).replace(os.fspath(self._source_dir), "", 1)
        if relative == INDEX_FILENAME or relative.endswith(f"/{INDEX_FILENAME}"):
            relative = relative[: -len(INDEX_FILENAME)]
        return self._url_for(sanitize_path(relative))

    def entry(self, absolute_path: Path) -> DocumentEntry:
        return DocumentEntry(
            absolute_path=absolute_path,
            path=self.path_for(absolute_path),
            title=self.title_for(absolute_path),
        )

    def markdown_page(self, absolute_path: Path) -> MarkdownPage:
        """Load a Markdown file.

        Args:
            absolute_path: Path to the ``.md`` file

        Returns:
            MarkdownPage holding the raw source, undecodable bytes replaced

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        content = absolute_path.read_text(encoding="utf-8", errors="replace")
        return MarkdownPage(
            absolute_path=absolute_path,
            path=self.path_for(absolute_path),
            title=self.title_for(absolute_path),
            content=content,
        )

    def listing_entries(self, directory: Path) -> tuple[DocumentEntry, ...]:
        """List Markdown files and subdirectories of a directory by name.

        Args:
            directory: Directory to list

        Returns:
            Entries sorted ascending by name
        """
        entries: list[DocumentEntry] = []
        for name in sorted(os.listdir(directory)):
            child = directory / name
            if name.endswith(".md") or child.is_dir():
                entries.append(self.entry(child))
        logger.debug(f"Listed {len(entries)} entries in {directory}")
        return tuple(entries)
