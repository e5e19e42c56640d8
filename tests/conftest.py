"""Shared test fixtures."""

from collections.abc import Sequence
from pathlib import Path

import pytest
from docshelf.config import Config, DocsConfig, HomeConfig, ServerConfig
from docshelf.core.documents import DocumentEntry, DocumentFactory
from docshelf.core.types import URLPath


def docs_url_for(key: str) -> URLPath:
    """Format path keys like the server's page route."""
    return URLPath(f"/docs/{key}")


class RecordingListingRenderer:
    """Listing renderer that records its calls and emits a plain list."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[DocumentEntry]]] = []

    def render_listing(
        self,
        title: str,
        path: URLPath,
        entries: Sequence[DocumentEntry],
    ) -> str:
        self.calls.append((title, path, list(entries)))
        return "".join(f"- {entry.title}\n" for entry in entries)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create an empty document root."""
    docs = tmp_path / "docs"
    docs.mkdir(exist_ok=True)
    return docs


@pytest.fixture
def documents(docs_dir: Path) -> DocumentFactory:
    return DocumentFactory(docs_dir, docs_url_for)


@pytest.fixture
def listing_renderer() -> RecordingListingRenderer:
    return RecordingListingRenderer()


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        home=HomeConfig(),
    )
