"""Core type definitions."""

from collections.abc import Callable
from typing import NewType

# Public documentation URI (e.g., "/docs/guide/setup")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

# Formats a sanitized path key (e.g., "guide/setup") into a public URI
UrlFor = Callable[[str], URLPath]
