"""Reverse lookup from route identifiers to documentation URIs.

The mapping is an ordered table of ``(pattern, path)`` entries. Lookup walks
the table and the first pattern matching the route identifier wins, so table
order decides between overlapping patterns. Overlaps are a configuration
problem and are only reported by the ``ambiguous_routes`` lint.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from docshelf.core.errors import ConfigurationError
from docshelf.core.paths import sanitize_path
from docshelf.core.types import URLPath, UrlFor

logger = logging.getLogger(__name__)

# PCRE-style "/pattern/modifiers"; delimiters exclude regex metacharacters
_DELIMITED_PATTERN = re.compile(r"^([/#~%@!,;:])(.*)\1([A-Za-z]*)$", re.DOTALL)

# "u" and "S" have no effect on Python str patterns
_PATTERN_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
    "S": 0,
}


@dataclass(frozen=True)
class RouteMappingEntry:
    """Route pattern and the documentation path it points to."""

    pattern: str
    path: str


def compile_route_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a route pattern.

    Delimited patterns such as ``/^page_a$/i`` are unwrapped and their
    trailing modifiers applied. Delimiters are ``/ # ~ % @ ! , ; :``. Other
    patterns are compiled as-is.

    Args:
        pattern: Pattern from configuration

    Returns:
        Compiled pattern

    Raises:
        ConfigurationError: If the pattern is not a valid regular expression
            or carries an unsupported modifier
    """
    source = pattern
    flags = 0
    delimited = _DELIMITED_PATTERN.match(pattern)
    if delimited is not None:
        source = delimited.group(2)
        for modifier in delimited.group(3):
            if modifier not in _PATTERN_FLAGS:
                raise ConfigurationError(
                    f"Invalid route pattern {pattern!r}: unsupported modifier {modifier!r}"
                )
            flags |= _PATTERN_FLAGS[modifier]

    try:
        return re.compile(source, flags)
    except re.error as e:
        raise ConfigurationError(f"Invalid route pattern {pattern!r}: {e}") from e


def validate_route_mapping(
    entries: Iterable[RouteMappingEntry],
    source_dir: Path,
) -> list[str]:
    """Check route mapping entries against the document tree.

    Every pattern must compile and every path must exist below source_dir,
    either as given or with a ``.md`` extension.

    Args:
        entries: Route mapping entries
        source_dir: Document root directory

    Returns:
        Problem descriptions, empty when the mapping is valid
    """
    problems: list[str] = []
    for entry in entries:
        try:
            compile_route_pattern(entry.pattern)
        except ConfigurationError as e:
            problems.append(str(e))

        target = Path(f"{source_dir}/{entry.path}")
        if not target.exists() and not Path(f"{target}.md").exists():
            problems.append(f"File {target} is missing (mapped from {entry.pattern!r})")

    return problems


class RouteMapping:
    """Ordered route pattern table with first-match lookup."""

    def __init__(self, entries: Sequence[RouteMappingEntry], url_for: UrlFor) -> None:
        """Initialize mapping.

        Args:
            entries: Entries in lookup order
            url_for: Formats a path key into a public URI

        Raises:
            ConfigurationError: If a pattern doesn't compile
        """
        self._compiled = tuple(
            (compile_route_pattern(entry.pattern), entry) for entry in entries
        )
        self._url_for = url_for

    def find_entry(self, route_id: str) -> RouteMappingEntry | None:
        for pattern, entry in self._compiled:
            if pattern.search(route_id):
                return entry
        return None

    def resolve_route(self, route_id: str | None) -> URLPath | None:
        """Find the documentation URI for a route.

        Args:
            route_id: Route identifier (e.g., a named endpoint)

        Returns:
            URI of the first matching entry, None if nothing matches
        """
        if not route_id:
            return None

        entry = self.find_entry(route_id)
        if entry is None:
            logger.debug(f"No documentation mapped for route '{route_id}'")
            return None

        return self._url_for(sanitize_path(entry.path))

    def ambiguous_routes(self, route_ids: Iterable[str]) -> dict[str, list[str]]:
        """Report route identifiers matched by more than one pattern.

        Args:
            route_ids: Known route identifiers to check

        Returns:
            Mapping of route identifier to all patterns matching it, in
            table order; only identifiers with two or more matches
        """
        ambiguous: dict[str, list[str]] = {}
        for route_id in route_ids:
            matches = [entry.pattern for pattern, entry in self._compiled if pattern.search(route_id)]
            if len(matches) > 1:
                ambiguous[route_id] = matches
        return ambiguous
