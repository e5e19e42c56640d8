"""Tests for route mapping reverse lookup."""

import re
from pathlib import Path

import pytest
from docshelf.core.errors import ConfigurationError
from docshelf.core.routes import (
    RouteMapping,
    RouteMappingEntry,
    compile_route_pattern,
    validate_route_mapping,
)

from tests.conftest import docs_url_for


class TestCompileRoutePattern:
    """Tests for compile_route_pattern()."""

    def test__delimited_pattern__unwrapped(self) -> None:
        pattern = compile_route_pattern("/^page_a$/")

        assert pattern.pattern == "^page_a$"
        assert pattern.search("page_a")
        assert not pattern.search("page_ab")

    def test__delimited_pattern_with_flags__applies_flags(self) -> None:
        pattern = compile_route_pattern("#^admin_.*$#i")

        assert pattern.flags & re.IGNORECASE
        assert pattern.search("ADMIN_users")

    def test__plain_pattern__used_as_is(self) -> None:
        pattern = compile_route_pattern("^user_(show|edit)$")

        assert pattern.search("user_edit")

    def test__pattern_with_inner_delimiter__keeps_body(self) -> None:
        pattern = compile_route_pattern("/^api/v1$/")

        assert pattern.pattern == "^api/v1$"

    def test__invalid_pattern__raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid route pattern"):
            compile_route_pattern("/^page_(a$/")

    def test__unicode_modifier__accepted(self) -> None:
        """The u modifier is a no-op for str patterns."""
        pattern = compile_route_pattern("/^page_a$/u")

        assert pattern.pattern == "^page_a$"
        assert pattern.search("page_a")

    def test__unknown_modifier__raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="unsupported modifier 'q'"):
            compile_route_pattern("/^page_a$/q")

    def test__metacharacter_bounds__not_treated_as_delimiters(self) -> None:
        """A plain regex starting and ending with '.' is compiled as-is."""
        pattern = compile_route_pattern(".*_admin.")

        assert pattern.pattern == ".*_admin."
        assert pattern.search("user_admin_")


class TestRouteMapping:
    """Tests for RouteMapping."""

    def test__first_matching_entry__wins(self) -> None:
        """Table order decides, not the most specific pattern."""
        mapping = RouteMapping(
            [
                RouteMappingEntry(pattern="/^page_a$/", path="a"),
                RouteMappingEntry(pattern="/^page_.*$/", path="b"),
            ],
            docs_url_for,
        )

        assert mapping.resolve_route("page_a") == "/docs/a"
        assert mapping.resolve_route("page_c") == "/docs/b"

    def test__reversed_order__broader_pattern_wins(self) -> None:
        mapping = RouteMapping(
            [
                RouteMappingEntry(pattern="/^page_.*$/", path="b"),
                RouteMappingEntry(pattern="/^page_a$/", path="a"),
            ],
            docs_url_for,
        )

        assert mapping.resolve_route("page_a") == "/docs/b"

    def test__no_match__returns_none(self) -> None:
        mapping = RouteMapping([RouteMappingEntry(pattern="/^page_a$/", path="a")], docs_url_for)

        assert mapping.resolve_route("dashboard") is None

    @pytest.mark.parametrize("route_id", [None, ""])
    def test__missing_route_id__returns_none(self, route_id: str | None) -> None:
        mapping = RouteMapping([RouteMappingEntry(pattern="/.*/", path="a")], docs_url_for)

        assert mapping.resolve_route(route_id) is None

    def test__unanchored_pattern__matches_substring(self) -> None:
        mapping = RouteMapping([RouteMappingEntry(pattern="/invoice/", path="billing")], docs_url_for)

        assert mapping.resolve_route("app_invoice_show") == "/docs/billing"

    def test__mapped_path__sanitized(self) -> None:
        mapping = RouteMapping(
            [RouteMappingEntry(pattern="/^x$/", path="/guide/setup.md")],
            docs_url_for,
        )

        assert mapping.resolve_route("x") == "/docs/guide/setup"

    def test__unicode_modifier__route_resolved(self) -> None:
        mapping = RouteMapping([RouteMappingEntry(pattern="/^page_a$/u", path="a")], docs_url_for)

        assert mapping.resolve_route("page_a") == "/docs/a"

    def test__invalid_pattern__rejected_on_construction(self) -> None:
        with pytest.raises(ConfigurationError):
            RouteMapping([RouteMappingEntry(pattern="/[/", path="a")], docs_url_for)

    def test__ambiguous_routes__reports_overlaps(self) -> None:
        mapping = RouteMapping(
            [
                RouteMappingEntry(pattern="/^page_a$/", path="a"),
                RouteMappingEntry(pattern="/^page_.*$/", path="b"),
            ],
            docs_url_for,
        )

        ambiguous = mapping.ambiguous_routes(["page_a", "page_b", "other"])

        assert ambiguous == {"page_a": ["/^page_a$/", "/^page_.*$/"]}


class TestValidateRouteMapping:
    """Tests for validate_route_mapping()."""

    def test__valid_mapping__no_problems(self, docs_dir: Path) -> None:
        (docs_dir / "a.md").write_text("A")
        (docs_dir / "section").mkdir()

        problems = validate_route_mapping(
            [
                RouteMappingEntry(pattern="/^page_a$/", path="a"),
                RouteMappingEntry(pattern="/^section_/", path="section"),
            ],
            docs_dir,
        )

        assert problems == []

    def test__missing_file__reported(self, docs_dir: Path) -> None:
        problems = validate_route_mapping(
            [RouteMappingEntry(pattern="/^page_a$/", path="missing")],
            docs_dir,
        )

        assert len(problems) == 1
        assert "missing is missing" in problems[0]

    def test__invalid_regex__reported(self, docs_dir: Path) -> None:
        (docs_dir / "a.md").write_text("A")

        problems = validate_route_mapping(
            [RouteMappingEntry(pattern="/(unclosed/", path="a")],
            docs_dir,
        )

        assert len(problems) == 1
        assert "Invalid route pattern" in problems[0]

    def test__unknown_modifier__reported(self, docs_dir: Path) -> None:
        (docs_dir / "a.md").write_text("A")

        problems = validate_route_mapping(
            [RouteMappingEntry(pattern="/^page_a$/e", path="a")],
            docs_dir,
        )

        assert problems == ["Invalid route pattern '/^page_a$/e': unsupported modifier 'e'"]
