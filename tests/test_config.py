"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from docshelf.config import Config, DocsConfig, HomeConfig, ServerConfig
from docshelf.core.routes import RouteMappingEntry


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "docshelf.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[docs]
source_dir = "documentation"

[home]
title = "Dashboard"
route = "dashboard"

[[route_mapping]]
pattern = "/^page_a$/"
path = "a"

[[route_mapping]]
pattern = "/^page_.*$/"
path = "b"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.docs.source_dir == tmp_path / "documentation"
        assert config.home.title == "Dashboard"
        assert config.home.route == "dashboard"
        assert config.route_mapping == (
            RouteMappingEntry(pattern="/^page_a$/", path="a"),
            RouteMappingEntry(pattern="/^page_.*$/", path="b"),
        )
        assert config.config_path == config_file

    def test__route_mapping_table__keeps_order(self, tmp_path: Path) -> None:
        """Accept a table of pattern = path pairs."""
        config_file = tmp_path / "docshelf.toml"
        config_file.write_text("""
[route_mapping]
"/^z_route$/" = "z"
"/^a_route$/" = "a"
""")

        config = Config.load(config_file)

        assert [entry.path for entry in config.route_mapping] == ["z", "a"]

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "docshelf.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.docs.source_dir == tmp_path / "docs"
        assert config.home == HomeConfig(title="Home", route=None)
        assert config.route_mapping == ()

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "nonexistent.toml")

    def test__no_path_no_discovery__returns_defaults(self) -> None:
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.docs.source_dir == Path("docs")
        assert config.route_mapping == ()
        assert config.config_path is None


class TestConfigDiscovery:
    """Tests for config file discovery."""

    def test__config_in_current_dir__found(self, tmp_path: Path) -> None:
        config_file = tmp_path / "docshelf.toml"
        config_file.write_text("[server]\nport = 9000")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = Config._discover_config()

        assert discovered == config_file

    def test__config_in_parent_dir__found(self, tmp_path: Path) -> None:
        config_file = tmp_path / "docshelf.toml"
        config_file.write_text("[server]\nport = 9000")
        child = tmp_path / "sub" / "dir"
        child.mkdir(parents=True)

        with patch("pathlib.Path.cwd", return_value=child):
            discovered = Config._discover_config()

        assert discovered == config_file


class TestConfigValidation:
    """Tests for configuration type checks."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ("[docs]\nsource_dir = 1", "docs.source_dir must be a string"),
            ("[home]\ntitle = 1", "home.title must be a string"),
            ("[home]\nroute = 1", "home.route must be a string"),
            ("route_mapping = 1", "route_mapping must be a list or a dictionary"),
            ("route_mapping = [1]", "route_mapping items must be dictionaries"),
            ('[[route_mapping]]\npath = "a"', "route_mapping.pattern must be a string"),
            ('[[route_mapping]]\npattern = "/a/"', "route_mapping.path must be a string"),
            ('[route_mapping]\n"/a/" = 1', "route_mapping path for '/a/' must be a string"),
        ],
    )
    def test__invalid_value__raises_value_error(
        self, tmp_path: Path, content: str, message: str
    ) -> None:
        config_file = tmp_path / "docshelf.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    @pytest.fixture
    def config(self) -> Config:
        return Config(
            server=ServerConfig(host="127.0.0.1", port=8080),
            docs=DocsConfig(source_dir=Path("docs")),
            home=HomeConfig(),
        )

    def test__overrides__applied(self, config: Config) -> None:
        result = config.with_overrides(host="0.0.0.0", port=9000, source_dir=Path("other"))

        assert result.server.host == "0.0.0.0"
        assert result.server.port == 9000
        assert result.docs.source_dir == Path("other")

    def test__none_values__keep_existing(self, config: Config) -> None:
        result = config.with_overrides(port=9000)

        assert result.server.host == "127.0.0.1"
        assert result.server.port == 9000
        assert result.docs.source_dir == Path("docs")

    def test__original__not_modified(self, config: Config) -> None:
        config.with_overrides(host="0.0.0.0")

        assert config.server.host == "127.0.0.1"
