"""Configuration management for Docshelf.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from docshelf.core.routes import RouteMappingEntry

CONFIG_FILENAME = "docshelf.toml"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class DocsConfig:
    """Documentation configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))


@dataclass(frozen=True)
class HomeConfig:
    """Home link shown as the first breadcrumb."""

    title: str = "Home"
    route: str | None = None


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    home: HomeConfig
    route_mapping: tuple[RouteMappingEntry, ...] = ()
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docshelf.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(server=ServerConfig(), docs=DocsConfig(), home=HomeConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            home=cls._parse_home(data.get("home")),
            route_mapping=cls._parse_route_mapping(data.get("route_mapping")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        return DocsConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_home(cls, data: object) -> HomeConfig:
        if data is None:
            return HomeConfig()

        if not isinstance(data, dict):
            raise ValueError("home section must be a dictionary")

        title = data.get("title", "Home")
        if not isinstance(title, str):
            raise ValueError("home.title must be a string")

        route = data.get("route")
        if route is not None and not isinstance(route, str):
            raise ValueError("home.route must be a string")

        return HomeConfig(title=title, route=route)

    @classmethod
    def _parse_route_mapping(cls, data: object) -> tuple[RouteMappingEntry, ...]:
        """Parse route_mapping configuration.

        Accepts an array of tables with ``pattern`` and ``path`` keys, or a
        table of ``pattern = path`` pairs. Order is kept either way.

        Args:
            data: Raw route_mapping data

        Returns:
            Entries in configuration order
        """
        if data is None:
            return ()

        if isinstance(data, dict):
            entries: list[RouteMappingEntry] = []
            for pattern, path in data.items():
                if not isinstance(path, str):
                    raise ValueError(f"route_mapping path for {pattern!r} must be a string")
                entries.append(RouteMappingEntry(pattern=pattern, path=path))
            return tuple(entries)

        if not isinstance(data, list):
            raise ValueError("route_mapping must be a list or a dictionary")

        entries = []
        for item in data:
            if not isinstance(item, dict):
                raise ValueError("route_mapping items must be dictionaries")
            pattern = item.get("pattern")
            if not isinstance(pattern, str):
                raise ValueError("route_mapping.pattern must be a string")
            path = item.get("path")
            if not isinstance(path, str):
                raise ValueError("route_mapping.path must be a string")
            entries.append(RouteMappingEntry(pattern=pattern, path=path))

        return tuple(entries)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override docs.source_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        return replace(self, server=server, docs=docs)
