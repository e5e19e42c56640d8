"""Error types for document resolution and configuration checks."""


class PageNotFoundError(FileNotFoundError):
    """No resolution rule matched the requested path."""

    def __init__(self, path: str, message: str = "Page not found") -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class InvalidQueryError(ValueError):
    """Search query is missing or blank."""


class ConfigurationError(ValueError):
    """Route mapping or document root configuration is unusable."""
