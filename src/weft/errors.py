"""Error types raised by weft's outer surfaces (source loading, CLI)."""


class WeftError(Exception):
    """Base class for all weft errors."""


class StyleSourceError(WeftError):
    """Raised when a style source document cannot be loaded."""

    def __init__(self, message: str, location: str | None = None):
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)
