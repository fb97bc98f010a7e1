"""Error types raised by the wttr client."""


class WttrError(Exception):
    """Base class for every fatal error of an invocation."""


class FetchFailed(WttrError):
    """Raised when the provider request fails or returns a bad response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ExtractionFailed(WttrError):
    """Raised when the provider payload does not have the expected shape."""


class MalformedRecord(WttrError):
    """Raised when normalized weather JSON cannot be parsed into a record."""


class CacheIoError(WttrError):
    """Raised on a filesystem error accessing the cache file."""


class HomeDirUnavailable(WttrError):
    """Raised when the user's home directory cannot be resolved."""


class ConfigError(WttrError):
    """Raised when the config file cannot be read or fails validation."""
