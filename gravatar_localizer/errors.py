class LocalizerError(Exception):
    """Base class for errors that abort the whole run."""


class DirectoryReadError(LocalizerError):
    """Raised when a directory in the work tree cannot be listed."""


class DownloadError(LocalizerError):
    """Raised when an avatar cannot be fetched or saved."""


class ShortReadError(DownloadError):
    """Raised when the response body is shorter than the format header."""
