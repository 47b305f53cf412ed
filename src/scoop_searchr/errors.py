"""Exception hierarchy for scoop-searchr.

Library code raises these; only the CLI turns them into exit codes.
"""

from pathlib import Path


class ScoopSearchrError(Exception):
    """Base class for all scoop-searchr errors."""


class ScoopHomeError(ScoopSearchrError):
    """Raised when no valid Scoop installation can be located."""


class ManifestError(ScoopSearchrError):
    """Raised when a manifest cannot be read or does not have the expected shape."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message} ({path})" if path else message)


class SearchError(ScoopSearchrError):
    """Raised when a bucket or buckets directory cannot be listed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        self.message = message
        super().__init__(message)
