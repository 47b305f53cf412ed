"""Search result entities.

This module contains entities produced by a search run:
- MatchKind: Which manifest field matched
- MatchEntry: A single matching package
- SearchIssue: Non-fatal problem encountered while scanning
- BucketResult: Matches found in one bucket
- SearchReport: Aggregated result of a search run
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class MatchKind(Enum):
    """Manifest field that produced a match."""

    NAME = "name"
    BINARY = "binary"
    DESCRIPTION = "description"


def _optional_key(value: str | None) -> tuple[bool, str]:
    # Absent values sort before present ones
    return (value is not None, value or "")


@dataclass
class MatchEntry:
    """A package that matched the search term.

    Only the field relevant to the match is populated: ``bin`` for binary
    matches, ``description`` for description matches.

    Attributes:
        name: Package name (manifest file stem)
        version: Package version
        kind: Which field matched
        bin: Matching binary path
        description: Full description text
    """

    name: str
    version: str
    kind: MatchKind = MatchKind.NAME
    bin: str | None = None
    description: str | None = None

    def sort_key(self) -> tuple[Any, ...]:
        """Ordering key: name, version, binary, description."""
        return (
            self.name,
            self.version,
            _optional_key(self.bin),
            _optional_key(self.description),
        )

    def __lt__(self, other: "MatchEntry") -> bool:
        return self.sort_key() < other.sort_key()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "version": self.version,
            "kind": self.kind.value,
            "bin": self.bin,
            "description": self.description,
        }


@dataclass
class SearchIssue:
    """Non-fatal problem encountered during a search.

    Attributes:
        component: Component that reported it (manifest, bucket)
        message: Problem description
        file_path: File or directory involved
        recoverable: Whether the search continued afterwards
    """

    component: str
    message: str
    file_path: str | None = None
    recoverable: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "component": self.component,
            "message": self.message,
            "file_path": self.file_path,
            "recoverable": self.recoverable,
        }


@dataclass
class BucketResult:
    """Matches found in a single bucket.

    Attributes:
        name: Bucket name (directory name under ``buckets/``)
        path: Directory the manifests were read from
        entries: Sorted matching entries
    """

    name: str
    path: Path
    entries: list[MatchEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "path": str(self.path),
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass
class SearchReport:
    """Aggregated result of a search across all buckets.

    Attributes:
        term: Search term as given by the user
        scoop_home: Scoop installation that was searched
        buckets: Buckets with at least one match, in bucket order
        issues: Non-fatal problems encountered while scanning
    """

    term: str
    scoop_home: Path
    buckets: list[BucketResult] = field(default_factory=list)
    issues: list[SearchIssue] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Return True if any bucket produced a match."""
        return any(bucket.entries for bucket in self.buckets)

    @property
    def match_count(self) -> int:
        """Total number of matching entries."""
        return sum(len(bucket.entries) for bucket in self.buckets)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "term": self.term,
            "scoop_home": str(self.scoop_home),
            "found": self.found,
            "match_count": self.match_count,
            "buckets": [bucket.to_dict() for bucket in self.buckets],
            "issues": [issue.to_dict() for issue in self.issues],
        }
