"""scoop-searchr data models.

This module exports all core entities used throughout the application:
- Manifest: Searchable fields of a Scoop manifest
- MatchEntry: A single matching package
- MatchKind: Which manifest field matched
- SearchIssue: Non-fatal problem encountered during a search
- BucketResult: Matches found in one bucket
- SearchReport: Aggregated search result
"""

from scoop_searchr.models.manifest import Manifest, bin_stem
from scoop_searchr.models.result import (
    BucketResult,
    MatchEntry,
    MatchKind,
    SearchIssue,
    SearchReport,
)

__all__ = [
    "Manifest",
    "bin_stem",
    "MatchEntry",
    "MatchKind",
    "SearchIssue",
    "BucketResult",
    "SearchReport",
]
