"""Manifest search.

- matchers: Name, binary and description matchers tried in priority order
- engine: Bucket walking and manifest loading
"""

from scoop_searchr.search.engine import ManifestSearch, find_manifests
from scoop_searchr.search.matchers import (
    BinaryMatcher,
    DescriptionMatcher,
    Matcher,
    NameMatcher,
    build_matchers,
    match_manifest,
)

__all__ = [
    "ManifestSearch",
    "find_manifests",
    "Matcher",
    "NameMatcher",
    "BinaryMatcher",
    "DescriptionMatcher",
    "build_matchers",
    "match_manifest",
]
