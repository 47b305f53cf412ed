"""Manifest matchers.

Each matcher checks one manifest field against the (lowercased) search term.
Matchers are tried in order and the first hit wins, so a package is reported
at most once per bucket:

    NameMatcher -> BinaryMatcher -> DescriptionMatcher
"""

from abc import ABC, abstractmethod

from scoop_searchr.config import SearchConfig
from scoop_searchr.models import Manifest, MatchEntry, MatchKind, bin_stem


class Matcher(ABC):
    """Abstract interface for a single-field manifest matcher.

    Attributes:
        kind: Field this matcher inspects
    """

    kind: MatchKind

    @abstractmethod
    def match(self, name: str, manifest: Manifest, term: str) -> MatchEntry | None:
        """Check a manifest against the term.

        Args:
            name: Package name (manifest file stem)
            manifest: Parsed manifest
            term: Lowercased search term

        Returns:
            A MatchEntry on a hit, None otherwise
        """
        pass


class NameMatcher(Matcher):
    """Matches the package name."""

    kind = MatchKind.NAME

    def match(self, name: str, manifest: Manifest, term: str) -> MatchEntry | None:
        if term not in name.lower():
            return None
        return MatchEntry(name=name, version=manifest.version, kind=self.kind)


class BinaryMatcher(Matcher):
    """Matches the file stem of any binary; reports the first one that hits."""

    kind = MatchKind.BINARY

    def match(self, name: str, manifest: Manifest, term: str) -> MatchEntry | None:
        for path in manifest.bin:
            if term in bin_stem(path).lower():
                return MatchEntry(
                    name=name,
                    version=manifest.version,
                    kind=self.kind,
                    bin=path,
                )
        return None


class DescriptionMatcher(Matcher):
    """Matches anywhere in the description text."""

    kind = MatchKind.DESCRIPTION

    def match(self, name: str, manifest: Manifest, term: str) -> MatchEntry | None:
        if manifest.description is None or term not in manifest.description.lower():
            return None
        return MatchEntry(
            name=name,
            version=manifest.version,
            kind=self.kind,
            description=manifest.description,
        )


def build_matchers(search: SearchConfig | None = None) -> list[Matcher]:
    """Build the ordered matcher chain for a search configuration.

    Args:
        search: Field selection (defaults to every field)

    Returns:
        Matchers in priority order
    """
    if search is None:
        search = SearchConfig()

    matchers: list[Matcher] = [NameMatcher()]
    if search.binaries:
        matchers.append(BinaryMatcher())
    if search.descriptions:
        matchers.append(DescriptionMatcher())
    return matchers


def match_manifest(
    matchers: list[Matcher],
    name: str,
    manifest: Manifest,
    term: str,
) -> MatchEntry | None:
    """Run the matcher chain, returning the first hit."""
    for matcher in matchers:
        entry = matcher.match(name, manifest, term)
        if entry is not None:
            return entry
    return None
