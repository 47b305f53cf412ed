"""Bucket scanning engine.

Walks every bucket of a Scoop installation, loads each ``*.json`` manifest
and runs the matcher chain over it. Problems with individual manifests are
logged and collected; they never abort the search.
"""

import logging
from pathlib import Path

from scoop_searchr.config import SearchrConfig
from scoop_searchr.errors import ManifestError, SearchError
from scoop_searchr.models import (
    BucketResult,
    Manifest,
    MatchEntry,
    SearchIssue,
    SearchReport,
)
from scoop_searchr.scoop import iter_buckets
from scoop_searchr.search.matchers import Matcher, build_matchers, match_manifest

logger = logging.getLogger(__name__)

MANIFEST_SUFFIX = ".json"


def find_manifests(
    base: Path,
    term: str,
    matchers: list[Matcher] | None = None,
) -> tuple[list[MatchEntry], list[SearchIssue]]:
    """Search every manifest in a directory.

    Args:
        base: Directory containing ``<package>.json`` manifests
        term: Search term (matched case-insensitively)
        matchers: Matcher chain (defaults to every field)

    Returns:
        Sorted matching entries and the non-fatal issues encountered

    Raises:
        SearchError: If the directory cannot be listed
    """
    if matchers is None:
        matchers = build_matchers()

    term = term.lower()

    try:
        paths = list(base.iterdir())
    except OSError as e:
        raise SearchError(f"failed to list manifests in {base}: {e}", base) from e

    entries: list[MatchEntry] = []
    issues: list[SearchIssue] = []

    for path in paths:
        if path.suffix != MANIFEST_SUFFIX or not path.is_file():
            continue

        try:
            manifest = Manifest.from_file(path)
        except ManifestError as e:
            logger.warning("Skipping manifest %s: %s", path, e.message)
            issues.append(
                SearchIssue(component="manifest", message=e.message, file_path=str(path))
            )
            continue

        name = path.stem
        logger.debug("Checking %s (%s)", name, manifest.version)

        entry = match_manifest(matchers, name, manifest, term)
        if entry is not None:
            entries.append(entry)

    entries.sort()
    return entries, issues


class ManifestSearch:
    """Searches all buckets of a Scoop installation.

    Usage:
        search = ManifestSearch(config)
        report = search.run("python", scoop_home)
    """

    def __init__(self, config: SearchrConfig | None = None) -> None:
        """Initialize the search.

        Args:
            config: scoop-searchr configuration (uses defaults if None)
        """
        self.config = config or SearchrConfig()
        self._matchers = build_matchers(self.config.search)

    @property
    def matchers(self) -> list[Matcher]:
        """The matcher chain in priority order."""
        return list(self._matchers)

    def run(self, term: str, scoop_home: Path) -> SearchReport:
        """Search every bucket for the term.

        Args:
            term: Search term
            scoop_home: Scoop installation directory

        Returns:
            SearchReport listing buckets with at least one match

        Raises:
            SearchError: If the buckets directory or a bucket cannot be listed
        """
        report = SearchReport(term=term, scoop_home=scoop_home)

        for bucket_name, manifest_path in iter_buckets(scoop_home):
            logger.debug("Searching bucket '%s' in %s", bucket_name, manifest_path)
            entries, issues = find_manifests(manifest_path, term, self._matchers)
            report.issues.extend(issues)

            if not entries:
                continue

            report.buckets.append(
                BucketResult(name=bucket_name, path=manifest_path, entries=entries)
            )

        logger.debug(
            "Found %d match(es) in %d bucket(s)",
            report.match_count,
            len(report.buckets),
        )
        return report
