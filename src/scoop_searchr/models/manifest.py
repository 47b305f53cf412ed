"""Scoop manifest entity.

Only the fields the search reads are modelled:
- version: required string
- bin: a path, or a list of paths and ``[path, alias, args...]`` shim entries
- description: optional string (some buckets split it into a list of lines)

Every other manifest key is ignored.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import Any

from scoop_searchr.errors import ManifestError


def bin_stem(path: str) -> str:
    """Return the file stem of a manifest binary path.

    Manifests are written for Windows, so both ``\\`` and ``/`` are treated
    as separators regardless of the host platform.

    Args:
        path: Binary path as written in the manifest

    Returns:
        File name without its final suffix
    """
    return PureWindowsPath(path).stem


def _normalize_bin(value: Any) -> list[str]:
    """Flatten the ``bin`` field into a list of executable paths."""
    if value is None:
        return []

    if isinstance(value, str):
        return [value]

    if not isinstance(value, list):
        raise ManifestError(f"Unexpected type for 'bin': {type(value).__name__}")

    bins: list[str] = []
    for item in value:
        if isinstance(item, str):
            bins.append(item)
        elif isinstance(item, list):
            # Shim entry: [path, alias, args...], only the path is searched
            if not item:
                continue
            if not isinstance(item[0], str):
                raise ManifestError("Unexpected shim entry in 'bin'")
            bins.append(item[0])
        else:
            raise ManifestError(f"Unexpected item in 'bin': {type(item).__name__}")

    return bins


def _normalize_description(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(line, str) for line in value):
        return " ".join(value)
    raise ManifestError(f"Unexpected type for 'description': {type(value).__name__}")


@dataclass
class Manifest:
    """The searchable part of a Scoop package manifest.

    Attributes:
        version: Package version
        bin: Executable paths exposed by the package, in manifest order
        description: Human-readable package description
    """

    version: str
    bin: list[str] = field(default_factory=list)
    description: str | None = None

    @property
    def bin_stems(self) -> list[str]:
        """File stems of every binary, in manifest order."""
        return [bin_stem(path) for path in self.bin]

    @classmethod
    def from_dict(cls, data: Any) -> "Manifest":
        """Create a Manifest from decoded JSON.

        Args:
            data: Decoded manifest document

        Returns:
            Manifest instance

        Raises:
            ManifestError: If the document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ManifestError("Manifest is not a JSON object")

        version = data.get("version")
        if version is None:
            raise ManifestError("Missing field 'version'")
        if not isinstance(version, str):
            raise ManifestError(f"Unexpected type for 'version': {type(version).__name__}")

        return cls(
            version=version,
            bin=_normalize_bin(data.get("bin")),
            description=_normalize_description(data.get("description")),
        )

    @classmethod
    def from_file(cls, path: Path) -> "Manifest":
        """Load a Manifest from a JSON file.

        Args:
            path: Path to the manifest file

        Returns:
            Manifest instance

        Raises:
            ManifestError: If the file cannot be read or parsed
        """
        try:
            # utf-8-sig: some bucket maintainers save manifests with a BOM
            content = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestError(f"Failed to read manifest: {e}", path) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Failed to parse manifest: {e}", path) from e

        try:
            return cls.from_dict(data)
        except ManifestError as e:
            raise ManifestError(e.message, path) from e
