"""Test fixtures for scoop-searchr.

This package provides a sample Scoop installation for integration and
end-to-end testing.

Sample Scoop home (scoop_home/buckets):
- main: manifests under a ``bucket/`` subdirectory, including one broken manifest
- extras: manifests at the bucket root (flat layout)
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Sample Scoop installation
SCOOP_HOME_PATH = FIXTURES_DIR / "scoop_home"
