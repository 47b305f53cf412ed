"""Shared pytest fixtures for scoop-searchr tests.

This module provides common fixtures used across unit and integration
tests. Fixtures are organized by category:
- Environment fixtures: Isolation from the real Scoop installation
- Scoop home fixtures: Sample and temporary Scoop installations
- Manifest fixtures: Manifest documents for model and matcher tests
"""

import json
import logging
import shutil
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from scoop_searchr.utils.logging import get_logger
from tests.fixtures import SCOOP_HOME_PATH

# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Keep tests away from the developer's Scoop install and config files.

    Unsets SCOOP, points XDG_CONFIG_HOME at an empty directory and runs the
    test from an empty working directory.
    """
    workdir = tmp_path_factory.mktemp("cwd")
    config_home = tmp_path_factory.mktemp("xdg_config")

    monkeypatch.delenv("SCOOP", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers the CLI installs so they do not outlive CliRunner streams."""
    yield
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Scoop Home Fixtures
# =============================================================================


@pytest.fixture
def sample_scoop_home() -> Path:
    """Return the path to the sample Scoop installation."""
    return SCOOP_HOME_PATH


@pytest.fixture
def scoop_home(tmp_path: Path, sample_scoop_home: Path) -> Path:
    """Copy the sample Scoop installation into a writable temp directory."""
    target = tmp_path / "scoop"
    shutil.copytree(sample_scoop_home, target)
    return target


@pytest.fixture
def make_bucket(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a bucket directory filled with manifests.

    Usage:
        path = make_bucket("main", {"git": {"version": "2.0"}}, nested=True)

    Returns the directory the manifests were written to.
    """

    def _make(
        name: str,
        manifests: dict[str, Any],
        nested: bool = False,
        home: Path | None = None,
    ) -> Path:
        bucket = (home or tmp_path / "scoop") / "buckets" / name
        manifest_dir = bucket / "bucket" if nested else bucket
        manifest_dir.mkdir(parents=True, exist_ok=True)

        for package, document in manifests.items():
            content = document if isinstance(document, str) else json.dumps(document)
            (manifest_dir / f"{package}.json").write_text(content, encoding="utf-8")

        return manifest_dir

    return _make


# =============================================================================
# Manifest Fixtures
# =============================================================================


@pytest.fixture
def git_manifest() -> dict[str, Any]:
    """Return a manifest with plain and shim-alias binaries."""
    return {
        "version": "2.43.0",
        "description": "Distributed version control system",
        "bin": [
            "bin\\git.exe",
            ["bin\\bash.exe", "git-bash"],
        ],
    }


@pytest.fixture
def single_bin_manifest() -> dict[str, Any]:
    """Return a manifest whose ``bin`` is a single string."""
    return {
        "version": "14.1.0",
        "description": "Recursively search directories for a regex pattern.",
        "bin": "rg.exe",
    }
