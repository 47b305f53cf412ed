"""Scoop installation discovery.

Locates the Scoop home directory the same way Scoop does:
1. An explicit root from configuration, then the SCOOP environment variable
2. ``root_path`` in Scoop's own config.json
   ($XDG_CONFIG_HOME/scoop/config.json, ~/.config when unset)
3. ~/scoop

and enumerates the buckets cloned under ``<home>/buckets``.
"""

import json
import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from scoop_searchr.errors import ScoopHomeError, SearchError

logger = logging.getLogger(__name__)


def _root_path_from_scoop_config(config_json: Path) -> Path | None:
    """Read ``root_path`` from Scoop's config.json, None if absent or unreadable."""
    try:
        with open(config_json, encoding="utf-8-sig") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable Scoop config %s: %s", config_json, e)
        return None

    root_path = data.get("root_path") if isinstance(data, dict) else None
    if not isinstance(root_path, str) or not root_path:
        return None
    return Path(root_path)


def resolve_scoop_home(
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    root: str | Path | None = None,
) -> Path:
    """Locate the Scoop installation directory.

    Args:
        env: Environment mapping (defaults to os.environ)
        home: User home directory (defaults to Path.home())
        root: Explicit Scoop home from configuration, checked before anything else

    Returns:
        Path to the Scoop home

    Raises:
        ScoopHomeError: If no Scoop installation can be located
    """
    if root:
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise ScoopHomeError(f"The configured Scoop root ({root_path}) does not exist")
        return root_path

    if env is None:
        env = os.environ

    scoop_env = env.get("SCOOP")
    if scoop_env:
        env_path = Path(scoop_env)
        if not env_path.exists():
            raise ScoopHomeError(
                f"The SCOOP environment variable is set ({env_path}) but it does not exist"
            )
        logger.debug("Using Scoop home from SCOOP: %s", env_path)
        return env_path

    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise ScoopHomeError("can not locate user home directory") from e

    xdg = env.get("XDG_CONFIG_HOME")
    config_home = Path(xdg) if xdg else home / ".config"
    config_json = config_home / "scoop" / "config.json"

    root_path = _root_path_from_scoop_config(config_json)
    if root_path is not None:
        logger.debug("Using Scoop home from %s: %s", config_json, root_path)
        return root_path

    default = home / "scoop"
    if default.exists():
        logger.debug("Using default Scoop home: %s", default)
        return default

    raise ScoopHomeError("failed to fall back to default location, does not exist")


def manifest_dir(bucket_path: Path) -> Path:
    """Return the directory holding a bucket's manifests.

    Newer buckets keep manifests in a ``bucket/`` subdirectory; older ones
    keep them at the repository root.
    """
    separate = bucket_path / "bucket"
    return separate if separate.exists() else bucket_path


def iter_buckets(scoop_home: Path) -> Iterator[tuple[str, Path]]:
    """Yield ``(bucket name, manifest directory)`` for every installed bucket.

    Buckets are yielded in name order.

    Args:
        scoop_home: Scoop installation directory

    Raises:
        SearchError: If the buckets directory cannot be listed
    """
    buckets_base = scoop_home / "buckets"
    try:
        children = sorted(buckets_base.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SearchError(
            f"failed to list buckets directory: {buckets_base}: {e}", buckets_base
        ) from e

    for child in children:
        if not child.is_dir():
            logger.debug("Skipping non-directory in buckets: %s", child)
            continue
        yield child.name, manifest_dir(child)
