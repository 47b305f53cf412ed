"""scoop-searchr configuration system.

Configuration is YAML-based with CLI overrides (--json, --no-binaries,
--no-descriptions). Supports environment variable substitution (${VAR}) in
config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.scoop-searchr/config.yaml
3. ./scoop-searchr.yaml
4. $XDG_CONFIG_HOME/scoop-searchr/config.yaml (~/.config when unset)
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

OUTPUT_FORMATS = {"text", "json"}

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class ScoopConfig:
    """Scoop installation settings.

    Attributes:
        root: Scoop home override (skips SCOOP / config.json / ~/scoop lookup)
    """

    root: str | None = None


@dataclass
class SearchConfig:
    """Which manifest fields are searched.

    Package names are always searched.

    Attributes:
        binaries: Search binary names from the ``bin`` field
        descriptions: Search description text
    """

    binaries: bool = True
    descriptions: bool = True


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        format: Output format (text, json)
    """

    format: str = "text"

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format: {self.format}. Valid: {sorted(OUTPUT_FORMATS)}"
            )


@dataclass
class SearchrConfig:
    """Top-level scoop-searchr configuration.

    Attributes:
        scoop: Scoop installation settings
        search: Searched fields
        output: Output format
    """

    scoop: ScoopConfig = field(default_factory=ScoopConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${SCOOP_GLOBAL} -> value of SCOOP_GLOBAL

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def user_config_dir() -> Path:
    """Return the per-user configuration directory ($XDG_CONFIG_HOME or ~/.config)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.scoop-searchr/config.yaml
    2. ./scoop-searchr.yaml
    3. <user config dir>/scoop-searchr/config.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".scoop-searchr" / "config.yaml",
        start_path / "scoop-searchr.yaml",
        user_config_dir() / "scoop-searchr" / "config.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> SearchrConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        SearchrConfig instance
    """
    data = substitute_env_vars(data)

    config = SearchrConfig()

    if "scoop" in data:
        scoop_data = data["scoop"] or {}
        config.scoop = ScoopConfig(root=scoop_data.get("root"))

    if "search" in data:
        search_data = data["search"] or {}
        config.search = SearchConfig(
            binaries=search_data.get("binaries", True),
            descriptions=search_data.get("descriptions", True),
        )

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            format=output_data.get("format", config.output.format),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> SearchrConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        SearchrConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = SearchrConfig()

    return config
