"""scoop-searchr CLI interface.

Usage:
    scoop-searchr [TERM] [options]

Searches package names, binary names and descriptions of every manifest in
the local Scoop buckets. With no TERM every package is listed.

Options:
- --hook: Print a PowerShell hook that routes `scoop search` here
- --json: Output results as JSON
- --no-binaries / --no-descriptions: Restrict the searched fields
- --config: Path to configuration file
- --verbose / --quiet / --ci: Logging mode
- --version: Show version and exit

Exit codes:
    0: At least one match (or hook printed)
    1: No match, or Scoop could not be searched
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from scoop_searchr import __version__
from scoop_searchr.config import OutputConfig, SearchrConfig, load_config
from scoop_searchr.errors import ScoopHomeError, SearchError
from scoop_searchr.scoop import resolve_scoop_home
from scoop_searchr.search import ManifestSearch
from scoop_searchr.templates import ResultRenderer
from scoop_searchr.utils.logging import configure_from_cli, get_logger

# Adapted from shilangyu/scoop-search (args.go)
POWERSHELL_HOOK = (
    'function scoop { if ($args[0] -eq "search") '
    "{ scoop-searchr.exe @($args | Select-Object -Skip 1) } "
    "else { scoop.ps1 @args } }"
)

app = typer.Typer(
    name="scoop-searchr",
    help="Search Scoop manifests by name, binary and description",
    add_completion=False,
    no_args_is_help=False,
)

_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"scoop-searchr {__version__}")
        raise typer.Exit()


def _apply_overrides(
    config: SearchrConfig,
    json_output: bool,
    no_binaries: bool,
    no_descriptions: bool,
) -> SearchrConfig:
    """Apply per-run CLI flags on top of the loaded configuration."""
    if json_output:
        config.output = OutputConfig(format="json")
    if no_binaries:
        config.search.binaries = False
    if no_descriptions:
        config.search.descriptions = False
    return config


@app.command()
def search(
    term: Annotated[
        str,
        typer.Argument(
            help="Text to look for in package names, binaries and descriptions",
            show_default=False,
        ),
    ] = "",
    hook: Annotated[
        bool,
        typer.Option(
            "--hook",
            help="Print a PowerShell hook that makes `scoop search` use scoop-searchr",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
    no_binaries: Annotated[
        bool,
        typer.Option(
            "--no-binaries",
            help="Do not search binary names",
        ),
    ] = False,
    no_descriptions: Annotated[
        bool,
        typer.Option(
            "--no-descriptions",
            help="Do not search descriptions",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Search local Scoop buckets.

    A package is listed once per bucket: a name match wins over a binary
    match, which wins over a description match.
    """
    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    if hook:
        typer.echo(POWERSHELL_HOOK)
        raise typer.Exit(0)

    try:
        loaded = load_config(config_path=config)
        if loaded.config_path:
            _logger.debug(f"Loaded config from: {loaded.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)

    settings = _apply_overrides(loaded, json_output, no_binaries, no_descriptions)

    try:
        scoop_home = resolve_scoop_home(root=settings.scoop.root)
    except ScoopHomeError as e:
        _logger.error(f"Failed to find a valid scoop installation: {e}")
        raise typer.Exit(1)

    if not scoop_home.exists():
        _logger.error("Failed to find a valid scoop installation")
        raise typer.Exit(1)

    _logger.debug(f"Searching Scoop home: {scoop_home}")

    try:
        report = ManifestSearch(settings).run(term, scoop_home)
    except SearchError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    typer.echo(ResultRenderer(settings).render(report), nl=False)

    _logger.structured(
        logging.DEBUG,
        "Search complete",
        term=term,
        matches=report.match_count,
        buckets=len(report.buckets),
        issues=len(report.issues),
    )

    raise typer.Exit(0 if report.found else 1)


if __name__ == "__main__":
    app()
