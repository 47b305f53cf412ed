"""scoop-searchr utility modules.

- logging: Standardized logging with human/verbose/JSON modes
"""

from scoop_searchr.utils.logging import configure_from_cli, get_logger, setup_logging

__all__ = [
    "configure_from_cli",
    "get_logger",
    "setup_logging",
]
