"""Entry point for running scoop-searchr as a module.

Usage:
    python -m scoop_searchr [TERM] [options]

Example:
    python -m scoop_searchr python
    python -m scoop_searchr --hook
"""

from scoop_searchr.cli import app

if __name__ == "__main__":
    app()
