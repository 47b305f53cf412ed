"""scoop-searchr - Fast local search for Scoop manifests.

scoop-searchr scans the manifests of every locally cloned Scoop bucket and
reports packages whose name, binaries or description contain a search term.
It is a drop-in replacement for ``scoop search`` that never touches the
network:
- Name matches win over binary matches, which win over description matches
- Matching is a case-insensitive substring check
- Non-zero exit code when nothing matched
"""

__version__ = "0.3.0"
__author__ = "scoop-searchr Contributors"
