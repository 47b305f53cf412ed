"""Result rendering.

Provides the Jinja2-based text renderer and the JSON renderer for search
reports. The text template lives alongside this module.
"""

from scoop_searchr.templates.renderer import ResultRenderer

__all__ = ["ResultRenderer"]
