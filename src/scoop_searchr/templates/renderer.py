"""Search result renderer.

Renders a SearchReport either as the classic ``scoop search`` text layout
(via a Jinja2 template) or as JSON. Output is deterministic: buckets are in
name order and entries are sorted.
"""

import json
import logging
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from scoop_searchr.config import OUTPUT_FORMATS, SearchrConfig
from scoop_searchr.models import SearchReport

logger = logging.getLogger(__name__)

TEXT_TEMPLATE = "results.txt.j2"


class ResultRenderer:
    """Renders search reports for the terminal.

    Usage:
        renderer = ResultRenderer(config)
        output = renderer.render(report)
    """

    def __init__(self, config: SearchrConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
            config: scoop-searchr configuration (selects the default format)
        """
        self.config = config

        self._env = Environment(
            loader=PackageLoader("scoop_searchr", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @property
    def default_format(self) -> str:
        """Output format from config, ``text`` when unconfigured."""
        return self.config.output.format if self.config else "text"

    def render(self, report: SearchReport, output_format: str | None = None) -> str:
        """Render a search report.

        Args:
            report: Search report to render
            output_format: ``text`` or ``json`` (defaults to the configured format)

        Returns:
            Rendered output, newline-terminated

        Raises:
            ValueError: If the format is unknown
        """
        output_format = output_format or self.default_format
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")

        if output_format == "json":
            return self.render_json(report)
        return self.render_text(report)

    def render_text(self, report: SearchReport) -> str:
        """Render the human-readable bucket listing."""
        template = self._env.get_template(TEXT_TEMPLATE)
        return template.render(**self._build_context(report))

    def render_json(self, report: SearchReport) -> str:
        """Render the report as indented JSON."""
        return json.dumps(report.to_dict(), indent=2) + "\n"

    def _build_context(self, report: SearchReport) -> dict[str, Any]:
        return {
            "term": report.term,
            "buckets": [bucket.to_dict() for bucket in report.buckets if bucket.entries],
        }
