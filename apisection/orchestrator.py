"""Pipeline tying loading, classification, rendering and output together."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from .config import ApiSectionConfig, RenderOptions, load_config
from .loader import load_type_nodes
from .logging import get_logger
from .markdown.markers import MarkerManager
from .markdown.serializer import MarkdownSerializer
from .rendering.section import render_section
from .resolve import DEFAULT_COLLABORATORS, Collaborators
from .shapes import normalize_types


@dataclass
class RenderOutcome:
    """Result of rendering one collection of type nodes."""

    markdown: str
    rendered: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    path: Optional[Path] = None


class Orchestrator:
    """Coordinates the render flow for the CLI and the HTTP service."""

    def __init__(
        self,
        config: ApiSectionConfig | None = None,
        collaborators: Collaborators = DEFAULT_COLLABORATORS,
        serializer: MarkdownSerializer | None = None,
        marker_manager: MarkerManager | None = None,
    ) -> None:
        self.config = config or ApiSectionConfig(root=Path.cwd())
        self.collaborators = collaborators
        self.serializer = serializer or MarkdownSerializer(
            self.config.templates_dir, lint=self.config.output.lint
        )
        self.marker_manager = marker_manager or MarkerManager()
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_config_path(cls, config_path: Path) -> "Orchestrator":
        return cls(load_config(config_path))

    def render_nodes(
        self,
        raw_nodes: Sequence[Mapping[str, Any]] | None,
        *,
        title: str | None = None,
    ) -> RenderOutcome:
        """Render raw type nodes to markdown."""
        options = self._options(title)
        nodes = normalize_types(raw_nodes, options)
        rendered = [node.name for node in nodes if node.renderable]
        skipped = [node.name for node in nodes if not node.renderable]
        if skipped:
            self.logger.debug("Skipped %d undocumented type(s): %s", len(skipped), ", ".join(skipped))

        section = render_section(nodes, options, self.collaborators)
        markdown = self.serializer.serialize(section)
        self.logger.info("Rendered %d of %d type(s)", len(rendered), len(nodes))
        return RenderOutcome(markdown=markdown, rendered=rendered, skipped=skipped)

    def run_render(
        self,
        input_path: Path,
        output_path: Path | None = None,
        *,
        title: str | None = None,
    ) -> RenderOutcome:
        """Load ``input_path``, render it and optionally write ``output_path``."""
        self.logger.debug("Loading type metadata from %s", input_path)
        outcome = self.render_nodes(load_type_nodes(input_path), title=title)
        if output_path is not None:
            self.write(output_path, outcome.markdown)
            outcome.path = output_path
        return outcome

    def write(self, output_path: Path, markdown: str) -> None:
        """Write the section, replacing a managed block when the page already has one."""
        key = self.config.output.marker_key
        if output_path.exists():
            existing = output_path.read_text(encoding="utf-8")
            if self.marker_manager.contains(existing, key):
                self.logger.info("Replacing managed '%s' block in %s", key, output_path)
                output_path.write_text(
                    self.marker_manager.replace(existing, key, markdown), encoding="utf-8"
                )
                return
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.marker_manager.wrap(key, markdown) + "\n", encoding="utf-8")
        self.logger.info("Wrote %s", output_path)

    def _options(self, title: str | None) -> RenderOptions:
        options = self.config.rendering
        if title:
            options = replace(options, section_title=title)
        return options


__all__ = ["Orchestrator", "RenderOutcome"]
