"""High-level helpers: summary mapping in, diagram out."""

from __future__ import annotations

from collections.abc import Mapping

from mindmap_radial.hierarchy import ROOT_LABEL, from_summary
from mindmap_radial.layout.radial import RadialConfig, generate_layout
from mindmap_radial.renderers.svg import SvgRenderer
from mindmap_radial.visibility import VisibilityEngine


def engine_for_summary(summary: Mapping, title: str = ROOT_LABEL, config: RadialConfig | None = None) -> VisibilityEngine:
    """Parse a summarizer result, lay it out and wrap it in a fresh VisibilityEngine."""
    return VisibilityEngine(generate_layout(from_summary(summary, title), config))


def render_summary_svg(summary: Mapping, title: str = ROOT_LABEL, config: RadialConfig | None = None) -> str:
    """Render a summarizer result as a fully expanded SVG mind map."""
    engine = engine_for_summary(summary, title, config)
    return SvgRenderer(collapsed=engine.collapsed).render(engine.result)
