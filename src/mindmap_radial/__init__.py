"""mindmap-radial: radial mind-map layout with collapsible subtrees."""

from __future__ import annotations

from .api import engine_for_summary, render_summary_svg
from .hierarchy import ROOT_LABEL, HierarchyError, HierarchyNode, from_summary, parse_hierarchy
from .layout import LayoutEdge, LayoutNode, LayoutResult, NodeKind, Point, RadialConfig, generate_layout
from .renderers import SvgRenderer
from .visibility import NotCollapsibleError, VisibilityEngine

__all__ = [
    "ROOT_LABEL",
    "HierarchyError",
    "HierarchyNode",
    "LayoutEdge",
    "LayoutNode",
    "LayoutResult",
    "NodeKind",
    "NotCollapsibleError",
    "Point",
    "RadialConfig",
    "SvgRenderer",
    "VisibilityEngine",
    "engine_for_summary",
    "from_summary",
    "generate_layout",
    "parse_hierarchy",
    "render_summary_svg",
]
