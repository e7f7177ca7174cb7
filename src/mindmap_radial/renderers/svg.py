"""SVG renderer: renders the visible part of a radial layout to an SVG string."""

from __future__ import annotations

from collections.abc import Iterable

from mindmap_radial.layout.radial import NODE_HEIGHT, NODE_WIDTH
from mindmap_radial.layout.types import LayoutEdge, LayoutNode, LayoutResult, NodeKind, Point

# ─── Constants ──────────────────────────────────────────────────────────────

NODE_RADIUS = 6
FONT_SIZE = 13
FONT_FAMILY = "sans-serif"
CHAR_W = 7  # approximate glyph advance at FONT_SIZE
TEXT_PAD = 10
PADDING = 40  # canvas padding around the outermost nodes
ELLIPSIS = "…"

# (fill, stroke, text) per node kind
_PALETTE: dict[NodeKind, tuple[str, str, str]] = {
    NodeKind.Root: ("#f5f5f5", "#525252", "#171717"),
    NodeKind.Topic: ("#eff6ff", "#93c5fd", "#1e40af"),
    NodeKind.Subtopic: ("#f0fdf4", "#86efac", "#166534"),
    NodeKind.Keypoint: ("#fff7ed", "#fdba74", "#9a3412"),
}

# Edge stroke keyed by the kind of the child node.
_EDGE_STROKES: dict[NodeKind, str] = {
    NodeKind.Topic: 'stroke="#2563eb" stroke-width="2"',
    NodeKind.Subtopic: 'stroke="#10b981" stroke-width="1.5" stroke-dasharray="6 4"',
    NodeKind.Keypoint: 'stroke="#f97316" stroke-width="1.5"',
}
_DEFAULT_EDGE_STROKE = 'stroke="#555" stroke-width="1.5"'


def _escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def _font(size: int = FONT_SIZE) -> str:
    return f'font-family="{FONT_FAMILY}" font-size="{size}"'


def _num(v: float) -> str:
    """Format a coordinate with at most one decimal, dropping a trailing ``.0``."""
    text = f"{v:.1f}"
    return text[:-2] if text.endswith(".0") else text


def truncate_label(label: str, max_chars: int) -> str:
    """Shorten ``label`` to ``max_chars`` characters, ending in an ellipsis when cut."""
    if max_chars <= 0:
        return ""
    if len(label) <= max_chars:
        return label
    return label[: max_chars - 1].rstrip() + ELLIPSIS


# ─── Coordinate Helpers ─────────────────────────────────────────────────────


class _Frame:
    """Maps diagram coordinates (centred on the root, may be negative) onto the canvas."""

    def __init__(self, nodes: Iterable[LayoutNode]) -> None:
        positions = [n.position for n in nodes]
        self.min_x = min(p.x for p in positions) - NODE_WIDTH / 2
        self.min_y = min(p.y for p in positions) - NODE_HEIGHT / 2
        max_x = max(p.x for p in positions) + NODE_WIDTH / 2
        max_y = max(p.y for p in positions) + NODE_HEIGHT / 2
        self.width = max_x - self.min_x + 2 * PADDING
        self.height = max_y - self.min_y + 2 * PADDING

    def px(self, x: float) -> float:
        return PADDING + x - self.min_x

    def py(self, y: float) -> float:
        return PADDING + y - self.min_y

    def point(self, p: Point) -> tuple[float, float]:
        return self.px(p.x), self.py(p.y)


# ─── Shape Rendering ────────────────────────────────────────────────────────


def _render_node(ln: LayoutNode, frame: _Frame, collapsed: bool | None) -> str:
    cx, cy = frame.point(ln.position)
    x, y = cx - NODE_WIDTH / 2, cy - NODE_HEIGHT / 2
    fill, stroke, text = _PALETTE[ln.kind]
    max_chars = (NODE_WIDTH - 2 * TEXT_PAD) // CHAR_W
    label = _escape(truncate_label(ln.label, max_chars))

    parts = [
        f'<g class="node {ln.kind.value}" data-id="{_escape(ln.id)}">',
        f'<rect x="{_num(x)}" y="{_num(y)}" width="{NODE_WIDTH}" height="{NODE_HEIGHT}" '
        f'rx="{NODE_RADIUS}" fill="{fill}" stroke="{stroke}" stroke-width="2"/>',
        f'<text x="{_num(cx)}" y="{_num(cy)}" dominant-baseline="central" text-anchor="middle" '
        f'{_font()} fill="{text}">{label}</text>',
    ]
    if collapsed is not None:
        mx, my = x + NODE_WIDTH, y
        parts.append(f'<circle cx="{_num(mx)}" cy="{_num(my)}" r="8" fill="white" stroke="{stroke}"/>')
        parts.append(
            f'<text x="{_num(mx)}" y="{_num(my)}" dominant-baseline="central" text-anchor="middle" '
            f'{_font(FONT_SIZE - 1)} fill="{text}">{"+" if collapsed else "-"}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


# ─── Edge Rendering ─────────────────────────────────────────────────────────


def _render_edge(le: LayoutEdge, nodes: dict[str, LayoutNode], frame: _Frame) -> str:
    src = nodes.get(le.source)
    tgt = nodes.get(le.target)
    if src is None or tgt is None:
        return ""
    x1, y1 = frame.point(src.position)
    x2, y2 = frame.point(tgt.position)
    style = _EDGE_STROKES.get(tgt.kind, _DEFAULT_EDGE_STROKE)
    return (
        f'<line class="edge {tgt.kind.value}" x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}" '
        f'{style} marker-end="url(#arrowhead)"/>'
    )


# ─── Public Renderer ────────────────────────────────────────────────────────


class SvgRenderer:
    """SVG renderer: consumes a LayoutResult, produces an SVG string.

    Hidden nodes and edges are skipped. When ``collapsed`` is given, topic and
    subtopic nodes get a ``+`` (collapsed) or ``-`` (expanded) marker.
    """

    def __init__(self, collapsed: Iterable[str] | None = None) -> None:
        self.collapsed = None if collapsed is None else frozenset(collapsed)

    def render(self, result: LayoutResult) -> str:
        nodes = result.visible_nodes()
        if not nodes:
            return ""
        node_map = {n.id: n for n in nodes}
        frame = _Frame(nodes)
        w, h = _num(frame.width), _num(frame.height)

        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
            "<defs>",
            '  <marker id="arrowhead" markerWidth="10" markerHeight="7" refX="10" refY="3.5" orient="auto">',
            '    <polygon points="0 0, 10 3.5, 0 7" fill="#555"/>',
            "  </marker>",
            "</defs>",
            f'<rect width="{w}" height="{h}" fill="white"/>',
        ]

        # Edges (behind nodes)
        for le in result.visible_edges():
            svg = _render_edge(le, node_map, frame)
            if svg:
                parts.append(svg)

        # Nodes (on top)
        for ln in nodes:
            marker = None
            if self.collapsed is not None and ln.kind.collapsible:
                marker = ln.id in self.collapsed
            parts.append(_render_node(ln, frame, marker))

        parts.append("</svg>")
        return "\n".join(parts)
