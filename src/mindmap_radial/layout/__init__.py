"""Layout module: radial placement of a summary hierarchy.

Re-exports the layout types and the generator.
"""

from mindmap_radial.layout.radial import (
    DEFAULT_CONFIG,
    NODE_HEIGHT,
    NODE_WIDTH,
    RadialConfig,
    arc_offsets,
    build_digraph,
    generate_layout,
    overlapping_pairs,
)
from mindmap_radial.layout.types import (
    ROOT_ID,
    LayoutEdge,
    LayoutNode,
    LayoutResult,
    NodeKind,
    Point,
    edge_id,
)

__all__ = [
    "DEFAULT_CONFIG",
    "NODE_HEIGHT",
    "NODE_WIDTH",
    "ROOT_ID",
    "LayoutEdge",
    "LayoutNode",
    "LayoutResult",
    "NodeKind",
    "Point",
    "RadialConfig",
    "arc_offsets",
    "build_digraph",
    "edge_id",
    "generate_layout",
    "overlapping_pairs",
]
