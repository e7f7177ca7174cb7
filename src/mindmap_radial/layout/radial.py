"""Radial layout: place a summary hierarchy around a central root node.

Levels:
  1. Root at the origin.
  2. Topics evenly spaced on a circle around the root.
  3. Topic key points and subtopics fanned out on arcs centred on the ray
     from the root through their topic.
  4. Subtopic key points fanned out on arcs around their subtopic.

The generator is pure: the same hierarchy and config always yield the same
ids, positions and edges.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import networkx as nx

from mindmap_radial.hierarchy import HierarchyError, HierarchyNode
from mindmap_radial.layout.types import (
    ROOT_ID,
    LayoutEdge,
    LayoutNode,
    LayoutResult,
    NodeKind,
    Point,
    edge_id,
)
from mindmap_radial.utils.logger import logger

# ─── Geometry Constants ───────────────────────────────────────────────────────

# Node footprint (diagram units) the renderer draws, centred on each position.
NODE_WIDTH: int = 180
NODE_HEIGHT: int = 40

# Radii in diagram units, arcs in radians. At up to 7 topics × 5 key points ×
# 3 subtopics × 3 sub key points every pair of centres stays at least
# hypot(NODE_WIDTH, NODE_HEIGHT) apart, so no two footprints intersect.
TOPIC_RADIUS: float = 900.0  # root → topic
KEYPOINT_RADIUS: float = 480.0  # topic → its key points
KEYPOINT_ARC: float = 1.6
SUBTOPIC_RADIUS: float = 900.0  # topic → subtopic, beyond the key-point ring
SUBTOPIC_ARC: float = 1.0
SUB_KEYPOINT_RADIUS: float = 560.0  # subtopic → its key points
SUB_KEYPOINT_ARC: float = 0.7


@dataclass(frozen=True)
class RadialConfig:
    """Radii and arc widths used by ``generate_layout``."""

    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))
    topic_radius: float = TOPIC_RADIUS
    keypoint_radius: float = KEYPOINT_RADIUS
    keypoint_arc: float = KEYPOINT_ARC
    subtopic_radius: float = SUBTOPIC_RADIUS
    subtopic_arc: float = SUBTOPIC_ARC
    sub_keypoint_radius: float = SUB_KEYPOINT_RADIUS
    sub_keypoint_arc: float = SUB_KEYPOINT_ARC


DEFAULT_CONFIG = RadialConfig()


# ─── Arc Subdivision ──────────────────────────────────────────────────────────


def arc_offsets(count: int, arc: float) -> list[float]:
    """Angular offsets (relative to the arc centre) for ``count`` siblings.

    One sibling (or none) sits on the centre angle. Otherwise the arc is cut
    into ``count - 1`` equal steps so the first and last siblings land on the
    arc endpoints.
    """
    if count <= 1:
        return [0.0] * count
    step = arc / (count - 1)
    return [-arc / 2 + i * step for i in range(count)]


def polar(center: Point, radius: float, angle: float) -> Point:
    """Point at ``radius`` from ``center`` in direction ``angle``."""
    return Point(x=center.x + math.cos(angle) * radius, y=center.y + math.sin(angle) * radius)


# ─── Layout Generation ────────────────────────────────────────────────────────


class _Builder:
    """Accumulates nodes and edges in insertion order."""

    def __init__(self) -> None:
        self.nodes: list[LayoutNode] = []
        self.edges: list[LayoutEdge] = []

    def add(self, node_id: str, kind: NodeKind, label: str, position: Point, parent: str | None = None) -> None:
        self.nodes.append(LayoutNode(id=node_id, kind=kind, label=label, position=position))
        if parent is not None:
            self.edges.append(LayoutEdge(id=edge_id(parent, node_id), source=parent, target=node_id))

    def fan_out(
        self,
        parent: str,
        center: Point,
        center_angle: float,
        labels: tuple[str, ...],
        radius: float,
        arc: float,
        id_prefix: str,
    ) -> None:
        """Place key-point leaves on an arc around ``center``."""
        for k, (label, offset) in enumerate(zip(labels, arc_offsets(len(labels), arc))):
            self.add(
                f"{id_prefix}-{k}",
                NodeKind.Keypoint,
                label,
                polar(center, radius, center_angle + offset),
                parent,
            )


def generate_layout(hierarchy: HierarchyNode, config: RadialConfig | None = None) -> LayoutResult:
    """Lay out ``hierarchy`` radially and return its nodes and edges.

    Output order is root, then per topic: the topic, its key points, then each
    subtopic followed by its key points. A hierarchy with no topics yields the
    root alone.
    """
    if not isinstance(hierarchy, HierarchyNode):
        raise HierarchyError(f"expected a HierarchyNode, got {type(hierarchy).__name__}")
    cfg = config or DEFAULT_CONFIG

    b = _Builder()
    b.add(ROOT_ID, NodeKind.Root, hierarchy.title, Point(cfg.origin.x, cfg.origin.y))
    if hierarchy.key_points:
        logger.warning("Root key points are not laid out (%d skipped)", len(hierarchy.key_points))

    topics = hierarchy.subtopics
    topic_step = 2 * math.pi / len(topics) if topics else 0.0

    for t, topic in enumerate(topics):
        topic_id = f"topic-{t}"
        angle = t * topic_step
        topic_pos = polar(cfg.origin, cfg.topic_radius, angle)
        b.add(topic_id, NodeKind.Topic, topic.title, topic_pos, ROOT_ID)

        b.fan_out(topic_id, topic_pos, angle, topic.key_points, cfg.keypoint_radius, cfg.keypoint_arc, f"keypoint-{t}")

        sub_offsets = arc_offsets(len(topic.subtopics), cfg.subtopic_arc)
        for s, (subtopic, offset) in enumerate(zip(topic.subtopics, sub_offsets)):
            subtopic_id = f"subtopic-{t}-{s}"
            sub_angle = angle + offset
            sub_pos = polar(topic_pos, cfg.subtopic_radius, sub_angle)
            b.add(subtopic_id, NodeKind.Subtopic, subtopic.title, sub_pos, topic_id)

            b.fan_out(
                subtopic_id,
                sub_pos,
                sub_angle,
                subtopic.key_points,
                cfg.sub_keypoint_radius,
                cfg.sub_keypoint_arc,
                f"keypoint-sub-{t}-{s}",
            )

        if topic.depth() > 2:
            logger.warning(
                "Topic %r nests deeper than supported (%d levels); subtopics below its subtopics skipped",
                topic.title,
                topic.depth(),
            )

    logger.debug("Generated layout: %d nodes, %d edges, %d topics", len(b.nodes), len(b.edges), len(topics))
    return LayoutResult(nodes=b.nodes, edges=b.edges)


# ─── Adjacency Index ──────────────────────────────────────────────────────────


def build_digraph(result: LayoutResult) -> nx.DiGraph:
    """Index a layout as a DiGraph: node attrs ``kind``, edge attr ``id``.

    Edges referencing unknown node ids are a generator bug and trip an assertion.
    """
    g: nx.DiGraph = nx.DiGraph()
    for n in result.nodes:
        g.add_node(n.id, kind=n.kind)
    for e in result.edges:
        assert e.source in g and e.target in g, f"edge {e.id} references a missing node"
        g.add_edge(e.source, e.target, id=e.id)
    return g


def overlapping_pairs(
    nodes: list[LayoutNode],
    width: float = NODE_WIDTH,
    height: float = NODE_HEIGHT,
) -> list[tuple[str, str]]:
    """Id pairs whose ``width`` × ``height`` footprints (centred on position) intersect."""
    pairs: list[tuple[str, str]] = []
    for i in range(len(nodes)):
        a = nodes[i].position
        for j in range(i + 1, len(nodes)):
            b = nodes[j].position
            if abs(a.x - b.x) < width and abs(a.y - b.y) < height:
                pairs.append((nodes[i].id, nodes[j].id))
    return pairs
