"""Layout types shared by the layout generator, visibility engine and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Role of a node in the diagram."""

    Root = "root"
    Topic = "topic"
    Subtopic = "subtopic"
    Keypoint = "keypoint"

    @property
    def collapsible(self) -> bool:
        return self in (NodeKind.Topic, NodeKind.Subtopic)


@dataclass
class Point:
    """A 2D point in diagram units."""

    x: float
    y: float


@dataclass
class LayoutNode:
    """A positioned node in the layout."""

    id: str
    kind: NodeKind
    label: str
    position: Point
    hidden: bool = False


@dataclass
class LayoutEdge:
    """A parent -> child relation between two layout nodes."""

    id: str
    source: str
    target: str
    hidden: bool = False


@dataclass
class LayoutResult:
    """Self-contained layout output: everything renderers need."""

    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)

    def node(self, node_id: str) -> LayoutNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def visible_nodes(self) -> list[LayoutNode]:
        return [n for n in self.nodes if not n.hidden]

    def visible_edges(self) -> list[LayoutEdge]:
        return [e for e in self.edges if not e.hidden]


# Id constants
ROOT_ID = "root"
EDGE_PREFIX = "edge-"


def edge_id(source: str, target: str) -> str:
    """Deterministic edge id for a parent -> child pair."""
    return f"{EDGE_PREFIX}{source}-{target}"
