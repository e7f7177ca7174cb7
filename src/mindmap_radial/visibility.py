"""Visibility engine: collapse and expand subtrees of a generated layout.

The engine owns one ``LayoutResult`` and is the only code that mutates the
``hidden`` flags of its nodes and edges. Each collapsible node (topic or
subtopic) keeps its own collapsed flag. Collapsing an ancestor only hides
descendants; it never clears a descendant's flag, so re-expanding the
ancestor leaves that descendant's subtree hidden.
"""

from __future__ import annotations

from collections import deque

import networkx as nx

from mindmap_radial.layout.radial import build_digraph
from mindmap_radial.layout.types import (
    LayoutEdge,
    LayoutNode,
    LayoutResult,
    NodeKind,
)
from mindmap_radial.utils.logger import logger


class NotCollapsibleError(ValueError):
    """Raised when toggling a node id that is unknown or not a topic/subtopic."""


class VisibilityEngine:
    """Tracks collapsed nodes and derives hidden flags for their descendants.

    Attributes:
        result: The wrapped layout, mutated in place.
        graph: Adjacency index (parent id → child ids) built once per layout.
    """

    def __init__(self, result: LayoutResult) -> None:
        self.load(result)

    def load(self, result: LayoutResult) -> None:
        """Replace the wrapped layout wholesale and forget all collapsed state."""
        graph = build_digraph(result)
        _check_tree(graph)
        nodes = {n.id: n for n in result.nodes}
        edges = {e.id: e for e in result.edges}
        assert len(nodes) == len(result.nodes), "duplicate node ids"
        assert len(edges) == len(result.edges), "duplicate edge ids"

        self.result = result
        self.graph = graph
        self._nodes: dict[str, LayoutNode] = nodes
        self._edges: dict[str, LayoutEdge] = edges
        self._collapsed: set[str] = set()
        logger.debug("Visibility engine loaded %d nodes, %d edges", len(nodes), len(edges))

    # ─── Queries ──────────────────────────────────────────────────────────

    @property
    def collapsed(self) -> frozenset[str]:
        return frozenset(self._collapsed)

    def is_collapsed(self, node_id: str) -> bool:
        return node_id in self._collapsed

    def is_collapsible(self, node_id: str) -> bool:
        node = self._nodes.get(node_id)
        return node is not None and node.kind.collapsible

    def descendants(self, node_id: str) -> tuple[list[str], list[str]]:
        """Node ids and edge ids reachable from ``node_id``, excluding the node itself.

        Breadth-first over the adjacency index; each node and edge is visited once.
        """
        if node_id not in self.graph:
            raise KeyError(node_id)
        node_ids: list[str] = []
        edge_ids: list[str] = []
        for src, tgt in nx.bfs_edges(self.graph, node_id):
            node_ids.append(tgt)
            edge_ids.append(self.graph.edges[src, tgt]["id"])
        return node_ids, edge_ids

    def visible(self) -> LayoutResult:
        """The currently visible subset, sharing node and edge objects with the wrapped layout."""
        return LayoutResult(nodes=self.result.visible_nodes(), edges=self.result.visible_edges())

    # ─── Mutations ────────────────────────────────────────────────────────

    def toggle_collapse(self, node_id: str) -> bool:
        """Flip the collapsed state of a topic or subtopic and return the new state.

        Raises NotCollapsibleError (leaving all state untouched) for unknown ids,
        the root, and key points.
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise NotCollapsibleError(f"unknown node id: {node_id!r}")
        if not node.kind.collapsible:
            raise NotCollapsibleError(f"node {node_id!r} of kind {node.kind.value} is not collapsible")

        if node_id in self._collapsed:
            self._collapsed.remove(node_id)
            now_collapsed = False
        else:
            self._collapsed.add(node_id)
            now_collapsed = True

        touched = self._refresh_subtree(node_id)
        logger.debug(
            "%s %s (%d descendants updated)",
            "Collapsed" if now_collapsed else "Expanded",
            node_id,
            touched,
        )
        return now_collapsed

    def expand_all(self) -> None:
        """Clear every collapsed flag and show every node and edge."""
        self._collapsed.clear()
        for n in self.result.nodes:
            n.hidden = False
        for e in self.result.edges:
            e.hidden = False

    def _refresh_subtree(self, node_id: str) -> int:
        """Recompute hidden flags below ``node_id``; return the number of descendants touched.

        A child is hidden when its parent is hidden or its parent is collapsed.
        ``node_id``'s own flag is left as is.
        """
        start = self._nodes[node_id]
        queue: deque[tuple[str, bool]] = deque([(node_id, start.hidden or node_id in self._collapsed)])
        touched = 0
        while queue:
            parent, hide_children = queue.popleft()
            for child in self.graph.successors(parent):
                self._edges[self.graph.edges[parent, child]["id"]].hidden = hide_children
                self._nodes[child].hidden = hide_children
                touched += 1
                queue.append((child, hide_children or child in self._collapsed))
        return touched


def _check_tree(graph: nx.DiGraph) -> None:
    """Assert the layout is a single tree rooted at the one root node."""
    roots = [n for n, kind in graph.nodes(data="kind") if kind == NodeKind.Root]
    assert len(roots) == 1, f"expected exactly one root node, found {len(roots)}"
    assert graph.in_degree(roots[0]) == 0, "root node has an incoming edge"
    for n in graph.nodes:
        if n != roots[0]:
            assert graph.in_degree(n) == 1, f"node {n} has {graph.in_degree(n)} incoming edges"
