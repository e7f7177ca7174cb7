"""Hierarchy input model: a parsed summary tree of titles, key points and subtopics.

The layout generator only consumes ``HierarchyNode`` trees. The parsers here
turn the JSON-like mappings a summarizer returns into that tree and fail fast
on malformed input, so downstream layout never sees partial data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

ROOT_LABEL = "Video Summary"


class HierarchyError(ValueError):
    """Raised when a hierarchy is missing required fields or has the wrong shape."""


@dataclass(frozen=True)
class HierarchyNode:
    """A topic or subtopic (or the root) with its ordered key points and children."""

    title: str
    key_points: tuple[str, ...] = ()
    subtopics: tuple[HierarchyNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise HierarchyError(f"title: expected a string, got {type(self.title).__name__}")
        if not isinstance(self.key_points, (tuple, list)):
            raise HierarchyError(
                f"{self.title!r}.key_points: expected a tuple or list, got {type(self.key_points).__name__}"
            )
        for i, point in enumerate(self.key_points):
            if not isinstance(point, str):
                raise HierarchyError(f"{self.title!r}.key_points[{i}]: expected a string, got {type(point).__name__}")
        if not isinstance(self.subtopics, (tuple, list)):
            raise HierarchyError(
                f"{self.title!r}.subtopics: expected a tuple of HierarchyNode, got {type(self.subtopics).__name__}"
            )
        for i, sub in enumerate(self.subtopics):
            if not isinstance(sub, HierarchyNode):
                raise HierarchyError(
                    f"{self.title!r}.subtopics[{i}]: expected a HierarchyNode, got {type(sub).__name__}"
                )
        # frozen: store lists as tuples
        object.__setattr__(self, "key_points", tuple(self.key_points))
        object.__setattr__(self, "subtopics", tuple(self.subtopics))

    def depth(self) -> int:
        """Number of HierarchyNode levels, counting this node (key points excluded)."""
        if not self.subtopics:
            return 1
        return 1 + max(sub.depth() for sub in self.subtopics)


def parse_hierarchy(data: Mapping, path: str = "") -> HierarchyNode:
    """Build a HierarchyNode from a mapping with ``title``, ``keyPoints`` and ``subtopics``.

    ``key_points`` is accepted as an alias of ``keyPoints``; ``subtopics`` may be
    absent or null. Raises HierarchyError naming the offending path.
    """
    where = path or "<root>"
    if not isinstance(data, Mapping):
        raise HierarchyError(f"{where}: expected a mapping, got {type(data).__name__}")

    title = data.get("title")
    if not isinstance(title, str):
        raise HierarchyError(f"{_join(path, 'title')}: missing or not a string")

    if "keyPoints" in data:
        key, raw_points = "keyPoints", data["keyPoints"]
    else:
        key, raw_points = "key_points", data.get("key_points")
    if not isinstance(raw_points, list):
        raise HierarchyError(f"{_join(path, key)}: missing or not a list")
    for i, point in enumerate(raw_points):
        if not isinstance(point, str):
            raise HierarchyError(f"{_join(path, key)}[{i}]: expected a string, got {type(point).__name__}")

    raw_subtopics = data.get("subtopics")
    if raw_subtopics is None:
        raw_subtopics = []
    if not isinstance(raw_subtopics, list):
        raise HierarchyError(f"{_join(path, 'subtopics')}: not a list")

    subtopics = tuple(
        parse_hierarchy(sub, f"{_join(path, 'subtopics')}[{i}]") for i, sub in enumerate(raw_subtopics)
    )
    return HierarchyNode(title=title, key_points=tuple(raw_points), subtopics=subtopics)


def from_summary(summary: Mapping, title: str = ROOT_LABEL) -> HierarchyNode:
    """Wrap a summarizer result ``{"tldr": ..., "topics": [...]}`` under a synthetic root.

    The tl;dr text is not part of the diagram.
    """
    if not isinstance(summary, Mapping):
        raise HierarchyError(f"<summary>: expected a mapping, got {type(summary).__name__}")
    topics = summary.get("topics")
    if not isinstance(topics, list):
        raise HierarchyError("topics: missing or not a list")
    return HierarchyNode(
        title=title,
        subtopics=tuple(parse_hierarchy(topic, f"topics[{i}]") for i, topic in enumerate(topics)),
    )


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name
