"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from mindmap_radial.layout.types import LayoutResult


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, result: LayoutResult) -> str:
        """Render the visible part of a laid-out diagram to an output string."""
        ...
