from mindmap_radial.renderers.base import Renderer
from mindmap_radial.renderers.svg import SvgRenderer

__all__ = ["Renderer", "SvgRenderer"]
