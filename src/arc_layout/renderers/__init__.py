"""Renderers that draw an ArcLayoutResult."""

from arc_layout.renderers.base import Renderer
from arc_layout.renderers.svg import SvgRenderer

__all__ = ["Renderer", "SvgRenderer"]
