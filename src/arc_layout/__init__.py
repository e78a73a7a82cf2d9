"""Arc diagram layout for networks.

Nodes are placed along one edge of the canvas (or on a circle) and links are
drawn as arcs between them.
"""

from arc_layout.api import arc_layout, render_svg
from arc_layout.layout import ArcLayout
from arc_layout.network import NetworkLayout
from arc_layout.types import (
    ArcLayoutResult,
    ArcLink,
    Link,
    MarkStyle,
    Node,
    Orientation,
    UnsupportedOrientationError,
)

__all__ = [
    "ArcLayout",
    "ArcLayoutResult",
    "ArcLink",
    "Link",
    "MarkStyle",
    "NetworkLayout",
    "Node",
    "Orientation",
    "UnsupportedOrientationError",
    "arc_layout",
    "render_svg",
]
