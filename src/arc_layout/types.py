"""Layout types shared by the network base, the arc layout and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable


class UnsupportedOrientationError(ValueError):
    """Raised for an orientation outside top/bottom/left/right/radial."""

    def __init__(self, value: object) -> None:
        choices = ", ".join(o.value for o in Orientation)
        super().__init__(f"unsupported orientation {value!r} (expected one of: {choices})")
        self.value = value


class Orientation(str, Enum):
    """Where nodes sit: along one edge of the canvas, or on a circle."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    RADIAL = "radial"

    @classmethod
    def parse(cls, value: object) -> Orientation:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedOrientationError(value) from None


@dataclass(eq=False)
class Node:
    """A network node. ``breadth``, ``x``, ``y`` and ``mid_angle`` are written by layouts.

    Nodes compare by identity: two nodes with the same id are still distinct
    members of a collection.
    """

    id: Hashable
    label: str = ""
    index: int = 0
    link_degree: float = 0.0
    breadth: float = 0.0
    x: float = 0.0
    y: float = 0.0
    mid_angle: float = 0.0

    def __post_init__(self) -> None:
        if not self.label:
            self.label = str(self.id)


@dataclass(eq=False)
class Link:
    """A link between two nodes of the same network."""

    source_node: Node
    target_node: Node
    value: float = 1.0


@dataclass
class ArcLink:
    """Render-time view of a link: ordered endpoints plus curve style."""

    source: Node
    target: Node
    interpolate: str
    link: Link


@dataclass(frozen=True)
class MarkStyle:
    """Default mark prototypes for nodes, links and labels."""

    node_radius: float = 4.5
    node_fill: str = "white"
    node_stroke: str = "#1f77b4"
    link_stroke: str = "rgba(0,0,0,.2)"
    link_width: float = 1.5
    label_color: str = "#333"
    label_font_size: int = 10
    label_offset: float = 6.0


@dataclass
class ArcLayoutResult:
    """Self-contained arc layout output — everything renderers need."""

    nodes: list[Node]
    links: list[ArcLink]
    orient: Orientation
    width: float
    height: float
    directed: bool = False
    style: MarkStyle = field(default_factory=MarkStyle)
