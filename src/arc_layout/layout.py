"""Arc diagram layout.

An arc diagram is a network visualization with a one-dimensional layout of
nodes, using circular arcs to render links between nodes. For undirected
networks arcs are drawn on a single side, which makes arc diagrams useful as
annotations to other two-dimensional layouts. For directed networks, links in
opposite directions can be drawn on opposite sides with ``directed(True)``.

Arc diagrams are sensitive to node ordering: related nodes should sit close
together, or arcs grow long and cross. The layout takes the order as given
(or as produced by a caller-supplied comparator) and does not reorder nodes
itself.

Build steps:
  1. Order the nodes (comparator or collection order).
  2. Assign breadth (i + 0.5) / N to the node at ordered position i.
  3. Map breadth to x/y and mid-angle for the active orientation.
  4. Cache directedness, interpolation and the reverse flag for link rendering.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable

from arc_layout.network import NetworkLayout, NetworkSpec
from arc_layout.types import (
    ArcLayoutResult,
    ArcLink,
    Link,
    MarkStyle,
    Node,
    Orientation,
    UnsupportedOrientationError,
)

logger = logging.getLogger(__name__)

Comparator = Callable[[Node, Node], int]


@dataclass(frozen=True)
class ArcSpec(NetworkSpec):
    """Network inputs plus arc-specific configuration."""

    orient: Orientation = Orientation.BOTTOM
    directed: bool = False


# ─── Orientation Geometry ─────────────────────────────────────────────────────

_FIXED_MID_ANGLE: dict[Orientation, float] = {
    Orientation.TOP: -math.pi / 2,
    Orientation.BOTTOM: math.pi / 2,
    Orientation.LEFT: math.pi,
    Orientation.RIGHT: 0.0,
}


def mid_angle(orient: Orientation, breadth: float) -> float:
    """Angle (radians) pointing away from the node line, given the breadth."""
    if orient is Orientation.RADIAL:
        return (breadth - 0.25) * 2 * math.pi
    return _FIXED_MID_ANGLE[orient]


def position(orient: Orientation, breadth: float, width: float, height: float) -> tuple[float, float]:
    """Return (x, y) for a node with the given breadth on a width × height canvas."""
    if orient is Orientation.TOP:
        return (breadth * width, 0.0)
    if orient is Orientation.BOTTOM:
        return (breadth * width, height)
    if orient is Orientation.LEFT:
        return (0.0, breadth * height)
    if orient is Orientation.RIGHT:
        return (width, breadth * height)
    if orient is Orientation.RADIAL:
        r = min(width, height) / 2
        a = mid_angle(orient, breadth)
        return (width / 2 + r * math.cos(a), height / 2 + r * math.sin(a))
    raise UnsupportedOrientationError(orient)


def order_nodes(nodes: list[Node], comparator: Comparator | None) -> list[int]:
    """Index permutation over ``nodes``: comparator order, or collection order when None.

    The sort is stable, so nodes the comparator considers equal keep their
    relative collection order.
    """
    index = list(range(len(nodes)))
    if comparator is not None:
        index.sort(key=functools.cmp_to_key(lambda a, b: comparator(nodes[a], nodes[b])))
    return index


# ─── Arc Layout ───────────────────────────────────────────────────────────────


class ArcLayout(NetworkLayout):
    """Arc diagram layout: nodes on a line (or circle), links as arcs.

    Example:
        layout = ArcLayout.defaults().orient("radial").nodes(["a", "b", "c"])
        layout.links([("a", "c"), ("b", "c")]).build()
        for arc in layout.arc_links():
            ...
    """

    def __init__(
        self,
        nodes: Any = None,
        links: Any = None,
        orient: Orientation | str = Orientation.BOTTOM,
        directed: bool = False,
        sort: Comparator | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(nodes=nodes, links=links, **kwargs)
        self._orient = Orientation.parse(orient)
        self._directed_option = bool(directed)
        self._sort = sort
        # Cached link rendering state from the last build.
        self._interpolate: str | None = None
        self._directed: bool | None = None
        self._reverse: bool | None = None

    @classmethod
    def defaults(cls) -> ArcLayout:
        return cls(style=MarkStyle()).orient(Orientation.BOTTOM)

    # ─── Configuration ────────────────────────────────────────────────────

    def orient(self, value: Orientation | str | None = None) -> Any:
        """Get the orientation, or set it and return the layout."""
        if value is None:
            return self._orient
        self._orient = Orientation.parse(value)
        return self

    def directed(self, value: bool | None = None) -> Any:
        """Get whether links render asymmetrically, or set it and return the layout."""
        if value is None:
            return self._directed_option
        self._directed_option = bool(value)
        return self

    def sort(self, comparator: Comparator | None = None) -> ArcLayout:
        """Set the node comparator (negative/zero/positive); None restores collection order.

        The comparator sees fields filled in by the network base, such as
        ``link_degree``.
        """
        self._sort = comparator
        return self

    def _config_key(self) -> tuple:
        return (self._orient, self._directed_option, self._sort)

    # ─── Build ────────────────────────────────────────────────────────────

    def spec(self) -> ArcSpec:
        return ArcSpec(
            nodes=self._nodes,
            links=self._links,
            width=self._width,
            height=self._height,
            orient=self._orient,
            directed=self._directed_option,
        )

    def build(self) -> ArcLayout:
        self.build_implied(self.spec())
        return self

    def build_implied(self, spec: ArcSpec) -> bool:  # type: ignore[override]
        if self._network_build_implied(spec):
            return True

        nodes = list(spec.nodes)
        try:
            orient = Orientation.parse(spec.orient)
            index = order_nodes(nodes, self._sort)
        except Exception:
            # A failed build must not leave a cache entry behind.
            self.invalidate()
            raise
        count = len(nodes)

        for i, j in enumerate(index):
            n = nodes[j]
            n.breadth = (i + 0.5) / count
            n.x, n.y = position(orient, n.breadth, spec.width, spec.height)
            n.mid_angle = mid_angle(orient, n.breadth)

        self._directed = spec.directed
        self._interpolate = "linear" if orient is Orientation.RADIAL else "polar"
        self._reverse = orient in (Orientation.RIGHT, Orientation.TOP)

        logger.debug(
            "Arc layout built: nodes=%s, orient=%s, directed=%s, sorted=%s",
            count,
            orient.value,
            spec.directed,
            self._sort is not None,
        )
        return False

    # ─── Link Rendering ───────────────────────────────────────────────────

    def link_endpoints(self, link: Link) -> tuple[Node, Node]:
        """Ordered endpoint pair used to draw ``link``, building first if needed."""
        self.build()
        s, t = link.source_node, link.target_node
        if self._reverse != (bool(self._directed) or s.breadth < t.breadth):
            return (s, t)
        return (t, s)

    def link_interpolate(self) -> str | None:
        """Curve style shared by every link: "linear" (radial) or "polar"."""
        return self._interpolate

    def arc_links(self) -> list[ArcLink]:
        self.build()
        arcs: list[ArcLink] = []
        for link in self._links:
            s, t = self.link_endpoints(link)
            arcs.append(ArcLink(source=s, target=t, interpolate=self._interpolate or "polar", link=link))
        return arcs

    def result(self) -> ArcLayoutResult:
        """Build if needed and return the positioned nodes and ordered links."""
        links = self.arc_links()
        return ArcLayoutResult(
            nodes=list(self._nodes),
            links=links,
            orient=self._orient,
            width=self._width,
            height=self._height,
            directed=bool(self._directed),
            style=self.style,
        )


