"""Public API — lay out and render networkx graphs as arc diagrams."""

from __future__ import annotations

import networkx as nx

from arc_layout.layout import ArcLayout, Comparator
from arc_layout.network import DEFAULT_HEIGHT, DEFAULT_WIDTH
from arc_layout.renderers.svg import SvgRenderer
from arc_layout.types import ArcLayoutResult, Orientation


def arc_layout(
    graph: nx.Graph,
    orient: Orientation | str = Orientation.BOTTOM,
    directed: bool | None = None,
    sort: Comparator | None = None,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
) -> ArcLayoutResult:
    """Lay out ``graph`` as an arc diagram.

    ``directed=None`` follows ``graph.is_directed()``.
    """
    layout = ArcLayout.from_graph(graph)
    layout.orient(orient).sort(sort).width(width).height(height)
    if directed is not None:
        layout.directed(directed)
    return layout.result()


def render_svg(graph: nx.Graph, **kwargs: object) -> str:
    """Lay out ``graph`` and render it to an SVG string."""
    return SvgRenderer().render(arc_layout(graph, **kwargs))  # type: ignore[arg-type]
