"""Network layout base — node/link collections and the build cache.

Concrete layouts (see ``arc_layout.layout``) subclass ``NetworkLayout`` and
override ``build_implied``. The base owns:

  1. The node and link collections (links resolved to Node references).
  2. Canvas size and default mark styling.
  3. Link degree bookkeeping, refreshed on every fresh build.
  4. The "implied" build cache: a fingerprint of the inputs last built, so
     repeated builds with unchanged inputs are no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Sequence

import networkx as nx

from arc_layout.types import Link, MarkStyle, Node

logger = logging.getLogger(__name__)

DEFAULT_WIDTH: float = 800.0
DEFAULT_HEIGHT: float = 400.0

LinkLike = Link | tuple[Any, Any] | tuple[Any, Any, float]


@dataclass(frozen=True)
class NetworkSpec:
    """Snapshot of the inputs a build runs against."""

    nodes: Sequence[Node]
    links: Sequence[Link]
    width: float
    height: float


class NetworkLayout:
    """Base class for network layouts.

    Nodes may be given as ``Node`` objects or as bare ids. Links may be given
    as ``Link`` objects or as ``(source, target)`` / ``(source, target, value)``
    tuples, where endpoints are node ids or integer node indices. Set nodes
    before links: tuple endpoints are resolved against the current node set.
    """

    def __init__(
        self,
        nodes: Iterable[Node | Hashable] | None = None,
        links: Iterable[LinkLike] | None = None,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        style: MarkStyle | None = None,
    ) -> None:
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._member_ids: set[int] = set()
        self._width = float(width)
        self._height = float(height)
        self.style = style if style is not None else MarkStyle()
        self._built_key: tuple | None = None
        if nodes is not None:
            self.nodes(nodes)
        if links is not None:
            self.links(links)

    # ─── Construction ─────────────────────────────────────────────────────

    @classmethod
    def defaults(cls) -> NetworkLayout:
        """Return a layout carrying the default node/link/label mark styling."""
        return cls(style=MarkStyle())

    @classmethod
    def from_graph(cls, graph: nx.Graph, weight: str = "weight") -> NetworkLayout:
        """Build a layout from a networkx graph.

        Node order follows ``graph.nodes`` iteration order. A node ``label``
        attribute is used as the label when present; the edge attribute named
        by ``weight`` becomes the link value (default 1.0). A directed graph
        switches on the layout's ``directed`` option when it has one.
        """
        layout = cls()
        layout.nodes(Node(id=n, label=str(data.get("label", ""))) for n, data in graph.nodes(data=True))
        layout.links((u, v, float(data.get(weight, 1.0))) for u, v, data in graph.edges(data=True))
        directed = getattr(layout, "directed", None)
        if graph.is_directed() and callable(directed):
            directed(True)
        return layout

    # ─── Collections ──────────────────────────────────────────────────────

    def nodes(self, value: Iterable[Node | Hashable] | None = None) -> Any:
        """Get the node list, or replace it and return the layout."""
        if value is None:
            return self._nodes
        nodes = [n if isinstance(n, Node) else Node(id=n) for n in value]
        for i, n in enumerate(nodes):
            n.index = i
        self._nodes = nodes
        self._links = []
        return self

    def links(self, value: Iterable[LinkLike] | None = None) -> Any:
        """Get the link list, or replace it and return the layout."""
        if value is None:
            return self._links
        by_id: dict[Hashable, Node] = {n.id: n for n in self._nodes}
        self._member_ids = {id(n) for n in self._nodes}
        self._links = [self._resolve_link(item, by_id) for item in value]
        return self

    def _resolve_link(self, item: LinkLike, by_id: dict[Hashable, Node]) -> Link:
        if isinstance(item, Link):
            self._check_member(item.source_node)
            self._check_member(item.target_node)
            return item
        if len(item) == 3:
            source, target, value = item  # type: ignore[misc]
        else:
            source, target = item  # type: ignore[misc]
            value = 1.0
        return Link(self._resolve_endpoint(source, by_id), self._resolve_endpoint(target, by_id), float(value))

    def _resolve_endpoint(self, ref: Any, by_id: dict[Hashable, Node]) -> Node:
        if isinstance(ref, Node):
            return self._check_member(ref)
        if ref in by_id:
            return by_id[ref]
        # Integer references fall back to collection indices.
        if isinstance(ref, int) and not isinstance(ref, bool) and 0 <= ref < len(self._nodes):
            return self._nodes[ref]
        raise KeyError(f"link endpoint {ref!r} is not a node of this network")

    def _check_member(self, node: Node) -> Node:
        if id(node) not in self._member_ids:
            raise KeyError(f"link endpoint {node.id!r} is not a node of this network")
        return node

    # ─── Canvas ───────────────────────────────────────────────────────────

    def width(self, value: float | None = None) -> Any:
        if value is None:
            return self._width
        self._width = float(value)
        return self

    def height(self, value: float | None = None) -> Any:
        if value is None:
            return self._height
        self._height = float(value)
        return self

    # ─── Build ────────────────────────────────────────────────────────────

    def spec(self) -> NetworkSpec:
        return NetworkSpec(nodes=self._nodes, links=self._links, width=self._width, height=self._height)

    def build(self) -> NetworkLayout:
        """Bring node positions up to date with the current inputs."""
        self.build_implied(self.spec())
        return self

    def build_implied(self, spec: NetworkSpec) -> bool:
        """Subclass hook. Returns True when the cached build is still valid."""
        return self._network_build_implied(spec)

    def invalidate(self) -> NetworkLayout:
        """Force the next build to recompute."""
        self._built_key = None
        return self

    def _config_key(self) -> tuple:
        """Subclass-specific configuration folded into the build fingerprint."""
        return ()

    def _fingerprint(self, spec: NetworkSpec) -> tuple:
        # Holds the objects themselves; Node and Link compare by identity.
        return (
            tuple(spec.nodes),
            tuple((link, link.source_node, link.target_node, link.value) for link in spec.links),
            spec.width,
            spec.height,
            self._config_key(),
        )

    def _network_build_implied(self, spec: NetworkSpec) -> bool:
        """Return True if already built from identical inputs; otherwise prepare a fresh build."""
        key = self._fingerprint(spec)
        if key == self._built_key:
            logger.debug("Network build cached: nodes=%s, links=%s", len(spec.nodes), len(spec.links))
            return True
        self._built_key = key
        compute_link_degrees(spec.nodes, spec.links)
        return False


def compute_link_degrees(nodes: Sequence[Node], links: Sequence[Link]) -> None:
    """Set each node's link_degree to the summed value of its incident links."""
    for n in nodes:
        n.link_degree = 0.0
    for link in links:
        link.source_node.link_degree += link.value
        link.target_node.link_degree += link.value
