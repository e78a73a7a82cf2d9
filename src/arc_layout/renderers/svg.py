"""SVG renderer — draws an arc diagram from an ArcLayoutResult."""

from __future__ import annotations

import math

from arc_layout.types import ArcLayoutResult, ArcLink, MarkStyle, Node, Orientation

# ─── Constants ──────────────────────────────────────────────────────────────

PADDING = 40  # canvas padding in pixels
FONT_FAMILY = "sans-serif"

_LABEL_ANCHOR: dict[Orientation, str] = {
    Orientation.TOP: "middle",
    Orientation.BOTTOM: "middle",
    Orientation.LEFT: "end",
    Orientation.RIGHT: "start",
}


def _escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _num(v: float) -> str:
    """Compact coordinate formatting: two decimals, no trailing zeros."""
    return f"{round(v, 2) + 0.0:g}"


# ─── Link Rendering ─────────────────────────────────────────────────────────


def link_path(arc: ArcLink) -> str:
    """SVG path data for one link.

    "polar" links are half-ellipse arcs from the first endpoint to the second
    with a fixed sweep flag, so the endpoint order decides which side of the
    node line the arc bulges to. "linear" links are straight chords.
    """
    s, t = arc.source, arc.target
    start = f"M{_num(s.x)},{_num(s.y)}"
    if arc.interpolate == "linear":
        return f"{start} L{_num(t.x)},{_num(t.y)}"
    r = math.hypot(t.x - s.x, t.y - s.y) / 2
    return f"{start} A{_num(r)},{_num(r)} 0 0,1 {_num(t.x)},{_num(t.y)}"


def _render_link(arc: ArcLink, style: MarkStyle, directed: bool) -> str:
    marker = ' marker-end="url(#arrowhead)"' if directed else ""
    return (
        f'<path d="{link_path(arc)}" fill="none" stroke="{style.link_stroke}" '
        f'stroke-width="{_num(style.link_width)}"{marker}/>'
    )


# ─── Node Rendering ─────────────────────────────────────────────────────────


def _label_anchor(node: Node, orient: Orientation) -> str:
    if orient in _LABEL_ANCHOR:
        return _LABEL_ANCHOR[orient]
    c = math.cos(node.mid_angle)
    if abs(c) < 1e-9:
        return "middle"
    return "start" if c > 0 else "end"


def _render_node(node: Node, style: MarkStyle, orient: Orientation) -> str:
    shape = (
        f'<circle cx="{_num(node.x)}" cy="{_num(node.y)}" r="{_num(style.node_radius)}" '
        f'fill="{style.node_fill}" stroke="{style.node_stroke}" stroke-width="1.5"/>'
    )
    offset = style.node_radius + style.label_offset
    lx = node.x + offset * math.cos(node.mid_angle)
    ly = node.y + offset * math.sin(node.mid_angle)
    label = (
        f'<text x="{_num(lx)}" y="{_num(ly)}" dominant-baseline="central" '
        f'text-anchor="{_label_anchor(node, orient)}" font-family="{FONT_FAMILY}" '
        f'font-size="{style.label_font_size}" fill="{style.label_color}">{_escape(node.label)}</text>'
    )
    return f"{shape}\n{label}"


# ─── Public Renderer ────────────────────────────────────────────────────────


class SvgRenderer:
    """SVG renderer — consumes an ArcLayoutResult, produces an SVG string."""

    def render(self, result: ArcLayoutResult) -> str:
        if not result.nodes:
            return ""

        style = result.style
        svg_w = _num(result.width + 2 * PADDING)
        svg_h = _num(result.height + 2 * PADDING)

        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{svg_w}" height="{svg_h}" viewBox="0 0 {svg_w} {svg_h}">',
        ]
        if result.directed:
            parts += [
                "<defs>",
                '  <marker id="arrowhead" markerWidth="10" markerHeight="7" refX="10" refY="3.5" orient="auto">',
                f'    <polygon points="0 0, 10 3.5, 0 7" fill="{style.link_stroke}"/>',
                "  </marker>",
                "</defs>",
            ]
        parts += [
            f'<rect width="{svg_w}" height="{svg_h}" fill="white"/>',
            f'<g transform="translate({PADDING},{PADDING})">',
        ]

        # Links (behind nodes)
        for arc in result.links:
            parts.append(_render_link(arc, style, result.directed))

        # Nodes (on top)
        for node in result.nodes:
            parts.append(_render_node(node, style, result.orient))

        parts.append("</g>")
        parts.append("</svg>")
        return "\n".join(parts)
