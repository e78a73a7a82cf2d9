"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from arc_layout.types import ArcLayoutResult


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, result: ArcLayoutResult) -> str:
        """Render a laid-out arc diagram to an output string."""
        ...
