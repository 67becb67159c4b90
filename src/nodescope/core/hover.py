"""
Transient hover highlighting.

Hover is layered on top of the persistent selection: while a node is hovered
its highlight is what gets displayed, and when the pointer leaves, the display
falls back to whatever the selection dictates.
"""

import logging
from typing import Optional

from .exceptions import UnknownNodeError
from .graph import GraphModel
from .highlight import derive_highlight
from .selection import SelectionController
from .types import HighlightSet

logger = logging.getLogger(__name__)


class HoverHighlighter:
    """Computes hover highlights; never touches the selection."""

    def __init__(self, graph: GraphModel):
        self._graph = graph
        self._hovered: Optional[str] = None

    @property
    def hovered_node_id(self) -> Optional[str]:
        return self._hovered

    @property
    def is_active(self) -> bool:
        return self._hovered is not None

    def on_hover_enter(self, node_id: str) -> HighlightSet:
        """
        Raises:
            UnknownNodeError: If the node is not in the graph. The previous
                hover target is kept.
        """
        if not self._graph.has_node(node_id):
            raise UnknownNodeError(node_id)
        self._hovered = node_id
        return derive_highlight(self._graph, node_id)

    def on_hover_exit(self) -> HighlightSet:
        self._hovered = None
        return HighlightSet.empty()

    def displayed(self, selection: SelectionController) -> HighlightSet:
        """Highlight to draw: the hover target if any, else the selection."""
        if self._hovered is not None:
            return derive_highlight(self._graph, self._hovered)
        return selection.highlight
