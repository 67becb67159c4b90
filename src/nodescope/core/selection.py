"""
Click selection state machine.

Two states: unselected, or exactly one selected node. Selecting the selected
node again clears the selection; selecting another node switches to it
directly.
"""

import logging
from typing import Optional

from .exceptions import UnknownNodeError
from .graph import GraphModel
from .highlight import derive_highlight
from .types import HighlightSet

logger = logging.getLogger(__name__)


class SelectionController:
    """Tracks at most one selected node of a GraphModel."""

    def __init__(self, graph: GraphModel):
        self._graph = graph
        self._selected: Optional[str] = None

    @property
    def selected_node_id(self) -> Optional[str]:
        return self._selected

    @property
    def is_selected(self) -> bool:
        return self._selected is not None

    def select(self, node_id: str) -> HighlightSet:
        """
        Apply a click on `node_id` and return the resulting highlight.

        Raises:
            UnknownNodeError: If the node is not in the graph. The current
                selection is kept.
        """
        if not self._graph.has_node(node_id):
            raise UnknownNodeError(node_id)

        if self._selected == node_id:
            logger.debug(f"Deselected {node_id}")
            self._selected = None
        else:
            logger.debug(f"Selected {node_id} (was {self._selected})")
            self._selected = node_id
        return self.highlight

    def clear(self) -> None:
        self._selected = None

    @property
    def highlight(self) -> HighlightSet:
        return derive_highlight(self._graph, self._selected)
