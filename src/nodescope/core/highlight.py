"""
Highlight derivation shared by click selection and hover.

Both interactions highlight a node and its direct neighbors, so the set is
always computed here from the graph's adjacency index.
"""

from typing import Optional

from .graph import GraphModel
from .types import HighlightSet


def derive_highlight(graph: GraphModel, node_id: Optional[str]) -> HighlightSet:
    """
    Highlight for `node_id`: the node as primary, its neighbors as adjacent.

    Raises:
        UnknownNodeError: If `node_id` is not in the graph.
    """
    if node_id is None:
        return HighlightSet.empty()
    return HighlightSet(primary=node_id, adjacent=graph.neighbors_of(node_id))
