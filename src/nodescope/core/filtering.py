"""
Text filter over the node list.

Matching is a case-insensitive substring test against the display name.
The filter never reorders its input.
"""

from typing import Dict, Iterable, List, Sequence

from .types import Node


def filter_nodes(query: str, nodes: Iterable[Node]) -> List[Node]:
    """Return the nodes whose display name contains `query`, in input order."""
    needle = query.lower()
    if not needle:
        return list(nodes)
    return [node for node in nodes if needle in node.display_name.lower()]


class FilterIndex:
    """
    Filter with the lowered display names computed once per load.

    Holds no query state; the caller owns the current query string.
    """

    def __init__(self, nodes: Iterable[Node] = ()):
        self._lowered: Dict[str, str] = {node.id: node.display_name.lower() for node in nodes}

    def apply(self, query: str, nodes: Sequence[Node]) -> List[Node]:
        needle = query.lower()
        if not needle:
            return list(nodes)

        matches = []
        for node in nodes:
            name = self._lowered.get(node.id)
            if name is None:
                name = node.display_name.lower()
            if needle in name:
                matches.append(node)
        return matches
