"""
Graph model backed by rustworkx.

It manages:
- The bimap between string node ids and rustworkx integer indices.
- An undirected adjacency index used for highlight propagation.
- Directional lookups (incoming link sources) for the sankey view.

A GraphModel is built once per data load and is read-only afterwards.
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

import rustworkx as rx

from .exceptions import GraphDataError, InvalidEdgeError, UnknownNodeError
from .types import Edge, Node

logger = logging.getLogger(__name__)


class GraphModel:
    """
    Immutable-per-load set of nodes and edges.

    Features:
    - O(1) node lookup via id-to-index bimap
    - Adjacency index built in O(N+E), queried in O(1)
    - Node order preserved as loaded (the node list is rendered in that order)
    """

    def __init__(
        self,
        graph: rx.PyDiGraph,
        id_to_idx: Dict[str, int],
        adjacency: Dict[str, FrozenSet[str]],
        incoming: Dict[str, Tuple[str, ...]],
    ):
        self._graph = graph
        self._id_to_idx = id_to_idx
        self._adjacency = adjacency
        self._incoming = incoming
        self._nodes: List[Node] = [graph[idx] for idx in id_to_idx.values()]

    @classmethod
    def build(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> "GraphModel":
        """
        Build a graph from a node list and an edge list.

        Every edge endpoint must name an existing node, otherwise
        InvalidEdgeError is raised and nothing is returned.
        """
        graph = rx.PyDiGraph(multigraph=True)
        id_to_idx: Dict[str, int] = {}
        neighbors: Dict[str, Set[str]] = {}
        # Distinct sources per target, in link order
        incoming: Dict[str, Dict[str, None]] = {}

        for node in nodes:
            if node.id in id_to_idx:
                raise GraphDataError(f"Duplicate node id: {node.id!r}")
            id_to_idx[node.id] = graph.add_node(node)
            neighbors[node.id] = set()
            incoming[node.id] = {}

        for edge in edges:
            for endpoint in (edge.source_id, edge.target_id):
                if endpoint not in id_to_idx:
                    raise InvalidEdgeError(edge.source_id, edge.target_id, endpoint)
            graph.add_edge(id_to_idx[edge.source_id], id_to_idx[edge.target_id], edge)
            # Adjacency ignores direction
            neighbors[edge.source_id].add(edge.target_id)
            neighbors[edge.target_id].add(edge.source_id)
            incoming[edge.target_id][edge.source_id] = None

        adjacency = {node_id: frozenset(ids) for node_id, ids in neighbors.items()}
        model = cls(
            graph,
            id_to_idx,
            adjacency,
            {node_id: tuple(sources) for node_id, sources in incoming.items()},
        )
        logger.debug(f"Built graph with {model.node_count} nodes and {model.edge_count} edges")
        return model

    @classmethod
    def empty(cls) -> "GraphModel":
        return cls.build([], [])

    def neighbors_of(self, node_id: str) -> FrozenSet[str]:
        """Ids of all nodes sharing an edge with `node_id`, in either direction."""
        try:
            return self._adjacency[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def sources_of(self, node_id: str) -> List[Node]:
        """
        Nodes with a link pointing at `node_id` (incoming direction only),
        each listed once, in the order their first link was loaded.
        """
        self._require(node_id)
        return [self._graph[self._id_to_idx[source_id]] for source_id in self._incoming[node_id]]

    def degree(self, node_id: str) -> int:
        return len(self.neighbors_of(node_id))

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by id."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def has_edge(self, source_id: str, target_id: str) -> bool:
        """Check if a directed edge exists between two nodes."""
        if source_id not in self._id_to_idx or target_id not in self._id_to_idx:
            return False
        return self._graph.has_edge(self._id_to_idx[source_id], self._id_to_idx[target_id])

    @property
    def nodes(self) -> List[Node]:
        """All nodes in load order."""
        return list(self._nodes)

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._nodes)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._graph.edges())

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        orphans = sum(1 for ids in self._adjacency.values() if not ids)
        components = rx.number_weakly_connected_components(self._graph) if self.node_count else 0
        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "orphans": orphans,
            "components": components,
            "backend": "rustworkx",
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.model_dump(by_alias=True) for node in self._nodes],
            "edges": [edge.model_dump(by_alias=True) for edge in self.iter_edges()],
            "stats": self.get_stats(),
        }

    def _require(self, node_id: str) -> int:
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            raise UnknownNodeError(node_id)
        return idx

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._id_to_idx
