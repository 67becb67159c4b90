"""
Exception hierarchy for nodescope.

Build-time failures (bad documents, dangling edges) are fatal to the graph
being built. Lookup failures (unknown node ids) are raised to the caller and
never leave interaction state partially updated.
"""

from typing import Any, Optional


class NodescopeError(Exception):
    """Base class for all nodescope errors."""


class GraphDataError(NodescopeError):
    """
    Raised when an input document cannot be turned into nodes or edges.

    Attributes:
        message: Human-readable error message.
        path: The file the data came from, if any.
    """

    def __init__(self, message: str, path: Optional[Any] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class InvalidEdgeError(NodescopeError):
    """
    Raised when an edge references a node id that is not in the graph.

    Attributes:
        source_id: The edge's source endpoint.
        target_id: The edge's target endpoint.
        missing_id: The endpoint that could not be resolved.
    """

    def __init__(self, source_id: str, target_id: str, missing_id: str):
        self.source_id = source_id
        self.target_id = target_id
        self.missing_id = missing_id
        super().__init__(
            f"Edge {source_id!r} -> {target_id!r} references unknown node {missing_id!r}"
        )


class UnknownNodeError(NodescopeError):
    """
    Raised when a node id is not present in the graph.

    Attributes:
        node_id: The id that was looked up.
    """

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Unknown node: {node_id!r}")
