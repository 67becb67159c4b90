"""
Core modules for nodescope.

This package contains the graph exploration building blocks:
- types: Data structures (Node, Edge, HighlightSet, Page)
- graph: Read-only graph model with adjacency index
- filtering / pagination: Node list filter and pager
- selection / hover: Highlight state machines
- session: Event-driven composition of the above
"""

from .exceptions import GraphDataError, InvalidEdgeError, NodescopeError, UnknownNodeError
from .filtering import FilterIndex, filter_nodes
from .graph import GraphModel
from .highlight import derive_highlight
from .hover import HoverHighlighter
from .pagination import Paginator, paginate
from .selection import SelectionController
from .session import ExplorerSession, ExplorerView
from .types import Edge, HighlightSet, Node, Page

__all__ = [
    # Types
    "Node", "Edge", "HighlightSet", "Page",
    # Errors
    "NodescopeError", "GraphDataError", "InvalidEdgeError", "UnknownNodeError",
    # Graph
    "GraphModel",
    # Node list
    "FilterIndex", "filter_nodes", "Paginator", "paginate",
    # Highlighting
    "derive_highlight", "SelectionController", "HoverHighlighter",
    # Session
    "ExplorerSession", "ExplorerView",
]
