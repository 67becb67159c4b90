"""
Loaders for the JSON documents behind the graph pages.

The force graph page reads two parallel documents: a node list and a link
list. The sankey page reads a single `{nodes, links}` document whose link
endpoints are node indices (the d3-sankey default) or node names.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from ..config import DATA_SUBDIR, LINKS_FILE, NODES_FILE
from .exceptions import GraphDataError
from .graph import GraphModel
from .types import Edge, Node

logger = logging.getLogger(__name__)

_NODE_LIST = TypeAdapter(List[Node])
_EDGE_LIST = TypeAdapter(List[Edge])

PathLike = Union[str, Path]


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise GraphDataError("File not found", path) from None
    except (OSError, json.JSONDecodeError) as e:
        raise GraphDataError(f"Failed to read JSON: {e}", path) from e


def parse_nodes(data: Any, source: Any = None) -> List[Node]:
    try:
        return _NODE_LIST.validate_python(data)
    except ValidationError as e:
        raise GraphDataError(f"Invalid node list: {e}", source) from e


def parse_edges(data: Any, source: Any = None) -> List[Edge]:
    try:
        return _EDGE_LIST.validate_python(data)
    except ValidationError as e:
        raise GraphDataError(f"Invalid link list: {e}", source) from e


def read_graph_files(nodes_path: PathLike, edges_path: PathLike) -> Tuple[List[Node], List[Edge]]:
    """Parse both documents without building the graph."""
    nodes_path, edges_path = Path(nodes_path), Path(edges_path)
    nodes = parse_nodes(_read_json(nodes_path), nodes_path)
    edges = parse_edges(_read_json(edges_path), edges_path)
    logger.debug(f"Read {len(nodes)} nodes from {nodes_path}, {len(edges)} links from {edges_path}")
    return nodes, edges


def load_graph_files(nodes_path: PathLike, edges_path: PathLike) -> GraphModel:
    """
    Load and build a graph from a node list file and a link list file.

    Raises:
        GraphDataError: A document is missing, unreadable, or has the wrong shape.
        InvalidEdgeError: A link references a node that is not in the node list.
    """
    nodes, edges = read_graph_files(nodes_path, edges_path)
    return GraphModel.build(nodes, edges)


def resolve_graph_dir(directory: PathLike) -> Tuple[Path, Path]:
    """Find the node and link lists in `directory` or its `data/` subdirectory."""
    root = Path(directory)
    for candidate in (root, root / DATA_SUBDIR):
        nodes_path, edges_path = candidate / NODES_FILE, candidate / LINKS_FILE
        if nodes_path.exists() and edges_path.exists():
            return nodes_path, edges_path
    raise GraphDataError(f"Expected {NODES_FILE} and {LINKS_FILE}", root)


def load_graph_dir(directory: PathLike) -> GraphModel:
    return load_graph_files(*resolve_graph_dir(directory))


def parse_sankey(data: Any, source: Any = None) -> Tuple[List[Node], List[Edge]]:
    """
    Convert a sankey document into nodes and edges keyed by node index.

    Node ids are the positions in `nodes` as strings, so repeated names are
    allowed. Link endpoints may be integer indices or node names; a name must
    identify exactly one node.
    """
    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list):
        raise GraphDataError("Sankey document needs a 'nodes' list", source)

    names: List[str] = []
    for i, raw in enumerate(data["nodes"]):
        if not isinstance(raw, dict) or "name" not in raw:
            raise GraphDataError(f"Sankey node {i} has no name", source)
        names.append(str(raw["name"]))

    nodes = [Node(id=str(i), display_name=name) for i, name in enumerate(names)]
    positions: Dict[str, List[int]] = {}
    for i, name in enumerate(names):
        positions.setdefault(name, []).append(i)

    def endpoint(value: Any) -> str:
        # bool is an int subclass; it is never a valid index here
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value < len(names):
                raise GraphDataError(f"Link endpoint index {value} out of range", source)
            return str(value)
        matches = positions.get(str(value), [])
        if len(matches) != 1:
            problem = "ambiguous" if matches else "unknown"
            raise GraphDataError(f"Link endpoint {value!r} is an {problem} node name", source)
        return str(matches[0])

    edges = []
    for i, raw in enumerate(data.get("links") or []):
        if not isinstance(raw, dict) or "source" not in raw or "target" not in raw:
            raise GraphDataError(f"Sankey link {i} needs 'source' and 'target'", source)
        try:
            edges.append(Edge(
                source_id=endpoint(raw["source"]),
                target_id=endpoint(raw["target"]),
                value=raw.get("value", 1.0),
            ))
        except ValidationError as e:
            raise GraphDataError(f"Invalid sankey link {i}: {e}", source) from e
    return nodes, edges


def load_sankey(path: PathLike) -> GraphModel:
    path = Path(path)
    nodes, edges = parse_sankey(_read_json(path), path)
    return GraphModel.build(nodes, edges)
