"""
Neighbors Command - Show the highlight produced by selecting a node.
"""

from typing import List, Optional

import click
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from ...core.exceptions import NodescopeError
from ...core.selection import SelectionController
from ..renderers import JsonRenderer
from ..utils import echo_error, load_graph

console = Console()


# --- API Models ---
class NeighborsResponse(BaseModel):
    primary: str
    adjacent: List[str]
    count: int


@click.command()
@click.argument("data", type=click.Path(exists=True))
@click.argument("node_id")
@click.option("--links", "links_path", type=click.Path(exists=True),
              help="Link list file (when DATA is the node list file)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def neighbors(data: str, node_id: str, links_path: Optional[str], as_json: bool):
    """
    Select NODE_ID and list the nodes it would highlight.
    """
    renderer = JsonRenderer("neighbors")
    try:
        graph = load_graph(data, links_path)
        highlight = SelectionController(graph).select(node_id)
    except NodescopeError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        raise SystemExit(1)

    adjacent = sorted(highlight.adjacent)
    if as_json:
        renderer.render_success(NeighborsResponse(
            primary=node_id, adjacent=adjacent, count=len(adjacent),
        ))
        return

    node = graph.get_node(node_id)
    console.print(f"[bold]{escape(node.display_name)}[/bold] [dim]({escape(node_id)})[/dim]")
    if not adjacent:
        console.print("   [dim]No adjacent nodes[/dim]")
        return
    for neighbor_id in adjacent:
        console.print(f"   ↔ {escape(graph.get_node(neighbor_id).display_name)} [dim]({escape(neighbor_id)})[/dim]")
