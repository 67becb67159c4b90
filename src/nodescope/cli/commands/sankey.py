"""
Sankey Command - Inspect the nodes of a sankey data file.

Lists each node with the sources of its incoming links, the same text the
sankey page shows in a node's tooltip.
"""

from typing import Any, Dict, List

import click
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.exceptions import NodescopeError
from ...core.loader import load_sankey
from ..renderers import JsonRenderer
from ..utils import echo_error

console = Console()


class SankeyNode(BaseModel):
    id: str
    name: str
    sources: List[str]


class SankeyResponse(BaseModel):
    nodes: List[SankeyNode]
    stats: Dict[str, Any]


@click.command()
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def sankey(data_file: str, as_json: bool):
    """
    List sankey nodes with their incoming sources.
    """
    renderer = JsonRenderer("sankey")
    try:
        graph = load_sankey(data_file)
    except NodescopeError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        raise SystemExit(1)

    entries = [
        SankeyNode(
            id=node.id,
            name=node.display_name,
            sources=[source.display_name for source in graph.sources_of(node.id)],
        )
        for node in graph.iter_nodes()
    ]

    if as_json:
        renderer.render_success(SankeyResponse(nodes=entries, stats=graph.get_stats()))
        return

    table = Table(title=f"Sankey: {escape(data_file)}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="cyan")
    table.add_column("Sources")
    for entry in entries:
        sources = escape("\n".join(entry.sources)) if entry.sources else "[dim]-[/dim]"
        table.add_row(entry.id, escape(entry.name), sources)
    console.print(table)
