"""
Nodes Command - List the filtered, paginated node list.

Mirrors the node list panel next to the force graph: a text filter, fixed
size pages, and previous/next availability.
"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.exceptions import NodescopeError
from ...core.session import ExplorerSession
from ...core.types import Page
from ..renderers import JsonRenderer
from ..utils import echo_error, load_graph, resolve_page_size

console = Console()


def render_page_table(page: Page, title: str = "Nodes") -> Table:
    """Rich table of one page of nodes."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Radius", justify="right")
    table.add_column("Color")

    for offset, node in enumerate(page.items):
        table.add_row(
            str(page.start_index + offset + 1),
            escape(node.id),
            escape(node.display_name),
            f"{node.radius:g}",
            escape(node.color),
        )
    return table


def pager_caption(page: Page) -> str:
    prev_label = "◀ prev" if page.has_previous else "[dim]◀ prev[/dim]"
    next_label = "next ▶" if page.has_next else "[dim]next ▶[/dim]"
    return f"{prev_label}  Page {page.page} of {page.total_pages}  {next_label}"


@click.command()
@click.argument("data", type=click.Path(exists=True))
@click.option("--links", "links_path", type=click.Path(exists=True),
              help="Link list file (when DATA is the node list file)")
@click.option("-f", "--filter", "query", default="", help="Case-insensitive name filter")
@click.option("-p", "--page", default=1, type=int, help="Page number (clamped to range)")
@click.option("--page-size", type=int, default=None, help="Items per page")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def nodes(data: str, links_path: Optional[str], query: str, page: int,
          page_size: Optional[int], as_json: bool):
    """
    List graph nodes, filtered and paginated.
    """
    renderer = JsonRenderer("nodes")
    try:
        graph = load_graph(data, links_path)
    except NodescopeError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        raise SystemExit(1)

    session = ExplorerSession(graph, page_size=resolve_page_size(page_size))
    session.set_filter(query)
    result = session.go_to_page(page)

    if as_json:
        renderer.render_success(result)
        return

    if result.is_empty:
        console.print(f"[yellow]No nodes match {escape(repr(query))}[/yellow]")
    else:
        console.print(render_page_table(result))
    console.print(pager_caption(result))
