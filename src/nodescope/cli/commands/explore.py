"""
Explore Command - Interactive node list and highlight session.

Reads commands from the prompt and feeds them to an ExplorerSession as the
graph page's input events would:

  filter <text>   text input changed (resets to page 1)
  page <n>        jump to page n
  next / prev     pagination buttons
  select <id>     node clicked (click again to deselect)
  hover <id>      pointer entered a node
  leave           pointer left the node
  quit            exit
"""

import logging
import shlex
from typing import Callable, Dict, List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ...core.exceptions import NodescopeError, UnknownNodeError
from ...core.session import ExplorerSession, ExplorerView
from ..utils import echo_error, load_graph, resolve_page_size
from .nodes import pager_caption, render_page_table

logger = logging.getLogger(__name__)

console = Console()

HELP_TEXT = (
    "Commands: filter <text> | page <n> | next | prev | "
    "select <id> | hover <id> | leave | help | quit"
)


def render_view(session: ExplorerSession, view: ExplorerView) -> None:
    """Print the node list page and the active highlight."""
    if view.page.is_empty:
        console.print(f"[yellow]No nodes match {escape(repr(view.query))}[/yellow]")
    else:
        console.print(render_page_table(view.page, title=f"Nodes (filter: {escape(repr(view.query))})"))
    console.print(pager_caption(view.page))

    highlight = view.highlight
    if highlight.primary is None:
        console.print("[dim]No highlight[/dim]")
        return

    source = "hover" if view.hovered_node_id else "selection"
    primary = session.graph.get_node(highlight.primary)
    console.print(f"Highlight ({source}): [bold red]{escape(primary.display_name)}[/bold red]")
    for node_id in sorted(highlight.adjacent):
        console.print(f"   ↔ [orange1]{escape(session.graph.get_node(node_id).display_name)}[/orange1]")


class ExploreLoop:
    """Dispatches prompt commands to session events."""

    def __init__(self, session: ExplorerSession):
        self.session = session
        self._handlers: Dict[str, Callable[[List[str]], None]] = {
            "filter": self._filter,
            "page": self._page,
            "next": lambda args: self.session.next_page(),
            "prev": lambda args: self.session.previous_page(),
            "select": self._select,
            "hover": self._hover,
            "leave": lambda args: self.session.hover_exit(),
        }

    def handle(self, line: str) -> bool:
        """
        Apply one command line. Returns False when the loop should stop.
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            echo_error(f"Cannot parse command: {e}")
            return True

        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            console.print(HELP_TEXT)
            return True

        handler = self._handlers.get(command)
        if handler is None:
            echo_error(f"Unknown command: {command}")
            console.print(HELP_TEXT)
            return True

        try:
            handler(args)
        except UnknownNodeError as e:
            echo_error(str(e))
            return True
        except click.BadParameter as e:
            echo_error(e.format_message())
            return True

        render_view(self.session, self.session.view())
        return True

    def _filter(self, args: List[str]) -> None:
        self.session.set_filter(" ".join(args))

    def _page(self, args: List[str]) -> None:
        if len(args) != 1:
            raise click.BadParameter("usage: page <n>")
        try:
            page = int(args[0])
        except ValueError:
            raise click.BadParameter(f"not a page number: {args[0]!r}") from None
        self.session.go_to_page(page)

    def _select(self, args: List[str]) -> None:
        self.session.click_node(self._node_arg(args, "select"))

    def _hover(self, args: List[str]) -> None:
        self.session.hover_enter(self._node_arg(args, "hover"))

    @staticmethod
    def _node_arg(args: List[str], command: str) -> str:
        if len(args) != 1:
            raise click.BadParameter(f"usage: {command} <node id>")
        return args[0]


@click.command()
@click.argument("data", type=click.Path(exists=True))
@click.option("--links", "links_path", type=click.Path(exists=True),
              help="Link list file (when DATA is the node list file)")
@click.option("--page-size", type=int, default=None, help="Items per page")
def explore(data: str, links_path: Optional[str], page_size: Optional[int]):
    """
    Explore a graph interactively: filter, paginate, select and hover.
    """
    try:
        graph = load_graph(data, links_path)
    except NodescopeError as e:
        echo_error(str(e))
        raise SystemExit(1)

    session = ExplorerSession(graph, page_size=resolve_page_size(page_size))
    loop = ExploreLoop(session)
    logger.debug(f"Exploring {graph.node_count} nodes")

    console.print(HELP_TEXT)
    render_view(session, session.view())
    while True:
        try:
            line = Prompt.ask("[bold cyan]nodescope[/bold cyan]", console=console)
        except EOFError:
            break
        if not loop.handle(line):
            break
