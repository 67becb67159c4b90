"""
Explorer session: the interaction state of one graph page.

Owns the graph plus the mutable filter, page, selection and hover state, and
turns input events into a consistent view for the renderer. Every event
either applies completely or leaves the previous state in place.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from ..config import DEFAULT_PAGE_SIZE
from .filtering import FilterIndex
from .graph import GraphModel
from .hover import HoverHighlighter
from .pagination import paginate
from .selection import SelectionController
from .types import Edge, HighlightSet, Node, Page

logger = logging.getLogger(__name__)


@dataclass
class FilterState:
    query: str = ""


@dataclass
class PageState:
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        self.page_size = max(1, self.page_size)
        self.current_page = max(1, self.current_page)


class ExplorerView(BaseModel):
    """Snapshot of everything the renderer needs after an event."""
    query: str
    page: Page
    highlight: HighlightSet
    selected_node_id: Optional[str] = None
    hovered_node_id: Optional[str] = None
    visible_labels: FrozenSet[str] = frozenset()

    model_config = ConfigDict(frozen=True)


@dataclass
class ExplorerSession:
    """
    Event-driven state for exploring a GraphModel.

    Events: set_filter, go_to_page, next_page, previous_page, click_node,
    hover_enter, hover_exit. Call `view()` afterwards to re-render.
    """
    graph: GraphModel
    page_size: int = DEFAULT_PAGE_SIZE
    filter_state: FilterState = field(default_factory=FilterState)
    page_state: PageState = field(init=False)

    def __post_init__(self):
        self.page_state = PageState(page_size=self.page_size)
        self._attach(self.graph)

    def _attach(self, graph: GraphModel) -> None:
        self.graph = graph
        self._filter = FilterIndex(graph.iter_nodes())
        self.selection = SelectionController(graph)
        self.hover = HoverHighlighter(graph)

    @classmethod
    def from_data(
        cls, nodes: Iterable[Node], edges: Iterable[Edge], page_size: int = DEFAULT_PAGE_SIZE
    ) -> "ExplorerSession":
        return cls(GraphModel.build(nodes, edges), page_size=page_size)

    def reload(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        """
        Replace the graph and reset filter, page, selection and hover.

        If the new data fails to build, the current graph and state remain.
        """
        graph = GraphModel.build(nodes, edges)
        self._attach(graph)
        self.filter_state = FilterState()
        self.page_state = PageState(page_size=self.page_state.page_size)
        logger.info(f"Reloaded graph: {graph.node_count} nodes, {graph.edge_count} edges")

    # --- Node list ---

    def visible_nodes(self) -> List[Node]:
        """The filtered node list, before pagination."""
        return self._filter.apply(self.filter_state.query, self.graph.nodes)

    def current_page(self) -> Page:
        page = paginate(self.visible_nodes(), self.page_state.page_size, self.page_state.current_page)
        self.page_state.current_page = page.page
        return page

    def set_filter(self, query: str) -> Page:
        """A new query invalidates the old page position, so return to page 1."""
        self.filter_state.query = query
        self.page_state.current_page = 1
        logger.debug(f"Filter set to {query!r}")
        return self.current_page()

    def go_to_page(self, page: int) -> Page:
        result = paginate(self.visible_nodes(), self.page_state.page_size, page)
        self.page_state.current_page = result.page
        return result

    def next_page(self) -> Page:
        return self.go_to_page(self.page_state.current_page + 1)

    def previous_page(self) -> Page:
        return self.go_to_page(self.page_state.current_page - 1)

    @property
    def total_pages(self) -> int:
        return self.current_page().total_pages

    # --- Highlighting ---

    def click_node(self, node_id: str) -> HighlightSet:
        self.selection.select(node_id)
        return self.displayed_highlight()

    def hover_enter(self, node_id: str) -> HighlightSet:
        return self.hover.on_hover_enter(node_id)

    def hover_exit(self) -> HighlightSet:
        self.hover.on_hover_exit()
        return self.displayed_highlight()

    def displayed_highlight(self) -> HighlightSet:
        return self.hover.displayed(self.selection)

    def visible_labels(self) -> FrozenSet[str]:
        return self.displayed_highlight().labelled_ids()

    def view(self) -> ExplorerView:
        highlight = self.displayed_highlight()
        return ExplorerView(
            query=self.filter_state.query,
            page=self.current_page(),
            highlight=highlight,
            selected_node_id=self.selection.selected_node_id,
            hovered_node_id=self.hover.hovered_node_id,
            visible_labels=highlight.labelled_ids(),
        )
