"""
Core type definitions for nodescope.

Nodes and edges mirror the JSON documents consumed by the graph pages
(camelCase keys on the wire, snake_case in Python). Highlight sets and pages
are derived values and are never persisted.
"""

from typing import FrozenSet, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field


class Node(BaseModel):
    """
    A graph vertex as loaded from the node list.

    Identity is the `id`; two nodes with the same id are equal.
    """
    id: str
    display_name: str = Field(
        validation_alias=AliasChoices("displayName", "display_name", "name"),
        serialization_alias="displayName",
    )
    radius: float = 5.0
    color: str = "#999"

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.id == other.id
        return False


class Edge(BaseModel):
    """
    A link between two nodes.

    Stored with a direction (as in the link list) but treated as undirected
    for adjacency.
    """
    source_id: str = Field(
        validation_alias=AliasChoices("source", "sourceId", "source_id"),
        serialization_alias="source",
    )
    target_id: str = Field(
        validation_alias=AliasChoices("target", "targetId", "target_id"),
        serialization_alias="target",
    )
    value: float = 1.0

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )


class HighlightSet(BaseModel):
    """
    Display instruction for the renderer.

    `primary` is drawn emphasised, `adjacent` nodes get the secondary style.
    """
    primary: Optional[str] = None
    adjacent: FrozenSet[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> "HighlightSet":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.primary is None and not self.adjacent

    def labelled_ids(self) -> FrozenSet[str]:
        """Ids whose labels should be visible."""
        if self.primary is None:
            return frozenset(self.adjacent)
        return self.adjacent | {self.primary}


class Page(BaseModel):
    """
    One page of a (filtered) node list, plus the metadata the renderer needs
    for its previous/next controls.
    """
    items: List[Node] = Field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    page_size: int
    total_items: int = 0

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def start_index(self) -> int:
        """Index of the first item of this page within the full list."""
        return (self.page - 1) * self.page_size
