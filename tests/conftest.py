"""Shared fixtures for nodescope tests."""

import json
import logging

import pytest

from nodescope.core.graph import GraphModel
from nodescope.core.types import Edge, Node


@pytest.fixture
def hub_nodes():
    return [
        Node(id="hub", displayName="VNet Hub", radius=12, color="#1f77b4"),
        Node(id="spoke-a", displayName="VNet Spoke A", radius=8, color="#ff7f0e"),
        Node(id="spoke-b", displayName="VNet Spoke B", radius=8, color="#ff7f0e"),
        Node(id="fw", displayName="Azure Firewall", radius=6, color="#2ca02c"),
        Node(id="dns", displayName="Private DNS Zone", radius=6, color="#d62728"),
    ]


@pytest.fixture
def hub_edges():
    return [
        Edge(source="hub", target="spoke-a", value=4),
        Edge(source="spoke-b", target="hub", value=4),
        Edge(source="hub", target="fw", value=1),
    ]


@pytest.fixture
def hub_graph(hub_nodes, hub_edges):
    return GraphModel.build(hub_nodes, hub_edges)


@pytest.fixture
def data_dir(tmp_path, hub_nodes, hub_edges):
    """A directory laid out like the graph page's data folder."""
    data = tmp_path / "data"
    data.mkdir()
    (data / "idList.json").write_text(json.dumps(
        [n.model_dump(by_alias=True) for n in hub_nodes]
    ))
    (data / "linkList.json").write_text(json.dumps(
        [e.model_dump(by_alias=True) for e in hub_edges]
    ))
    return tmp_path


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by `configure_logging`."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
