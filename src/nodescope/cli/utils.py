"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, graph loading and logging setup.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..config import ExplorerConfig
from ..core.graph import GraphModel
from ..core.loader import load_graph_dir, load_graph_files


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_graph(data_path: str, links_path: Optional[str] = None) -> GraphModel:
    """
    Load a GraphModel from a data directory or a pair of JSON files.

    Args:
        data_path (str): A directory holding idList.json and linkList.json
            (directly or under data/), or the node list file itself.
        links_path (Optional[str]): The link list file when `data_path` is a file.

    Raises:
        NodescopeError: If the data cannot be read or does not form a graph.
    """
    path = Path(data_path)
    if path.is_dir():
        return load_graph_dir(path)
    if links_path is None:
        raise click.UsageError("--links is required when DATA is a node list file")
    return load_graph_files(path, links_path)


def resolve_page_size(page_size: Optional[int]) -> int:
    """Explicit option first, then the project config."""
    if page_size is not None:
        return page_size
    return ExplorerConfig.load().page_size

