"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import explore
from . import initialize
from . import neighbors
from . import nodes
from . import pages
from . import sankey

__all__ = [
    "explore",
    "initialize",
    "neighbors",
    "nodes",
    "pages",
    "sankey",
]
