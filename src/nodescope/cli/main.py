"""
nodescope CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import explore, initialize, neighbors, nodes, pages, sankey
from .utils import configure_logging


@click.group()
@click.version_option(package_name="nodescope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """nodescope: Explore graph pages from the command line.

    \b
    Quick Start:
      nodescope nodes ./data --filter vnet
      nodescope neighbors ./data vnet-hub
      nodescope explore ./data
      nodescope pages src
    """
    configure_logging(verbose)


# Register commands
main.add_command(nodes.nodes)
main.add_command(neighbors.neighbors)
main.add_command(explore.explore)
main.add_command(sankey.sankey)
main.add_command(pages.pages)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
