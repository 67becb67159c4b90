"""
Init Command - Write a project configuration file.

Creates `.nodescope/config.yaml` with the default page size and content root.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_PATH, DEFAULT_PAGE_SIZE, write_default_config

console = Console()


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--page-size", type=click.IntRange(min=1), default=DEFAULT_PAGE_SIZE,
              help="Node list page size")
def init(force: bool, page_size: int):
    """
    Initialize nodescope in the current directory.
    """
    console.print(Panel.fit("[bold blue]nodescope init[/bold blue]", border_style="blue"))

    config_file = Path.cwd() / CONFIG_PATH
    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    write_default_config(config_file, page_size=page_size)
    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
