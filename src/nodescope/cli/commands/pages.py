"""
Pages Command - Generate the documentation site navigation.
"""

import json
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...config import ExplorerConfig
from ...site.navigation import NavSection, generate_pages, to_config
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_success

console = Console()


@click.command()
@click.argument("root", required=False, type=click.Path(file_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False),
              help="Write the navigation to a .json or .yaml file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def pages(root: Optional[str], output: Optional[str], as_json: bool):
    """
    Build sidebar navigation from the Markdown pages under ROOT.

    ROOT defaults to the configured content root (src).
    """
    root_path = Path(root or ExplorerConfig.load().content_root)
    if not root_path.is_dir():
        if as_json:
            JsonRenderer("pages").render_error(FileNotFoundError(f"No such directory: {root_path}"))
        else:
            echo_error(f"Content root not found: {root_path}")
        raise SystemExit(1)

    entries = generate_pages(root_path)
    data = to_config(entries)

    if as_json:
        JsonRenderer("pages").render_success(data)
        return

    if output:
        output_path = Path(output)
        if output_path.suffix in (".yaml", ".yml"):
            output_path.write_text(yaml.dump(data, sort_keys=False, allow_unicode=True))
        else:
            output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False))
        echo_success(f"Generated: {output_path}")
        return

    tree = Tree(f"[bold]{root_path}[/bold]")
    for entry in entries:
        if isinstance(entry, NavSection):
            branch = tree.add(f"[bold cyan]{escape(entry.name)}[/bold cyan]")
            for page in entry.pages:
                branch.add(f"{escape(page.name)} [dim]{escape(page.path)}[/dim]")
        else:
            tree.add(f"{escape(entry.name)} [dim]{escape(entry.path)}[/dim]")
    console.print(tree)
