"""
Global configuration and defaults.

Defaults live here as module constants. Per-project overrides are read from
`.nodescope/config.yaml`, and the NODESCOPE_PAGE_SIZE environment variable
wins over both.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Set

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# --- Node list ---
DEFAULT_PAGE_SIZE = 10

# --- Data files ---
# File names used by the force graph page and the sankey page
NODES_FILE = "idList.json"
LINKS_FILE = "linkList.json"
SANKEY_FILE = "data.json"
DATA_SUBDIR = "data"

# --- Site content ---
CONTENT_ROOT = "src"
HOME_PAGE_PATH = "/index"
UNCATEGORIZED_SECTION = "Uncategorized"

CONFIG_PATH = Path(".nodescope/config.yaml")
PAGE_SIZE_ENV = "NODESCOPE_PAGE_SIZE"

# Directories to skip when walking the content root
IGNORE_DIRECTORIES: Set[str] = {
    ".git",
    ".nodescope",
    ".observablehq",
    "__pycache__",
    "node_modules",
    "dist",
    ".venv",
    "venv",
}


def is_ignored_directory(dir_name: str) -> bool:
    """Check if directory name is in the blocklist."""
    return dir_name in IGNORE_DIRECTORIES


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0",
    "explorer": {"page_size": DEFAULT_PAGE_SIZE},
    "site": {"content_root": CONTENT_ROOT},
}


class ExplorerConfig(BaseModel):
    """Resolved settings for the explorer and the site navigation."""
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    content_root: str = CONTENT_ROOT

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "ExplorerConfig":
        """
        Read settings from YAML, falling back to defaults.

        A missing or unreadable file yields the defaults; an invalid value is
        logged and replaced by its default.
        """
        path = config_path or CONFIG_PATH
        data: Dict[str, Any] = {}

        if path.exists():
            try:
                with open(path, "r") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to read config {path}: {e}")

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {path}: expected a mapping")
            data = {}

        values: Dict[str, Any] = {}
        explorer = data.get("explorer") or {}
        site = data.get("site") or {}
        if "page_size" in explorer:
            values["page_size"] = explorer["page_size"]
        if "content_root" in site:
            values["content_root"] = site["content_root"]

        env_page_size = os.getenv(PAGE_SIZE_ENV)
        if env_page_size:
            try:
                values["page_size"] = cls(page_size=env_page_size).page_size
            except ValidationError:
                logger.warning(f"Ignoring invalid {PAGE_SIZE_ENV}={env_page_size!r}")

        try:
            return cls(**values)
        except ValidationError as e:
            # Drop only the offending fields and keep the rest
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            logger.warning(f"Invalid configuration in {path}, using defaults for {sorted(invalid)}: {e}")
            return cls(**{key: value for key, value in values.items() if key not in invalid})


def write_default_config(path: Path, page_size: int = DEFAULT_PAGE_SIZE) -> Path:
    """Write a fresh config file and return its path."""
    config = {key: dict(value) if isinstance(value, dict) else value
              for key, value in DEFAULT_CONFIG.items()}
    config["explorer"]["page_size"] = page_size
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)
    return path
