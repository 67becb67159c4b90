"""
Sidebar navigation for the documentation site.

Walks the Markdown content root, reads each page's YAML frontmatter and
groups pages into sections:

- The home page (`/index`) comes first, as a plain link.
- Every other page lands in the section named by its `section` key, or in
  "Uncategorized". Sections keep the order in which they were first seen.
- Inside a section, dated pages come first (newest first), then undated
  pages by title.
"""

import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field

from ..config import CONTENT_ROOT, HOME_PAGE_PATH, UNCATEGORIZED_SECTION, is_ignored_directory

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)

PathLike = Union[str, Path]


class PageInfo(BaseModel):
    """Metadata of one Markdown page."""
    title: str
    path: str
    section: Optional[str] = None
    date: Optional[datetime] = None


class NavPage(BaseModel):
    name: str
    path: str


class NavSection(BaseModel):
    name: str
    pages: List[NavPage] = Field(default_factory=list)


NavEntry = Union[NavPage, NavSection]


def parse_frontmatter(content: str) -> Dict[str, Any]:
    """
    Extract the YAML frontmatter mapping from a Markdown document.

    Documents without frontmatter, or with frontmatter that is not a YAML
    mapping, yield an empty dict.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring malformed frontmatter: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def walk_markdown_files(root: PathLike) -> List[Path]:
    """All `.md` files under `root`, depth first, in name order."""
    files: List[Path] = []
    for entry in sorted(Path(root).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if not is_ignored_directory(entry.name):
                files.extend(walk_markdown_files(entry))
        elif entry.is_file() and entry.suffix == ".md":
            files.append(entry)
    return files


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _coerce_date(value: Any) -> Optional[datetime]:
    """Frontmatter date as a naive UTC datetime, so offsets compare correctly."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return _to_naive_utc(datetime.fromisoformat(str(value)))
    except ValueError:
        logger.warning(f"Ignoring unparseable date: {value!r}")
        return None


def _read_frontmatter(filepath: Path) -> Dict[str, Any]:
    try:
        content = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read {filepath}, treating it as untitled: {e}")
        return {}
    return parse_frontmatter(content)


def read_page_info(filepath: PathLike, root: PathLike = CONTENT_ROOT) -> PageInfo:
    """
    Read title, site path, section and date of a Markdown page.

    The site path is the file path relative to `root`, with a leading slash
    and without the `.md` suffix.
    """
    filepath = Path(filepath)
    meta = _read_frontmatter(filepath)

    relative = filepath.relative_to(root).with_suffix("")
    section = meta.get("section")
    return PageInfo(
        title=str(meta.get("title") or filepath.stem),
        path="/" + relative.as_posix(),
        section=str(section) if section else None,
        date=_coerce_date(meta.get("date")),
    )


def read_title(filepath: PathLike) -> str:
    """Frontmatter title, or the file name without extension."""
    filepath = Path(filepath)
    meta = _read_frontmatter(filepath)
    return str(meta.get("title") or filepath.stem)


def _order_section(pages: List[PageInfo]) -> List[PageInfo]:
    dated = sorted((p for p in pages if p.date is not None), key=lambda p: p.date, reverse=True)
    undated = sorted((p for p in pages if p.date is None), key=lambda p: p.title.casefold())
    return dated + undated


def group_pages(pages: List[PageInfo]) -> List[NavEntry]:
    """Arrange page infos into the final navigation structure."""
    home = next((p for p in pages if p.path == HOME_PAGE_PATH), None)

    grouped: Dict[str, List[PageInfo]] = {}
    for page in pages:
        if page.path == HOME_PAGE_PATH:
            continue
        grouped.setdefault(page.section or UNCATEGORIZED_SECTION, []).append(page)

    entries: List[NavEntry] = []
    if home is not None:
        entries.append(NavPage(name=home.title, path=home.path))

    for name, section_pages in grouped.items():
        entries.append(NavSection(
            name=name,
            pages=[NavPage(name=p.title, path=p.path) for p in _order_section(section_pages)],
        ))
    return entries


def generate_pages(root: PathLike = CONTENT_ROOT) -> List[NavEntry]:
    """Build the sidebar navigation for every Markdown page under `root`."""
    root = Path(root)
    files = walk_markdown_files(root)
    logger.debug(f"Found {len(files)} Markdown files under {root}")
    return group_pages([read_page_info(f, root) for f in files])


def to_config(entries: List[NavEntry]) -> List[Dict[str, Any]]:
    """Plain dicts in the shape the site generator's `pages` option expects."""
    return [entry.model_dump() for entry in entries]
