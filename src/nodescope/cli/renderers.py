"""
JSON output envelope for tool integrations.

Every `--json` response has the shape
`{"meta": {...}, "data": ...}` on success or
`{"meta": {...}, "error": {...}}` on failure.
"""

import json
from typing import Any

import click
from pydantic import BaseModel

from .. import __version__


class JsonRenderer:
    """Renders command results in the standard envelope."""

    def __init__(self, command: str):
        self.command = command

    def _meta(self, status: str) -> dict:
        return {"command": self.command, "status": status, "version": __version__}

    def render_success(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True)
        click.echo(json.dumps({"meta": self._meta("success"), "data": data}, default=str))

    def render_error(self, error: Exception) -> None:
        click.echo(json.dumps({
            "meta": self._meta("error"),
            "error": {"type": type(error).__name__, "message": str(error)},
        }))
