"""Flat full-path output formatter."""

from __future__ import annotations

from treee.formatter.color import colorize
from treee.walker import RenderRecord


def format_full_path(records: list[RenderRecord], color: bool = False) -> list[str]:
    """Render one root-relative path per record, in traversal order."""
    return [colorize(record.path, record.kind, color) for record in records]
