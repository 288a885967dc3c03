"""Output formatters for walker records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from treee.formatter.fullpath import format_full_path
from treee.formatter.tree import format_tree
from treee.walker import RenderRecord


class RenderStyle(Enum):
    TREE = "tree"
    FULL_PATH = "full-path"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options for :func:`render`.

    Attributes:
        style: Tree glyphs or flat full paths.
        color: Colorize names by entry kind.
        charset: Glyph set for tree style, ``unicode`` or ``ascii``.
        root_label: First line in tree style; ``None`` omits it. Ignored
            in full-path style.
    """

    style: RenderStyle = RenderStyle.TREE
    color: bool = False
    charset: Literal["unicode", "ascii"] = "unicode"
    root_label: str | None = None


def render(records: list[RenderRecord], options: RenderOptions | None = None) -> str:
    """Render records as text.

    Both styles list the same records in the same order; only the
    per-line formatting differs.

    Args:
        records: Walker output.
        options: Rendering options.

    Returns:
        str: Output lines joined by ``\\n`` without a trailing newline.
    """
    opts = options or RenderOptions()
    if opts.style is RenderStyle.FULL_PATH:
        lines = format_full_path(records, opts.color)
    else:
        lines = format_tree(records, opts.color, opts.charset, opts.root_label)
    return "\n".join(lines)
