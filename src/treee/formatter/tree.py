"""Box-drawing tree output formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from treee.formatter.color import colorize
from treee.walker import EntryKind, RenderRecord


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Box-drawing character set for tree rendering."""

    branch: str  # ├──
    last_branch: str  # └──
    vertical: str  # │
    space: str  # (indent)


UNICODE_GLYPHS = Glyphs(
    branch="├── ",
    last_branch="└── ",
    vertical="│   ",
    space="    ",
)

ASCII_GLYPHS = Glyphs(
    branch="|-- ",
    last_branch="\\-- ",
    vertical="|   ",
    space="    ",
)

ERROR_MARK = "  [error opening dir]"


def _prefix(record: RenderRecord, glyphs: Glyphs) -> str:
    """Build indentation and connector for one record.

    Args:
        record: Record to prefix.
        glyphs: Character set.

    Returns:
        str: One ``vertical``/``space`` segment per ancestor level,
        followed by the record's own connector.
    """
    parts = [glyphs.space if last else glyphs.vertical for last in record.last_flags[:-1]]
    parts.append(glyphs.last_branch if record.is_last else glyphs.branch)
    return "".join(parts)


def format_tree(
    records: list[RenderRecord],
    color: bool = False,
    charset: Literal["unicode", "ascii"] = "unicode",
    root_label: str | None = None,
) -> list[str]:
    """Render records as tree lines.

    Directories that could not be listed are suffixed with
    ``ERROR_MARK``.

    Args:
        records: Walker output.
        color: Whether to colorize names by kind.
        charset: ``unicode`` or ``ascii`` glyphs.
        root_label: Optional first line naming the root directory.

    Returns:
        list[str]: Output lines without trailing newlines.
    """
    glyphs = ASCII_GLYPHS if charset == "ascii" else UNICODE_GLYPHS
    lines: list[str] = []
    if root_label is not None:
        lines.append(colorize(root_label, EntryKind.DIRECTORY, color))
    for record in records:
        line = _prefix(record, glyphs) + colorize(record.name, record.kind, color)
        if record.error is not None:
            line += ERROR_MARK
        lines.append(line)
    return lines
