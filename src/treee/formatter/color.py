"""ANSI coloring by entry kind."""

from __future__ import annotations

from treee.walker import EntryKind

RESET = "\033[0m"

KIND_STYLES: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "\033[1;34m",
    EntryKind.OTHER: "\033[36m",
}


def colorize(text: str, kind: EntryKind, enabled: bool) -> str:
    """Wrap *text* in the escape sequence for *kind*.

    Files and disabled coloring return *text* unchanged.
    """
    style = KIND_STYLES.get(kind)
    if not enabled or style is None:
        return text
    return f"{style}{text}{RESET}"
