"""Directory walker: depth-first traversal with show / hide / prune filtering."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from treee import EntryReadError, RootNotADirectoryError, RootNotFoundError, TreeeError
from treee.config import TraversalConfig
from treee.filter import FilterChain, FilterDecision
from treee.gitignore import IgnoreRules

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem entry discovered during traversal.

    Attributes:
        path: Filesystem path of the entry (root joined with ``rel_path``).
        rel_path: Root-relative POSIX path.
        name: Basename of the entry.
        kind: Directory, file, or other (symlinks and special files).
        depth: Depth from the root; the root's children are depth 1.
    """

    path: Path
    rel_path: str
    name: str
    kind: EntryKind
    depth: int

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class RenderRecord:
    """One displayed line, in traversal order.

    Attributes:
        path: Root-relative POSIX path.
        name: Label relative to the enclosing displayed record, usually
            the basename.
        kind: Entry kind, used for coloring.
        last_flags: One flag per tree level from the top down; each is
            ``True`` when the ancestor at that level (the record itself
            for the final flag) is the last visible sibling.
        error: Read failure reason when the directory could not be listed;
            tree output marks such directories.
    """

    path: str
    name: str
    kind: EntryKind
    last_flags: tuple[bool, ...]
    error: str | None = None

    @property
    def depth(self) -> int:
        return len(self.last_flags)

    @property
    def is_last(self) -> bool:
        return self.last_flags[-1]


@dataclass(slots=True)
class _Node:
    entry: Entry
    children: list[_Node] = field(default_factory=list)
    error: str | None = None


def _kind_of(dir_entry: os.DirEntry[str]) -> EntryKind:
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def _list_dir(directory: Path, rel_dir: str, depth: int) -> list[Entry]:
    """List *directory* into unsorted entries.

    Args:
        directory: Directory to list.
        rel_dir: Its root-relative POSIX path (``""`` for the root).
        depth: Depth assigned to the children.

    Returns:
        list[Entry]: Children in filesystem order.

    Raises:
        EntryReadError: If the directory cannot be opened or read.
    """
    try:
        with os.scandir(directory) as it:
            raw_entries = list(it)
    except OSError as exc:
        raise EntryReadError(rel_dir or ".", exc.strerror or str(exc)) from exc

    entries: list[Entry] = []
    for dir_entry in raw_entries:
        try:
            kind = _kind_of(dir_entry)
        except OSError:
            logger.debug("Cannot stat: %s", dir_entry.path)
            continue
        name = dir_entry.name
        entries.append(
            Entry(
                path=Path(dir_entry.path),
                rel_path=f"{rel_dir}/{name}" if rel_dir else name,
                name=name,
                kind=kind,
                depth=depth,
            )
        )
    return entries


def _sort_entries(entries: list[Entry], config: TraversalConfig) -> list[Entry]:
    ordered = sorted(entries, key=lambda e: e.name, reverse=config.order == "desc")
    if config.dirs_first:
        ordered.sort(key=lambda e: not e.is_dir)
    return ordered


class _Walker:
    def __init__(self, config: TraversalConfig) -> None:
        self.config = config
        self.chain = FilterChain(config)

    def visible_children(
        self, directory: Path, rel_dir: str, depth: int, ignore: IgnoreRules
    ) -> list[_Node]:
        """Return the visible subtree below *directory*, bottom-up.

        Hidden directories are kept only when something below them is
        visible. Under files-only their visible descendants are spliced
        into this level instead.

        Raises:
            EntryReadError: If *directory* itself cannot be listed.
        """
        entries = _sort_entries(_list_dir(directory, rel_dir, depth + 1), self.config)
        nodes: list[_Node] = []
        for entry in entries:
            decision = self.chain.decide(entry, ignore)
            if decision is FilterDecision.PRUNE:
                continue

            children: list[_Node] = []
            error: str | None = None
            if entry.is_dir and entry.depth < self.config.max_depth:
                try:
                    children = self.visible_children(
                        entry.path,
                        entry.rel_path,
                        entry.depth,
                        ignore.extend(entry.path, entry.rel_path),
                    )
                except EntryReadError as exc:
                    logger.warning("%s", exc)
                    error = exc.reason

            if decision is FilterDecision.SHOW:
                nodes.append(_Node(entry, children, error))
            elif children:
                if self.config.files_only:
                    nodes.extend(children)
                else:
                    nodes.append(_Node(entry, children, error))
        return nodes


def _flatten(nodes: list[_Node]) -> list[RenderRecord]:
    """Turn the visible tree into records in depth-first order."""
    records: list[RenderRecord] = []

    # Stack items: (node, enclosing record path, last flags)
    # Push in reverse so the first sibling is popped first.
    stack: list[tuple[_Node, str, tuple[bool, ...]]] = []
    for i in range(len(nodes) - 1, -1, -1):
        stack.append((nodes[i], "", (i == len(nodes) - 1,)))

    while stack:
        node, parent_rel, flags = stack.pop()
        entry = node.entry
        label = entry.rel_path[len(parent_rel) + 1 :] if parent_rel else entry.rel_path
        records.append(
            RenderRecord(
                path=entry.rel_path,
                name=label,
                kind=entry.kind,
                last_flags=flags,
                error=node.error,
            )
        )
        kids = node.children
        for j in range(len(kids) - 1, -1, -1):
            stack.append((kids[j], entry.rel_path, flags + (j == len(kids) - 1,)))

    return records


def walk(root: Path, config: TraversalConfig | None = None) -> list[RenderRecord]:
    """Walk *root* and return the visible entries as render records.

    Args:
        root: Root directory.
        config: Traversal options. Defaults to ``TraversalConfig()``.

    Returns:
        list[RenderRecord]: Records in deterministic depth-first order.

    Raises:
        RootNotFoundError: If *root* does not exist.
        RootNotADirectoryError: If *root* is not a directory.
        TreeeError: If *root* cannot be listed.
    """
    cfg = config or TraversalConfig()
    root = Path(root)
    if not root.exists():
        raise RootNotFoundError(f"'{root}' does not exist")
    if not root.is_dir():
        raise RootNotADirectoryError(f"'{root}' is not a directory")
    if cfg.max_depth < 1:
        return []

    ignore = IgnoreRules.for_root(root, enabled=cfg.gitignore)
    try:
        nodes = _Walker(cfg).visible_children(root, "", 0, ignore)
    except EntryReadError as exc:
        raise TreeeError(str(exc)) from exc
    return _flatten(nodes)
