"""Per-entry filtering: the show / hide / prune decision chain."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from treee.config import TraversalConfig
from treee.gitignore import IgnoreRules

if TYPE_CHECKING:
    from treee.walker import Entry

HIDDEN_PREFIX = "."


class FilterDecision(Enum):
    """Outcome of evaluating one entry.

    ``SHOW`` displays the entry and descends into it, ``HIDE`` omits it
    from output but still descends, ``PRUNE`` skips the entry and its
    whole subtree.
    """

    SHOW = "show"
    HIDE = "hide"
    PRUNE = "prune"


class FilterChain:
    """Combine every configured filter into one decision per entry.

    Checks run in a fixed order. Pruning checks (depth, hidden,
    gitignore, exclude) come first so an excluded subtree is never
    listed; display checks (directories/files only, include and name
    patterns) only ever hide.
    """

    def __init__(self, config: TraversalConfig) -> None:
        self.config = config

    def decide(self, entry: Entry, ignore: IgnoreRules) -> FilterDecision:
        """Return the decision for *entry*.

        Args:
            entry: Entry being evaluated; ``entry.depth`` is 1 for the
                root's children.
            ignore: Gitignore chain in effect for the entry's parent.

        Returns:
            FilterDecision: ``SHOW``, ``HIDE`` or ``PRUNE``.
        """
        cfg = self.config
        rel = entry.rel_path

        if entry.depth > cfg.max_depth:
            return FilterDecision.PRUNE
        if not cfg.show_hidden and entry.name.startswith(HIDDEN_PREFIX):
            return FilterDecision.PRUNE
        if cfg.gitignore and ignore.is_ignored(rel, entry.is_dir):
            return FilterDecision.PRUNE
        if any(p.matches_path(rel, entry.name) for p in cfg.exclude):
            return FilterDecision.PRUNE

        if cfg.has_match_filters:
            matched = any(p.matches_path(rel, entry.name) for p in cfg.include) or any(
                p.matches(entry.name) for p in cfg.name_patterns
            )
            if entry.is_dir:
                # a matching directory overrides files-only
                return FilterDecision.SHOW if matched else FilterDecision.HIDE
            if not matched or cfg.directories_only:
                return FilterDecision.HIDE
            return FilterDecision.SHOW

        if cfg.directories_only and not entry.is_dir:
            return FilterDecision.HIDE
        if cfg.files_only and entry.is_dir:
            return FilterDecision.HIDE
        return FilterDecision.SHOW
