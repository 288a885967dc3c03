"""Traversal configuration snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from treee import ConfigError
from treee.pattern import PatternMatcher, compile_patterns

DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Options controlling which entries the walker visits and shows.

    Constructed once before traversal and shared read-only by every
    recursion frame. Use :meth:`build` to get validation.

    Attributes:
        max_depth: Deepest entry depth shown (root's children are depth 1).
        show_hidden: Whether dot-entries are visited.
        directories_only: Hide files.
        files_only: Hide directories (their files are still visited).
        include: Path-or-name globs an entry must match to be shown.
        exclude: Path-or-name globs that prune an entry.
        name_patterns: Name-only globs, alternative to ``include``.
        gitignore: Whether ``.gitignore`` rules prune entries.
        dirs_first: List directories before files among siblings.
        order: Sibling sort direction by name.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    show_hidden: bool = False
    directories_only: bool = False
    files_only: bool = False
    include: tuple[PatternMatcher, ...] = ()
    exclude: tuple[PatternMatcher, ...] = ()
    name_patterns: tuple[PatternMatcher, ...] = ()
    gitignore: bool = True
    dirs_first: bool = False
    order: Literal["asc", "desc"] = "asc"

    @property
    def has_match_filters(self) -> bool:
        return bool(self.include or self.name_patterns)

    @classmethod
    def build(
        cls,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        show_hidden: bool = False,
        directories_only: bool = False,
        files_only: bool = False,
        include: list[str] | None = None,
        exclude: list[str] | None = None,
        name_patterns: list[str] | None = None,
        gitignore: bool = True,
        dirs_first: bool = False,
        order: Literal["asc", "desc"] = "asc",
    ) -> TraversalConfig:
        """Validate raw option values and compile their patterns.

        Args:
            max_depth: Maximum display depth, must be ``>= 0``.
            show_hidden: Include hidden entries.
            directories_only: List directories only.
            files_only: List files only.
            include: Include globs.
            exclude: Exclude globs.
            name_patterns: Filename-only globs.
            gitignore: Honor ``.gitignore`` files.
            dirs_first: Directories before files.
            order: ``asc`` or ``desc``.

        Returns:
            TraversalConfig: Immutable, validated configuration.

        Raises:
            ConfigError: On negative depth, conflicting flags, or a
                malformed glob.
        """
        if max_depth < 0:
            raise ConfigError("Invalid depth, must be 0 or greater.")
        if directories_only and files_only:
            raise ConfigError(
                "--directories-only (-d) is incompatible with --files-only (-f)"
            )
        if order not in ("asc", "desc"):
            raise ConfigError(f"Invalid order '{order}', expected 'asc' or 'desc'.")
        return cls(
            max_depth=max_depth,
            show_hidden=show_hidden,
            directories_only=directories_only,
            files_only=files_only,
            include=compile_patterns(include or []),
            exclude=compile_patterns(exclude or []),
            name_patterns=compile_patterns(name_patterns or []),
            gitignore=gitignore,
            dirs_first=dirs_first,
            order=order,
        )
