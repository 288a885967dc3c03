"""Gitignore integration: layered .gitignore rules via pathspec."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)


def _read_lines(path: Path) -> list[str] | None:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError:
        logger.debug("Cannot read ignore file: %s", path)
        return None


def load_gitignore_spec(root: Path) -> GitIgnoreSpec | None:
    """Load .gitignore patterns from *root* directory.

    Args:
        root: Directory containing the ``.gitignore`` file.

    Returns:
        A compiled spec when a ``.gitignore`` exists and is readable,
        otherwise ``None``.
    """
    lines = _read_lines(root / ".gitignore")
    if lines is None:
        return None
    return GitIgnoreSpec.from_lines(lines)


@dataclass(frozen=True, slots=True)
class IgnoreRules:
    """Immutable chain of gitignore rule sets, one layer per directory.

    Each layer applies to the subtree rooted at ``base`` (a root-relative
    POSIX path, ``""`` for the root). Deeper layers extend their parent
    and take precedence over it.

    Attributes:
        enabled: When ``False`` nothing is ever ignored.
        base: Root-relative directory the layer's patterns are anchored to.
        spec: Compiled patterns of this layer, or ``None`` for an empty layer.
        parent: Enclosing layer.
    """

    enabled: bool = True
    base: str = ""
    spec: GitIgnoreSpec | None = None
    parent: IgnoreRules | None = None

    @classmethod
    def disabled(cls) -> IgnoreRules:
        return cls(enabled=False)

    @classmethod
    def for_root(cls, root: Path, enabled: bool = True) -> IgnoreRules:
        """Build the root layer from ``.gitignore`` and ``.git/info/exclude``.

        Args:
            root: Traversal root directory.
            enabled: Whether gitignore support is on.

        Returns:
            IgnoreRules: Root layer (possibly empty).
        """
        if not enabled:
            return cls.disabled()
        lines: list[str] = []
        # .gitignore is read last so its rules override info/exclude
        for source in (root / ".git" / "info" / "exclude", root / ".gitignore"):
            if source.is_file():
                lines.extend(_read_lines(source) or [])
        spec = GitIgnoreSpec.from_lines(lines) if lines else None
        return cls(enabled=True, base="", spec=spec)

    def extend(self, directory: Path, rel_dir: str) -> IgnoreRules:
        """Return the rule chain in effect inside *directory*.

        Args:
            directory: Absolute directory about to be listed.
            rel_dir: Its root-relative POSIX path.

        Returns:
            IgnoreRules: A new chain with the directory's ``.gitignore``
            layered on top, or ``self`` when it has none.
        """
        if not self.enabled:
            return self
        spec = load_gitignore_spec(directory)
        if spec is None:
            return self
        return IgnoreRules(enabled=True, base=rel_dir, spec=spec, parent=self)

    def is_ignored(self, rel_path: str, is_dir: bool) -> bool:
        """Return whether *rel_path* is ignored by the chain.

        The deepest layer with a matching rule decides; a ``!`` rule in
        that layer re-includes the path.

        Args:
            rel_path: Root-relative POSIX path of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            bool: ``True`` when the path is ignored.
        """
        if not self.enabled:
            return False
        layer: IgnoreRules | None = self
        while layer is not None:
            if layer.spec is not None:
                local = rel_path[len(layer.base) + 1 :] if layer.base else rel_path
                if is_dir:
                    local += "/"
                verdict = layer.spec.check_file(local).include
                if verdict is not None:
                    return verdict
            layer = layer.parent
        return False
