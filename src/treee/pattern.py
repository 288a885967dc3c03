"""Glob pattern compilation and matching."""

from __future__ import annotations

import re

from treee import ConfigError


def _check_brackets(pattern: str) -> None:
    """Raise ``ConfigError`` when a ``[`` class is never closed.

    Args:
        pattern: Raw glob pattern.

    Raises:
        ConfigError: If a character class is unterminated or spans a ``/``.
    """
    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # a leading ']' is a literal member of the class
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] not in "]/":
                j += 1
            if j >= n or pattern[j] == "/":
                raise ConfigError(
                    f"invalid glob pattern '{pattern}': unterminated character class"
                )
            i = j
        i += 1


def _check_recursive_wildcards(pattern: str) -> None:
    """Raise ``ConfigError`` for misplaced ``**`` wildcards.

    ``**`` is only valid as a whole path segment.

    Args:
        pattern: Raw glob pattern.

    Raises:
        ConfigError: If ``***`` appears or ``**`` shares a segment with
            other characters.
    """
    if "***" in pattern:
        raise ConfigError(f"invalid glob pattern '{pattern}': wildcards are '*' or '**'")
    for segment in pattern.split("/"):
        if "**" in segment and segment != "**":
            raise ConfigError(
                f"invalid glob pattern '{pattern}': "
                "recursive wildcards must form a single path component"
            )


def _translate_segment(segment: str) -> str:
    """Translate one path segment without ``**`` into a regex fragment."""
    out: list[str] = []
    i = 0
    n = len(segment)
    while i < n:
        c = segment[i]
        if c == "*":
            out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            j = i + 1
            negate = j < n and segment[j] == "!"
            if negate:
                j += 1
            members: list[str] = []
            # a leading ']' is a literal member of the class
            if j < n and segment[j] == "]":
                members.append("\\]")
                j += 1
            while segment[j] != "]":
                ch = segment[j]
                members.append(ch if ch == "-" else re.escape(ch))
                j += 1
            out.append(("[^" if negate else "[") + "".join(members) + "]")
            i = j
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


def _translate(pattern: str) -> str:
    """Translate a validated glob into a regex for ``fullmatch``.

    A whole-segment ``**`` matches zero or more directories: ``**/x``
    matches ``x`` and ``a/b/x``, ``a/**/x`` matches ``a/x``, and a
    trailing ``a/**`` matches everything below ``a``.

    Args:
        pattern: Glob already checked by the validators above.

    Returns:
        str: Regex source.
    """
    segments = pattern.split("/")
    last = len(segments) - 1
    out: list[str] = []
    for i, segment in enumerate(segments):
        if segment == "**":
            out.append(".*" if i == last else "(?:.*/)?")
            continue
        out.append(_translate_segment(segment))
        if i < last:
            out.append("/")
    return "".join(out)


class PatternMatcher:
    """A glob pattern compiled once and evaluated repeatedly.

    ``*`` and ``?`` match any character including ``/``, so ``*.rs``
    matches both ``lib.rs`` and ``src/util/lib.rs``.
    """

    def __init__(self, pattern: str) -> None:
        """Compile *pattern*.

        Args:
            pattern: Glob pattern.

        Raises:
            ConfigError: If the pattern is empty or malformed.
        """
        if not pattern:
            raise ConfigError("invalid glob pattern '': pattern is empty")
        _check_brackets(pattern)
        _check_recursive_wildcards(pattern)
        self.pattern = pattern
        self._regex = re.compile(_translate(pattern), re.DOTALL)

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern!r})"

    def matches(self, candidate: str) -> bool:
        """Return whether *candidate* matches the whole pattern."""
        return self._regex.fullmatch(candidate) is not None

    def matches_path(self, rel_path: str, name: str) -> bool:
        """Match against a root-relative path or, failing that, the bare name.

        Args:
            rel_path: Root-relative POSIX path of the entry.
            name: Basename of the entry.

        Returns:
            bool: ``True`` when either form matches.
        """
        return self.matches(rel_path) or self.matches(name)


def compile_patterns(patterns: list[str] | tuple[str, ...]) -> tuple[PatternMatcher, ...]:
    """Compile every pattern, failing on the first malformed one.

    Args:
        patterns: Raw glob patterns in command-line order.

    Returns:
        tuple[PatternMatcher, ...]: Compiled matchers in the same order.

    Raises:
        ConfigError: If any pattern is malformed.
    """
    return tuple(PatternMatcher(p) for p in patterns)
