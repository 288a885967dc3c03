"""CLI entry point for treee: I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from treee import TreeeError, __version__
from treee.config import DEFAULT_MAX_DEPTH, TraversalConfig
from treee.formatter import RenderOptions, RenderStyle, render
from treee.walker import walk


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``treee`` command.
    """
    parser = argparse.ArgumentParser(
        prog="treee",
        description="A fast tree command with gitignore support and flexible filtering",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to traverse (default: current directory)",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-L",
        "--depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        dest="max_depth",
        help=f"Maximum depth to traverse (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="all_files",
        help="Show hidden files (starting with .)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Don't use colors",
    )
    parser.add_argument(
        "-d",
        "--directories-only",
        action="store_true",
        dest="dirs_only",
        help="Show directories only",
    )
    parser.add_argument(
        "-f",
        "--files-only",
        action="store_true",
        dest="files_only",
        help="Show only files (opposite of --directories-only)",
    )
    parser.add_argument(
        "-I",
        "--include",
        action="append",
        default=[],
        dest="include",
        help="Include paths matching this glob (can be specified multiple times)",
    )
    parser.add_argument(
        "-E",
        "--exclude",
        action="append",
        default=[],
        dest="exclude",
        help="Exclude paths matching this glob (can be specified multiple times)",
    )
    parser.add_argument(
        "-P",
        "--pattern",
        action="append",
        default=[],
        dest="name_patterns",
        help="File name glob to match (can be specified multiple times)",
    )
    parser.add_argument(
        "--no-git-ignore",
        action="store_true",
        dest="no_git_ignore",
        help="Disable gitignore rules",
    )
    parser.add_argument(
        "--full-path",
        action="store_true",
        dest="full_path",
        help="Print full paths instead of tree format",
    )
    parser.add_argument(
        "--dirsfirst",
        action="store_true",
        dest="dirs_first",
        help="List directories before files",
    )
    parser.add_argument(
        "--order",
        choices=["asc", "desc"],
        default="asc",
        help="Sort direction by name: asc (default) or desc",
    )
    parser.add_argument(
        "--charset",
        choices=["unicode", "ascii"],
        default="unicode",
        help="Character set for tree drawing (default: unicode)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    return parser


def _root_label(path: str) -> str:
    """Return the name printed above the tree for *path*.

    Args:
        path: PATH argument as given.

    Returns:
        str: Final path component, or the argument itself when it has
        none (``.``, ``/``).
    """
    return Path(path).name or path


def _build_config(args: argparse.Namespace) -> TraversalConfig:
    """Translate parsed CLI options into a validated traversal config.

    Args:
        args: Parsed CLI namespace.

    Returns:
        TraversalConfig: Immutable traversal options.

    Raises:
        ConfigError: On invalid depth, conflicting flags, or bad globs.
    """
    return TraversalConfig.build(
        max_depth=args.max_depth,
        show_hidden=args.all_files,
        directories_only=args.dirs_only,
        files_only=args.files_only,
        include=args.include,
        exclude=args.exclude,
        name_patterns=args.name_patterns,
        gitignore=not args.no_git_ignore,
        dirs_first=args.dirs_first,
        order=args.order,
    )


def _run_with_args(args: argparse.Namespace, color: bool = False) -> str:
    """Run the core walk/render pipeline for parsed arguments.

    Args:
        args: Parsed CLI namespace.
        color: Whether to emit ANSI colors.

    Returns:
        str: Rendered output.

    Raises:
        TreeeError: On any user-facing validation or root error.
    """
    config = _build_config(args)
    records = walk(Path(args.path), config)

    render_opts = RenderOptions(
        style=RenderStyle.FULL_PATH if args.full_path else RenderStyle.TREE,
        color=color and not args.no_color,
        charset=args.charset,
        root_label=None if args.full_path else _root_label(args.path),
    )
    return render(records, render_opts)


def run_treee(argv: list[str] | None = None, color: bool = False) -> str:
    """Run treee with provided CLI args and return formatted output.

    This function is intentionally side-effect free and is the primary
    test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.
        color: Whether to emit ANSI colors (still subject to ``--no-color``).

    Returns:
        str: Final rendered output.

    Raises:
        TreeeError: On any user-facing validation or I/O error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args, color=color)


def _stdout_supports_color() -> bool:
    try:
        return os.isatty(sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def main() -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once and writes output to stdout or ``-o`` file.
    Unreadable directories are reported as warnings on stderr and do not
    change the exit status. Exits with code 1 on user-facing errors.
    """
    logging.basicConfig(format="treee: %(levelname)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args()  # single parse

    color = not args.output_file and _stdout_supports_color()
    try:
        output = _run_with_args(args, color=color)
    except TreeeError as exc:
        sys.stderr.write(f"treee: {exc}\n")
        sys.exit(1)

    if args.output_file:
        try:
            Path(args.output_file).write_text(
                output + "\n", encoding="utf-8", newline=""
            )
        except OSError as exc:
            sys.stderr.write(f"treee: cannot write to '{args.output_file}': {exc}\n")
            sys.exit(1)
    elif output:
        sys.stdout.write(output + "\n")
