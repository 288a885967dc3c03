"""treee: directory tree viewer with gitignore support and glob filtering."""

__version__ = "0.1.0"


class TreeeError(Exception):
    """User-facing CLI error.

    Raised for invalid arguments, missing directories, and other
    input errors. The message is printed to stderr and the process
    exits with code 1.
    """


class ConfigError(TreeeError):
    """Invalid option combination, depth, or glob pattern."""


class RootNotFoundError(TreeeError):
    """The root path does not exist."""


class RootNotADirectoryError(TreeeError):
    """The root path exists but is not a directory."""


class EntryReadError(TreeeError):
    """A directory below the root could not be listed.

    Recoverable: the walker logs it, attaches it to the entry, and
    continues with the remaining siblings.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason
