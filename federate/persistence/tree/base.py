"""Key-value tree interface.

Identity data is laid out as a tree of slash-separated paths, for example
``/socialIdentities/twitter/12345``. Values are JSON-serializable and are
stored at exact paths; a path holds either a value or nothing.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

# Characters that may not appear inside a single path segment
FORBIDDEN_KEY_CHARS = frozenset(".#$[]/")

MAX_KEY_BYTES = 768

TreeValue = Any


def validate_key(key: str) -> str:
    """Validate a single path segment.

    Args:
        key: Path segment

    Returns:
        The key unchanged

    Raises:
        ValueError: If the key is empty, too long, or contains a forbidden
            or control character
    """
    if not key:
        raise ValueError("Path segment must not be empty")
    if len(key.encode("utf-8")) > MAX_KEY_BYTES:
        raise ValueError(f"Path segment longer than {MAX_KEY_BYTES} bytes")
    for char in key:
        if char in FORBIDDEN_KEY_CHARS or ord(char) < 32 or ord(char) == 127:
            raise ValueError(f"Path segment contains forbidden character: {char!r}")
    return key


def tree_path(*keys: str) -> str:
    """Build an absolute path from validated segments.

    >>> tree_path("socialIdentities", "google", "42")
    '/socialIdentities/google/42'
    """
    if not keys:
        raise ValueError("Path must have at least one segment")
    return "/" + "/".join(validate_key(key) for key in keys)


def normalize_path(path: str) -> str:
    """Validate an absolute path and strip any trailing slash.

    Raises:
        ValueError: If the path is not absolute or has an invalid segment
    """
    if not path.startswith("/"):
        raise ValueError(f"Path must be absolute: {path!r}")
    return tree_path(*path.strip("/").split("/"))


def last_key(path: str) -> str:
    """Return the final segment of a normalized path."""
    return path.rsplit("/", 1)[1]


class KeyValueTree(ABC):
    """Hierarchical key-value store with multi-path atomic updates."""

    @abstractmethod
    async def get(self, path: str) -> Optional[TreeValue]:
        """Read the value stored at a path.

        Args:
            path: Absolute path

        Returns:
            The value, or None if nothing is stored there
        """
        pass

    @abstractmethod
    async def children(self, path: str) -> dict[str, TreeValue]:
        """Read the direct children of a path.

        Args:
            path: Absolute path of the parent

        Returns:
            Child key to value, ordered by key
        """
        pass

    @abstractmethod
    async def update(self, updates: dict[str, Optional[TreeValue]]) -> None:
        """Write several paths in one transaction.

        Writing a path replaces its value and drops everything below it. A
        None value deletes the path and everything below it.

        Args:
            updates: Absolute path to new value (None deletes)
        """
        pass

    @abstractmethod
    async def pop(self, path: str) -> Optional[TreeValue]:
        """Atomically read and delete the value at a path.

        Of several concurrent callers, at most one receives the value.

        Args:
            path: Absolute path

        Returns:
            The removed value, or None if nothing was stored there
        """
        pass
