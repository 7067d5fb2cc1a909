"""In-memory key-value tree for testing and local development."""

import asyncio
import copy
from typing import Optional

from federate.persistence.tree.base import (
    KeyValueTree,
    TreeValue,
    last_key,
    normalize_path,
)


class InMemoryTree(KeyValueTree):
    """In-memory implementation of KeyValueTree.

    A single lock serializes writers, so multi-path updates and pops are
    atomic with respect to each other.
    """

    def __init__(self, initial: Optional[dict[str, TreeValue]] = None) -> None:
        self._nodes: dict[str, TreeValue] = {}
        self._lock = asyncio.Lock()
        for path, value in (initial or {}).items():
            self._nodes[normalize_path(path)] = copy.deepcopy(value)

    async def get(self, path: str) -> Optional[TreeValue]:
        """Read the value stored at a path."""
        return copy.deepcopy(self._nodes.get(normalize_path(path)))

    async def children(self, path: str) -> dict[str, TreeValue]:
        """Read the direct children of a path."""
        prefix = normalize_path(path) + "/"
        found = {
            last_key(node): copy.deepcopy(value)
            for node, value in self._nodes.items()
            if node.startswith(prefix) and "/" not in node[len(prefix) :]
        }
        return dict(sorted(found.items()))

    async def update(self, updates: dict[str, Optional[TreeValue]]) -> None:
        """Write several paths in one step."""
        normalized = {normalize_path(p): v for p, v in updates.items()}
        async with self._lock:
            for path, value in normalized.items():
                self._drop_subtree(path)
                if value is not None:
                    self._nodes[path] = copy.deepcopy(value)

    async def pop(self, path: str) -> Optional[TreeValue]:
        """Atomically read and delete the value at a path."""
        normalized = normalize_path(path)
        async with self._lock:
            return self._nodes.pop(normalized, None)

    def snapshot(self) -> dict[str, TreeValue]:
        """Return a deep copy of every stored path and value."""
        return copy.deepcopy(self._nodes)

    def _drop_subtree(self, path: str) -> None:
        prefix = path + "/"
        for node in [n for n in self._nodes if n == path or n.startswith(prefix)]:
            del self._nodes[node]
