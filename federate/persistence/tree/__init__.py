"""Key-value tree storage for identity data."""

from .base import KeyValueTree, normalize_path, tree_path, validate_key
from .inmemory import InMemoryTree
from .sql import CommittingSqlTree, SqlTree

__all__ = [
    "CommittingSqlTree",
    "InMemoryTree",
    "KeyValueTree",
    "SqlTree",
    "normalize_path",
    "tree_path",
    "validate_key",
]
