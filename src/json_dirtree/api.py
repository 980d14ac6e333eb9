"""Public API functions for json-dirtree.

Loading functions create a fresh ``TreeIngestor`` per call, so no state
(decode cache included) survives between calls.  Keep a ``TreeIngestor``
around instead when the same entry point is reloaded repeatedly.
"""

from __future__ import annotations

import os
from typing import Any

from json_dirtree.config import LoaderConfig
from json_dirtree.files.codec import read_value, write_value
from json_dirtree.ingest import TreeIngestor, resolve_entry_point
from json_dirtree.tree.access import get_path, has_path
from json_dirtree.tree.mutate import set_path, set_path_with_policy

__all__ = [
    "get_path",
    "has_path",
    "ingest_directory",
    "load",
    "read_value",
    "resolve_entry_point",
    "set_path",
    "set_path_with_policy",
    "store_value",
    "write_value",
]


def load(
    input_path: str | os.PathLike[str],
    config: LoaderConfig | None = None,
) -> dict[str, Any]:
    """Load an entry point (root file and directory) into a new tree.

    Args:
        input_path: ``"path/to/db"`` or ``"path/to/db.json"``; both read
                    ``path/to/db.json`` then ``path/to/db/``.
        config:     Loader settings.  Defaults to ``LoaderConfig()``.

    Returns:
        The merged tree.  Directory content overrides root file content.

    Raises:
        EntryPointNotFoundError: Neither ``db.json`` nor ``db/`` exists.
    """
    return TreeIngestor(config=config).load_entry_point(input_path)


def ingest_directory(
    base_dir: str | os.PathLike[str],
    tree: dict[str, Any],
    config: LoaderConfig | None = None,
) -> dict[str, Any]:
    """Store every fragment under ``base_dir`` into ``tree`` and return it."""
    TreeIngestor(config=config).ingest_directory(base_dir, tree)
    return tree


def store_value(
    base_dir: str | os.PathLike[str],
    file_path: str | os.PathLike[str],
    value: Any,
    tree: dict[str, Any],
    config: LoaderConfig | None = None,
) -> dict[str, Any]:
    """Store an already decoded ``value`` as if read from ``file_path``.

    Returns ``tree`` for convenience; it is modified in place.
    """
    TreeIngestor(config=config).store_value(base_dir, file_path, value, tree)
    return tree
