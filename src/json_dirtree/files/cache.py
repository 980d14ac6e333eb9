"""DecodeCache: LRU-backed caching proxy around a JSON file reader.

Wraps any ``reader(path, encoding)`` callable (``read_value`` by default)
and keeps decoded values in memory, keyed by the file's real path together
with its modification time and size.  A file that was touched since it was
cached therefore misses and is decoded again; stale entries age out through
LRU eviction.

Every hit returns a deep copy: ingestion merges maps in place, and a tree
built from a cached value must never write back into the cache.

Each ``DecodeCache`` instance maintains its own ``LRUCache``; there is no
shared state between instances.

Example::

    cache = DecodeCache(max_size=256)
    value = cache.read("db/users.json")      # decoded from disk
    again = cache.read("db/users.json")      # served from memory (a copy)
"""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Callable
from typing import Any

from cachetools import LRUCache

from json_dirtree.files.codec import read_value

__all__ = ["DecodeCache", "Reader"]

logger = logging.getLogger(__name__)

Reader = Callable[[str, str], Any]

_Key = tuple[str, str, int, int]


class DecodeCache:
    """LRU cache of decoded JSON files.

    Args:
        reader:   Callable ``(path, encoding) -> value`` used on a miss.
                  Defaults to ``read_value``.
        max_size: Maximum number of decoded files held in memory.  Defaults
                  to 128.  When exceeded, the least-recently-used entry is
                  silently evicted.
    """

    def __init__(self, reader: Reader | None = None, max_size: int = 128) -> None:
        self._reader: Reader = reader if reader is not None else read_value
        self._cache: LRUCache[_Key, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Reader surface
    # ------------------------------------------------------------------

    def read(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> Any:
        """Return the decoded value of ``path``; unchanged files skip decoding.

        Raises:
            OSError: ``path`` cannot be stat'ed or read.
            DecodeError: Propagated from the wrapped reader.
        """
        filename = os.fspath(path)
        st = os.stat(filename)
        key: _Key = (os.path.realpath(filename), encoding, st.st_mtime_ns, st.st_size)

        if key in self._cache:
            logger.debug("decode cache hit for %s", filename)
            return copy.deepcopy(self._cache[key])

        value = self._reader(filename, encoding)
        self._cache[key] = value
        return copy.deepcopy(value)

    __call__ = read

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
