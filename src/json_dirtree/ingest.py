"""TreeIngestor: folds a directory of JSON fragments into a single tree.

Each file's location relative to the base directory becomes its path in
the tree, with the suffix stripped::

    db/users/alice.json  ->  ["users", "alice"]

so that, with ``db/users/alice.json`` holding ``{"age": 30}``::

    TreeIngestor().load_entry_point("db")
    # {"users": {"alice": {"age": 30}}}

An entry point ``db`` is made of two optional sources, loaded in this
order:

1. the root file ``db.json``, whose top-level object is unioned directly
   into the tree;
2. the directory ``db/``, walked recursively.

Because the directory is loaded second, its content overrides the root
file's for the same key path.  The same rule holds at every level of the
walk: in each directory, regular files are stored first (sorted by name)
and subdirectories are descended afterwards (sorted by name), so ``foo/``
beats a sibling ``foo.json``.  Two fragments that map onto the same path
with scalar or list values resolve to the one visited last; map values are
merged according to the configured MergePolicy.

The walk stops at the first error.  Fragments stored before the failure
stay in the tree.
"""

from __future__ import annotations

import logging
import os
from typing import Any, NoReturn

from json_dirtree.config import LoaderConfig
from json_dirtree.errors import EntryPointNotFoundError, RootNotAMapError
from json_dirtree.files.cache import DecodeCache, Reader
from json_dirtree.files.codec import read_value
from json_dirtree.paths.codec import (
    is_root_marker,
    join_for_display,
    split,
    strip_extension,
    validate_segments,
)
from json_dirtree.tree.kinds import as_map, kind_of
from json_dirtree.tree.mutate import set_path_with_policy

__all__ = ["TreeIngestor", "resolve_entry_point"]

logger = logging.getLogger(__name__)

_TRAILING_SEPARATORS = os.sep + "/"


def _raise(err: OSError) -> NoReturn:
    raise err


def _is_missing(err: FileNotFoundError, candidate: str) -> bool:
    """True when ``err`` reports ``candidate`` itself as absent."""
    if err.filename is None:
        return True
    return os.path.normpath(os.fspath(err.filename)) == os.path.normpath(candidate)


def resolve_entry_point(
    input_path: str | os.PathLike[str], suffix: str = ".json"
) -> tuple[str, str]:
    """Return the ``(directory, file)`` candidates for an entry point.

    ``"db"`` and ``"db.json"`` both resolve to ``("db", "db.json")``.  An
    input already ending with ``suffix`` keeps it for the file candidate and
    loses it, together with any trailing separator, for the directory one.
    """
    path = os.fspath(input_path)
    if path.endswith(suffix):
        return strip_extension(path.rstrip(_TRAILING_SEPARATORS), suffix), path
    return path, path + suffix


class TreeIngestor:
    """Loads JSON fragment files and directories into a tree.

    Decoded files go through a per-instance ``DecodeCache``, so calling
    ``load_entry_point`` again on an unchanged directory does not decode its
    files a second time.  Two ``TreeIngestor`` instances never share cache
    state.  Instances are not thread-safe.

    Example::

        ingestor = TreeIngestor(LoaderConfig(policy=MergePolicy.DEEP_MERGE))
        tree = ingestor.load_entry_point("conf/app")
    """

    def __init__(
        self,
        config: LoaderConfig | None = None,
        reader: Reader | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the ingestor.

        Args:
            config: Suffix, merge policy and encoding.  Defaults to
                ``LoaderConfig()``.
            reader: Callable ``(path, encoding) -> value`` decoding one file.
                Defaults to ``read_value``.
            max_cache_size: Maximum number of decoded files kept by the
                per-instance cache.  Defaults to 128.
        """
        self._config: LoaderConfig = config if config is not None else LoaderConfig()
        raw_reader: Reader = reader if reader is not None else read_value
        self._reader = DecodeCache(raw_reader, max_size=max_cache_size)

    @property
    def config(self) -> LoaderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Single values and files
    # ------------------------------------------------------------------

    def store_value(
        self,
        base_dir: str | os.PathLike[str],
        file_path: str | os.PathLike[str],
        value: Any,
        tree: dict[str, Any],
    ) -> None:
        """Store ``value`` in ``tree`` at the path ``file_path`` maps to.

        When ``file_path`` minus its suffix is ``base_dir`` itself (the root
        file of an entry point), ``value`` must be a map and its keys are
        copied directly into the top level of ``tree``, new keys winning.

        Raises:
            RootNotAMapError:    The root file does not hold a map.
            InvalidSegmentError: The relative path cannot be mapped to
                                 segments unambiguously (e.g. it leaves
                                 ``base_dir``).
            BadPathError:        Propagated from ``set_path_with_policy``.
        """
        base, filename = os.fspath(base_dir), os.fspath(file_path)
        suffix = self._config.suffix

        if is_root_marker(base, filename, suffix):
            self._store_root(filename, value, tree)
            return

        rel = strip_extension(os.path.relpath(filename, base), suffix)
        segments = validate_segments(split(rel), suffix=suffix)
        set_path_with_policy(tree, segments, value, self._config.policy)
        logger.debug("stored %s at %s", filename, join_for_display(segments))

    def _store_root(self, filename: str, value: Any, tree: dict[str, Any]) -> None:
        top = as_map(value)
        if top is None:
            raise RootNotAMapError(filename, kind_of(value))
        tree.update(top)
        logger.debug("stored %s at the root", filename)

    def ingest_file(
        self,
        base_dir: str | os.PathLike[str],
        file_path: str | os.PathLike[str],
        tree: dict[str, Any],
    ) -> None:
        """Decode ``file_path`` and store it relative to ``base_dir``."""
        value = self._reader(os.fspath(file_path), self._config.encoding)
        self.store_value(base_dir, file_path, value, tree)

    # ------------------------------------------------------------------
    # Directories and entry points
    # ------------------------------------------------------------------

    def ingest_directory(
        self, base_dir: str | os.PathLike[str], tree: dict[str, Any]
    ) -> int:
        """Recursively store every fragment under ``base_dir`` into ``tree``.

        A ``base_dir`` that is a regular file is decoded as a root file
        whatever its name: its map is unioned into the top level of ``tree``.

        Returns:
            The number of files stored.

        Raises:
            FileNotFoundError: ``base_dir`` does not exist.
            RootNotAMapError:  ``base_dir`` is a file not holding a map.
            OSError:           Any other traversal or read failure.
            DecodeError:       A fragment is not valid JSON.
        """
        base = os.fspath(base_dir)
        suffix = self._config.suffix
        stored = 0

        if os.path.isfile(base):
            value = self._reader(base, self._config.encoding)
            self._store_root(base, value, tree)
            return 1

        for dirpath, dirnames, filenames in os.walk(base, onerror=_raise):
            dirnames.sort()
            for name in sorted(filenames):
                file_path = os.path.join(dirpath, name)
                if not os.path.isfile(file_path):
                    logger.debug("skipping %s: not a regular file", file_path)
                    continue
                if not name.endswith(suffix) and not self._config.ingest_unsuffixed:
                    logger.debug("skipping %s: no %s suffix", file_path, suffix)
                    continue
                self.ingest_file(base, file_path, tree)
                stored += 1

        return stored

    def load_entry_point(
        self,
        input_path: str | os.PathLike[str],
        tree: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Load the root file and then the directory of an entry point.

        ``"path/to/db"`` (or ``"path/to/db.json"``) reads ``path/to/db.json``
        and then ``path/to/db/``.  Either may be missing, not both.

        Args:
            input_path: Entry point, with or without the suffix.
            tree:       Tree to load into.  A fresh ``{}`` when None.

        Returns:
            The loaded tree.

        Raises:
            EntryPointNotFoundError: Neither source exists.  Carries both
                underlying ``FileNotFoundError`` instances.
            DecodeError, RootNotAMapError, BadPathError, OSError: Any other
                failure of either source, raised as is.
        """
        tree = {} if tree is None else tree
        directory, filename = resolve_entry_point(input_path, self._config.suffix)
        missing: list[FileNotFoundError] = []

        has_file = True
        try:
            self.ingest_file(directory, filename, tree)
        except FileNotFoundError as exc:
            if not _is_missing(exc, filename):
                raise
            logger.debug("no root file %s", filename)
            missing.append(exc)
            has_file = False

        stored = 0
        try:
            stored = self.ingest_directory(directory, tree)
        except FileNotFoundError as exc:
            if not _is_missing(exc, directory):
                raise
            logger.debug("no directory %s", directory)
            missing.append(exc)

        if len(missing) == 2:
            raise EntryPointNotFoundError(missing)

        logger.info(
            "loaded entry point %s (root file %s, %d directory fragment(s))",
            os.fspath(input_path),
            "present" if has_file else "absent",
            stored,
        )
        return tree
