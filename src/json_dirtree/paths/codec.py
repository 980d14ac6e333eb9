"""Path segment helpers shared by the accessor, the mutator and the ingestor.

A path is an ordered sequence of string segments, one per key hop from the
tree root.  Filesystem paths map onto tree paths by splitting on the
platform separator once the JSON suffix has been stripped::

    split(strip_extension("to/foo.json"))   # ["to", "foo"]
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from json_dirtree.errors import InvalidSegmentError

__all__ = [
    "DEFAULT_SUFFIX",
    "is_root_marker",
    "join_for_display",
    "split",
    "strip_extension",
    "validate_segments",
]

DEFAULT_SUFFIX = ".json"

# Characters that can never appear inside a segment derived from a file
# path: either would be read back as a segment boundary.
_SEPARATORS = frozenset({os.sep, "/"})


def split(path: str) -> list[str]:
    """Split ``path`` on the platform separator.  ``split("")`` is ``[""]``."""
    return path.split(os.sep)


def strip_extension(name: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Remove a trailing ``suffix`` from ``name``; identity otherwise."""
    return name.removesuffix(suffix)


def is_root_marker(
    base_dir: str, candidate_file: str, suffix: str = DEFAULT_SUFFIX
) -> bool:
    """Return True when ``candidate_file`` sans suffix is ``base_dir`` itself.

    Both sides are normalised, so ``"path/to/db/"`` and ``"path/to/db.json"``
    designate the same location.
    """
    return os.path.normpath(base_dir) == os.path.normpath(
        strip_extension(candidate_file, suffix)
    )


def join_for_display(segments: Sequence[str]) -> str:
    """Join ``segments`` with ``.`` for error and log messages."""
    return ".".join(segments)


def validate_segments(
    segments: Sequence[str], suffix: str | None = None
) -> tuple[str, ...]:
    """Check that ``segments`` is a path and return it as a tuple.

    In-memory paths are opaque: any string is a valid segment, including
    one holding ``/`` or ``..``.

    Args:
        segments: The path to check.  A bare ``str`` is refused because it
                  would otherwise be iterated character by character.
        suffix:   When given, the path was derived from a file name and each
                  segment is also checked for a path separator, ``.``/``..``
                  hops and a leftover suffix (``foo.json.json`` or a
                  ``foo.json/`` directory).

    Returns:
        The segments as a tuple.

    Raises:
        TypeError:           If ``segments`` is a string.
        InvalidSegmentError: If a segment is ambiguous.
    """
    if isinstance(segments, str):
        msg = f"path must be a sequence of segments, not a string: {segments!r}"
        raise TypeError(msg)

    path = tuple(segments)
    for segment in path:
        if not isinstance(segment, str):
            msg = f"path segments must be strings, got {type(segment).__name__!r}"
            raise TypeError(msg)
        if suffix is None:
            continue
        if any(sep in segment for sep in _SEPARATORS):
            raise InvalidSegmentError(segment, path, "contains a path separator")
        if segment in (os.curdir, os.pardir):
            raise InvalidSegmentError(segment, path, "relative hop outside the base")
        if segment.endswith(suffix):
            raise InvalidSegmentError(segment, path, f"ends with {suffix!r}")
    return path
