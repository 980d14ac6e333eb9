"""Typed deep-get over a decoded JSON tree.

Example::

    tree = {"foo": {"bar": "baz"}}
    get_path(tree, ["foo", "bar"], str)    # "baz"
    get_path(tree, ["foo", "bar"], int)    # BadTypeError: bad type: 'foo.bar'; ...
    get_path(tree, ["foo", "nope"])        # BadPathError: bad path: foo.nope
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar, overload

from json_dirtree.errors import BadPathError, BadTypeError
from json_dirtree.paths.codec import validate_segments
from json_dirtree.tree.kinds import as_map, conforms, type_name

__all__ = ["get_path", "has_path"]

T = TypeVar("T")


@overload
def get_path(tree: dict[str, Any], path: Sequence[str]) -> Any: ...


@overload
def get_path(tree: dict[str, Any], path: Sequence[str], expected: type[T]) -> T: ...


@overload
def get_path(tree: dict[str, Any], path: Sequence[str], expected: Any) -> Any: ...


def get_path(
    tree: dict[str, Any], path: Sequence[str], expected: Any = object
) -> Any:
    """Return the value at ``path``, checked against ``expected``.

    The tree is never modified.

    Args:
        tree:     Root map of the tree.
        path:     Segments from the root.  The root itself is not
                  addressable, so an empty path always fails.
        expected: Requested type; see ``conforms`` for the accepted forms.
                  Defaults to ``object`` (any value).

    Returns:
        The value found, unchanged (no copy, no coercion).

    Raises:
        BadPathError: A key is missing, an intermediate node is not a map, or
                      the path is empty.  ``err.path`` is the prefix up to and
                      including the failing segment.
        BadTypeError: The value found does not conform to ``expected``.
    """
    segments = validate_segments(path)
    if not segments:
        raise BadPathError(())

    node = tree
    last = len(segments) - 1
    for n, segment in enumerate(segments):
        if segment not in node:
            raise BadPathError(segments[: n + 1])
        value = node[segment]
        if n == last:
            if not conforms(value, expected):
                raise BadTypeError(segments, type(value).__name__, type_name(expected))
            return value
        child = as_map(value)
        if child is None:
            raise BadPathError(segments[: n + 1])
        node = child

    # unreachable: the loop always returns or raises on a non-empty path
    raise BadPathError(segments)


def has_path(tree: dict[str, Any], path: Sequence[str]) -> bool:
    """Return True if ``get_path(tree, path)`` would find a value."""
    try:
        get_path(tree, path)
    except BadPathError:
        return False
    return True
