"""Deep-set over a decoded JSON tree, parameterised by a MergePolicy.

``set_path_with_policy`` is the single mutation primitive: it walks the
path, creating empty maps for missing intermediate segments, then writes the
leaf according to the policy flags.  ``set_path`` is the same call with the
policy defaulting to ``DEFAULT_POLICY`` (merge maps, nothing else).

Leaf write precedence, first match wins:

1. DEEP_MERGE and both sides are maps   -> recursive merge
2. MERGE_MAPS and both sides are maps   -> shallow union, new keys win
3. APPEND_ARRAYS and both sides are
   lists of the element type            -> existing + new
4. anything else                        -> overwrite

A flag whose precondition does not hold simply falls through to the next
rule, so ``MERGE_MAPS`` with a scalar value is a plain overwrite.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Flag, auto
from typing import Any

from json_dirtree.errors import BadPathError
from json_dirtree.paths.codec import validate_segments
from json_dirtree.tree.kinds import as_map, as_sequence

__all__ = [
    "DEFAULT_POLICY",
    "MergePolicy",
    "merge_into",
    "set_path",
    "set_path_with_policy",
]


class MergePolicy(Flag):
    """Composable flags controlling how a leaf write treats existing data.

    - MERGE_MAPS:    map onto map shallow-unions the two; colliding keys
                     take the new value.
    - APPEND_ARRAYS: list onto list concatenates, existing elements first.
    - FORCE_THROUGH: a non-map met on an intermediate segment is replaced by
                     an empty map instead of failing.  The old value is lost.
    - DEEP_MERGE:    map onto map merges recursively; nested lists follow
                     APPEND_ARRAYS when that flag is also set.
    """

    NONE = 0
    MERGE_MAPS = auto()
    APPEND_ARRAYS = auto()
    FORCE_THROUGH = auto()
    DEEP_MERGE = auto()


DEFAULT_POLICY = MergePolicy.MERGE_MAPS


def merge_into(
    existing: dict[str, Any],
    incoming: dict[str, Any],
    policy: MergePolicy = DEFAULT_POLICY,
    element_type: Any = object,
) -> None:
    """Merge ``incoming`` into ``existing`` in place.

    Shallow unless ``policy`` carries DEEP_MERGE, in which case map/map
    collisions recurse and list/list collisions concatenate under
    APPEND_ARRAYS.
    """
    if MergePolicy.DEEP_MERGE not in policy:
        existing.update(incoming)
        return

    for key, value in incoming.items():
        _write_leaf(existing, key, value, policy, element_type)


def _write_leaf(
    parent: dict[str, Any],
    key: str,
    value: Any,
    policy: MergePolicy,
    element_type: Any,
) -> None:
    current = parent.get(key)

    if policy & (MergePolicy.DEEP_MERGE | MergePolicy.MERGE_MAPS):
        old_map, new_map = as_map(current), as_map(value)
        if old_map is not None and new_map is not None:
            merge_into(old_map, new_map, policy, element_type)
            return

    if MergePolicy.APPEND_ARRAYS in policy:
        old_seq = as_sequence(current, element_type)
        new_seq = as_sequence(value, element_type)
        if old_seq is not None and new_seq is not None:
            parent[key] = old_seq + new_seq
            return

    parent[key] = value


def set_path_with_policy(
    tree: dict[str, Any],
    path: Sequence[str],
    value: Any,
    policy: MergePolicy,
    element_type: Any = object,
) -> None:
    """Write ``value`` at ``path`` following ``policy``.

    Missing intermediate maps are created as the walk goes.  A failing
    segment is always an existing one, met before anything was created, so
    a failed call leaves the tree untouched.

    Args:
        tree:         Root map of the tree, mutated in place.
        path:         Segments from the root.  An empty path is a no-op: the
                      root is never replaced by this call.
        value:        Value to write.  Stored by reference, not copied.
        policy:       Combination of MergePolicy flags.
        element_type: Element type both lists must hold for APPEND_ARRAYS to
                      apply.  Defaults to ``object`` (any elements).

    Raises:
        BadPathError: An intermediate segment holds a non-map and
                      FORCE_THROUGH is not set.  ``err.path`` ends with that
                      segment.
    """
    segments = validate_segments(path)
    if not segments:
        return

    node = tree
    for n, segment in enumerate(segments[:-1]):
        if segment not in node:
            node[segment] = {}
        elif as_map(node[segment]) is None:
            if MergePolicy.FORCE_THROUGH not in policy:
                raise BadPathError(segments[: n + 1])
            node[segment] = {}
        node = node[segment]

    _write_leaf(node, segments[-1], value, policy, element_type)


def set_path(
    tree: dict[str, Any],
    path: Sequence[str],
    value: Any,
    policy: MergePolicy = DEFAULT_POLICY,
) -> None:
    """``set_path_with_policy`` with ``policy`` defaulting to merge maps."""
    set_path_with_policy(tree, path, value, policy)
