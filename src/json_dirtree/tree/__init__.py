"""Tree subpackage: value kinds, typed deep-get and policy-driven deep-set.

Re-exports the public API for the tree module:
- ValueKind / kind_of: dynamic kind of a decoded JSON value
- get_path / has_path: read-only lookups
- set_path / set_path_with_policy / merge_into: mutations
- MergePolicy / DEFAULT_POLICY: leaf write flags
"""

from json_dirtree.tree.access import get_path, has_path
from json_dirtree.tree.kinds import JsonValue, ValueKind, conforms, kind_of
from json_dirtree.tree.mutate import (
    DEFAULT_POLICY,
    MergePolicy,
    merge_into,
    set_path,
    set_path_with_policy,
)

__all__ = [
    "DEFAULT_POLICY",
    "JsonValue",
    "MergePolicy",
    "ValueKind",
    "conforms",
    "get_path",
    "has_path",
    "kind_of",
    "merge_into",
    "set_path",
    "set_path_with_policy",
]
