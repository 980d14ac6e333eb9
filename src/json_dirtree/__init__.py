"""json-dirtree - load directories of JSON fragments into one tree and
address it by key paths."""

from __future__ import annotations

from json_dirtree.api import (
    get_path,
    has_path,
    ingest_directory,
    load,
    read_value,
    resolve_entry_point,
    set_path,
    set_path_with_policy,
    store_value,
    write_value,
)
from json_dirtree.config import LoaderConfig
from json_dirtree.errors import (
    BadPathError,
    BadTypeError,
    DecodeError,
    EntryPointNotFoundError,
    InvalidSegmentError,
    JsonTreeError,
    RootNotAMapError,
)
from json_dirtree.ingest import TreeIngestor
from json_dirtree.tree.kinds import ValueKind, kind_of
from json_dirtree.tree.mutate import DEFAULT_POLICY, MergePolicy

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_POLICY",
    "BadPathError",
    "BadTypeError",
    "DecodeError",
    "EntryPointNotFoundError",
    "InvalidSegmentError",
    "JsonTreeError",
    "LoaderConfig",
    "MergePolicy",
    "RootNotAMapError",
    "TreeIngestor",
    "ValueKind",
    "get_path",
    "has_path",
    "ingest_directory",
    "kind_of",
    "load",
    "read_value",
    "resolve_entry_point",
    "set_path",
    "set_path_with_policy",
    "store_value",
    "write_value",
]
