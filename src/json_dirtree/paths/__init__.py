"""Paths subpackage: segment splitting, suffix handling and validation."""

from json_dirtree.paths.codec import (
    DEFAULT_SUFFIX,
    is_root_marker,
    join_for_display,
    split,
    strip_extension,
    validate_segments,
)

__all__ = [
    "DEFAULT_SUFFIX",
    "is_root_marker",
    "join_for_display",
    "split",
    "strip_extension",
    "validate_segments",
]
