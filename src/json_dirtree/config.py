"""LoaderConfig: immutable settings for directory ingestion.

The configuration is always passed explicitly to ``TreeIngestor`` (or to
the ``api`` functions); there is no module-level mutable default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from json_dirtree.paths.codec import DEFAULT_SUFFIX
from json_dirtree.tree.mutate import DEFAULT_POLICY, MergePolicy

__all__ = ["LoaderConfig"]


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Immutable configuration for loading a JSON directory tree.

    Attributes:
        suffix: File suffix marking a JSON fragment.  Stripped from file
            names to obtain the last path segment.  Default ``".json"``.
        policy: MergePolicy applied when a fragment lands on an existing
            value.  Default ``MergePolicy.MERGE_MAPS``.
        encoding: Text encoding of the fragments.  Default ``"utf-8"``.
        ingest_unsuffixed: When True, files without ``suffix`` are decoded
            too and their whole name becomes the segment.  Default False:
            such files are skipped.
    """

    suffix: str = DEFAULT_SUFFIX
    policy: MergePolicy = DEFAULT_POLICY
    encoding: str = "utf-8"
    ingest_unsuffixed: bool = False

    def __post_init__(self) -> None:
        if not self.suffix.startswith(".") or len(self.suffix) < 2:
            msg = f"suffix must start with '.' and name an extension, got {self.suffix!r}"
            raise ValueError(msg)
        if os.sep in self.suffix or "/" in self.suffix:
            msg = f"suffix must not contain a path separator, got {self.suffix!r}"
            raise ValueError(msg)
        if not isinstance(self.policy, MergePolicy):
            msg = f"policy must be a MergePolicy, got {type(self.policy).__name__}"
            raise ValueError(msg)
        if not self.encoding:
            msg = "encoding must not be empty"
            raise ValueError(msg)
