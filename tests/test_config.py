"""Tests for the LoaderConfig frozen dataclass.

Covers:
- Default values (suffix=".json", policy=MERGE_MAPS, encoding="utf-8")
- Immutability (FrozenInstanceError on assignment)
- Validation of suffix, policy and encoding
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_dirtree.config import LoaderConfig
from json_dirtree.tree.mutate import MergePolicy

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_suffix(self) -> None:
        assert LoaderConfig().suffix == ".json"

    def test_policy(self) -> None:
        assert LoaderConfig().policy == MergePolicy.MERGE_MAPS

    def test_encoding(self) -> None:
        assert LoaderConfig().encoding == "utf-8"

    def test_ingest_unsuffixed(self) -> None:
        assert LoaderConfig().ingest_unsuffixed is False

    def test_equality(self) -> None:
        assert LoaderConfig() == LoaderConfig()


class TestImmutability:
    def test_cannot_assign(self) -> None:
        config = LoaderConfig()
        with pytest.raises(FrozenInstanceError):
            config.suffix = ".yaml"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_custom_values(self) -> None:
        policy = MergePolicy.DEEP_MERGE | MergePolicy.APPEND_ARRAYS
        config = LoaderConfig(suffix=".jsonc", policy=policy, encoding="latin-1")
        assert config.suffix == ".jsonc"
        assert config.policy == policy

    @pytest.mark.parametrize("suffix", ["", ".", "json", "x.json"])
    def test_bad_suffix(self, suffix: str) -> None:
        with pytest.raises(ValueError, match="suffix must start with"):
            LoaderConfig(suffix=suffix)

    def test_suffix_with_separator(self) -> None:
        with pytest.raises(ValueError, match="path separator"):
            LoaderConfig(suffix=".a/b")

    def test_policy_must_be_flag(self) -> None:
        with pytest.raises(ValueError, match="MergePolicy"):
            LoaderConfig(policy=1)  # type: ignore[arg-type]

    def test_empty_encoding(self) -> None:
        with pytest.raises(ValueError, match="encoding"):
            LoaderConfig(encoding="")
