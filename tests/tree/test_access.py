"""Tests for get_path / has_path.

Covers empty paths, missing keys, paths that go deeper than the tree, type
mismatches (message and attributes), nested lookups, typed sequences and
the read-only guarantee.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_dirtree.errors import BadPathError, BadTypeError
from json_dirtree.tree.access import get_path, has_path


@pytest.fixture
def tree() -> dict[str, Any]:
    return {
        "foo": {"bar": "baz", "n": 3, "flag": True},
        "tags": ["a", "b"],
        "nothing": None,
    }


# ---------------------------------------------------------------------------
# Bad paths
# ---------------------------------------------------------------------------


class TestBadPath:
    def test_empty_tree_empty_path(self) -> None:
        with pytest.raises(BadPathError) as exc_info:
            get_path({}, [])
        assert exc_info.value.path == ()
        assert str(exc_info.value) == "bad path: "

    def test_non_empty_tree_empty_path(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadPathError):
            get_path(tree, [])

    def test_missing_key_in_empty_tree(self) -> None:
        with pytest.raises(BadPathError, match=r"^bad path: path$"):
            get_path({}, ["path"])

    def test_cannot_go_this_deep(self) -> None:
        with pytest.raises(BadPathError) as exc_info:
            get_path({"foo": "bar"}, ["foo", "bar"], str)
        assert exc_info.value.path == ("foo",)
        assert str(exc_info.value) == "bad path: foo"

    def test_missing_intermediate(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadPathError) as exc_info:
            get_path(tree, ["nope", "bar", "baz"])
        assert exc_info.value.path == ("nope",)

    def test_missing_leaf_reports_full_path(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadPathError) as exc_info:
            get_path(tree, ["foo", "missing"])
        assert exc_info.value.path == ("foo", "missing")

    def test_sequence_is_not_traversed(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadPathError) as exc_info:
            get_path(tree, ["tags", "0"])
        assert exc_info.value.path == ("tags",)

    def test_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            get_path({}, ["x"])

    def test_bare_string_path_rejected(self, tree: dict[str, Any]) -> None:
        with pytest.raises(TypeError):
            get_path(tree, "foo")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class TestTypes:
    def test_valid_path_wrong_type(self) -> None:
        with pytest.raises(BadTypeError) as exc_info:
            get_path({"foo": "bar"}, ["foo"], int)
        err = exc_info.value
        assert str(err) == "bad type: 'foo'; got 'str', expected 'int'"
        assert err.path == ("foo",)
        assert err.actual == "str"
        assert err.expected == "int"

    def test_valid_path_valid_type(self) -> None:
        assert get_path({"foo": "bar"}, ["foo"], str) == "bar"

    def test_valid_nested_path(self) -> None:
        assert get_path({"foo": {"bar": "baz"}}, ["foo", "bar"], str) == "baz"

    def test_nested_wrong_type_reports_full_path(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadTypeError, match=r"'foo\.bar'"):
            get_path(tree, ["foo", "bar"], dict)

    def test_default_expected_is_any(self, tree: dict[str, Any]) -> None:
        assert get_path(tree, ["foo", "n"]) == 3

    def test_bool_is_not_int(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadTypeError, match="got 'bool', expected 'int'"):
            get_path(tree, ["foo", "flag"], int)

    def test_typed_sequence(self, tree: dict[str, Any]) -> None:
        assert get_path(tree, ["tags"], list[str]) == ["a", "b"]

    def test_typed_sequence_mismatch(self, tree: dict[str, Any]) -> None:
        with pytest.raises(BadTypeError, match=r"expected 'list\[int\]'"):
            get_path(tree, ["tags"], list[int])

    def test_map_leaf(self, tree: dict[str, Any]) -> None:
        assert get_path(tree, ["foo"], dict) is tree["foo"]

    def test_null_leaf(self, tree: dict[str, Any]) -> None:
        assert get_path(tree, ["nothing"], type(None)) is None

    def test_null_leaf_is_found(self, tree: dict[str, Any]) -> None:
        assert get_path(tree, ["nothing"]) is None

    def test_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            get_path({"a": 1}, ["a"], str)


# ---------------------------------------------------------------------------
# Read-only / has_path
# ---------------------------------------------------------------------------


class TestReadOnly:
    def test_successful_get_does_not_mutate(self, tree: dict[str, Any]) -> None:
        before = copy.deepcopy(tree)
        get_path(tree, ["foo", "bar"], str)
        assert tree == before

    def test_failed_get_does_not_mutate(self, tree: dict[str, Any]) -> None:
        before = copy.deepcopy(tree)
        with pytest.raises(BadPathError):
            get_path(tree, ["a", "b", "c"])
        assert tree == before


class TestHasPath:
    def test_present(self, tree: dict[str, Any]) -> None:
        assert has_path(tree, ["foo", "bar"])

    def test_present_null(self, tree: dict[str, Any]) -> None:
        assert has_path(tree, ["nothing"])

    def test_absent(self, tree: dict[str, Any]) -> None:
        assert not has_path(tree, ["foo", "nope"])

    def test_empty_path(self, tree: dict[str, Any]) -> None:
        assert not has_path(tree, [])


class TestOpaqueSegments:
    def test_slash_in_key(self) -> None:
        tree = {"routes": {"/api/v1": 1}, "types": {"application/json": "j"}}
        assert get_path(tree, ["routes", "/api/v1"], int) == 1
        assert get_path(tree, ["types", "application/json"], str) == "j"

    def test_dot_keys(self) -> None:
        assert get_path({"..": {".": 2}}, ["..", "."], int) == 2
