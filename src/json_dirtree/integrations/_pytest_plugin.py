"""pytest plugin for json-dirtree.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml.  When the package is installed (even in editable mode),
pytest discovers this plugin automatically -- no conftest.py changes are
needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from json_dirtree.files.codec import write_value


@pytest.fixture
def make_json_dir(tmp_path: Path) -> Callable[[Mapping[str, Any]], Path]:
    """Fixture that returns a factory laying out JSON fragments on disk.

    The factory takes a mapping from a ``/``-separated relative file path to
    the value that file should hold, writes each value as JSON under a fresh
    directory inside ``tmp_path`` and returns that directory.

    Usage in tests::

        def test_load(make_json_dir):
            root = make_json_dir({
                "db.json": {"foo": "bar"},
                "db/foo.json": "baz",
            })
            assert load(root / "db") == {"foo": "baz"}

    Returns:
        A callable ``_make(files, name="tree") -> Path``.  Calling it twice
        with the same ``name`` adds files to the same directory.
    """

    def _make(files: Mapping[str, Any], name: str = "tree") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, value in files.items():
            write_value(root.joinpath(*rel.split("/")), value, indent=True)
        return root

    return _make
