"""Integrations subpackage for json-dirtree.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``make_json_dir`` fixture

The plugin module imports pytest and is only loaded by pytest itself, so it
is not re-exported here.
"""

from __future__ import annotations

__all__: list[str] = []
