"""Read and write a single JSON value from/to a file.

Decoding failures are reported with the file name and a 1-based
line/column computed from the failure offset, so that a malformed fragment
deep inside a directory tree can be located directly::

    DecodeError: decoding db/users/alice.json:3:14: Expecting ',' delimiter

Writes go through a temporary file in the target directory followed by
``os.replace``, so readers see either the old or the new bytes.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from typing import Any

from json_dirtree.errors import DecodeError

__all__ = ["encode_value", "locate", "read_value", "write_value"]

logger = logging.getLogger(__name__)


def locate(data: bytes | str, offset: int) -> tuple[int, int]:
    """Translate an offset into a 1-based ``(line, column)`` pair.

    The line is one plus the number of newlines before ``offset``; the
    column is ``offset`` minus the position of the preceding newline.
    """
    if isinstance(data, bytes):
        head = data[:offset]
        return 1 + head.count(b"\n"), offset - head.rfind(b"\n")
    text = data[:offset]
    return 1 + text.count("\n"), offset - text.rfind("\n")


def read_value(path: str | os.PathLike[str], encoding: str = "utf-8") -> Any:
    """Read the file at ``path`` and decode it as a single JSON value.

    Args:
        path:     File to read.
        encoding: Text encoding of the file.

    Returns:
        The decoded value (dict, list, str, int, float, bool or None).

    Raises:
        DecodeError: The bytes are not valid text in ``encoding`` or not
                     valid JSON.
        OSError:     Reading failed; ``FileNotFoundError`` in particular is
                     passed through untouched.
    """
    filename = os.fspath(path)
    with open(filename, "rb") as fh:
        data = fh.read()

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        line, column = locate(data, exc.start)
        raise DecodeError(filename, line, column, exc.reason) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        line, column = locate(text, exc.pos)
        raise DecodeError(filename, line, column, exc.msg) from exc


def encode_value(value: Any, indent: bool = False) -> bytes:
    """Encode ``value`` as UTF-8 JSON, compact or indented with tabs.

    Raises:
        TypeError:  ``value`` holds something JSON cannot represent.
        ValueError: ``value`` contains a reference cycle.
    """
    if indent:
        text = json.dumps(value, indent="\t", ensure_ascii=False)
    else:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return text.encode("utf-8")


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_value(
    path: str | os.PathLike[str],
    value: Any,
    indent: bool = False,
    *,
    dir_mode: int = 0o750,
    file_mode: int = 0o660,
) -> None:
    """Encode ``value`` and write it to ``path``.

    Missing parent directories are created with ``dir_mode``.  The value is
    encoded before anything touches the disk, so an encoding failure leaves
    no trace.

    Args:
        path:      Destination file.
        value:     JSON value to encode.
        indent:    Pretty-print with one tab per level when True.
        dir_mode:  Permission bits for created directories.
        file_mode: Permission bits of the written file, masked by the
                   process umask.
    """
    filename = os.fspath(path)
    payload = encode_value(value, indent=indent)

    directory = os.path.dirname(filename) or os.curdir
    os.makedirs(directory, mode=dir_mode, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        dir=directory, prefix=f".{os.path.basename(filename)}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
        os.chmod(tmp_name, file_mode & ~_current_umask())
        os.replace(tmp_name, filename)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise

    logger.debug("wrote %d bytes to %s", len(payload), filename)
