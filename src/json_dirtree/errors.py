"""Exception hierarchy for json-dirtree.

Every error raised by the path engine and the ingestor derives from
``JsonTreeError`` and additionally from the closest built-in exception, so
callers may catch either the library type or the familiar built-in:

- BadPathError        (LookupError):       a path could not be resolved
- BadTypeError        (TypeError):         a leaf is not of the requested type
- RootNotAMapError    (TypeError):         the root file holds a non-object
- InvalidSegmentError (ValueError):        a path segment is ambiguous
- DecodeError         (ValueError):        malformed JSON, with line/column
- EntryPointNotFoundError (FileNotFoundError): neither file nor dir exists

Plain ``OSError`` from the file layer is never wrapped.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "BadPathError",
    "BadTypeError",
    "DecodeError",
    "EntryPointNotFoundError",
    "InvalidSegmentError",
    "JsonTreeError",
    "RootNotAMapError",
]


def _display(path: Sequence[str]) -> str:
    return ".".join(path)


class JsonTreeError(Exception):
    """Base class of all json-dirtree errors."""


class BadPathError(JsonTreeError, LookupError):
    """A path segment could not be resolved.

    Attributes:
        path: The longest prefix consumed, including the failing segment.
              Empty when the whole path was empty.
    """

    def __init__(self, path: Sequence[str]) -> None:
        self.path: tuple[str, ...] = tuple(path)
        super().__init__(f"bad path: {_display(self.path)}")


class BadTypeError(JsonTreeError, TypeError):
    """The value at a path does not have the requested type.

    Attributes:
        path:     Full path of the offending leaf.
        actual:   Python type name of the value found.
        expected: Display name of the type that was requested.
    """

    def __init__(self, path: Sequence[str], actual: str, expected: str) -> None:
        self.path: tuple[str, ...] = tuple(path)
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"bad type: '{_display(self.path)}'; "
            f"got '{actual}', expected '{expected}'"
        )


class RootNotAMapError(JsonTreeError, TypeError):
    """The root file of an entry point does not hold a JSON object."""

    def __init__(self, filename: str, kind: str) -> None:
        self.filename = filename
        self.kind = kind
        super().__init__(f"root isn't a map: {filename} holds a {kind}")


class InvalidSegmentError(JsonTreeError, ValueError):
    """A path segment cannot be represented without ambiguity."""

    def __init__(self, segment: str, path: Sequence[str], reason: str) -> None:
        self.segment = segment
        self.path: tuple[str, ...] = tuple(path)
        super().__init__(
            f"invalid segment {segment!r} in path {list(self.path)!r}: {reason}"
        )


class DecodeError(JsonTreeError, ValueError):
    """A file could not be decoded as JSON.

    Attributes:
        filename: File being decoded.
        line:     1-based line of the failure.
        column:   1-based column of the failure.
        reason:   Message of the underlying decoder error.
    """

    def __init__(self, filename: str, line: int, column: int, reason: str) -> None:
        self.filename = filename
        self.line = line
        self.column = column
        self.reason = reason
        super().__init__(f"decoding {filename}:{line}:{column}: {reason}")


class EntryPointNotFoundError(JsonTreeError, FileNotFoundError):
    """Neither the file nor the directory of an entry point exists.

    Attributes:
        errors: The two underlying ``FileNotFoundError`` instances, file
                candidate first.
    """

    def __init__(self, errors: Sequence[BaseException]) -> None:
        self.errors: tuple[BaseException, ...] = tuple(errors)
        detail = "; ".join(str(err) for err in self.errors)
        super().__init__(f"no entry point found: {detail}")
