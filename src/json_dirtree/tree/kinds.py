"""ValueKind StrEnum and safe downcasts over decoded JSON values.

A tree is made of the types ``json.loads`` produces: ``dict`` for objects,
``list`` for arrays, and ``str``/``int``/``float``/``bool``/``None`` for
scalars.  This module names those kinds and answers the one question the
accessor and mutator keep asking: "may this value be used as that type?"
"""

from __future__ import annotations

import types
import typing
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "JsonValue",
    "ValueKind",
    "as_map",
    "as_sequence",
    "conforms",
    "kind_of",
    "type_name",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The six dynamic kinds a JSON value can have.

    - MAP      -> "map"      : JSON object {}
    - SEQUENCE -> "sequence" : JSON array []
    - STRING   -> "string"
    - NUMBER   -> "number"   : int or float
    - BOOLEAN  -> "boolean"
    - NULL     -> "null"
    """

    MAP = auto()
    SEQUENCE = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


def kind_of(value: Any) -> ValueKind:
    """Return the ValueKind of ``value``.

    Raises:
        TypeError: If value is not a JSON value.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, dict):
        return ValueKind.MAP
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None:
        return ValueKind.NULL
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def as_map(value: Any) -> dict[str, Any] | None:
    """Return ``value`` if it is a map, else None."""
    return value if isinstance(value, dict) else None


def as_sequence(value: Any, element_type: Any = object) -> list[Any] | None:
    """Return ``value`` if it is a list whose elements all conform to
    ``element_type``, else None."""
    if not isinstance(value, list):
        return None
    if all(conforms(item, element_type) for item in value):
        return value
    return None


def conforms(value: Any, expected: Any) -> bool:
    """Return True if ``value`` may be handed out as ``expected``.

    Supported ``expected`` forms: ``object``/``typing.Any``, ``None`` or
    ``type(None)``, plain classes, unions (``int | str``, ``Optional[...]``)
    and parameterised ``list[T]`` / ``dict[str, T]``.

    JSON has a single number type, so an ``int`` conforms to ``float``.  A
    ``bool`` never conforms to ``int`` or ``float`` even though Python
    considers it one.
    """
    if expected is object or expected is Any:
        return True
    if expected is None or expected is type(None):
        return value is None

    origin = typing.get_origin(expected)
    if origin is typing.Union or origin is types.UnionType:
        return any(conforms(value, arg) for arg in typing.get_args(expected))
    if origin is list:
        (item_type,) = typing.get_args(expected) or (object,)
        return as_sequence(value, item_type) is not None
    if origin is dict:
        args = typing.get_args(expected)
        value_type = args[1] if len(args) == 2 else object
        return isinstance(value, dict) and all(
            isinstance(k, str) and conforms(v, value_type) for k, v in value.items()
        )

    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool) and expected in (int, float):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def type_name(expected: Any) -> str:
    """Human-readable name of a type accepted by ``conforms``."""
    if isinstance(expected, type) and not typing.get_args(expected):
        return expected.__name__
    return repr(expected).removeprefix("typing.")
