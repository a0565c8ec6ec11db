"""
JSON utilities using orjson for jpaz
====================================

Provides a small JSON interface on top of orjson that mirrors the parts of
the standard json module used by the CLI. orjson always emits UTF-8, so
Japanese characters are written as-is rather than as ``\\u`` escapes.
"""

import orjson
from typing import Any, Callable, Optional


def dumps(obj: Any, indent: Optional[int] = None, default: Optional[Callable[[Any], Any]] = None) -> str:
    """
    Serialize obj to JSON string using orjson

    Args:
        obj: Object to serialize
        indent: Any non-None value enables 2-space pretty printing
        default: Callable for objects that cannot be serialized (e.g., default=str)

    Returns:
        JSON string

    Note:
        orjson.dumps returns bytes, this function returns str
    """
    option = orjson.OPT_NON_STR_KEYS

    if indent is not None:
        option |= orjson.OPT_INDENT_2

    return orjson.dumps(obj, default=default, option=option).decode("utf-8")


def loads(s: Any) -> Any:
    """
    Deserialize JSON string (or bytes) to Python object using orjson

    Args:
        s: JSON string to deserialize

    Returns:
        Python object
    """
    return orjson.loads(s)


# Provide compatibility constants
JSONDecodeError = orjson.JSONDecodeError
