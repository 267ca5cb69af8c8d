# jsonmend/shared/utils/json_codec.py

"""Strict JSON parse/serialize primitives

Thin wrapper around the standard library ``json`` module. Parsing is strict
RFC 8259: the ``NaN``/``Infinity`` extensions the stdlib accepts by default
are rejected with a ``JSONDecodeError`` like any other syntax error, and so
are documents nested deeper than ``MAX_NESTING_DEPTH``.
"""

# Standard library imports
from json import JSONDecodeError
from json import dumps
from json import loads
from re import compile

# Local imports
from jsonmend.core.types.json import JSONType

CANONICAL_INDENT = 2

# Deeper values cannot be pretty-printed within the default recursion limit
MAX_NESTING_DEPTH = 500
NESTING_TOO_DEEP_MESSAGE = f"Nesting deeper than {MAX_NESTING_DEPTH} levels"

STRING_OR_CONSTANT_PATTERN = compile(r'"(?:\\.|[^"\\])*"|-?Infinity|NaN')


class _NonStandardConstant(ValueError):
    """Raised from inside the decoder when it meets NaN or Infinity"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


def _reject_constant(name: str) -> JSONType:
    raise _NonStandardConstant(name)


def _constant_position(text: str, name: str) -> int:
    """Offset of the first bare constant, skipping string literals

    The decoder stops at the first constant it meets and every string before
    it is terminated, so the first match outside strings is the one rejected.
    """
    for match in STRING_OR_CONSTANT_PATTERN.finditer(text):
        if match.group() == name:
            return match.start()
    return 0


def _nesting_depth(value: JSONType) -> int:
    deepest = 0
    stack = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def loads_strict(text: str) -> JSONType:
    """Parse JSON text, raising JSONDecodeError for anything non-conformant"""
    try:
        value = loads(text, parse_constant=_reject_constant)
    except JSONDecodeError:
        raise
    except _NonStandardConstant as e:
        position = _constant_position(text, e.name)
        raise JSONDecodeError(f"Non-standard constant {e.name}", text, position) from e
    except ValueError as e:
        # e.g. an integer literal longer than the int conversion limit
        raise JSONDecodeError(str(e), text, 0) from e
    except RecursionError as e:
        raise JSONDecodeError(NESTING_TOO_DEEP_MESSAGE, text, 0) from e

    if _nesting_depth(value) > MAX_NESTING_DEPTH:
        raise JSONDecodeError(NESTING_TOO_DEEP_MESSAGE, text, 0)
    return value


def dumps_pretty(
    value: JSONType, indent: int = CANONICAL_INDENT, ensure_ascii: bool = False
) -> str:
    """Serialize with one member per line; indent 0 still breaks lines"""
    return dumps(value, indent=indent, ensure_ascii=ensure_ascii)


def dumps_canonical(value: JSONType) -> str:
    """Two-space indented serialization used for repaired output"""
    return dumps_pretty(value, indent=CANONICAL_INDENT)


def dumps_compact(value: JSONType, ensure_ascii: bool = False) -> str:
    """Serialize without any insignificant whitespace"""
    return dumps(value, separators=(",", ":"), ensure_ascii=ensure_ascii)
