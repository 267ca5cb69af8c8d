# jsonmend/application/processing/path_resolver.py

"""Point lookup of a path inside a parsed JSON value

Resolution-order policy for numeric segments: an index segment addresses a
list position first; against an object it falls back to the literal key text
and the result carries a PATH_SYNTAX_AMBIGUOUS warning. A key segment never
addresses a list.
"""

# Standard library imports
from logging import getLogger
from typing import Iterator

# Local imports
from jsonmend.core.domain.diagnostics import PathWarning
from jsonmend.core.domain.path_segment import IndexSegment
from jsonmend.core.domain.path_segment import KeySegment
from jsonmend.core.domain.path_segment import PathSegment
from jsonmend.core.domain.path_segment import PathSegments
from jsonmend.core.domain.path_segment import is_index
from jsonmend.core.domain.path_segment import is_key
from jsonmend.core.domain.results import Found
from jsonmend.core.domain.results import LookupResult
from jsonmend.core.domain.results import PathNotFound
from jsonmend.core.types.json import JSONType

logger = getLogger(__name__)


def _type_name(value: JSONType) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case _:
            return "object"


def resolve(value: JSONType, path: PathSegments) -> LookupResult:
    """Follow path from value

    Args:
        value: Parsed document (never modified)
        path: Segments from the root to the target; empty addresses the root

    Returns:
        Found with the addressed value, or PathNotFound naming the segment
        that could not be followed
    """
    current = value
    warnings: list[PathWarning] = []

    for depth, segment in enumerate(path):
        if isinstance(current, list):
            if is_key(segment):
                return PathNotFound(
                    depth=depth, segment=segment.text, reason="array cannot be indexed by key"
                )
            if segment.index >= len(current):
                return PathNotFound(
                    depth=depth,
                    segment=segment.text,
                    reason=f"index out of range for array of length {len(current)}",
                )
            current = current[segment.index]
        elif isinstance(current, dict):
            if segment.text not in current:
                return PathNotFound(depth=depth, segment=segment.text, reason="missing key")
            if is_index(segment):
                logger.debug(f"Index segment {segment.text} fell back to an object key")
                warnings.append(
                    PathWarning(
                        depth=depth,
                        segment=segment.text,
                        message=f"numeric segment {segment.text!r} used as an object key",
                    )
                )
            current = current[segment.text]
        else:
            return PathNotFound(
                depth=depth,
                segment=segment.text,
                reason=f"cannot descend into {_type_name(current)}",
            )

    return Found(value=current, warnings=tuple(warnings))


def walk_paths(value: JSONType) -> Iterator[tuple[PathSegments, JSONType]]:
    """Yield every address in value with the value found there

    Depth first, the root first, children in document order.
    """
    stack: list[tuple[PathSegments, JSONType]] = [((), value)]
    while stack:
        path, current = stack.pop()
        yield path, current

        children: list[tuple[PathSegment, JSONType]] = []
        if isinstance(current, list):
            children = [(IndexSegment(index=i), item) for i, item in enumerate(current)]
        elif isinstance(current, dict):
            children = [(KeySegment(key=key), item) for key, item in current.items()]

        for segment, child in reversed(children):
            stack.append(((*path, segment), child))
