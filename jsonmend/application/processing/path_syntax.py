# jsonmend/application/processing/path_syntax.py

"""Parsing and formatting of the two path syntaxes

Both syntaxes are textual encodings of the same segment sequence:

    dot-path:      user.0.name
    bracket path:  $response['user'][0]['name']

A numeric component is parsed as an index; the resolver falls back to the
literal key when the container turns out to be an object. Digit runs longer
than MAX_INDEX_DIGITS can only be object keys and parse as key segments.
"""

# Standard library imports
from re import compile
from typing import assert_never

# Local imports
from jsonmend.core.domain.enums import PathSyntax
from jsonmend.core.domain.path_segment import MAX_INDEX_DIGITS
from jsonmend.core.domain.path_segment import IndexSegment
from jsonmend.core.domain.path_segment import KeySegment
from jsonmend.core.domain.path_segment import PathSegment
from jsonmend.core.domain.path_segment import PathSegments
from jsonmend.core.domain.path_segment import is_index

ROOT_SENTINEL = "root"
PHP_ROOT = "$response"

INDEX_PATTERN = compile(r"[0-9]+")
PHP_PREFIX_PATTERN = compile(r"^\$\w+")
PHP_GROUP_PATTERN = compile(r"""\[(?:([0-9]+)|'([^']*)'|"([^"]*)")\]""")


def _numeric_segment(digits: str) -> PathSegment:
    if len(digits) > MAX_INDEX_DIGITS:
        return KeySegment(key=digits)
    return IndexSegment(index=int(digits), literal=digits)


def parse_dot_path(text: str) -> PathSegments:
    """Split a dot-path into segments

    Empty and whitespace-only components are dropped, so leading, trailing
    and doubled dots are tolerated and blank input is the root path.
    """
    segments: list[PathSegment] = []
    for component in text.split("."):
        if not component.strip():
            continue
        if INDEX_PATTERN.fullmatch(component):
            segments.append(_numeric_segment(component))
        else:
            segments.append(KeySegment(key=component))
    return tuple(segments)


def parse_php_path(text: str) -> PathSegments:
    """Extract segments from a PHP-style bracket path

    A leading ``$name`` prefix is stripped, then every ``[digits]``,
    ``['key']`` or ``["key"]`` group is taken in order. Anything between
    groups is ignored.
    """
    remainder = PHP_PREFIX_PATTERN.sub("", text.strip(), count=1)

    segments: list[PathSegment] = []
    for match in PHP_GROUP_PATTERN.finditer(remainder):
        digits, single_quoted, double_quoted = match.groups()
        if digits is not None:
            segments.append(_numeric_segment(digits))
        elif single_quoted is not None:
            segments.append(KeySegment(key=single_quoted))
        else:
            segments.append(KeySegment(key=double_quoted))
    return tuple(segments)


def format_dot_path(segments: PathSegments) -> str:
    """Join segments with dots; the empty path displays as "root"

    The sentinel is for display only and does not parse back to the root.
    """
    if not segments:
        return ROOT_SENTINEL
    return ".".join(segment.text for segment in segments)


def _format_php_segment(segment: PathSegment) -> str:
    if is_index(segment):
        return f"[{segment.text}]"
    # A key holding single quotes is only reparsable inside double quotes
    if "'" in segment.text and '"' not in segment.text:
        return f'["{segment.text}"]'
    return f"['{segment.text}']"


def format_php_path(segments: PathSegments) -> str:
    """Render segments as ``$response[...]`` accessors"""
    return PHP_ROOT + "".join(_format_php_segment(segment) for segment in segments)


def parse_path(text: str, syntax: PathSyntax) -> PathSegments:
    """Parse text written in the given syntax"""
    match syntax:
        case PathSyntax.DOT:
            return parse_dot_path(text)
        case PathSyntax.PHP:
            return parse_php_path(text)
        case _:
            assert_never(syntax)


def format_path(segments: PathSegments, syntax: PathSyntax) -> str:
    """Format segments in the given syntax"""
    match syntax:
        case PathSyntax.DOT:
            return format_dot_path(segments)
        case PathSyntax.PHP:
            return format_php_path(segments)
        case _:
            assert_never(syntax)


def convert_path(text: str, source: PathSyntax, target: PathSyntax) -> str:
    """Re-encode a path from one syntax into another"""
    return format_path(parse_path(text, source), target)
