# jsonmend/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from jsonmend.core.domain.enums import PathSyntax

SYNTAX_CHOICES = [syntax.value for syntax in PathSyntax]


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    parser = ArgumentParser(
        prog="jsonmend",
        description="Inspect, repair and navigate JSON documents",
        epilog="FILE may be '-' to read from standard input.",
    )

    # Global options
    parser.add_argument(
        "--config", default=None, help="Path to configuration JSON file (default: ./jsonmend.json)"
    )
    parser.add_argument("--log-file", default=None, help="Also write a debug log to this file")
    # Verbosity - count occurrences: -v (INFO), -vv (DEBUG)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (default: warnings only, -v: INFO, -vv: DEBUG)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress all log output")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    parse_parser = subparsers.add_parser("parse", help="Strictly parse and pretty-print")
    parse_parser.add_argument("file", metavar="FILE")

    format_parser = subparsers.add_parser("format", help="Pretty-print valid JSON")
    format_parser.add_argument("file", metavar="FILE")
    format_parser.add_argument(
        "--indent", type=int, default=None, help="Spaces per level (default: from config, 2)"
    )

    minify_parser = subparsers.add_parser("minify", help="Remove insignificant whitespace")
    minify_parser.add_argument("file", metavar="FILE")

    repair_parser = subparsers.add_parser("repair", help="Repair near-JSON text")
    repair_parser.add_argument("files", metavar="FILE", nargs="+")
    repair_target = repair_parser.add_mutually_exclusive_group()
    repair_target.add_argument(
        "--output", "-o", default=None, help="Write the repaired JSON here (single FILE only)"
    )
    repair_target.add_argument(
        "--in-place", action="store_true", help="Overwrite each repaired FILE"
    )

    get_parser = subparsers.add_parser("get", help="Print the value at a path")
    get_parser.add_argument("file", metavar="FILE")
    get_parser.add_argument("path", metavar="PATH")
    get_parser.add_argument(
        "--syntax", choices=SYNTAX_CHOICES, default=None, help="Path syntax (default: from config)"
    )

    convert_parser = subparsers.add_parser("convert", help="Convert a path between syntaxes")
    convert_parser.add_argument("path", metavar="PATH")
    convert_parser.add_argument("--to", choices=SYNTAX_CHOICES, required=True, dest="target")
    convert_parser.add_argument(
        "--from",
        choices=SYNTAX_CHOICES,
        default=None,
        dest="source",
        help="Source syntax (default: php when PATH starts with '$', else dot)",
    )

    paths_parser = subparsers.add_parser("paths", help="List every path in a document")
    paths_parser.add_argument("file", metavar="FILE")
    paths_parser.add_argument(
        "--syntax", choices=SYNTAX_CHOICES, default=None, help="Path syntax (default: from config)"
    )

    return parser


def verbosity_to_log_level(verbose: int, debug: bool = False) -> str:
    """Map -v counts (and the config debug flag) to a logging level name"""
    if debug or verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return "WARNING"
