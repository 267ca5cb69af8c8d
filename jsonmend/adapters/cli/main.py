# jsonmend/adapters/cli/main.py

"""
jsonmend - CLI Main Module

Command-line interface for parsing, repairing and navigating JSON documents.

This CLI uses the public API provided by jsonmend.
"""

# Standard library imports
import sys
from argparse import Namespace
from logging import getLogger
from pathlib import Path
from time import time
from typing import Callable

# Local imports
from jsonmend.adapters.api import JsonInspector
from jsonmend.adapters.cli.parser import create_argument_parser
from jsonmend.adapters.cli.parser import verbosity_to_log_level
from jsonmend.core.domain.diagnostics import ParseDiagnostic
from jsonmend.core.domain.enums import REPAIR_STEP_DESCRIPTIONS
from jsonmend.core.domain.enums import PathSyntax
from jsonmend.core.domain.results import Failed
from jsonmend.core.domain.results import Invalid
from jsonmend.core.domain.results import is_found
from jsonmend.infrastructure.logging import FileProgress
from jsonmend.infrastructure.logging import log_run_summary
from jsonmend.infrastructure.logging import setup_logging
from jsonmend.shared.utils.json_codec import dumps_pretty
from jsonmend.shared.utils.text_utils import render_error_context

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def read_input(source: str) -> str:
    """Read a FILE argument, '-' meaning standard input"""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def report_diagnostic(text: str, diagnostic: ParseDiagnostic, prefix: str) -> None:
    """Print a parse diagnostic and the offending line to stderr"""
    print(f"{prefix}: {diagnostic.describe()}", file=sys.stderr)
    context = render_error_context(text, diagnostic)
    if context:
        print(context, file=sys.stderr)


def _run_parse(args: Namespace, inspector: JsonInspector) -> int:
    text = read_input(args.file)
    result = inspector.parse(text)
    if isinstance(result, Invalid):
        report_diagnostic(text, result.error, "JSON Parse Error")
        return EXIT_FAILURE

    print(result.canonical_text)
    return EXIT_OK


def _run_format(args: Namespace, inspector: JsonInspector) -> int:
    text = read_input(args.file)
    result = inspector.format(text, indent=args.indent)
    if isinstance(result, ParseDiagnostic):
        report_diagnostic(text, result, "JSON Parse Error")
        return EXIT_FAILURE

    print(result)
    return EXIT_OK


def _run_minify(args: Namespace, inspector: JsonInspector) -> int:
    text = read_input(args.file)
    result = inspector.minify(text)
    if isinstance(result, ParseDiagnostic):
        report_diagnostic(text, result, "JSON Parse Error")
        return EXIT_FAILURE

    print(result)
    return EXIT_OK


def _run_repair(args: Namespace, inspector: JsonInspector) -> int:
    if args.output and len(args.files) > 1:
        print("--output can only be used with a single FILE", file=sys.stderr)
        return EXIT_FAILURE
    if args.in_place and "-" in args.files:
        print("--in-place cannot be used with standard input", file=sys.stderr)
        return EXIT_FAILURE

    start_time = time()
    valid = repaired = failed = 0
    single = len(args.files) == 1
    show_progress = not single and not args.silent

    with FileProgress(len(args.files), "Repairing", enabled=show_progress) as progress:
        for source in args.files:
            try:
                text = read_input(source)
            except OSError as e:
                logger.error(f"Cannot read {source}: {e}")
                failed += 1
                progress.advance(source)
                continue
            except UnicodeDecodeError:
                logger.error(f"Cannot read {source}: not valid UTF-8")
                failed += 1
                progress.advance(source)
                continue

            result = inspector.repair(text)
            progress.advance(source)

            if isinstance(result, Failed):
                failed += 1
                report_diagnostic(text, result.original_error, f"{source}: JSON Parse Error")
                print(
                    f"{source}: Unable to auto-fix JSON: {result.repair_error.describe()}",
                    file=sys.stderr,
                )
                continue

            if result.was_valid:
                valid += 1
                logger.info(f"{source}: JSON is already valid")
            else:
                repaired += 1
                logger.info(f"{source}: JSON auto-fixed successfully")
                for step in result.applied_steps:
                    logger.info(f"  {REPAIR_STEP_DESCRIPTIONS[step]}")

            if args.in_place:
                if not result.was_valid:
                    Path(source).write_text(result.canonical_text + "\n", encoding="utf-8")
            elif args.output:
                Path(args.output).write_text(result.canonical_text + "\n", encoding="utf-8")
            elif single:
                print(result.canonical_text)

    if not single:
        log_run_summary(
            start_time=start_time,
            end_time=time(),
            total_files=len(args.files),
            valid_files=valid,
            repaired_files=repaired,
            failed_files=failed,
            log_file=args.log_file,
        )

    return EXIT_FAILURE if failed else EXIT_OK


def _run_get(args: Namespace, inspector: JsonInspector) -> int:
    text = read_input(args.file)
    loaded = inspector.load(text)
    match loaded:
        case Invalid(error=error) | Failed(original_error=error):
            report_diagnostic(text, error, "JSON Parse Error")
            return EXIT_FAILURE

    syntax = PathSyntax(args.syntax) if args.syntax else None
    result = inspector.lookup(loaded.value, args.path, syntax)
    if not is_found(result):
        print(f"Path not found: {args.path} ({result.reason})", file=sys.stderr)
        return EXIT_FAILURE

    output = inspector.config.output
    print(dumps_pretty(result.value, indent=output.indent, ensure_ascii=output.ensure_ascii))
    return EXIT_OK


def _run_convert(args: Namespace, inspector: JsonInspector) -> int:
    if args.source:
        source = PathSyntax(args.source)
    else:
        source = PathSyntax.PHP if args.path.lstrip().startswith("$") else PathSyntax.DOT

    print(inspector.convert_path(args.path, source, PathSyntax(args.target)))
    return EXIT_OK


def _run_paths(args: Namespace, inspector: JsonInspector) -> int:
    text = read_input(args.file)
    loaded = inspector.load(text)
    match loaded:
        case Invalid(error=error) | Failed(original_error=error):
            report_diagnostic(text, error, "JSON Parse Error")
            return EXIT_FAILURE

    syntax = PathSyntax(args.syntax) if args.syntax else None
    for path in inspector.list_paths(loaded.value, syntax):
        print(path)
    return EXIT_OK


COMMANDS: dict[str, Callable[[Namespace, JsonInspector], int]] = {
    "parse": _run_parse,
    "format": _run_format,
    "minify": _run_minify,
    "repair": _run_repair,
    "get": _run_get,
    "convert": _run_convert,
    "paths": _run_paths,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point using the public API

    Args:
        argv: Arguments without the program name, None for sys.argv

    Returns:
        Process exit code
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Handlers must exist before the config file is read
    setup_logging(
        log_file=args.log_file,
        log_level=verbosity_to_log_level(args.verbose),
        silent=args.silent,
    )

    inspector = JsonInspector(config_path=args.config)

    logging_config = inspector.config.logging
    if (logging_config.log_file and not args.log_file) or logging_config.debug:
        args.log_file = args.log_file or logging_config.log_file
        setup_logging(
            log_file=args.log_file,
            log_level=verbosity_to_log_level(args.verbose, logging_config.debug),
            silent=args.silent,
        )

    try:
        return COMMANDS[args.command](args, inspector)
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return EXIT_FAILURE
    except UnicodeDecodeError:
        logger.error("Cannot read input: not valid UTF-8")
        return EXIT_FAILURE


def run() -> None:
    """Console script entry point"""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
