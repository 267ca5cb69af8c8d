# jsonmend/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import NullHandler
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger
from os import makedirs
from os.path import dirname


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "WARNING",
    silent: bool = False,
) -> str | None:
    """Configure logging for the application

    Console output goes to stderr so stdout stays clean for JSON output.

    Args:
        log_file: Path to log file, None to disable file logging
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = INFO

    root_logger = getLogger()
    root_logger.setLevel(DEBUG if log_file else level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_dir = dirname(log_file)
        if log_dir:
            makedirs(log_dir, exist_ok=True)

        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    if silent:
        # Without any handler, records reach the last-resort stderr handler
        root_logger.addHandler(NullHandler())

    return None


def log_run_summary(
    start_time: float,
    end_time: float,
    total_files: int,
    valid_files: int,
    repaired_files: int,
    failed_files: int,
    log_file: str | None = None,
) -> None:
    """Log final summary of a multi-file repair run

    Args:
        start_time: Processing start time
        end_time: Processing end time
        total_files: Files processed
        valid_files: Files that were already valid JSON
        repaired_files: Files the repair pass fixed
        failed_files: Files that could not be read or repaired
        log_file: Path to log file (if any)
    """
    logger = getLogger(__name__)

    processing_time = end_time - start_time
    minutes = int(processing_time // 60)
    seconds = processing_time % 60

    summary_lines = [
        "=" * 60,
        "REPAIR COMPLETE",
        "=" * 60,
        f"Files processed: {total_files:,}",
        f"Processing time: {minutes}m {seconds:.1f}s",
    ]

    if total_files > 0:
        summary_lines.extend(
            [
                f"  Already valid: {valid_files:,} ({valid_files / total_files * 100:.1f}%)",
                f"  Repaired: {repaired_files:,} ({repaired_files / total_files * 100:.1f}%)",
                f"  Failed: {failed_files:,} ({failed_files / total_files * 100:.1f}%)",
            ]
        )

    if log_file:
        summary_lines.append(f"Log: {log_file}")

    summary_lines.append("=" * 60)
    logger.info("\n".join(summary_lines))
