# jsonmend/shared/utils/text_utils.py

"""Text helpers for presenting input and diagnostics"""

# Local imports
from jsonmend.core.domain.diagnostics import ParseDiagnostic

DEFAULT_PREVIEW_LENGTH = 100


def create_preview(text: str, limit: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Shorten text for log messages

    Args:
        text: Text to preview
        limit: Maximum number of characters kept before the ellipsis

    Returns:
        The first ``limit`` characters, followed by "..." when text was cut
    """
    if not text:
        return ""

    preview = text[:limit]
    return preview + "..." if len(preview) < len(text) else preview


def render_error_context(text: str, diagnostic: ParseDiagnostic) -> str:
    """Show the line containing a parse error with a caret under the error column

    Tabs before the error column are kept in the caret line so the marker
    lines up in a terminal.

    Args:
        text: The text that failed to parse
        diagnostic: Diagnostic for that text

    Returns:
        Two lines: the offending source line and the marker line
    """
    lines = text.split("\n")
    if not lines or diagnostic.line > len(lines):
        return ""

    source_line = lines[diagnostic.line - 1].rstrip("\r")
    prefix = source_line[: diagnostic.column - 1]
    marker = "".join("\t" if char == "\t" else " " for char in prefix) + "^"
    return f"{source_line}\n{marker}"
