# tests/unit/shared/utils/test_text_utils.py

"""Tests for preview and error-context helpers"""

# Standard library imports
from json import JSONDecodeError

# Third party imports
import pytest

# Local imports
from jsonmend.core.domain.diagnostics import ParseDiagnostic
from jsonmend.shared.utils.json_codec import loads_strict
from jsonmend.shared.utils.text_utils import create_preview
from jsonmend.shared.utils.text_utils import render_error_context


def diagnostic_for(text: str) -> ParseDiagnostic:
    with pytest.raises(JSONDecodeError) as exc_info:
        loads_strict(text)
    return ParseDiagnostic.from_decode_error(exc_info.value)


class TestCreatePreview:
    """Test create_preview()"""

    def test_short_text_unchanged(self):
        assert create_preview("abc", limit=10) == "abc"

    def test_exact_limit_unchanged(self):
        assert create_preview("abcde", limit=5) == "abcde"

    def test_long_text_truncated(self):
        assert create_preview("abcdefgh", limit=3) == "abc..."

    def test_empty(self):
        assert create_preview("") == ""

    def test_default_limit(self):
        preview = create_preview("x" * 150)
        assert preview == "x" * 100 + "..."


class TestRenderErrorContext:
    """Test render_error_context()"""

    def test_caret_under_error(self):
        text = '{"a": 1,}'
        diagnostic = diagnostic_for(text)

        context = render_error_context(text, diagnostic)

        source_line, marker = context.split("\n")
        assert source_line == text
        assert marker == " " * diagnostic.position + "^"

    def test_multiline_picks_error_line(self):
        text = '{\n  "a": 1\n  "b": 2\n}'
        diagnostic = diagnostic_for(text)
        assert diagnostic.line == 3

        context = render_error_context(text, diagnostic)

        assert context == '  "b": 2\n  ^'

    def test_tabs_kept_in_marker(self):
        diagnostic = ParseDiagnostic(position=2, message="x", line=1, column=3)
        assert render_error_context("\t\tx", diagnostic) == "\t\tx\n\t\t^"

    def test_line_past_end(self):
        diagnostic = ParseDiagnostic(position=0, message="x", line=5, column=1)
        assert render_error_context("one line", diagnostic) == ""
