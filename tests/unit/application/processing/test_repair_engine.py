# tests/unit/application/processing/test_repair_engine.py

"""Tests for the heuristic JSON repair pass"""

# Third party imports
import pytest

# Local imports
from jsonmend.application.processing.repair_engine import REPAIR_PIPELINE
from jsonmend.application.processing.repair_engine import apply_repairs
from jsonmend.application.processing.repair_engine import balance_brackets
from jsonmend.application.processing.repair_engine import insert_missing_commas
from jsonmend.application.processing.repair_engine import quote_bare_values
from jsonmend.application.processing.repair_engine import quote_unquoted_keys
from jsonmend.application.processing.repair_engine import remove_trailing_commas
from jsonmend.application.processing.repair_engine import repair
from jsonmend.application.processing.repair_engine import replace_single_quotes
from jsonmend.core.domain.enums import DiagnosticKind
from jsonmend.core.domain.enums import RepairStep
from jsonmend.core.domain.results import Failed
from jsonmend.core.domain.results import Repaired
from jsonmend.shared.utils.json_codec import MAX_NESTING_DEPTH


class TestRewriteSteps:
    """Each rewrite in isolation"""

    def test_replace_single_quotes(self):
        assert replace_single_quotes("{'a': 'b'}") == '{"a": "b"}'

    def test_quote_unquoted_keys(self):
        assert quote_unquoted_keys("{name: 1, age: 2}") == '{"name": 1, "age": 2}'

    def test_quoted_keys_untouched(self):
        text = '{"name": 1}'
        assert quote_unquoted_keys(text) == text

    def test_unquoted_key_with_underscore_and_digits(self):
        assert quote_unquoted_keys("{_id2 : 1}") == '{"_id2": 1}'

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("[1, 2, ]", "[1, 2 ]"),
            ('{"a": 1,\n}', '{"a": 1\n}'),
            ('{"a": [1,],}', '{"a": [1]}'),
        ],
    )
    def test_remove_trailing_commas(self, text, expected):
        assert remove_trailing_commas(text) == expected

    def test_missing_comma_between_strings(self):
        text = '{\n"a": "x"\n"b": "y"\n}'
        assert insert_missing_commas(text) == '{\n"a": "x",\n"b": "y"\n}'

    def test_missing_comma_after_object(self):
        text = '{"a": {"b": 1}\n"c": 2}'
        assert insert_missing_commas(text) == '{"a": {"b": 1},\n"c": 2}'

    def test_missing_comma_after_array(self):
        text = '{"a": [1]\n  "b": 2}'
        assert insert_missing_commas(text) == '{"a": [1],\n"b": 2}'

    def test_missing_comma_requires_newline(self):
        """Members on the same line are not separated"""
        text = '{"a": "x" "b": "y"}'
        assert insert_missing_commas(text) == text

    def test_quote_bare_values(self):
        assert quote_bare_values('{"a": hello, "b": world}') == '{"a": "hello", "b": "world"}'

    @pytest.mark.parametrize("literal", ["true", "false", "null"])
    def test_literals_not_quoted(self, literal):
        text = f'{{"a": {literal}}}'
        assert quote_bare_values(text) == text

    def test_numbers_not_quoted(self):
        text = '{"a": 30, "b": 1e5}'
        assert quote_bare_values(text) == text

    def test_bare_value_before_newline(self):
        """Whitespace between the value and the closer is dropped"""
        assert quote_bare_values('{"a": abc\n}') == '{"a": "abc"}'


class TestBalanceBrackets:
    """Test closer insertion"""

    def test_balanced_unchanged(self):
        assert balance_brackets('{"a": [1]}') == '{"a": [1]}'

    def test_missing_brackets(self):
        assert balance_brackets("[1, [2") == "[1, [2]]"

    def test_missing_braces(self):
        assert balance_brackets('{"a": {"b": 1') == '{"a": {"b": 1}}'

    def test_closers_follow_nesting(self):
        """Innermost unclosed opener is closed first"""
        assert balance_brackets('{"a": [1, 2') == '{"a": [1, 2]}'
        assert balance_brackets('[{"a": 1') == '[{"a": 1}]'

    def test_excess_closers_left_alone(self):
        assert balance_brackets('{"a": 1}}') == '{"a": 1}}'

    def test_mismatched_closer_ignored_for_nesting(self):
        assert balance_brackets('{"a": ]') == '{"a": ]}'


class TestApplyRepairs:
    """Test the full rewrite pipeline"""

    def test_pipeline_order(self):
        steps = [step for step, _ in REPAIR_PIPELINE]
        assert steps == [
            RepairStep.SINGLE_QUOTES,
            RepairStep.UNQUOTED_KEYS,
            RepairStep.TRAILING_COMMAS,
            RepairStep.MISSING_COMMAS,
            RepairStep.BARE_VALUES,
            RepairStep.UNBALANCED_BRACKETS,
        ]
        assert steps[-1] == RepairStep.UNBALANCED_BRACKETS

    def test_records_only_changing_steps(self):
        text, steps = apply_repairs("{name: 'Bob', age: 30,}")
        assert text == '{"name": "Bob", "age": 30}'
        assert steps == (
            RepairStep.SINGLE_QUOTES,
            RepairStep.UNQUOTED_KEYS,
            RepairStep.TRAILING_COMMAS,
        )

    def test_no_changes(self):
        assert apply_repairs("[1 2]") == ("[1 2]", ())


class TestRepair:
    """Test repair() results"""

    def test_valid_input_short_circuits(self):
        """Valid JSON is not rewritten, apostrophes included"""
        text = '{"a": "it\'s"}'
        result = repair(text)

        assert isinstance(result, Repaired)
        assert result.was_valid is True
        assert result.value == {"a": "it's"}
        assert result.repaired_text == text
        assert result.applied_steps == ()

    def test_common_near_json(self):
        result = repair("{name: 'Bob', age: 30,}")

        assert isinstance(result, Repaired)
        assert result.was_valid is False
        assert result.value == {"name": "Bob", "age": 30}
        assert result.canonical_text == '{\n  "name": "Bob",\n  "age": 30\n}'

    def test_truncated_input(self):
        result = repair('{"a": [1, 2')

        assert isinstance(result, Repaired)
        assert result.value == {"a": [1, 2]}
        assert result.applied_steps == (RepairStep.UNBALANCED_BRACKETS,)
        assert result.canonical_text == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_bare_values_and_keys(self):
        result = repair("{status: active, count: 3}")
        assert isinstance(result, Repaired)
        assert result.value == {"status": "active", "count": 3}

    def test_newline_separated_members(self):
        result = repair('{\n  "a": "x"\n  "b": "y"\n}')
        assert isinstance(result, Repaired)
        assert result.value == {"a": "x", "b": "y"}
        assert result.applied_steps == (RepairStep.MISSING_COMMAS,)

    def test_python_style_literals_become_strings(self):
        """Only lowercase JSON literals survive the bare value step"""
        result = repair("{'ok': True}")
        assert isinstance(result, Repaired)
        assert result.value == {"ok": "True"}

    def test_unrecoverable(self):
        result = repair("[1 2]")

        assert isinstance(result, Failed)
        assert result.kind == DiagnosticKind.REPAIR_UNRECOVERABLE
        assert result.original_error.position == 3
        assert result.original_error.message == "Expecting ',' delimiter"
        assert result.repair_error == result.original_error
        assert result.repaired_text == "[1 2]"
        assert result.applied_steps == ()

    def test_apostrophe_inside_repaired_string_fails(self):
        """Every single quote is rewritten, including apostrophes"""
        result = repair("{a: \"it's\", b: 1,}")

        assert isinstance(result, Failed)
        assert result.repaired_text == '{"a": "it"s", "b": 1}'
        assert RepairStep.SINGLE_QUOTES in result.applied_steps

    def test_failed_keeps_both_errors(self):
        result = repair("{'a': }")

        assert isinstance(result, Failed)
        assert result.original_error.position == 1
        assert result.repair_error.position == 6

    def test_empty_input(self):
        result = repair("")
        assert isinstance(result, Failed)
        assert result.original_error.message == "Expecting value"

    def test_non_standard_constants_not_repaired(self):
        result = repair("[NaN]")
        assert isinstance(result, Failed)

    def test_deep_valid_input_fails_cleanly(self):
        """Nesting past the recursion limit is a parse failure, not a crash"""
        result = repair("[" * 100000 + "]" * 100000)

        assert isinstance(result, Failed)
        assert "Nesting" in result.original_error.message

    def test_deep_truncated_input_fails_cleanly(self):
        result = repair("[" * 100000)

        assert isinstance(result, Failed)
        assert result.applied_steps == (RepairStep.UNBALANCED_BRACKETS,)
        assert "Nesting" in result.repair_error.message

    def test_nesting_limit(self):
        truncated = "[" * MAX_NESTING_DEPTH
        result = repair(truncated)
        assert isinstance(result, Repaired)
        assert result.canonical_text.count("[") == MAX_NESTING_DEPTH

        assert isinstance(repair("[" + truncated), Failed)
