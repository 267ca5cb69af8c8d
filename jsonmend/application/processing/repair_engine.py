# jsonmend/application/processing/repair_engine.py

"""Heuristic repair of near-JSON text

The repair pass is an ordered sequence of pure text-to-text rewrites run once,
unconditionally, followed by a strict re-parse. There is no backtracking and
no fixed-point loop, so running repair on its own output is not guaranteed to
be a no-op. Later steps assume the earlier ones already ran; bracket
balancing in particular must stay last.

Known limitations:
- Every ``'`` becomes ``"``, which breaks strings containing apostrophes
- Rewrites do not know about string boundaries, so text inside strings that
  looks like a key, a trailing comma or a bare value is rewritten too
"""

# Standard library imports
from json import JSONDecodeError
from logging import getLogger
from re import Match
from re import compile
from typing import Callable

# Local imports
from jsonmend.core.domain.diagnostics import ParseDiagnostic
from jsonmend.core.domain.enums import RepairStep
from jsonmend.core.domain.results import Failed
from jsonmend.core.domain.results import RepairResult
from jsonmend.core.domain.results import Repaired
from jsonmend.shared.utils.json_codec import dumps_canonical
from jsonmend.shared.utils.json_codec import loads_strict

logger = getLogger(__name__)

UNQUOTED_KEY_PATTERN = compile(r"([{,]\s*)([a-zA-Z_][a-zA-Z0-9_]*)\s*:")
TRAILING_COMMA_PATTERN = compile(r",(\s*[}\]])")
MISSING_COMMA_PATTERNS = (
    (compile(r'"\s*\n\s*"'), '",\n"'),
    (compile(r'}\s*\n\s*"'), '},\n"'),
    (compile(r']\s*\n\s*"'), '],\n"'),
)
BARE_VALUE_PATTERN = compile(r":(\s*)([a-zA-Z][a-zA-Z0-9_]*)\s*([,}\]])")
JSON_LITERALS = frozenset({"true", "false", "null"})
CLOSERS = {"{": "}", "[": "]"}


def replace_single_quotes(text: str) -> str:
    """Turn every single quote into a double quote"""
    return text.replace("'", '"')


def quote_unquoted_keys(text: str) -> str:
    """Wrap identifier keys that follow ``{`` or ``,`` in double quotes"""
    return UNQUOTED_KEY_PATTERN.sub(r'\1"\2":', text)


def remove_trailing_commas(text: str) -> str:
    """Drop a comma that directly precedes a closing brace or bracket"""
    return TRAILING_COMMA_PATTERN.sub(r"\1", text)


def insert_missing_commas(text: str) -> str:
    """Insert commas between newline-separated members

    Only three adjacencies are handled: string/string, ``}``/string and
    ``]``/string, each separated by a newline and optional whitespace.
    """
    for pattern, replacement in MISSING_COMMA_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def quote_bare_values(text: str) -> str:
    """Quote identifier values, leaving the true/false/null literals alone"""

    def quote_value(match: Match[str]) -> str:
        space, value, end = match.group(1), match.group(2), match.group(3)
        if value in JSON_LITERALS:
            return f":{space}{value}{end}"
        return f':{space}"{value}"{end}'

    return BARE_VALUE_PATTERN.sub(quote_value, text)


def balance_brackets(text: str) -> str:
    """Append the closers needed to balance ``{``/``}`` and ``[``/``]`` counts

    The number of closers appended is the whole-text deficit for each kind.
    Their order follows the nesting of the openers still unclosed at the end
    of the text, innermost first, so ``{"a": [1`` gains ``]}``. Excess closers
    are never removed.
    """
    missing = {
        "}": text.count("{") - text.count("}"),
        "]": text.count("[") - text.count("]"),
    }
    if missing["}"] <= 0 and missing["]"] <= 0:
        return text

    unclosed: list[str] = []
    for char in text:
        if char in CLOSERS:
            unclosed.append(char)
        elif unclosed and char == CLOSERS[unclosed[-1]]:
            unclosed.pop()

    suffix: list[str] = []
    for opener in reversed(unclosed):
        closer = CLOSERS[opener]
        if missing[closer] > 0:
            suffix.append(closer)
            missing[closer] -= 1

    return text + "".join(suffix)


# Order matters: each step assumes the earlier ones already ran
REPAIR_PIPELINE: tuple[tuple[RepairStep, Callable[[str], str]], ...] = (
    (RepairStep.SINGLE_QUOTES, replace_single_quotes),
    (RepairStep.UNQUOTED_KEYS, quote_unquoted_keys),
    (RepairStep.TRAILING_COMMAS, remove_trailing_commas),
    (RepairStep.MISSING_COMMAS, insert_missing_commas),
    (RepairStep.BARE_VALUES, quote_bare_values),
    (RepairStep.UNBALANCED_BRACKETS, balance_brackets),
)


def apply_repairs(text: str) -> tuple[str, tuple[RepairStep, ...]]:
    """Run every rewrite once, in order

    Returns:
        The rewritten text and the steps that changed it
    """
    applied: list[RepairStep] = []
    for step, rewrite in REPAIR_PIPELINE:
        rewritten = rewrite(text)
        if rewritten != text:
            logger.debug(f"Repair step {step.value} changed the text")
            applied.append(step)
        text = rewritten
    return text, tuple(applied)


def repair(text: str) -> RepairResult:
    """Convert near-JSON text into valid JSON when the heuristics allow it

    Text that already parses is returned unchanged in meaning, without any
    rewrite. Otherwise the rewrite pipeline runs once and its output is parsed
    strictly.

    Args:
        text: Arbitrary, typically JSON-like, text

    Returns:
        Repaired with the value and its canonical serialization, or Failed
        carrying both the original and the post-repair parse diagnostics
    """
    try:
        value = loads_strict(text)
    except JSONDecodeError as e:
        original_error = ParseDiagnostic.from_decode_error(e)
    else:
        return Repaired(
            value=value,
            canonical_text=dumps_canonical(value),
            repaired_text=text,
            was_valid=True,
        )

    logger.debug(f"Strict parse failed ({original_error.describe()}), attempting repair")
    repaired_text, applied_steps = apply_repairs(text)

    try:
        value = loads_strict(repaired_text)
    except JSONDecodeError as e:
        repair_error = ParseDiagnostic.from_decode_error(e)
        logger.debug(f"Repair did not produce valid JSON: {repair_error.describe()}")
        return Failed(
            original_error=original_error,
            repair_error=repair_error,
            repaired_text=repaired_text,
            applied_steps=applied_steps,
        )

    logger.debug(f"Repair succeeded after {len(applied_steps)} step(s)")
    return Repaired(
        value=value,
        canonical_text=dumps_canonical(value),
        repaired_text=repaired_text,
        applied_steps=applied_steps,
    )
