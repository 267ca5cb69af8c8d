# jsonmend/core/domain/enums.py

"""Domain enumerations for jsonmend"""

# Standard library imports
from enum import Enum


class DiagnosticKind(Enum):
    """Kinds of problems reported as values instead of raised"""

    PARSE_ERROR = "parse_error"  # Malformed JSON, carries position and message
    REPAIR_UNRECOVERABLE = "repair_unrecoverable"  # Heuristics did not yield valid JSON
    PATH_NOT_FOUND = "path_not_found"  # Valid path syntax, nothing at that address
    PATH_SYNTAX_AMBIGUOUS = "path_syntax_ambiguous"  # Numeric segment matched an object key


class PathSyntax(Enum):
    """Surface syntaxes for addressing a location inside a document"""

    DOT = "dot"  # a.0.b
    PHP = "php"  # $response['a'][0]['b']


class RepairStep(Enum):
    """Textual rewrites of the repair pass, in the order they run"""

    SINGLE_QUOTES = "single_quotes"
    UNQUOTED_KEYS = "unquoted_keys"
    TRAILING_COMMAS = "trailing_commas"
    MISSING_COMMAS = "missing_commas"
    BARE_VALUES = "bare_values"
    UNBALANCED_BRACKETS = "unbalanced_brackets"


# Human-readable descriptions for repair steps
REPAIR_STEP_DESCRIPTIONS = {
    RepairStep.SINGLE_QUOTES: "Replaced single quotes with double quotes",
    RepairStep.UNQUOTED_KEYS: "Quoted bare object keys",
    RepairStep.TRAILING_COMMAS: "Removed trailing commas",
    RepairStep.MISSING_COMMAS: "Inserted missing commas between lines",
    RepairStep.BARE_VALUES: "Quoted bare identifier values",
    RepairStep.UNBALANCED_BRACKETS: "Appended missing closing braces/brackets",
}
