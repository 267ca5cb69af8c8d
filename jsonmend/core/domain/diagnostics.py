# jsonmend/core/domain/diagnostics.py

"""Diagnostic models describing parse errors and path warnings"""

# Standard library imports
from json import JSONDecodeError
from typing import Self

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from jsonmend.core.domain.enums import DiagnosticKind

DIAGNOSTIC_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")


class ParseDiagnostic(BaseModel):
    """Structured description of a JSON syntax error"""

    model_config = DIAGNOSTIC_MODEL_CONFIG

    kind: DiagnosticKind = DiagnosticKind.PARSE_ERROR
    position: int = Field(ge=0, description="0-based character offset of the error")
    message: str = Field(min_length=1)
    line: int = Field(1, ge=1, description="1-based line of the error")
    column: int = Field(1, ge=1, description="1-based column of the error")

    @classmethod
    def from_decode_error(cls, error: JSONDecodeError) -> Self:
        """Build a diagnostic from the codec's own error report"""
        return cls(position=error.pos, message=error.msg, line=error.lineno, column=error.colno)

    @classmethod
    def at_position(cls, text: str, position: int, message: str) -> Self:
        """Build a diagnostic for an offset, deriving line and column from the text"""
        position = max(0, min(position, len(text)))
        line = text.count("\n", 0, position) + 1
        column = position - (text.rfind("\n", 0, position) + 1) + 1
        return cls(position=position, message=message, line=line, column=column)

    def describe(self) -> str:
        """One-line human readable summary"""
        return f"{self.message}: line {self.line} column {self.column} (char {self.position})"


class PathWarning(BaseModel):
    """Non-fatal note attached to a successful lookup"""

    model_config = DIAGNOSTIC_MODEL_CONFIG

    kind: DiagnosticKind = DiagnosticKind.PATH_SYNTAX_AMBIGUOUS
    depth: int = Field(ge=0, description="Index of the segment within the path")
    segment: str
    message: str
