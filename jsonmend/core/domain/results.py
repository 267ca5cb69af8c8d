# jsonmend/core/domain/results.py

"""Result models returned by repair and path lookup

Both operations report failure as a value. Results are discriminated unions
keyed on ``status`` so callers can ``match`` on them exhaustively.
"""

# Standard library imports
from typing import Literal
from typing import TypeIs

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import SkipValidation

# Local imports
from jsonmend.core.domain.diagnostics import ParseDiagnostic
from jsonmend.core.domain.diagnostics import PathWarning
from jsonmend.core.domain.enums import DiagnosticKind
from jsonmend.core.domain.enums import RepairStep
from jsonmend.core.types.json import JSONType

# Parsed values are handed over as produced by the codec, never re-validated or copied
RESULT_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")

# ============================================================================
# Repair results
# ============================================================================


class Repaired(BaseModel):
    """Text that parses, either as given or after the repair pass"""

    model_config = RESULT_MODEL_CONFIG

    status: Literal["repaired"] = "repaired"
    value: SkipValidation[JSONType]
    canonical_text: str = Field(description="Two-space indented serialization of value")
    repaired_text: str = Field(description="Text that was finally parsed")
    applied_steps: tuple[RepairStep, ...] = ()
    was_valid: bool = Field(False, description="Input parsed without any rewrite")


class Failed(BaseModel):
    """The repair pass did not produce valid JSON

    ``repaired_text`` is kept for display only and must not be treated as
    meaningful JSON.
    """

    model_config = RESULT_MODEL_CONFIG

    status: Literal["failed"] = "failed"
    kind: DiagnosticKind = DiagnosticKind.REPAIR_UNRECOVERABLE
    original_error: ParseDiagnostic
    repair_error: ParseDiagnostic
    repaired_text: str
    applied_steps: tuple[RepairStep, ...] = ()


class Invalid(BaseModel):
    """Strict parse failed and no repair was attempted"""

    model_config = RESULT_MODEL_CONFIG

    status: Literal["invalid"] = "invalid"
    error: ParseDiagnostic


type RepairResult = Repaired | Failed

# What the facade returns when loading text, with repair optionally disabled
type LoadResult = Repaired | Failed | Invalid

# ============================================================================
# Lookup results
# ============================================================================


class Found(BaseModel):
    """A value exists at the requested address"""

    model_config = RESULT_MODEL_CONFIG

    status: Literal["found"] = "found"
    value: SkipValidation[JSONType]
    warnings: tuple[PathWarning, ...] = ()


class PathNotFound(BaseModel):
    """Valid path syntax with no value at that address"""

    model_config = RESULT_MODEL_CONFIG

    status: Literal["not_found"] = "not_found"
    kind: DiagnosticKind = DiagnosticKind.PATH_NOT_FOUND
    depth: int = Field(ge=0, description="Index of the segment that could not be followed")
    segment: str
    reason: str


type LookupResult = Found | PathNotFound


def is_repaired(result: LoadResult) -> TypeIs[Repaired]:
    """Type guard for successful loads"""
    return result.status == "repaired"


def is_found(result: LookupResult) -> TypeIs[Found]:
    """Type guard for successful lookups"""
    return result.status == "found"
