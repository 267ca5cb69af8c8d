# jsonmend/core/domain/path_segment.py

"""Path segment models shared by both path syntaxes"""

# Standard library imports
from typing import Literal
from typing import Self
from typing import TypeIs

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

SEGMENT_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")

# Longer digit runs cannot name a list position
MAX_INDEX_DIGITS = 18


class KeySegment(BaseModel):
    """Object member name"""

    model_config = SEGMENT_MODEL_CONFIG

    type: Literal["key"] = "key"
    key: str

    @property
    def text(self) -> str:
        return self.key


class IndexSegment(BaseModel):
    """Array position

    ``literal`` keeps the digits the index was written with so a lookup
    against an object can fall back to the exact key text (``"007"`` stays
    ``"007"``). It defaults to ``str(index)``.
    """

    model_config = SEGMENT_MODEL_CONFIG

    type: Literal["index"] = "index"
    index: int = Field(ge=0)
    literal: str = Field(pattern=r"^[0-9]+$", max_length=MAX_INDEX_DIGITS)

    @model_validator(mode="before")
    @classmethod
    def default_literal(cls, data: object) -> object:
        if isinstance(data, dict) and "literal" not in data and "index" in data:
            return {**data, "literal": str(data["index"])}
        return data

    @model_validator(mode="after")
    def check_literal(self) -> Self:
        if int(self.literal) != self.index:
            raise ValueError(f"Literal {self.literal!r} does not spell index {self.index}")
        return self

    @property
    def text(self) -> str:
        return self.literal


# Discriminated union for path segments
type PathSegment = KeySegment | IndexSegment

# A path is an ordered sequence of segments from the root to the target
type PathSegments = tuple[PathSegment, ...]


def is_index(segment: PathSegment) -> TypeIs[IndexSegment]:
    """Type guard for index segments"""
    return segment.type == "index"


def is_key(segment: PathSegment) -> TypeIs[KeySegment]:
    """Type guard for key segments"""
    return segment.type == "key"
