"""
Typed models describing how random composite values are generated.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from helpkit.config.constants import DEFAULT_RANDOM_INT_MAX, DEFAULT_RANDOM_STRING_LENGTH


class ItemKind(str, Enum):
    """How each value of a generated object/array is produced."""

    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    CUSTOM = "custom"
    CUSTOM_ARRAY = "customArray"


class ContentMode(str, Enum):
    """How a single slot of a content specification is filled."""

    RANDOM_STRING = "randomString"
    LITERAL = "literal"
    RANDOM_NUMBER = "randomNumber"
    ASCENDING = "ascending"


class ContentSlot(BaseModel):
    """
    One ``(mode, literal?)`` entry of a content specification.

    ``literal`` is the value for ``literal`` slots and an optional prefix for
    ``ascending`` slots; other modes ignore it.
    """

    model_config = ConfigDict(frozen=True)

    mode: ContentMode
    literal: Optional[str] = None

    @classmethod
    def from_raw(cls, raw) -> "ContentSlot":
        if isinstance(raw, ContentSlot):
            return raw
        if isinstance(raw, (list, tuple)):
            if not 1 <= len(raw) <= 2:
                raise ValueError(f"content slot must be (mode, literal?), got {raw!r}")
            return cls(mode=raw[0], literal=raw[1] if len(raw) == 2 else None)
        return cls(mode=raw)


class GeneratorOptions(BaseModel):
    """Tuning parameters for random object/array generation."""

    key_length: int = Field(DEFAULT_RANDOM_STRING_LENGTH, ge=1, description="Length of random keys.")
    use_index_as_key: bool = Field(False, description="Objects only: use '0', '1', … as keys.")
    random_string_length: int = Field(DEFAULT_RANDOM_STRING_LENGTH, ge=0)
    random_number_length: int = Field(
        DEFAULT_RANDOM_INT_MAX, ge=0, description="Inclusive upper bound for random numbers."
    )
