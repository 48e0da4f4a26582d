"""
Check definitions and validation options for the password validator.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Pattern, Union

from pydantic import BaseModel, Field

from helpkit.config import settings


class CheckKind(str, Enum):
    """Closed set of check kinds understood by the validator."""

    CUSTOM = "custom"
    NUMBERS = "numbers"
    LETTERS = "letters"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    SPACES = "spaces"
    SYMBOLS = "symbols"
    CUSTOM_REGEX = "customRegex"

    @classmethod
    def coerce(cls, value: Union["CheckKind", str]) -> Union["CheckKind", str]:
        """Return the enum member for *value*, or *value* unchanged if unknown."""
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class Check:
    """
    A single validation rule.

    ``times=None`` means presence/absence semantics; any integer (including 0)
    switches the counting kinds to threshold semantics. ``negative`` inverts
    the pass condition. Unknown kinds are kept as-is and reported by the
    validator as a configuration error.
    """

    kind: Union[CheckKind, str]
    times: Optional[int] = None
    negative: bool = False
    custom_predicate: Optional[Callable[[str], bool]] = None
    custom_pattern: Optional[Union[str, Pattern[str]]] = None
    custom_error_message: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", CheckKind.coerce(self.kind))
        object.__setattr__(self, "negative", bool(self.negative))
        if self.times is not None and self.times < 0:
            raise ValueError(f"times must be non-negative, got {self.times}")

    @property
    def kind_name(self) -> str:
        return self.kind.value if isinstance(self.kind, CheckKind) else str(self.kind)

    def compiled_pattern(self) -> Optional[Pattern[str]]:
        if self.custom_pattern is None:
            return None
        if isinstance(self.custom_pattern, str):
            return re.compile(self.custom_pattern)
        return self.custom_pattern


class ValidationOptions(BaseModel):
    """Length bounds and output switches for :func:`validate`."""

    max_length: int = Field(default_factory=lambda: settings.DEFAULT_MAX_LENGTH, ge=0)
    min_length: int = Field(default_factory=lambda: settings.DEFAULT_MIN_LENGTH, ge=0)
    include_diagnostics: bool = False
