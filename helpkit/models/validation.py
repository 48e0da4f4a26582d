"""
ValidationResult — encapsulates the password validation outcome.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CheckOutcome:
    """Uniform record produced by every check handler."""

    passed: bool
    error_message: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class Diagnostic:
    """Per-check metadata returned when diagnostics are requested."""

    negative: bool
    error_category: Optional[str]

    def to_dict(self) -> dict:
        return {"negative": self.negative, "errorCategory": self.error_category}


@dataclass
class ValidationResult:
    """Result of evaluating a list of checks against a candidate."""

    passed: bool
    errors: List[str] = field(default_factory=list)
    diagnostics: Optional[List[Diagnostic]] = None

    def to_dict(self) -> dict:
        data = {"passed": self.passed, "errors": list(self.errors)}
        if self.diagnostics is not None:
            data["diagnostics"] = [d.to_dict() for d in self.diagnostics]
        return data
