"""
Password Validator — ordered rule evaluation with per-check diagnostics.

Flow for every check, in list order:
    1. Length guard (min/max): a violation is reported once and stops
       evaluation of the remaining checks
    2. Dispatch on the check kind to its handler
    3. Collect error message, diagnostic and pass flag

Configuration mistakes (missing predicate, missing or invalid pattern, unknown
kind) are failing checks with a descriptive message; they are never raised.
"""
import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from helpkit.config.constants import (
    CATEGORY_CUSTOM,
    CATEGORY_CUSTOM_REGEX,
    CATEGORY_PRESENCE,
    CATEGORY_THRESHOLD,
    CHARACTER_CLASS_NOUNS,
    CHARACTER_CLASS_PATTERNS,
    ERR_CUSTOM_FUNC_MISSING,
    ERR_CUSTOM_REGEX_INVALID,
    ERR_CUSTOM_REGEX_MISSING,
    ERR_INVALID_KIND,
    ERR_TOO_LONG,
    ERR_TOO_SHORT,
    ERROR_TEMPLATES,
)
from helpkit.models.check import Check, CheckKind, ValidationOptions
from helpkit.models.validation import CheckOutcome, Diagnostic, ValidationResult
from helpkit.password.metrics import record_check, record_length_rejection, timed_validation

logger = logging.getLogger(__name__)

_COMPILED_CLASSES: Dict[str, re.Pattern] = {
    kind: re.compile(pattern) for kind, pattern in CHARACTER_CLASS_PATTERNS.items()
}

SIMPLE_CHECKS: List[Check] = [
    Check(kind=CheckKind.UPPERCASE),
    Check(kind=CheckKind.NUMBERS),
    Check(kind=CheckKind.SPACES, negative=True),
]


# ======================================================================
# Shared helpers
# ======================================================================

def evaluate_threshold(count: int, negative: bool, times: Optional[int]) -> CheckOutcome:
    """
    Turn a match count into a pass flag and error category.

    ``times=None`` → presence semantics (any match / no match).
    ``times=n``    → threshold semantics (at least n / at most n).
    """
    if times is None:
        passed = count == 0 if negative else count > 0
        return CheckOutcome(passed=passed, category=CATEGORY_PRESENCE)
    passed = count <= times if negative else count >= times
    return CheckOutcome(passed=passed, category=CATEGORY_THRESHOLD)


def format_error(kind: str, category: str, negative: bool, times: Optional[int]) -> str:
    """Render the generated error message for a failed counting check."""
    singular, plural = CHARACTER_CLASS_NOUNS[kind]
    template = ERROR_TEMPLATES[(category, negative)]
    return template.format(singular=singular, plural=plural, times=times)


# ======================================================================
# Per-kind handlers
# ======================================================================

def _check_custom(check: Check, candidate: str) -> CheckOutcome:
    if check.custom_predicate is None:
        logger.warning("custom check without a predicate")
        return CheckOutcome(False, ERR_CUSTOM_FUNC_MISSING, CATEGORY_CUSTOM)

    passed = bool(check.custom_predicate(candidate))
    return CheckOutcome(
        passed,
        None if passed else check.custom_error_message,
        CATEGORY_CUSTOM,
    )


def _check_custom_regex(check: Check, candidate: str) -> CheckOutcome:
    try:
        pattern = check.compiled_pattern()
    except re.error as e:
        logger.warning("customRegex check with an invalid pattern: %s", e)
        return CheckOutcome(False, ERR_CUSTOM_REGEX_INVALID, CATEGORY_CUSTOM_REGEX)
    if pattern is None:
        logger.warning("customRegex check without a pattern")
        return CheckOutcome(False, ERR_CUSTOM_REGEX_MISSING, CATEGORY_CUSTOM_REGEX)

    matched = pattern.search(candidate) is not None
    passed = not matched if check.negative else matched
    return CheckOutcome(
        passed,
        None if passed else check.custom_error_message,
        CATEGORY_CUSTOM_REGEX,
    )


def _check_character_class(check: Check, candidate: str) -> CheckOutcome:
    kind = check.kind_name
    count = len(_COMPILED_CLASSES[kind].findall(candidate))
    outcome = evaluate_threshold(count, check.negative, check.times)
    if outcome.passed:
        return outcome

    message = check.custom_error_message
    if message is None:
        message = format_error(kind, outcome.category, check.negative, check.times)
    return CheckOutcome(False, message, outcome.category)


_HANDLERS: Dict[CheckKind, Callable[[Check, str], CheckOutcome]] = {
    CheckKind.CUSTOM: _check_custom,
    CheckKind.CUSTOM_REGEX: _check_custom_regex,
    CheckKind.NUMBERS: _check_character_class,
    CheckKind.LETTERS: _check_character_class,
    CheckKind.LOWERCASE: _check_character_class,
    CheckKind.UPPERCASE: _check_character_class,
    CheckKind.SPACES: _check_character_class,
    CheckKind.SYMBOLS: _check_character_class,
}


def evaluate_check(check: Check, candidate: str) -> CheckOutcome:
    """Evaluate a single check; unknown kinds yield a failing outcome."""
    handler = _HANDLERS.get(check.kind) if isinstance(check.kind, CheckKind) else None
    if handler is None:
        logger.warning("Unknown check kind: %r", check.kind)
        return CheckOutcome(False, ERR_INVALID_KIND, None)
    return handler(check, candidate)


# ======================================================================
# Public API
# ======================================================================

def validate(
    candidate: str,
    checks: Sequence[Check],
    options: Optional[ValidationOptions] = None,
) -> ValidationResult:
    """
    Validate *candidate* against *checks* in order.

    The length guard runs before each check, so a length violation adds a
    single error and stops evaluation. An empty check list always passes.

    Args:
        candidate: Password or other string to check.
        checks: Ordered checks to evaluate.
        options: Length bounds and diagnostics switch (defaults from settings).

    Returns:
        ValidationResult with pass flag, ordered errors and optional diagnostics.
    """
    if options is None:
        options = ValidationOptions()

    errors: List[str] = []
    diagnostics: List[Diagnostic] = []
    passed = True

    with timed_validation():
        for check in checks:
            if len(candidate) > options.max_length or len(candidate) < options.min_length:
                too_long = len(candidate) > options.max_length
                errors.append(ERR_TOO_LONG if too_long else ERR_TOO_SHORT)
                record_length_rejection("max" if too_long else "min")
                passed = False
                break

            outcome = evaluate_check(check, candidate)
            metric_kind = check.kind_name if isinstance(check.kind, CheckKind) else "unknown"
            record_check(metric_kind, outcome.passed)
            diagnostics.append(Diagnostic(negative=check.negative, error_category=outcome.category))
            if outcome.error_message is not None:
                errors.append(outcome.error_message)
            if not outcome.passed:
                passed = False

    logger.debug(
        "Validated candidate against %d checks: passed=%s errors=%d",
        len(checks),
        passed,
        len(errors),
    )
    return ValidationResult(
        passed=passed,
        errors=errors,
        diagnostics=diagnostics if options.include_diagnostics else None,
    )


def validate_simple(candidate: str) -> bool:
    """At least one uppercase letter, at least one digit, no whitespace."""
    return validate(candidate, SIMPLE_CHECKS).passed
