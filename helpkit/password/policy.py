"""
Check policies — declarative password rules loaded from JSON-compatible data.

A policy looks like::

    {
        "options": {"minLength": 8, "maxLength": 64, "passData": false},
        "checks": [
            {"type": "uppercase"},
            {"type": "numbers", "times": 2},
            {"type": "spaces", "negative": true},
            {"type": "customRegex", "customRegex": "123", "negative": true,
             "customError": "password cannot contain 123"},
            {"type": "custom", "customFunc": "not_username"}
        ]
    }

``customFunc`` names are resolved through a caller-supplied registry, since
callables cannot be expressed in JSON.
"""
import json
import logging
import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from jsonschema import ValidationError, validate

from helpkit.config.schemas import CHECK_POLICY_SCHEMA, CHECK_SCHEMA
from helpkit.models.check import Check, ValidationOptions
from helpkit.models.validation import ValidationResult
from helpkit.password import validator

logger = logging.getLogger(__name__)

PredicateRegistry = Dict[str, Callable[[str], bool]]
PolicySource = Union[dict, str, Path]


class PolicyError(ValueError):
    """Raised when a declared policy cannot be turned into checks."""


def check_from_dict(data: dict, predicates: Optional[PredicateRegistry] = None) -> Check:
    """
    Build a :class:`Check` from its JSON form.

    Raises:
        PolicyError: schema violation, unknown predicate name or invalid regex.
    """
    try:
        validate(instance=data, schema=CHECK_SCHEMA)
    except ValidationError as e:
        raise PolicyError(f"Invalid check: {e.message}") from e

    predicate = None
    func_name = data.get("customFunc")
    if func_name is not None:
        if not predicates or func_name not in predicates:
            raise PolicyError(f"Unknown customFunc: {func_name}")
        predicate = predicates[func_name]

    pattern = None
    if "customRegex" in data:
        try:
            pattern = re.compile(data["customRegex"])
        except re.error as e:
            raise PolicyError(f"Invalid customRegex '{data['customRegex']}': {e}") from e

    return Check(
        kind=data["type"],
        times=data.get("times"),
        negative=data.get("negative", False),
        custom_predicate=predicate,
        custom_pattern=pattern,
        custom_error_message=data.get("customError"),
    )


def _read_source(source: PolicySource) -> dict:
    if isinstance(source, dict):
        return source
    if isinstance(source, Path):
        with open(source, encoding="utf-8") as f:
            text = f.read()
    else:
        text = source
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PolicyError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PolicyError("Policy must be a JSON object")
    return data


def load_policy(
    source: PolicySource,
    predicates: Optional[PredicateRegistry] = None,
) -> Tuple[List[Check], ValidationOptions]:
    """
    Parse a policy into checks and options.

    Args:
        source: Policy dict, JSON string or path to a JSON file.
        predicates: Registry resolving ``customFunc`` names.

    Returns:
        ``(checks, options)`` ready for :func:`validator.validate`.
    """
    data = _read_source(source)
    try:
        validate(instance=data, schema=CHECK_POLICY_SCHEMA["schema"])
    except ValidationError as e:
        raise PolicyError(f"Schema violation: {e.message}") from e

    checks = [check_from_dict(item, predicates) for item in data["checks"]]

    raw_options = data.get("options", {})
    option_fields = {
        "max_length": raw_options.get("maxLength"),
        "min_length": raw_options.get("minLength"),
        "include_diagnostics": raw_options.get("passData"),
    }
    options = ValidationOptions(**{k: v for k, v in option_fields.items() if v is not None})

    logger.info(
        "Loaded policy with %d checks (min_length=%d, max_length=%d)",
        len(checks),
        options.min_length,
        options.max_length,
    )
    return checks, options


def validate_with_policy(
    candidate: str,
    source: PolicySource,
    predicates: Optional[PredicateRegistry] = None,
) -> ValidationResult:
    """Load *source* and validate *candidate* against it."""
    checks, options = load_policy(source, predicates)
    return validator.validate(candidate, checks, options)
