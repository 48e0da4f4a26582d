"""
Shared test fixtures for the helpkit test suite.
"""
import json

import pytest

from helpkit.models.check import Check, CheckKind, ValidationOptions
from helpkit.randomdata.generator import RandomGenerator


# ==========================================================================
# Validation options
# ==========================================================================

@pytest.fixture
def default_options():
    return ValidationOptions(max_length=100, min_length=0)


@pytest.fixture
def diagnostics_options():
    return ValidationOptions(max_length=100, min_length=0, include_diagnostics=True)


# ==========================================================================
# Checks
# ==========================================================================

@pytest.fixture
def strong_checks():
    return [
        Check(kind=CheckKind.UPPERCASE),
        Check(kind=CheckKind.LOWERCASE, times=2),
        Check(kind=CheckKind.NUMBERS),
        Check(kind=CheckKind.SYMBOLS),
        Check(kind=CheckKind.SPACES, negative=True),
    ]


@pytest.fixture
def predicates():
    return {
        "not_admin": lambda candidate: "admin" not in candidate.lower(),
        "even_length": lambda candidate: len(candidate) % 2 == 0,
    }


# ==========================================================================
# Policies
# ==========================================================================

@pytest.fixture
def policy_dict():
    return {
        "options": {"minLength": 8, "maxLength": 32, "passData": True},
        "checks": [
            {"type": "uppercase"},
            {"type": "numbers", "times": 2},
            {"type": "spaces", "negative": True},
            {
                "type": "customRegex",
                "customRegex": "123",
                "negative": True,
                "customError": "password cannot contain 123",
            },
            {"type": "custom", "customFunc": "not_admin", "customError": "password cannot contain admin"},
        ],
    }


@pytest.fixture
def policy_json(policy_dict):
    return json.dumps(policy_dict)


@pytest.fixture
def policy_file(tmp_path, policy_dict):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps(policy_dict), encoding="utf-8")
    return path


# ==========================================================================
# Random generator
# ==========================================================================

@pytest.fixture
def generator():
    return RandomGenerator(seed=1234)
