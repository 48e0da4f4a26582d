"""
JSON Schemas for declarative inputs.

Two schemas:
1. CHECK_POLICY_SCHEMA  — password policy: options + ordered checks
2. ITEM_CONTENT_SCHEMA  — content specification slots for the random generator
"""
from typing import List

CHECK_KINDS: List[str] = [
    "custom",
    "numbers",
    "letters",
    "lowercase",
    "uppercase",
    "spaces",
    "symbols",
    "customRegex",
]

CONTENT_MODES: List[str] = ["randomString", "literal", "randomNumber", "ascending"]

# =============================================================================
# 1. Check policy schema
# =============================================================================
CHECK_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["type"],
    "properties": {
        "type": {"type": "string", "enum": CHECK_KINDS},
        "times": {"type": "integer", "minimum": 0},
        "negative": {"type": "boolean"},
        "customFunc": {
            "type": "string",
            "minLength": 1,
            "description": "Name of a predicate in the caller-supplied registry",
        },
        "customRegex": {"type": "string"},
        "customError": {"type": "string"},
    },
}

CHECK_POLICY_SCHEMA: dict = {
    "name": "password_policy_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["checks"],
        "properties": {
            "options": {
                "type": "object",
                "additionalProperties": False,
                "properties": {
                    "maxLength": {"type": "integer", "minimum": 0},
                    "minLength": {"type": "integer", "minimum": 0},
                    "passData": {"type": "boolean"},
                },
            },
            "checks": {
                "type": "array",
                "items": CHECK_SCHEMA,
            },
        },
    },
}

# =============================================================================
# 2. Content specification schema
# =============================================================================
ITEM_CONTENT_SCHEMA: dict = {
    "type": "array",
    "items": {
        "type": "array",
        "minItems": 1,
        "maxItems": 2,
        "prefixItems": [
            {"type": "string", "enum": CONTENT_MODES},
            {"type": ["string", "null"]},
        ],
    },
}
