"""
Constants used across helpkit.
Patterns and message templates are fixed so validation stays deterministic.
"""
from typing import Dict, Tuple

# =============================================================================
# Character-class patterns (one per counting check kind)
# =============================================================================
# "letters" matches a lowercase letter directly followed by an uppercase
# letter, not any single letter.
CHARACTER_CLASS_PATTERNS: Dict[str, str] = {
    "numbers": r"[0-9]",
    "letters": r"[a-z][A-Z]",
    "lowercase": r"[a-z]",
    "uppercase": r"[A-Z]",
    "spaces": r"\s",
    "symbols": r"[`~!@#$%^&*()\-_=+\[{}\]\\|;:'\",<.>/?€£¥₹]",
}

# (singular, plural) noun used in generated error messages
CHARACTER_CLASS_NOUNS: Dict[str, Tuple[str, str]] = {
    "numbers": ("number", "numbers"),
    "letters": ("letter", "letters"),
    "lowercase": ("lowercase letter", "lowercase letters"),
    "uppercase": ("uppercase letter", "uppercase letters"),
    "spaces": ("space", "spaces"),
    "symbols": ("symbol", "symbols"),
}

# =============================================================================
# Error categories (diagnostics)
# =============================================================================
CATEGORY_PRESENCE: str = "presence"
CATEGORY_THRESHOLD: str = "threshold"
CATEGORY_CUSTOM: str = "custom"
CATEGORY_CUSTOM_REGEX: str = "customRegex"

# =============================================================================
# Error message templates, keyed by (category, negative)
# =============================================================================
ERROR_TEMPLATES: Dict[Tuple[str, bool], str] = {
    (CATEGORY_PRESENCE, False): "password has to contain at least one {singular}",
    (CATEGORY_PRESENCE, True): "password cannot contain {plural}",
    (CATEGORY_THRESHOLD, False): "password has to contain {times} or more {plural}",
    (CATEGORY_THRESHOLD, True): "password cannot contain more than {times} {plural}",
}

ERR_TOO_LONG: str = "Password is too long"
ERR_TOO_SHORT: str = "Password is too short"
ERR_CUSTOM_FUNC_MISSING: str = "customFunc has to be defined"
ERR_CUSTOM_REGEX_MISSING: str = "customRegex has to be defined"
ERR_CUSTOM_REGEX_INVALID: str = "customRegex is not a valid regular expression"
ERR_INVALID_KIND: str = "checking type not valid"

# =============================================================================
# Random data defaults
# =============================================================================
RANDOM_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
DEFAULT_RANDOM_STRING_LENGTH: int = 7
DEFAULT_RANDOM_INT_MAX: int = 10000
DEFAULT_KEY_COUNT: int = 7
DEFAULT_ARRAY_LENGTH: int = 7
