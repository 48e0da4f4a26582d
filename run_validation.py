"""
Validate a password against a JSON policy file.

Usage:
    python run_validation.py POLICY.json [CANDIDATE]

The candidate is read from stdin when not given as an argument.

Exit status:
    0  all checks passed
    1  at least one check failed
    2  the policy could not be loaded
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from helpkit.config import settings
from helpkit.password.policy import PolicyError, validate_with_policy

logger = logging.getLogger("run_validation")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a password against a JSON policy.")
    parser.add_argument("policy", type=Path, help="Path to the policy JSON file")
    parser.add_argument("candidate", nargs="?", help="Candidate string (default: read stdin)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    candidate = args.candidate
    if candidate is None:
        candidate = sys.stdin.readline().rstrip("\n")

    try:
        result = validate_with_policy(candidate, args.policy)
    except (PolicyError, OSError) as e:
        logger.error("Cannot load policy %s: %s", args.policy, e)
        return 2

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
