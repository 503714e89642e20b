"""src/typedheaders/utils/validators.py

Validation utilities for typedheaders.
"""

import re

from typedheaders.exceptions import GrammarError

__all__ = ["parse_int"]

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int:
    """
    Parse a base-10 integer header value.

    Raises:
        GrammarError: If value is not an optionally signed run of ASCII digits.
    """
    if not _INT_RE.fullmatch(value):
        raise GrammarError(f"invalid integer value {value!r}")
    return int(value)
