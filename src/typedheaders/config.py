"""src/typedheaders/config.py

Codec configuration.
"""

import enum
from dataclasses import dataclass

__all__ = ["ValuePolicy", "CodecConfig"]


class ValuePolicy(enum.Enum):
    """How a field reads a header that carries more than one value."""

    FIRST = "first"
    """Use the first value and ignore the rest (singleton headers)."""

    JOIN = "join"
    """Join every value with ", " (list headers such as Vary)."""


@dataclass
class CodecConfig:
    """
    Codec configuration.

    Attributes:
        default_policy: Multi-value policy for fields that do not set one.
        omit_empty: Skip primitive string fields whose value is empty when
            encoding. Structured and display encoders always omit empty
            output.
    """

    default_policy: ValuePolicy = ValuePolicy.FIRST
    omit_empty: bool = True
