"""src/typedheaders/codec/contract.py

Value conversion contract.

A field's value type takes part in decoding and encoding through the
capabilities below, checked in priority order when a record's field table
is built:

1. ``unmarshal_header(value)`` populates the instance from the raw header
   value, raising a :class:`~typedheaders.exceptions.HeaderError` on failure.
   It must be safe to call on a freshly constructed instance.
2. ``marshal_header()`` returns the canonical text, or raises. An empty
   string means "omit this header".
3. A class-defined ``__str__`` renders text without a failure mode. Such
   types are encoded but never decoded through it.
4. Plain ``str`` and ``int`` (and their subclasses) are converted directly.
"""

import enum
from typing import Optional, Protocol, Type, runtime_checkable

__all__ = [
    "Unmarshaler",
    "Marshaler",
    "Strategy",
    "decode_strategy",
    "encode_strategy",
]


@runtime_checkable
class Unmarshaler(Protocol):
    """Type that can populate itself from a raw header value."""

    def unmarshal_header(self, value: str) -> None:
        ...  # pragma: no cover


@runtime_checkable
class Marshaler(Protocol):
    """Type that can render itself as a header value, or fail."""

    def marshal_header(self) -> str:
        ...  # pragma: no cover


class Strategy(enum.Enum):
    """Conversion used for one field in one direction."""

    STRUCTURED = "structured"
    DISPLAY = "display"
    STRING = "string"
    INTEGER = "integer"


def _is_primitive_int(tp: type) -> bool:
    return issubclass(tp, int) and not issubclass(tp, bool)


def decode_strategy(tp: Type) -> Optional[Strategy]:
    """Pick the decode conversion for a value type, or None if unsupported."""
    if issubclass(tp, Unmarshaler):
        return Strategy.STRUCTURED
    if issubclass(tp, str):
        return Strategy.STRING
    if _is_primitive_int(tp):
        return Strategy.INTEGER
    return None


def encode_strategy(tp: Type) -> Optional[Strategy]:
    """Pick the encode conversion for a value type, or None if unsupported."""
    if issubclass(tp, bool):
        return None
    if issubclass(tp, Marshaler):
        return Strategy.STRUCTURED
    if tp.__str__ not in (object.__str__, str.__str__):
        return Strategy.DISPLAY
    if issubclass(tp, str):
        return Strategy.STRING
    if _is_primitive_int(tp):
        return Strategy.INTEGER
    return None
