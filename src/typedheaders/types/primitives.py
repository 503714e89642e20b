"""src/typedheaders/types/primitives.py

Single-value string and integer headers.
"""

from dataclasses import dataclass

from typedheaders.exceptions import GrammarError
from typedheaders.utils.validators import parse_int

__all__ = ["String", "Int", "Server", "Age", "ContentLength"]


@dataclass
class String:
    """Header holding an opaque string."""

    value: str = ""

    def unmarshal_header(self, value: str) -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value


@dataclass
class Int:
    """Header holding a base-10 integer."""

    value: int = 0

    def unmarshal_header(self, value: str) -> None:
        self.value = parse_int(value)

    def __str__(self) -> str:
        return str(self.value)


class Server(String):
    """
    Server header.

    https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Server
    """


class ContentLength(Int):
    """Content-Length header, the size of the body in bytes."""


@dataclass
class Age(Int):
    """
    Number of seconds an object has been in a proxy cache.
    The value is never negative.

    https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Age
    """

    def __post_init__(self) -> None:
        if self.value < 0:
            raise GrammarError("age cannot be negative")

    @classmethod
    def new(cls, seconds: int) -> "Age":
        """Create an Age header, rejecting negative values."""
        return cls(seconds)

    def unmarshal_header(self, value: str) -> None:
        seconds = parse_int(value)
        if seconds < 0:
            raise GrammarError("age cannot be negative")
        self.value = seconds
