"""src/typedheaders/types/cache_control.py

Cache-Control directive parsing and formatting.

Refer to RFC 9111, section 5.2 for the formal specification.

https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Cache-Control
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from typedheaders.exceptions import GrammarError

__all__ = [
    "TimeDelta",
    "Directive",
    "CacheControl",
    "BOOLEAN_DIRECTIVES",
    "TIME_DELTA_DIRECTIVES",
    "CANONICAL_ORDER",
    "parse_cache_control",
    "format_cache_control",
]

_DELTA_SECONDS_RE = re.compile(r"[0-9]+")

# Directive name -> CacheControl attribute.
BOOLEAN_DIRECTIVES: Dict[str, str] = {
    "public": "public",
    "private": "private",
    "no-cache": "no_cache",
    "no-store": "no_store",
    "must-revalidate": "must_revalidate",
    "proxy-revalidate": "proxy_revalidate",
    "immutable": "immutable",
    "no-transform": "no_transform",
    "only-if-cached": "only_if_cached",
}

# Directive name -> (CacheControl attribute, value required).
TIME_DELTA_DIRECTIVES: Dict[str, Tuple[str, bool]] = {
    "max-age": ("max_age", True),
    "s-maxage": ("s_maxage", True),
    "max-stale": ("max_stale", False),
    "min-fresh": ("min_fresh", True),
}

# Output order of recognized directives; extensions follow in stored order.
CANONICAL_ORDER: Tuple[str, ...] = (
    "public",
    "private",
    "no-cache",
    "no-store",
    "max-age",
    "s-maxage",
    "max-stale",
    "min-fresh",
    "must-revalidate",
    "proxy-revalidate",
    "immutable",
    "no-transform",
    "only-if-cached",
)


@dataclass
class TimeDelta:
    """
    A directive carrying an optional number of seconds.

    Attributes:
        name: Directive name, kept even without a value so a bare
            directive formats back unchanged.
        value: Seconds, meaningful only when valid is set.
        valid: Whether the directive carried ``=seconds``.
    """

    name: str
    value: int = 0
    valid: bool = False

    def __post_init__(self) -> None:
        if self.valid and self.value < 0:
            raise GrammarError(f"negative time delta for {self.name}")

    @classmethod
    def parse(cls, token: str, required: bool) -> "TimeDelta":
        """
        Parse ``name`` or ``name=seconds``.

        Args:
            token: Directive text, already trimmed.
            required: Whether the ``=seconds`` part is mandatory.

        Raises:
            GrammarError: If a required value is missing, or the value is not
                a non-negative integer.
        """
        name, sep, raw = token.partition("=")
        if not sep:
            if required:
                raise GrammarError('no "=" present')
            return cls(name=token)
        if not _DELTA_SECONDS_RE.fullmatch(raw):
            raise GrammarError("invalid time delta directive")
        return cls(name=name, value=int(raw), valid=True)

    def __str__(self) -> str:
        if self.valid:
            return f"{self.name}={self.value}"
        return self.name


@dataclass
class Directive:
    """An unrecognized directive, kept as written."""

    name: str
    value: Optional[str] = None

    @property
    def valid(self) -> bool:
        """Whether the directive carried ``=value``."""
        return self.value is not None

    @classmethod
    def parse(cls, token: str) -> "Directive":
        name, sep, value = token.partition("=")
        return cls(name=name, value=value if sep else None)

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}={self.value}"


# pylint: disable=too-many-instance-attributes
@dataclass
class CacheControl:
    """
    Directives for response and request caching.

    All time deltas are measured in seconds. A time delta directive that was
    not present is None; flags that were not present are False. Directives
    outside the recognized set land in ``extensions`` in the order they
    were seen.
    """

    header_optional = True

    # Cacheability
    public: bool = False
    private: bool = False
    no_cache: bool = False
    no_store: bool = False
    # Expiration
    max_age: Optional[TimeDelta] = None
    s_maxage: Optional[TimeDelta] = None
    max_stale: Optional[TimeDelta] = None
    min_fresh: Optional[TimeDelta] = None
    # Revalidation and reloading
    must_revalidate: bool = False
    proxy_revalidate: bool = False
    immutable: bool = False
    # Other
    no_transform: bool = False
    only_if_cached: bool = False
    extensions: List[Directive] = field(default_factory=list)

    @classmethod
    def parse(cls, value: str) -> "CacheControl":
        """Build a CacheControl from a header value."""
        cc = cls()
        cc.unmarshal_header(value)
        return cc

    def unmarshal_header(self, value: str) -> None:
        """
        Apply every directive of a Cache-Control value to this record.

        Parsing stops at the first invalid directive; directives applied
        before it are kept.

        Raises:
            GrammarError: If a time delta directive is malformed.
        """
        for part in value.split(","):
            token = part.strip()
            if not token:
                continue

            attr = BOOLEAN_DIRECTIVES.get(token)
            if attr is not None:
                setattr(self, attr, True)
                continue

            for name, (attr, required) in TIME_DELTA_DIRECTIVES.items():
                if token.startswith(name):
                    try:
                        delta = TimeDelta.parse(token, required)
                    except GrammarError as exc:
                        raise GrammarError(f"invalid {name} directive: {exc}") from exc
                    setattr(self, attr, delta)
                    break
            else:
                self.extensions.append(Directive.parse(token))

    def directives(self) -> List[str]:
        """Render each present directive in canonical order."""
        out = []
        for name in CANONICAL_ORDER:
            if name in BOOLEAN_DIRECTIVES:
                if getattr(self, BOOLEAN_DIRECTIVES[name]):
                    out.append(name)
                continue
            delta = getattr(self, TIME_DELTA_DIRECTIVES[name][0])
            if delta is not None:
                out.append(str(delta))
        out.extend(str(d) for d in self.extensions)
        return out

    def marshal_header(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return ", ".join(self.directives())


def parse_cache_control(value: str) -> CacheControl:
    """Parse a Cache-Control header value."""
    return CacheControl.parse(value)


def format_cache_control(cc: CacheControl) -> str:
    """Format a CacheControl in canonical directive order."""
    return str(cc)
