"""src/typedheaders/types/__init__.py

Typed header values.
"""

from .cache_control import (
    CacheControl,
    Directive,
    TimeDelta,
    format_cache_control,
    parse_cache_control,
)
from .content import ContentDisposition, ContentType
from .primitives import Age, ContentLength, Int, Server, String

__all__ = [
    "Age",
    "CacheControl",
    "ContentDisposition",
    "ContentLength",
    "ContentType",
    "Directive",
    "Int",
    "Server",
    "String",
    "TimeDelta",
    "format_cache_control",
    "parse_cache_control",
]
