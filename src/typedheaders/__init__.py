"""src/typedheaders/__init__.py

typedheaders - Typed HTTP header values and a declarative header codec.

typedheaders converts between header collections (a name mapped to one or
more string values) and dataclasses whose fields are tagged with a header
name. It performs no network I/O: header text goes in, typed values come
out, and the other way round.

Key Features:
    - Zero external dependencies
    - Case-insensitive, multi-valued header collection
    - Declarative field binding with per-field absence and multi-value policy
    - Lossless Cache-Control parsing and canonical formatting
    - Content-Type and Content-Disposition parameters
    - Full type hints (PEP 561)

Example:
    Decoding::

        from dataclasses import dataclass

        from typedheaders import CacheControl, ContentType, header, unmarshal

        @dataclass
        class ResponseHeaders:
            content_type: ContentType = header("content-type", default_factory=ContentType)
            cache_control: CacheControl = header("cache-control", default_factory=CacheControl)

        h = ResponseHeaders()
        unmarshal({"Content-Type": "application/json", "Cache-Control": "max-age=60"}, h)
        h.cache_control.max_age.value  # 60

    Encoding::

        from typedheaders import marshal

        marshal(h).get_all("cache-control")  # ["max-age=60"]
"""

from typedheaders.codec import header, marshal, unmarshal
from typedheaders.config import CodecConfig, ValuePolicy
from typedheaders.exceptions import (
    BindingError,
    ClassificationError,
    GrammarError,
    HeaderError,
    MarshalError,
    ShapeError,
)
from typedheaders.http.headers import Headers, merge
from typedheaders.types import (
    Age,
    CacheControl,
    ContentDisposition,
    ContentLength,
    ContentType,
    Directive,
    Int,
    Server,
    String,
    TimeDelta,
)
from typedheaders.version import __version__

__all__ = [
    "Headers",
    "merge",
    "header",
    "marshal",
    "unmarshal",
    "CodecConfig",
    "ValuePolicy",
    "HeaderError",
    "ShapeError",
    "GrammarError",
    "ClassificationError",
    "BindingError",
    "MarshalError",
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
]
