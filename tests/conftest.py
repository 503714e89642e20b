from dataclasses import dataclass, field
from typing import Optional

import pytest

from typedheaders import (
    Age,
    CacheControl,
    ContentDisposition,
    ContentLength,
    ContentType,
    Server,
    header,
)


@dataclass
class ResponseHeaders:
    """Record covering every built-in header type."""

    content_type: ContentType = header("content-type", default_factory=ContentType)
    content_disposition: Optional[ContentDisposition] = header(
        "content-disposition", default=None
    )
    cache_control: CacheControl = header("cache-control", default_factory=CacheControl)
    server: Server = header("server", default_factory=Server)
    age: Optional[Age] = header("age", default=None)
    content_length: Optional[ContentLength] = header("content-length", default=None)
    note: str = field(default="untouched")


@pytest.fixture
def wire_headers():
    """Header collection as a transport layer would hand it over."""
    return {
        "Content-Type": "application/json; charset=utf-8",
        "Content-Disposition": 'form-data; name="fieldName"; filename="filename.jpg"',
        "Cache-Control": "public, max-age=3600",
        "Server": "Apache",
        "Age": "12",
        "Content-Length": ["348"],
    }


@pytest.fixture
def response_headers():
    """Empty record ready to decode into."""
    return ResponseHeaders()
