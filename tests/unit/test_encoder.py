"""tests/unit/test_encoder.py"""

from dataclasses import dataclass
from typing import Optional

import pytest

from typedheaders import (
    Age,
    CacheControl,
    CodecConfig,
    ContentDisposition,
    ContentType,
    Headers,
    header,
    marshal,
    unmarshal,
)
from typedheaders.exceptions import BindingError, HeaderError, MarshalError
from typedheaders.types.cache_control import TimeDelta


class Etag:
    """Display-only value."""

    def __init__(self, tag):
        self.tag = tag

    def __str__(self):
        return f'"{self.tag}"' if self.tag else ""


@dataclass
class Outgoing:
    server: str = header("server", default="")
    retries: int = header("x-retries", default=0)
    etag: Optional[Etag] = header("etag", default=None)
    cache_control: CacheControl = header("cache-control", default_factory=CacheControl)
    secret: str = "not a header"


@dataclass
class WithContentType:
    content_type: ContentType = header("content-type", default_factory=ContentType)
    age: Age = header("age", default_factory=Age)


class Broken:
    """Structured value whose rendering always fails."""

    def __init__(self, reason=""):
        self.reason = reason

    def unmarshal_header(self, value):
        self.reason = value

    def marshal_header(self):
        raise MarshalError(self.reason)


@dataclass
class TwoBroken:
    first: Broken = header("x-first", default_factory=lambda: Broken("first failed"))
    second: Broken = header(
        "x-second", default_factory=lambda: Broken("second failed")
    )


class CodedError(HeaderError):
    """Error class whose constructor takes a code and a message."""

    def __init__(self, code, msg):
        super().__init__(f"{code}: {msg}")
        self.code = code


class Coded:
    """Value whose rendering fails with CodedError."""

    def __str__(self):
        raise CodedError(7, "bad")


@dataclass
class WithCoded:
    coded: Optional[Coded] = header("x-coded", default=None)


def test_marshal_full_record(wire_headers, response_headers):
    """Test a decoded record encodes back to equivalent values."""
    unmarshal(wire_headers, response_headers)
    out = marshal(response_headers)

    assert isinstance(out, Headers)
    assert out.get_all("content-type") == ["application/json; charset=utf-8"]
    assert out.get_all("content-disposition") == [
        'form-data; name="fieldName"; filename="filename.jpg"'
    ]
    assert out.get_all("cache-control") == ["public, max-age=3600"]
    assert out.get_all("server") == ["Apache"]
    assert out.get_all("age") == ["12"]
    assert out.get_all("content-length") == ["348"]


def test_declaration_order(wire_headers, response_headers):
    """Test headers come out in field declaration order."""
    unmarshal(wire_headers, response_headers)
    assert list(marshal(response_headers)) == [
        "content-type",
        "content-disposition",
        "cache-control",
        "server",
        "age",
        "content-length",
    ]


def test_primitives_and_display():
    """Test str, int and display-only fields."""
    record = Outgoing(server="nginx", retries=2, etag=Etag("abc"))
    out = marshal(record)
    assert out.get_all("server") == ["nginx"]
    assert out.get_all("x-retries") == ["2"]
    assert out.get_all("etag") == ['"abc"']
    assert "secret" not in out


def test_empty_values_omitted():
    """Test None, empty strings and empty Cache-Control are left out."""
    out = marshal(Outgoing(etag=Etag("")))
    assert list(out) == ["x-retries"]
    assert out.get_all("x-retries") == ["0"]


def test_keep_empty_strings_when_configured():
    """Test omit_empty=False emits empty primitive strings."""
    out = marshal(Outgoing(etag=Etag("")), CodecConfig(omit_empty=False))
    assert out.get_all("server") == [""]
    assert "etag" not in out
    assert "cache-control" not in out


def test_cache_control_canonical():
    """Test Cache-Control fields are formatted in canonical order."""
    cc = CacheControl.parse("must-revalidate, x=1, max-age=0, no-cache")
    out = marshal(Outgoing(cache_control=cc))
    assert out.get_all("cache-control") == ["no-cache, max-age=0, must-revalidate, x=1"]


def test_cache_control_mutated_before_encode():
    """Test fields changed after parsing are reflected."""
    cc = CacheControl.parse("public")
    cc.public = False
    cc.s_maxage = TimeDelta("s-maxage", 60, True)
    out = marshal(Outgoing(cache_control=cc))
    assert out.get_all("cache-control") == ["s-maxage=60"]


def test_marshal_error_aborts():
    """Test a failing structured encoder aborts with the field named."""
    with pytest.raises(MarshalError, match=r"content_type \(content-type\)"):
        marshal(WithContentType())


def test_marshal_error_chained():
    """Test the original error is kept as the cause."""
    with pytest.raises(MarshalError) as exc_info:
        marshal(WithContentType())
    assert isinstance(exc_info.value.__cause__, MarshalError)


def test_first_failing_field_reported():
    """Test only the first of several failing fields surfaces."""
    with pytest.raises(
        MarshalError, match=r"^first \(x-first\): first failed$"
    ) as exc_info:
        marshal(TwoBroken())
    assert "second" not in str(exc_info.value)


def test_error_with_custom_constructor_passed_through():
    """Test an error that cannot be re-created surfaces as raised."""
    with pytest.raises(CodedError) as exc_info:
        marshal(WithCoded(coded=Coded()))
    assert exc_info.value.code == 7
    assert str(exc_info.value) == "7: bad"


def test_zero_age_is_emitted():
    """Test integer wrappers render zero instead of omitting it."""
    out = marshal(WithContentType(content_type=ContentType("text/plain")))
    assert out.get_all("age") == ["0"]


def test_record_round_trip():
    """Test an encoded record decodes back to the same values."""
    original = Outgoing(
        server="nginx", retries=3, cache_control=CacheControl.parse("no-store, foo")
    )
    record = Outgoing()
    unmarshal(marshal(original), record)
    assert record.server == "nginx"
    assert record.retries == 3
    assert record.cache_control == original.cache_control


def test_content_disposition_round_trip():
    """Test a disposition survives render then parse."""
    disposition = ContentDisposition("attachment", filename="report.pdf")
    assert ContentDisposition.parse(disposition.marshal_header()) == disposition


@pytest.mark.parametrize("src", [None, Outgoing, {"server": "x"}])
def test_not_a_record(src):
    """Test non-dataclass sources are binding errors."""
    with pytest.raises(BindingError):
        marshal(src)
