"""src/typedheaders/types/content.py

Content-Type and Content-Disposition headers.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from typedheaders.exceptions import ClassificationError, MarshalError, ShapeError

__all__ = ["ContentType", "ContentDisposition", "DISPOSITION_TYPES"]

DISPOSITION_TYPES = ("inline", "attachment", "form-data")


def _attributes(parts: List[str], header: str) -> Iterator[Tuple[str, str]]:
    """Yield (key, value) for each ``key=value`` parameter."""
    for part in parts:
        pair = part.split("=")
        if len(pair) != 2:
            raise ShapeError(f"malformed {header} header")
        yield pair[0].strip(), pair[1].strip()


@dataclass
class ContentType:
    """
    Media type of a resource, with its optional charset and boundary.

    https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Type
    """

    media_type: str = ""
    charset: str = ""
    boundary: str = ""

    @classmethod
    def parse(cls, value: str) -> "ContentType":
        h = cls()
        h.unmarshal_header(value)
        return h

    def unmarshal_header(self, value: str) -> None:
        """
        Raises:
            ShapeError: If the media type is not ``type/subtype`` or a
                parameter is not ``key=value``.
            ClassificationError: If a parameter is not charset or boundary.
        """
        parts = value.split(";")
        media_type = parts[0].strip()
        kinds = media_type.split("/")
        if len(kinds) != 2 or not kinds[0] or not kinds[1]:
            raise ShapeError("invalid media type")
        self.media_type = media_type

        for key, attr in _attributes(parts[1:], "Content-Type"):
            if key == "charset":
                self.charset = attr
            elif key == "boundary":
                self.boundary = attr
            else:
                raise ClassificationError("invalid Content-Type directive")

    def marshal_header(self) -> str:
        if not self.media_type:
            raise MarshalError("media type cannot be empty")
        return str(self)

    def __str__(self) -> str:
        out = self.media_type
        if self.charset:
            out += f"; charset={self.charset}"
        if self.boundary:
            out += f"; boundary={self.boundary}"
        return out


@dataclass
class ContentDisposition:
    """
    Whether content is displayed inline or downloaded, and the names that
    come with it.

    Attributes:
        type: One of inline, attachment or form-data.
        name: Form field name (form-data only).
        filename: Suggested file name, quotes removed.
        filename_star: RFC 5987 encoded file name (``filename*``).

    https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Disposition
    """

    type: str = ""
    name: str = ""
    filename: str = ""
    filename_star: str = ""

    @classmethod
    def parse(cls, value: str) -> "ContentDisposition":
        h = cls()
        h.unmarshal_header(value)
        return h

    def unmarshal_header(self, value: str) -> None:
        parts = value.split(";")
        disposition = parts[0].strip()
        if disposition not in DISPOSITION_TYPES:
            raise ClassificationError("invalid Content-Disposition type")
        self.type = disposition

        for key, attr in _attributes(parts[1:], "Content-Disposition"):
            attr = attr.strip('"')
            if key == "name":
                self.name = attr
            elif key == "filename":
                self.filename = attr
            elif key == "filename*":
                self.filename_star = attr
            else:
                raise ClassificationError("invalid Content-Disposition directive")

    def marshal_header(self) -> str:
        if not self.type:
            raise MarshalError("disposition type cannot be empty")
        return str(self)

    def __str__(self) -> str:
        out = self.type
        if self.name:
            out += f'; name="{self.name}"'
        if self.filename:
            out += f'; filename="{self.filename}"'
        if self.filename_star:
            out += f"; filename*={self.filename_star}"
        return out
