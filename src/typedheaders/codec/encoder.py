"""src/typedheaders/codec/encoder.py

Generic encoder: record to header collection.
"""

import dataclasses
import logging
from typing import Any, Optional

from typedheaders.codec.contract import Strategy
from typedheaders.codec.fields import FieldDescriptor, field_error, fields_for
from typedheaders.config import CodecConfig
from typedheaders.exceptions import BindingError, HeaderError
from typedheaders.http.headers import Headers

__all__ = ["marshal"]

logger = logging.getLogger(__name__)


def _render(descriptor: FieldDescriptor, value: Any) -> str:
    if descriptor.encode is Strategy.STRUCTURED:
        return value.marshal_header()
    if descriptor.encode is Strategy.DISPLAY:
        return str(value)
    if descriptor.encode is Strategy.STRING:
        return str.__str__(value)
    return str(int(value))


def marshal(src: Any, config: Optional[CodecConfig] = None) -> Headers:
    """
    Build a header collection from a record.

    Fields are visited in declaration order. A field holding None, or
    whose conversion yields an empty string, is left out.

    Args:
        src: Dataclass instance to read.
        config: Codec configuration.

    Returns:
        A new :class:`Headers` with one value per emitted field.

    Raises:
        BindingError: If src is not a dataclass instance.
        HeaderError: The first field conversion error, prefixed with the
            field and header names.
    """
    if isinstance(src, type) or not dataclasses.is_dataclass(src):
        raise BindingError(f"cannot encode {src!r}; expected a dataclass instance")

    config = config or CodecConfig()
    out = Headers()
    for descriptor in fields_for(type(src)):
        if descriptor.encode is None:
            continue

        value = getattr(src, descriptor.attr)
        if value is None:
            continue

        try:
            text = _render(descriptor, value)
        except HeaderError as exc:
            err = field_error(exc, descriptor)
            if err is exc:
                raise
            raise err from exc

        keep_empty = descriptor.encode is Strategy.STRING and not config.omit_empty
        if not text and not keep_empty:
            logger.debug("Omitting empty header %r", descriptor.header)
            continue

        out.add(descriptor.header, text)

    return out
