"""src/typedheaders/codec/decoder.py

Generic decoder: header collection to record.
"""

import dataclasses
import logging
from typing import Any, List, Optional

from typedheaders.codec.contract import Strategy
from typedheaders.codec.fields import FieldDescriptor, field_error, fields_for
from typedheaders.config import CodecConfig, ValuePolicy
from typedheaders.exceptions import BindingError, HeaderError
from typedheaders.http.headers import Headers, HeadersInput
from typedheaders.utils.validators import parse_int

__all__ = ["unmarshal"]

logger = logging.getLogger(__name__)


def _select(values: List[str], policy: ValuePolicy) -> str:
    if policy is ValuePolicy.JOIN:
        return ", ".join(values)
    return values[0]


def _convert(descriptor: FieldDescriptor, raw: str) -> Any:
    tp = descriptor.value_type
    if descriptor.decode is Strategy.STRUCTURED:
        value = tp()
        value.unmarshal_header(raw)
        return value
    if descriptor.decode is Strategy.STRING:
        return tp(raw)
    return tp(parse_int(raw))


def unmarshal(
    headers: HeadersInput, dst: Any, config: Optional[CodecConfig] = None
) -> None:
    """
    Populate a record from a header collection.

    Every field declared with :func:`~typedheaders.codec.fields.header` is
    read; untagged fields are left untouched. Structured value types are
    constructed fresh and handed the raw value, ``str`` and ``int`` fields
    are converted directly.

    An absent header fails a required field. It resets a field whose type
    sets ``header_optional`` (Cache-Control) to a fresh default instance,
    and leaves any other optional field untouched.

    Decoding stops at the first failing field. Fields assigned before the
    failure keep their new values. Decoding the same record from several
    threads at once needs external locking.

    Args:
        headers: Header collection or plain mapping.
        dst: Dataclass instance to populate.
        config: Codec configuration.

    Raises:
        BindingError: If dst is not a dataclass instance, or a required
            header is absent.
        HeaderError: The field's own decode error, prefixed with the field
            and header names.
    """
    if dataclasses.is_dataclass(dst) and isinstance(dst, type):
        raise BindingError(
            f"cannot decode into class {dst.__name__}; pass an instance"
        )
    if not dataclasses.is_dataclass(dst):
        raise BindingError(f"cannot decode into {type(dst).__name__}")

    config = config or CodecConfig()
    if not isinstance(headers, Headers):
        headers = Headers(headers)

    for descriptor in fields_for(type(dst)):
        if descriptor.decode is None:
            continue

        values = headers.get_all(descriptor.header)
        if not values:
            if descriptor.required:
                raise BindingError(
                    f"{descriptor.attr}: missing required header {descriptor.header!r}"
                )
            if descriptor.reset_when_absent:
                logger.debug(
                    "Header %r absent, resetting %s.%s",
                    descriptor.header,
                    type(dst).__name__,
                    descriptor.attr,
                )
                setattr(dst, descriptor.attr, descriptor.value_type())
                continue
            logger.debug(
                "Header %r absent, keeping %s.%s",
                descriptor.header,
                type(dst).__name__,
                descriptor.attr,
            )
            continue

        raw = _select(values, descriptor.policy or config.default_policy)
        try:
            value = _convert(descriptor, raw)
        except HeaderError as exc:
            err = field_error(exc, descriptor)
            if err is exc:
                raise
            raise err from exc
        setattr(dst, descriptor.attr, value)
