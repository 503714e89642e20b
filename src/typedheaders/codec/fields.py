"""src/typedheaders/codec/fields.py

Field tags and per-record dispatch tables.

Records are dataclasses. A field takes part in decoding and encoding when
it is declared with :func:`header`; every other field is ignored. The table
describing a record type is built on first use and cached for the life of
the process.
"""

import dataclasses
import functools
import logging
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type

from typedheaders.codec.contract import Strategy, decode_strategy, encode_strategy
from typedheaders.config import ValuePolicy
from typedheaders.exceptions import BindingError, HeaderError

__all__ = ["HeaderTag", "FieldDescriptor", "header", "fields_for", "field_error"]

logger = logging.getLogger(__name__)

_METADATA_KEY = "typedheaders.header"

_UNION_TYPES = tuple(
    t for t in (typing.Union, getattr(types, "UnionType", None)) if t is not None
)


@dataclass(frozen=True)
class HeaderTag:
    """Configuration attached to a dataclass field by :func:`header`."""

    name: str
    required: Optional[bool] = None
    policy: Optional[ValuePolicy] = None


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Resolved binding between a header name and a record field.

    Attributes:
        attr: Attribute name on the record.
        header: Lower-cased header name.
        value_type: Field type with any ``Optional`` wrapper removed.
        nullable: Whether the annotation allows ``None``.
        required: Whether decoding fails when the header is absent.
        reset_when_absent: Whether an absent header resets the field to a
            fresh default instance of value_type.
        policy: Multi-value policy, or None to use the codec default.
        decode: Decode conversion, None for encode-only types.
        encode: Encode conversion, None for decode-only types.
    """

    attr: str
    header: str
    value_type: Type
    nullable: bool
    required: bool
    reset_when_absent: bool
    policy: Optional[ValuePolicy]
    decode: Optional[Strategy]
    encode: Optional[Strategy]


def header(
    name: str,
    *,
    required: Optional[bool] = None,
    policy: Optional[ValuePolicy] = None,
    default: Any = dataclasses.MISSING,
    default_factory: Callable[[], Any] = dataclasses.MISSING,  # type: ignore[assignment]
) -> Any:
    """
    Declare a dataclass field bound to a header name.

    Args:
        name: Header name (case-insensitive).
        required: Fail decoding when the header is absent. None derives it
            from the field type: ``Optional`` annotations and types with
            ``header_optional = True`` are optional, everything else is
            required.

            When the header is absent, a field that is optional because its
            type sets ``header_optional`` is reset to a fresh instance of that
            type. ``Optional`` fields and fields with ``required=False`` keep
            their current value.
        policy: How to read a multi-valued header. None uses the codec
            default (first value).
        default: Field default, as for :func:`dataclasses.field`.
        default_factory: Field default factory, as for :func:`dataclasses.field`.
    """
    tag = HeaderTag(name=name.lower(), required=required, policy=policy)
    return dataclasses.field(  # type: ignore[call-overload]
        default=default,
        default_factory=default_factory,
        metadata={_METADATA_KEY: tag},
    )


def _unwrap_optional(attr: str, annotation: Any) -> Tuple[Type, bool]:
    if typing.get_origin(annotation) in _UNION_TYPES:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) != 1:
            raise BindingError(f"field {attr!r}: union types are not supported")
        return _unwrap_optional(attr, args[0])[0], True
    if not isinstance(annotation, type):
        raise BindingError(f"field {attr!r}: unsupported annotation {annotation!r}")
    return annotation, False


@functools.lru_cache(maxsize=None)
def fields_for(cls: Type) -> Tuple[FieldDescriptor, ...]:
    """
    Build the dispatch table for a record type.

    Raises:
        BindingError: If cls is not a dataclass or a tagged field has a
            type that can be neither decoded nor encoded.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise BindingError(f"{cls!r} is not a dataclass type")

    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        raise BindingError(
            f"{cls.__name__}: cannot resolve annotations: {exc}"
        ) from exc

    table = []
    for f in dataclasses.fields(cls):
        tag = f.metadata.get(_METADATA_KEY)
        if tag is None:
            continue

        value_type, nullable = _unwrap_optional(f.name, hints[f.name])
        decode = decode_strategy(value_type)
        encode = encode_strategy(value_type)
        if decode is None and encode is None:
            raise BindingError(
                f"field {f.name!r}: type {value_type.__name__} has no header conversion"
            )

        defaultable = getattr(value_type, "header_optional", False) is True
        required = tag.required
        if required is None:
            required = not (nullable or defaultable)
        reset_when_absent = tag.required is None and defaultable and not nullable

        table.append(
            FieldDescriptor(
                attr=f.name,
                header=tag.name,
                value_type=value_type,
                nullable=nullable,
                required=required,
                reset_when_absent=reset_when_absent,
                policy=tag.policy,
                decode=decode,
                encode=encode,
            )
        )

    logger.debug("Built header table for %s: %d field(s)", cls.__name__, len(table))
    return tuple(table)


def field_error(exc: HeaderError, descriptor: FieldDescriptor) -> HeaderError:
    """
    Return exc re-created with the field and header names prefixed.

    Error classes whose constructor does not take a single message are
    returned unchanged.
    """
    try:
        return type(exc)(f"{descriptor.attr} ({descriptor.header}): {exc}")
    except TypeError:
        return exc
