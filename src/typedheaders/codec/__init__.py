"""src/typedheaders/codec/__init__.py

Generic field-dispatch codec.

Maps header names to dataclass fields and converts each value through the
conversion contract of its type.
"""

from .contract import Marshaler, Strategy, Unmarshaler
from .decoder import unmarshal
from .encoder import marshal
from .fields import FieldDescriptor, fields_for, header

__all__ = [
    "Marshaler",
    "Unmarshaler",
    "Strategy",
    "FieldDescriptor",
    "fields_for",
    "header",
    "marshal",
    "unmarshal",
]
