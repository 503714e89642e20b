"""src/typedheaders/exceptions.py

typedheaders Exceptions hierarchy.
"""


class HeaderError(Exception):
    """Base exception for all typedheaders errors."""


class ShapeError(HeaderError):
    """
    Malformed attribute syntax.
    Missing "=", wrong attribute count or an invalid media type shape.
    """


class GrammarError(HeaderError):
    """
    A value does not follow the header grammar.
    Invalid or missing time deltas, non-numeric integers.
    """


class ClassificationError(HeaderError):
    """Unrecognized attribute key or disposition type."""


class BindingError(HeaderError):
    """
    Errors binding a header collection to a record.
    Raised for unsupported destinations, unsupported field types and
    missing required headers.
    """


class MarshalError(HeaderError):
    """A value could not be rendered as header text."""
