"""src/typedheaders/http/headers.py

Header collection and merging for typedheaders.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Union, cast

__all__ = ["Headers", "HeadersInput", "merge"]

HeadersInput = Union["Headers", Mapping[str, Union[str, List[str]]]]


class Headers(Mapping[str, str]):
    """
    Case-insensitive dictionary for HTTP headers with support for multiple values.

    Behaves like a dictionary where values are strings. Duplicate headers are
    joined by commas (except Set-Cookie).
    Access raw lists via get_all().

    Instances are not synchronized; callers sharing one collection between
    threads must lock around mutation.
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[HeadersInput] = None):
        self._headers: Dict[str, List[str]] = {}
        if headers:
            if isinstance(headers, Headers):
                headers = headers.to_dict()
            for k, v in headers.items():
                # Support both single values and lists
                if isinstance(v, list):
                    self._headers.setdefault(k.lower(), []).extend(v)
                else:
                    self._headers.setdefault(k.lower(), []).append(v)

    def __getitem__(self, key: str) -> str:
        """Get header value (comma-joined if multiple, except Set-Cookie)."""
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return cast(str, value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get header value.

        Args:
            key: Header name (case-insensitive).
            default: Default value if header not found.

        Returns:
            Comma-joined string for multiple values (except Set-Cookie
            which returns first), or default if not found.
        """
        values = self._headers.get(key.lower())
        if not values:
            return default

        if key.lower() == "set-cookie":
            return values[0]

        return ", ".join(values)

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a header.

        Args:
            key: Header name (case-insensitive).

        Returns:
            Copy of all values for the header, empty list if not found.
        """
        return list(self._headers.get(key.lower(), []))

    def first(self, key: str, default: Any = None) -> Any:
        """Get the first value of a header, or default if not found."""
        values = self._headers.get(key.lower())
        if not values:
            return default
        return values[0]

    def add(self, key: str, value: str) -> None:
        """Append a value, keeping any values already stored under key."""
        self._headers.setdefault(key.lower(), []).append(value)

    def set(self, key: str, value: Union[str, List[str]]) -> None:
        """Replace all values stored under key."""
        self._headers[key.lower()] = list(value) if isinstance(value, list) else [value]

    def to_dict(self) -> Dict[str, List[str]]:
        """Return a copy of the raw storage: lower-cased name to value list."""
        return {k: list(v) for k, v in self._headers.items()}


def merge(*headers: HeadersInput) -> Headers:
    """
    Combine header collections into a new one.

    Keys from the first collection form the base. For every later
    collection, unseen keys are adopted and known keys get their values
    appended, earlier collections first. Values are never deduplicated.
    The inputs are left unmodified.
    """
    out = Headers()
    for h in headers:
        source = h if isinstance(h, Headers) else Headers(h)
        for key in source:
            for value in source.get_all(key):
                out.add(key, value)
    return out
