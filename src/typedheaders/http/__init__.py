"""src/typedheaders/http/__init__.py"""

from .headers import Headers, merge

__all__ = ["Headers", "merge"]
