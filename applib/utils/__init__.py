"""
Utility helpers kept intentionally small and stateless.
"""

from .dates import format_date  # noqa: F401
from .jsonutil import safe_json_parse  # noqa: F401
from .text import ALPHABET, random_string  # noqa: F401
from .timing import sleep  # noqa: F401

__all__ = ["ALPHABET", "format_date", "random_string", "safe_json_parse", "sleep"]
