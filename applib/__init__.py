"""
applib package bootstrap.

Expose the helpers at the top level so callers can import from `applib`
without needing to traverse the package hierarchy.
"""

from .config.settings import Settings, get_settings  # noqa: F401
from .utils import ALPHABET, format_date, random_string, safe_json_parse, sleep  # noqa: F401

__all__ = [
    "ALPHABET",
    "Settings",
    "format_date",
    "get_settings",
    "random_string",
    "safe_json_parse",
    "sleep",
]
