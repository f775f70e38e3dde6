"""
User-facing entry points (command line).
"""

from .cli import main, parse_args  # noqa: F401

__all__ = ["main", "parse_args"]
