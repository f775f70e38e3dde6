from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

logger = logging.getLogger("applib")

T = TypeVar("T")


def safe_json_parse(text: str | bytes, fallback: T) -> Any | T:
    """
    Decode JSON text, returning `fallback` itself (not a copy) when it cannot
    be parsed. Never raises.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("JSON parse failed, returning fallback: %s", exc)
        return fallback


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not part of standard JSON.
    raise ValueError(f"Non-standard JSON constant: {name}")


__all__ = ["safe_json_parse"]
