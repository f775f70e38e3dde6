from __future__ import annotations

from datetime import date, datetime

# en-US month names, fixed so output does not depend on the host locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(value: date | datetime | str) -> str:
    """
    Render a date as a long en-US string, e.g. "January 15, 2024".

    Text input must be ISO 8601 ("2024-06-20" or "2024-06-20T10:30:00Z"); the
    calendar date written in the text is the one rendered.

    Raises:
        ValueError: if the text is not a valid date.
        TypeError: if `value` is neither a date nor a string.
    """
    if isinstance(value, str):
        value = _parse_date_text(value)
    elif isinstance(value, datetime):
        value = value.date()
    elif not isinstance(value, date):
        raise TypeError(f"Expected date, datetime or str, got {type(value).__name__}")

    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def _parse_date_text(text: str) -> date:
    cleaned = text.strip()
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError as exc:
        raise ValueError(f"Cannot interpret {text!r} as a date") from exc


__all__ = ["MONTH_NAMES", "format_date"]
