from __future__ import annotations

import random
import string

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def random_string(length: int) -> str:
    """
    Return `length` characters drawn uniformly from ALPHABET.
    Not suitable for tokens or secrets; use `secrets` for those.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError("length must be non-negative")
    return "".join(random.choices(ALPHABET, k=length))


__all__ = ["ALPHABET", "random_string"]
