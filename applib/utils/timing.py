from __future__ import annotations

import asyncio
import math
import numbers


async def sleep(ms: int) -> None:
    """
    Suspend the current task for at least `ms` milliseconds.

    Always yields to the event loop, even for zero. The deadline is measured on
    the loop's own clock and the task goes back to sleep if the timer fires
    early, so it never resumes before the requested interval has elapsed.

    Raises:
        TypeError: if `ms` is not a real number.
        ValueError: if `ms` is negative or NaN.
    """
    if isinstance(ms, bool) or not isinstance(ms, numbers.Real):
        raise TypeError(f"ms must be a number, got {type(ms).__name__}")
    if math.isnan(ms) or ms < 0:
        raise ValueError(f"ms must be a non-negative number, got {ms}")

    loop = asyncio.get_running_loop()
    deadline = loop.time() + ms / 1000
    await asyncio.sleep(ms / 1000)
    # Timers may fire up to one clock tick ahead of schedule.
    remaining = deadline - loop.time()
    while remaining > 0:
        await asyncio.sleep(remaining)
        remaining = deadline - loop.time()


__all__ = ["sleep"]
