"""
Clock source for code generation.

A clock is any zero-argument callable returning Unix epoch seconds as a float.
"""

import time
from typing import Callable

Clock = Callable[[], float]


def system_clock() -> float:
    """Return the current Unix time from the system clock."""
    return time.time()
