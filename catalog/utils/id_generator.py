"""
Client-side identifiers for products and comments created in view memory.
"""

from __future__ import annotations

import time
from typing import Callable, Container, Optional


def _now_ms() -> int:
    return int(time.time() * 1000)


class MonotonicIdGenerator:
    """Strictly increasing integer ids seeded from the wall clock in milliseconds.

    Two calls in the same millisecond still get distinct ids, and ids listed in
    ``taken`` (e.g. ids the product service already assigned) are skipped.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _now_ms
        self._last = 0

    def next_id(self, taken: Container[int] = ()) -> int:
        candidate = max(self._clock(), self._last + 1)
        while candidate in taken:
            candidate += 1
        self._last = candidate
        return candidate


# Shared by every view in the process
default_id_generator = MonotonicIdGenerator()
