"""
Process-wide random source for backoff jitter.
"""

import random
import threading
import time


class LockedRandom:
    """Thread-safe wrapper around :class:`random.Random`.

    Every draw holds the lock for the duration of a single state update, so
    concurrent callers never interleave on the generator state.
    """

    def __init__(self, seed: int | None = None):
        self._lock = threading.Lock()
        self._rand = random.Random(seed)

    def intn(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"intn requires n > 0, got {n}")
        with self._lock:
            return self._rand.randrange(n)


seeded_rand = LockedRandom(time.time_ns())
