# lazy_image/utils/debounce.py
# Responsibility: Rate-limits re-invocation of a callback (e.g. re-selection on viewport changes).

import threading
import time
from typing import Callable, Optional


class Debouncer:
    """
    Leading-edge throttle.
    The first trigger runs the callback immediately; triggers arriving within
    `delay_ms` afterwards are discarded, not queued.
    """

    def __init__(self, call: Callable[[], None], delay_ms: float,
                 clock: Callable[[], float] = time.monotonic):
        self.call = call
        self.delay = delay_ms / 1000.0
        self.clock = clock
        self._blocked_until: Optional[float] = None
        self._lock = threading.Lock()

    def __call__(self) -> bool:
        """Returns True if this trigger invoked the callback."""
        with self._lock:
            now = self.clock()
            if self._blocked_until is not None and now < self._blocked_until:
                return False
            self._blocked_until = now + self.delay

        self.call()
        return True


def debounce(call: Callable[[], None], delay_ms: float,
             clock: Callable[[], float] = time.monotonic) -> Debouncer:
    return Debouncer(call, delay_ms, clock=clock)
