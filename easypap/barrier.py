"""A reusable thread barrier with a single-execution variant."""

from __future__ import annotations

import threading
from typing import Callable


class Barrier:
    """Block threads until ``count`` of them have arrived."""

    def __init__(self, count: int) -> None:
        if count <= 0:
            raise ValueError("barrier count must be positive")
        self.limit = count
        self._count = 0
        self._phase = 0
        self._cond = threading.Condition()

    def _arrive(self, func: Callable[[], object] | None) -> bool:
        with self._cond:
            self._count += 1
            if self._count >= self.limit:
                self._phase += 1
                self._count = 0
                if func is not None:
                    func()
                self._cond.notify_all()
                return True
            phase = self._phase
            while phase == self._phase:
                self._cond.wait()
            return False

    def wait(self) -> bool:
        """Wait for all threads; return True in exactly one of them."""
        return self._arrive(None)

    def single(self, func: Callable[[], object]) -> bool:
        """Wait like :meth:`wait`, the last arriving thread running ``func`` first."""
        return self._arrive(func)