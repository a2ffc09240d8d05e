"""Hand out element indices to a team of threads, then meet at a barrier."""

from __future__ import annotations

import threading
from typing import Callable, Iterator, Optional


class Distributor:
    """Distribute ``nb_elements`` indices among ``nb_threads`` threads.

    Once every index has been handed out, each thread calling :meth:`get`
    joins a barrier; the last one runs ``finalize`` and resets the
    distribution for the next round.
    """

    def __init__(
        self,
        nb_threads: int,
        nb_elements: int,
        finalize: Optional[Callable[[], object]] = None,
    ) -> None:
        if nb_threads <= 0 or nb_elements <= 0:
            raise ValueError("thread and element counts must be positive")
        self.limit = nb_threads
        self.total_elements = nb_elements
        self.finalize = finalize
        self._count = 0
        self._phase = 0
        self._next = 0
        self._cond = threading.Condition()

    def get(self) -> Optional[int]:
        """Return the next index, or None after waiting at the end-of-round barrier."""
        with self._cond:
            if self._next < self.total_elements:
                element = self._next
                self._next += 1
                return element

            self._count += 1
            if self._count >= self.limit:
                self._phase += 1
                self._count = 0
                self._next = 0
                if self.finalize is not None:
                    self.finalize()
                self._cond.notify_all()
            else:
                phase = self._phase
                while phase == self._phase:
                    self._cond.wait()
            return None

    def __iter__(self) -> Iterator[int]:
        while (element := self.get()) is not None:
            yield element