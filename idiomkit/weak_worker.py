"""Background workers that never keep themselves alive.

A ``Worker`` hands its update to a detached thread that holds only a weak
reference to it. If the worker is gone by the time the thread runs, the
update is skipped.
"""

from __future__ import annotations

import itertools
import sys
import threading
import time
import weakref
from typing import Iterator, Sequence


class Destination:
    """A thread-safe record of which thread finished which worker's update.

    Keys are worker identifiers, values are thread identifiers. A key that
    is already present keeps its first value. Iteration yields
    ``(worker_id, thread_id)`` pairs ordered by worker identifier.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[int, int] = {}

    def insert(self, value: int) -> None:
        """Record ``value`` as done by the calling thread, unless already recorded."""
        with self._lock:
            self._records.setdefault(value, threading.get_ident())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        with self._lock:
            snapshot = sorted(self._records.items())
        return iter(snapshot)


class Worker:
    """A unit of work with a unique identifier that reports into a ``Destination``."""

    _counter = itertools.count()
    _counter_lock = threading.Lock()
    delay = 0.005

    def __init__(self, out: Destination) -> None:
        with Worker._counter_lock:
            self._id = next(Worker._counter)
        self._out = out

    @property
    def id(self) -> int:
        """The worker's unique identifier."""
        return self._id

    def do_update(self) -> None:
        """Do the (simulated) work and record the result."""
        time.sleep(self.delay)
        self._out.insert(self._id)

    def async_update(self) -> threading.Thread:
        """Run ``do_update`` on a detached thread that holds only a weak reference.

        Returns the started thread; nothing needs to wait for it.
        """
        ref = weakref.ref(self)

        def run() -> None:
            worker = ref()
            if worker is not None:
                worker.do_update()

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        return thread


def main(argv: Sequence[str] | None = None) -> int:
    """Start many workers, drop them, and report how many finished."""
    out = sys.stdout
    result = Destination()

    workers = [Worker(result) for _ in range(100)]
    out.write(f"total workers: {len(workers)}\n")
    for worker in workers:
        worker.async_update()
    out.write(f"done before of the block: {len(result)}\n")
    del worker
    del workers

    out.write(f"done after of the block: {len(result)}\n")
    for worker_id, thread_id in result:
        out.write(f"{worker_id} -> {thread_id}\n")

    time.sleep(0.01)
    out.write(f"done at the end of main: {len(result)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())