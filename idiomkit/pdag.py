"""Run a graph of dependent calls in parallel using futures.

``asynchronize`` and ``async_adapter`` wrap plain functions so that nesting
calls to the wrapped versions builds a dependency graph; calling the result
launches every node on its own thread and returns a future.
"""

from __future__ import annotations

import argparse
import functools
import sys
import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, Sequence

Launcher = Callable[[], "Future[Any]"]


def _launch(fn: Callable[..., Any], *args: Any) -> Future[Any]:
    """Run ``fn(*args)`` on a new thread and return its future."""
    future: Future[Any] = Future()

    def run() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=run, daemon=True).start()
    return future


def asynchronize(f: Callable[..., Any]) -> Callable[..., Launcher]:
    """Turn ``f`` into a function that binds arguments and returns a launcher.

    ``asynchronize(f)(a, b)()`` runs ``f(a, b)`` on its own thread and
    returns the future of its result.
    """

    def bind(*args: Any) -> Launcher:
        def launch() -> Future[Any]:
            return _launch(f, *args)

        return launch

    return bind


def future_unwrap(f: Callable[..., Any]) -> Callable[..., Any]:
    """Turn ``f`` into a function that takes futures and passes on their results."""

    def unwrap(*futures: Future[Any]) -> Any:
        return f(*(future.result() for future in futures))

    return unwrap


def async_adapter(f: Callable[..., Any]) -> Callable[..., Launcher]:
    """Turn ``f`` into a function of launchers that returns a launcher.

    Calling the returned launcher starts every argument launcher, then runs
    ``f`` on their results on its own thread once they are ready.
    """

    def bind(*launchers: Launcher) -> Launcher:
        def launch() -> Future[Any]:
            futures = [launcher() for launcher in launchers]
            return _launch(future_unwrap(f), *futures)

        return launch

    return bind


def create(s: str, scale: float = 1.0) -> str:
    """Return a copy of ``s`` after a costly pause of 3 time units."""
    time.sleep(3 * scale)
    return str(s)


def concat(s1: str, s2: str, scale: float = 1.0) -> str:
    """Join two strings after a costly pause of 5 time units."""
    time.sleep(5 * scale)
    return s1 + s2


def twice(s: str, scale: float = 1.0) -> str:
    """Repeat ``s`` twice after a costly pause of 3 time units."""
    time.sleep(3 * scale)
    return s + s


class Stopwatch:
    """Measures whole seconds elapsed since it was started."""

    def __init__(self) -> None:
        self._start = time.monotonic()

    def start(self) -> None:
        """Restart the measurement."""
        self._start = time.monotonic()

    def secs(self) -> int:
        """Return the whole seconds elapsed since the start."""
        return int(time.monotonic() - self._start)


def serial_version(scale: float = 1.0) -> str:
    """Compute the sample result one call after another."""
    return concat(
        twice(
            concat(create("foo ", scale), create("bar ", scale), scale),
            scale,
        ),
        concat(create("this ", scale), create("that ", scale), scale),
        scale,
    )


def parallelized_version(scale: float = 1.0) -> str:
    """Compute the sample result with independent calls running in parallel."""
    pcreate = asynchronize(create)
    pconcat = async_adapter(functools.partial(concat, scale=scale))
    ptwice = async_adapter(functools.partial(twice, scale=scale))

    result = pconcat(
        ptwice(
            pconcat(pcreate("foo ", scale), pcreate("bar ", scale)),
        ),
        pconcat(pcreate("this ", scale), pcreate("that ", scale)),
    )
    return result().result()


def main(argv: Sequence[str] | None = None) -> int:
    """Time the serial and the parallel computation."""
    parser = argparse.ArgumentParser(description="Compare serial and parallel evaluation.")
    parser.add_argument("--scale", type=float, default=1.0, help="seconds per time unit")
    args = parser.parse_args(argv)

    out = sys.stdout
    watch = Stopwatch()
    out.write(serial_version(args.scale) + "\n")
    out.write(f"*** time elapsed: {watch.secs()} seconds\n")

    watch.start()
    out.write(parallelized_version(args.scale) + "\n")
    out.write(f"*** time elapsed: {watch.secs()} seconds\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())