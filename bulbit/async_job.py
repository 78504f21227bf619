"""Jobs that run a function once, possibly on another thread, and hand back its result."""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from concurrent.futures import Executor
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class AsyncJob(Generic[T]):
    """Runs ``func`` at most once and keeps its result or the error it raised.

    A thread that waits on a job nobody has started yet runs the job itself.
    """

    def __init__(self, func: Callable[[], T]) -> None:
        self._func = func
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._started = False
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None

    @property
    def started(self) -> bool:
        with self._lock:
            return self._started

    def run(self) -> None:
        """Run the job in the calling thread unless it has already started."""
        with self._lock:
            if self._started:
                return
            self._started = True
        try:
            self._value = self._func()
        except Exception as exc:
            self._error = exc
        finally:
            self._done.set()

    def is_ready(self) -> bool:
        """Return True once the job has finished."""
        return self._done.is_set()

    def wait(self) -> None:
        """Block until the job has finished, running it here if nobody has started it."""
        if not self.is_ready():
            self.run()
        self._done.wait()

    def result(self) -> T:
        """Wait for the job and return its value, re-raising any error it raised."""
        self.wait()
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]


def run_async(func: Callable[..., T], *args: Any, executor: Optional[Executor] = None) -> AsyncJob[T]:
    """Start ``func(*args)`` as a job.

    With an executor the job is submitted to it; without one it runs at once
    in the calling thread.
    """
    job: AsyncJob[T] = AsyncJob(functools.partial(func, *args))
    if executor is None:
        job.run()
    else:
        executor.submit(job.run)
    return job