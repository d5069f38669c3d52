"""A worker thread that repeatedly runs a function and can be woken or stopped."""

import threading
import time
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

Duration = Union[float, timedelta]
Deadline = Union[float, datetime]


class SleeperThread:
    """Runs ``func`` in a loop until stopped.

    ``func`` should pause with :meth:`sleep_for` or :meth:`sleep_until`, which
    return early (with True) when :meth:`wake_up` or :meth:`stop` is called.
    """

    def __init__(self, func: Optional[Callable[[], None]] = None) -> None:
        self._cond = threading.Condition()
        self._do_run = True
        self._signal = False
        self._thread: Optional[threading.Thread] = None
        if func is not None:
            self.start(func)

    def start(self, func: Callable[[], None]) -> "SleeperThread":
        """Begin running ``func`` repeatedly in a background thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker thread already started")
        self._thread = threading.Thread(target=self._loop, args=(func,), daemon=True)
        self._thread.start()
        return self

    def _loop(self, func: Callable[[], None]) -> None:
        while self.is_running():
            with self._cond:
                self._signal = False
            func()

    def is_running(self) -> bool:
        return self._do_run

    def _predicate(self) -> bool:
        return self._signal or not self._do_run

    def sleep_for(self, seconds: Duration) -> bool:
        """Sleep up to ``seconds``; True if woken or stopped before the time ran out."""
        if isinstance(seconds, timedelta):
            seconds = seconds.total_seconds()
        with self._cond:
            return self._cond.wait_for(self._predicate, timeout=max(0.0, seconds))

    def sleep_until(self, deadline: Deadline) -> bool:
        """Sleep until a wall-clock ``deadline`` (datetime or epoch seconds)."""
        if isinstance(deadline, datetime):
            deadline = deadline.timestamp()
        return self.sleep_for(deadline - time.time())

    def wake_up(self) -> None:
        """End the current (or next) sleep early."""
        with self._cond:
            self._signal = True
            self._cond.notify_all()

    def stop(self) -> None:
        """Ask the loop to finish and wake any sleeper."""
        with self._cond:
            self._signal = True
            self._do_run = False
            self._cond.notify_all()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker thread; True once it has finished."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def __enter__(self) -> "SleeperThread":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
        self.join()