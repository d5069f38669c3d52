"""A signal that delivers emissions from any thread on its owner thread."""

import threading
from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple


class SafeSignal:
    """Thread-safe signal.

    Emissions from the thread that created the signal are delivered at once.
    Emissions from other threads are queued and ``notify`` is called; the owner
    thread then calls :meth:`dispatch` to deliver them in order.
    """

    def __init__(self, notify: Optional[Callable[[], None]] = None) -> None:
        self._slots: List[Callable[..., Any]] = []
        self._queue: Deque[Tuple[Any, ...]] = deque()
        self._lock = threading.Lock()
        self._owner = threading.get_ident()
        self._notify = notify

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``slot`` to receive every emission."""
        self._slots.append(slot)
        return slot

    def _deliver(self, args: Tuple[Any, ...]) -> None:
        for slot in list(self._slots):
            slot(*args)

    def emit(self, *args: Any) -> None:
        """Deliver now on the owner thread, otherwise queue for :meth:`dispatch`."""
        if threading.get_ident() == self._owner:
            self._deliver(args)
            return
        with self._lock:
            self._queue.append(args)
        if self._notify is not None:
            self._notify()

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def dispatch(self) -> int:
        """Deliver all queued emissions; return how many were delivered."""
        delivered = 0
        while True:
            with self._lock:
                if not self._queue:
                    return delivered
                args = self._queue.popleft()
            self._deliver(args)
            delivered += 1