"""Watch the kernel rfkill device for soft/hard block changes."""

import errno
import logging
import os
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List

_log = logging.getLogger(__name__)

_EVENT = struct.Struct("=IBBBB")
EVENT_SIZE_V1 = _EVENT.size
_READ_SIZE = 64


class RfkillType(IntEnum):
    """Radio technologies reported by rfkill."""

    ALL = 0
    WLAN = 1
    BLUETOOTH = 2
    UWB = 3
    WIMAX = 4
    WWAN = 5
    GPS = 6
    FM = 7
    NFC = 8


class RfkillOp(IntEnum):
    """Kind of rfkill event."""

    ADD = 0
    DEL = 1
    CHANGE = 2
    CHANGE_ALL = 3


@dataclass(frozen=True)
class RfkillEvent:
    """One event read from the rfkill device."""

    idx: int
    type: int
    op: int
    soft: bool
    hard: bool

    @property
    def blocked(self) -> bool:
        return self.soft or self.hard


def parse_event(data: bytes) -> RfkillEvent:
    """Decode the leading version-1 event from ``data``."""
    if len(data) < EVENT_SIZE_V1:
        raise ValueError(f"Wrong size of RFKILL event: {len(data)} < {EVENT_SIZE_V1}")
    idx, kind, op, soft, hard = _EVENT.unpack_from(data)
    return RfkillEvent(idx=idx, type=kind, op=op, soft=bool(soft), hard=bool(hard))


class Rfkill:
    """Tracks whether radios of one type are blocked.

    Call :meth:`handle_readable` whenever :meth:`fileno` is readable; it
    returns False once the device should no longer be watched.
    """

    def __init__(self, rfkill_type: RfkillType, device: str = "/dev/rfkill") -> None:
        self.rfkill_type = RfkillType(rfkill_type)
        self.state = False
        self._callbacks: List[Callable[[RfkillEvent], None]] = []
        self._fd = os.open(device, os.O_RDONLY | os.O_NONBLOCK)

    def fileno(self) -> int:
        if self._fd < 0:
            raise ValueError("rfkill device is closed")
        return self._fd

    def connect(self, callback: Callable[[RfkillEvent], None]) -> None:
        """Call ``callback`` with each relevant event."""
        self._callbacks.append(callback)

    def handle_readable(self) -> bool:
        """Read one event and update the state."""
        try:
            data = os.read(self.fileno(), _READ_SIZE)
        except BlockingIOError:
            return True
        except OSError as exc:
            if exc.errno == errno.EAGAIN:
                return True
            _log.error("Reading of RFKILL events failed: %s", exc.errno)
            return False

        try:
            event = parse_event(data)
        except ValueError as exc:
            _log.error("%s", exc)
            return True

        if event.type == self.rfkill_type and event.op in (RfkillOp.ADD, RfkillOp.CHANGE):
            self.state = event.blocked
            for callback in list(self._callbacks):
                callback(event)
        return True

    def close(self) -> None:
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> "Rfkill":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()