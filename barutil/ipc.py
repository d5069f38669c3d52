"""Wire format of the i3/sway IPC protocol."""

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

IPC_MAGIC = b"i3-ipc"
_HEADER = struct.Struct("=II")
HEADER_SIZE = len(IPC_MAGIC) + _HEADER.size

_EVENT_BIT = 1 << 31


class IpcCommand(IntEnum):
    """Message types for requests, replies and events."""

    COMMAND = 0
    GET_WORKSPACES = 1
    SUBSCRIBE = 2
    GET_OUTPUTS = 3
    GET_TREE = 4
    GET_MARKS = 5
    GET_BAR_CONFIG = 6
    GET_VERSION = 7
    GET_BINDING_MODES = 8
    GET_CONFIG = 9
    SEND_TICK = 10
    GET_INPUTS = 100
    GET_SEATS = 101
    EVENT_WORKSPACE = _EVENT_BIT | 0
    EVENT_OUTPUT = _EVENT_BIT | 1
    EVENT_MODE = _EVENT_BIT | 2
    EVENT_WINDOW = _EVENT_BIT | 3
    EVENT_BARCONFIG_UPDATE = _EVENT_BIT | 4
    EVENT_BINDING = _EVENT_BIT | 5
    EVENT_SHUTDOWN = _EVENT_BIT | 6
    EVENT_TICK = _EVENT_BIT | 7
    EVENT_BAR_STATE_UPDATE = _EVENT_BIT | 20
    EVENT_INPUT = _EVENT_BIT | 21


@dataclass(frozen=True)
class IpcResponse:
    """A message received over the IPC socket."""

    size: int
    type: int
    payload: str


def event_mask(event: int) -> int:
    """Bit used for ``event`` in a subscription mask."""
    return 1 << (event & 0x7F)


def encode_message(message_type: int, payload: Union[str, bytes] = "") -> bytes:
    """Build a complete message: magic, length, type and payload."""
    body = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    return IPC_MAGIC + _HEADER.pack(len(body), int(message_type)) + body


def decode_header(data: bytes) -> Tuple[int, int]:
    """Return ``(payload_size, message_type)`` from a message header."""
    if len(data) < HEADER_SIZE:
        raise ValueError(f"IPC header too short: {len(data)} bytes")
    if data[: len(IPC_MAGIC)] != IPC_MAGIC:
        raise ValueError("Invalid IPC magic")
    size, message_type = _HEADER.unpack_from(data, len(IPC_MAGIC))
    return size, message_type