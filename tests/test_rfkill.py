import os
import struct

import pytest

from barutil.rfkill import EVENT_SIZE_V1, Rfkill, RfkillOp, RfkillType, parse_event


def _pack(idx, kind, op, soft, hard):
    return struct.pack("=IBBBB", idx, kind, op, soft, hard)


@pytest.fixture
def fifo(tmp_path):
    path = tmp_path / "rfkill"
    os.mkfifo(path)
    return str(path)


@pytest.fixture
def device(fifo):
    watcher = Rfkill(RfkillType.WLAN, fifo)
    writer = os.open(fifo, os.O_WRONLY | os.O_NONBLOCK)
    yield watcher, writer
    os.close(writer)
    watcher.close()


def test_parse_event_round_trip():
    event = parse_event(_pack(7, RfkillType.BLUETOOTH, RfkillOp.CHANGE, 1, 0))
    assert event.idx == 7
    assert event.type == RfkillType.BLUETOOTH
    assert event.op == RfkillOp.CHANGE
    assert event.soft is True and event.hard is False
    assert event.blocked is True


def test_parse_event_ignores_extra_bytes():
    data = _pack(1, RfkillType.WLAN, RfkillOp.ADD, 0, 0) + b"\x05"
    assert parse_event(data) == parse_event(data[:EVENT_SIZE_V1])


def test_parse_short_event_raises():
    with pytest.raises(ValueError):
        parse_event(b"\x00\x01")


def test_matching_event_updates_state(device):
    watcher, writer = device
    seen = []
    watcher.connect(seen.append)
    assert watcher.state is False
    os.write(writer, _pack(0, RfkillType.WLAN, RfkillOp.ADD, 0, 1))
    assert watcher.handle_readable() is True
    assert watcher.state is True
    assert [e.hard for e in seen] == [True]


def test_other_type_is_ignored(device):
    watcher, writer = device
    seen = []
    watcher.connect(seen.append)
    os.write(writer, _pack(0, RfkillType.BLUETOOTH, RfkillOp.CHANGE, 1, 1))
    assert watcher.handle_readable() is True
    assert watcher.state is False
    assert seen == []


def test_delete_op_is_ignored(device):
    watcher, writer = device
    os.write(writer, _pack(0, RfkillType.WLAN, RfkillOp.DEL, 1, 0))
    watcher.handle_readable()
    assert watcher.state is False


def test_no_data_keeps_watching(device):
    watcher, _ = device
    assert watcher.handle_readable() is True
    assert watcher.state is False


def test_short_read_keeps_watching(device):
    watcher, writer = device
    os.write(writer, b"\x01\x02")
    assert watcher.handle_readable() is True
    assert watcher.state is False


def test_closed_device_raises(fifo):
    with Rfkill(RfkillType.WLAN, fifo) as watcher:
        assert watcher.fileno() >= 0
    with pytest.raises(ValueError):
        watcher.fileno()


def test_missing_device_raises(tmp_path):
    with pytest.raises(OSError):
        Rfkill(RfkillType.WLAN, str(tmp_path / "absent"))