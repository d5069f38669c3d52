# barutil

Small building blocks for writing a desktop status bar. It uses only the standard library.

## Installation

```
pip install barutil
```

To run the tests:

```
pip install "barutil[test]"
pytest
```

## Modules

- `barutil.text`
  - `ltrim`, `rtrim` and `trim` strip the whitespace characters `" \n\r\t\f\v"`.
  - `sanitize_string` escapes `& < > " '` for Pango markup. `&` is escaped first.
  - `column_width` counts terminal columns. Wide and fullwidth characters count as two.
- `barutil.units`
  - `PowFormat(value, unit, binary=False)` is a dataclass. It formats a quantity with the largest fitting prefix: `k`, `M`, `G`, `T` or `P`, and `Ki`, `Mi` and so on when `binary` is true.
  - The format spec `""` gives plain output.
  - `">"` and `"<"` align the text to a fixed width.
  - `"="` pads the coefficient so that the suffixes line up.
  - A width written after the alignment character is accepted and ignored. Any other spec raises `ValueError`.
  - `format_pow(value, unit, binary=False, spec="")` is a shortcut for `format(PowFormat(...), spec)`.
- `barutil.ipc`: the i3/sway IPC wire framing.
  - `IpcCommand` lists the request and event types.
  - `event_mask(event)` gives the bit for an event in a subscription mask.
  - `encode_message(type, payload)` builds a message: magic, length, type and payload.
  - `decode_header(data)` returns `(payload_size, message_type)`. It raises `ValueError` on a short header or a bad magic.
  - `IpcResponse` holds a received message.
- `barutil.rfkill`
  - `RfkillType` and `RfkillOp` name the radio types and the kinds of event.
  - `parse_event(data)` decodes a version-1 event into an `RfkillEvent`. It raises `ValueError` if the data is too short.
  - `Rfkill(rfkill_type, device="/dev/rfkill")` opens the device without blocking. It provides:
    - `fileno()`, so the device can be watched with `select` or a similar loop.
    - `handle_readable()`, to call when the device is readable. It updates `state`, which is true when the radio is soft- or hard-blocked, and calls the callbacks registered with `connect`. It returns `False` once the device should no longer be watched.
    - `close()`. It is also a context manager.
- `barutil.command`
  - `run(cmd)` runs a command through `/bin/sh`. It returns a `CommandResult(exit_code, out)`, with the final newline removed from the output.
  - `run_no_read(cmd)` runs a command and discards its output.
  - For both, an empty command, or one that cannot be started, gives exit code `-1`. A child killed by a signal reports `0`.
  - `spawn(cmd)` starts a background command and returns its pid, or `-1` on failure.
  - `reap_children()` collects the finished background children and returns their pids.
- `barutil.sleeper`: `SleeperThread(func=None)` runs `func` again and again in a daemon thread until `stop()` is called.
  - Inside `func`, `sleep_for(seconds)` and `sleep_until(deadline)` pause. Both return `True` if `wake_up()` or `stop()` ended the sleep early.
  - `start(func)` starts the loop if no function was given at creation.
  - `is_running()` reports whether the loop is still running.
  - `join(timeout=None)` waits for the thread to finish.
  - Using it as a context manager stops and joins the thread on exit.
- `barutil.signal`: `SafeSignal(notify=None)`.
  - `connect(slot)` registers a slot.
  - `emit(*args)`, or calling the signal, delivers at once when called on the thread that created the signal.
  - From any other thread, the arguments are queued and `notify` is called. The owning thread then calls `dispatch()`, which delivers the queued emissions in order and returns how many there were.
- `barutil.records`: plain dataclasses.
  - `BacklightDevice`: equality compares name, actual and max, and ignores `powered`.
  - `ControllerInfo` and `DeviceInfo` describe Bluetooth controllers and devices. A battery percentage outside 0 to 255 raises `ValueError`.
  - `PlayerInfo` with `PlaybackStatus` describes what a media player is playing.
  - `SwaybarConfig` holds the supported subset of a sway bar configuration.
- `barutil.toplevel`
  - `TaskState` and `WorkspaceState` are flag enums.
  - `TaskStatus` has `maximized()`, `minimized()`, `active()` and `fullscreen()`.
  - `WorkspaceStatus` has `is_active()`, `is_urgent()`, `is_hidden()`, `is_empty()` and `is_persistent()`.

## Example

```python
from barutil.units import format_pow
from barutil.text import sanitize_string
from barutil.ipc import IpcCommand, encode_message, decode_header

print(format_pow(1536, "B", True, ""))        # 1.5KiB
print(sanitize_string("<b>Tom & Jerry</b>"))  # &lt;b&gt;Tom &amp; Jerry&lt;/b&gt;
frame = encode_message(IpcCommand.GET_WORKSPACES, "")
print(decode_header(frame))                   # (0, 1)
```

## What it does not do

barutil is a library of parts. It has no bar or window of its own and no command-line program. It does not draw any status modules.

The IPC support covers message framing only. It does not find or connect to the compositor's socket.

There is no configuration file loading. There is no JSON helper or regex rewrite helper, and no time-zone-aware clock formatting.