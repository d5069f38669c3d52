"""Run shell commands and keep track of background children."""

import logging
import subprocess
import threading
from dataclasses import dataclass
from typing import List

_log = logging.getLogger(__name__)

_SHELL = "/bin/sh"

_reap_lock = threading.Lock()
_reap: List[subprocess.Popen] = []


@dataclass(frozen=True)
class CommandResult:
    """Exit code and captured standard output of a finished command."""

    exit_code: int
    out: str


def _exit_status(returncode: int) -> int:
    # A child killed by a signal has no exit status; report 0 as waitpid does.
    if returncode < 0:
        _log.debug("Cmd killed by %d", -returncode)
        return 0
    _log.debug("Cmd exited with code %d", returncode)
    return returncode


def _start(cmd: str, capture: bool) -> subprocess.Popen:
    return subprocess.Popen(
        [_SHELL, "-c", cmd],
        stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
        start_new_session=True,
    )


def run(cmd: str) -> CommandResult:
    """Run ``cmd`` through the shell and return its output without the final newline.

    An empty command, or one that cannot be started, gives exit code -1.
    """
    if not cmd:
        return CommandResult(-1, "")
    try:
        process = _start(cmd, capture=True)
    except OSError as exc:
        _log.error("Unable to exec cmd %s, error %s", cmd, exc)
        return CommandResult(-1, "")
    with process:
        raw = process.stdout.read()
        returncode = process.wait()
    output = raw.decode("utf-8", errors="replace")
    if output.endswith("\n"):
        output = output[:-1]
    return CommandResult(_exit_status(returncode), output)


def run_no_read(cmd: str) -> CommandResult:
    """Run ``cmd`` through the shell, discarding its output."""
    if not cmd:
        return CommandResult(-1, "")
    try:
        process = _start(cmd, capture=False)
    except OSError as exc:
        _log.error("Unable to exec cmd %s, error %s", cmd, exc)
        return CommandResult(-1, "")
    return CommandResult(_exit_status(process.wait()), "")


def spawn(cmd: str) -> int:
    """Start ``cmd`` in the background and return its pid, or -1 on failure.

    The child is remembered until :func:`reap_children` sees it finish.
    """
    if not cmd:
        return -1
    try:
        process = subprocess.Popen([_SHELL, "-c", cmd], start_new_session=True)
    except OSError as exc:
        _log.error("Unable to exec cmd %s, error %s", cmd, exc)
        return -1
    with _reap_lock:
        _reap.append(process)
    _log.debug("Added child to reap list: %d", process.pid)
    return process.pid


def reap_children() -> List[int]:
    """Collect finished background children and return their pids."""
    finished = []
    with _reap_lock:
        for process in list(_reap):
            if process.poll() is not None:
                _reap.remove(process)
                finished.append(process.pid)
    for pid in finished:
        _log.debug("Reaped child %d", pid)
    return finished