"""Building blocks for status bars: text, units, IPC framing, rfkill, commands, threads, signals and status records."""

__version__ = "0.1.0"