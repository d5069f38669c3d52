"""Plain records describing devices, players and bar configuration."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(eq=False)
class BacklightDevice:
    """A backlight and its brightness; equality ignores the power state."""

    name: str = ""
    actual: int = 1
    max: int = 1
    powered: bool = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BacklightDevice):
            return NotImplemented
        return (self.name, self.actual, self.max) == (other.name, other.actual, other.max)

    __hash__ = None  # type: ignore[assignment]


@dataclass
class ControllerInfo:
    """A Bluetooth controller."""

    path: str = ""
    address: str = ""
    address_type: str = ""
    alias: str = ""
    powered: bool = False
    discoverable: bool = False
    pairable: bool = False
    discovering: bool = False


@dataclass
class DeviceInfo:
    """A Bluetooth device; some properties are not provided by every device."""

    path: str = ""
    paired_controller: str = ""
    address: str = ""
    address_type: str = ""
    alias: str = ""
    icon: Optional[str] = None
    paired: bool = False
    trusted: bool = False
    blocked: bool = False
    connected: bool = False
    services_resolved: bool = False
    battery_percentage: Optional[int] = None

    def __post_init__(self) -> None:
        if self.battery_percentage is not None and not 0 <= self.battery_percentage <= 255:
            raise ValueError(f"battery percentage out of range: {self.battery_percentage}")


class PlaybackStatus(Enum):
    """Playback state of a media player."""

    PLAYING = 0
    PAUSED = 1
    STOPPED = 2


@dataclass
class PlayerInfo:
    """What a media player is playing; times are formatted as HH:MM:SS."""

    name: str
    status: PlaybackStatus = PlaybackStatus.STOPPED
    status_string: str = ""
    artist: Optional[str] = None
    album: Optional[str] = None
    title: Optional[str] = None
    length: Optional[str] = None
    position: Optional[str] = None


@dataclass
class SwaybarConfig:
    """The supported subset of a sway bar configuration."""

    id: str = ""
    mode: str = ""
    hidden_state: str = ""