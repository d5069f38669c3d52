"""State flags of toplevel windows (tasks) and workspaces."""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import List


class TaskState(IntFlag):
    """State bits of a toplevel window."""

    MAXIMIZED = 1 << 0
    MINIMIZED = 1 << 1
    ACTIVE = 1 << 2
    FULLSCREEN = 1 << 3
    INVALID = 1 << 4


class WorkspaceState(IntFlag):
    """State bits of a workspace."""

    ACTIVE = 1 << 0
    URGENT = 1 << 1
    HIDDEN = 1 << 2
    EMPTY = 1 << 3


@dataclass
class TaskStatus:
    """What is known about one toplevel window."""

    id: int
    title: str = ""
    app_id: str = ""
    state: TaskState = TaskState(0)

    def __post_init__(self) -> None:
        self.state = TaskState(self.state)

    def maximized(self) -> bool:
        return bool(self.state & TaskState.MAXIMIZED)

    def minimized(self) -> bool:
        return bool(self.state & TaskState.MINIMIZED)

    def active(self) -> bool:
        return bool(self.state & TaskState.ACTIVE)

    def fullscreen(self) -> bool:
        return bool(self.state & TaskState.FULLSCREEN)


@dataclass
class WorkspaceStatus:
    """What is known about one workspace."""

    id: int
    name: str = ""
    coordinates: List[int] = field(default_factory=list)
    state: WorkspaceState = WorkspaceState(0)
    persistent: bool = False

    def __post_init__(self) -> None:
        self.state = WorkspaceState(self.state)

    def is_active(self) -> bool:
        return bool(self.state & WorkspaceState.ACTIVE)

    def is_urgent(self) -> bool:
        return bool(self.state & WorkspaceState.URGENT)

    def is_hidden(self) -> bool:
        return bool(self.state & WorkspaceState.HIDDEN)

    def is_empty(self) -> bool:
        return bool(self.state & WorkspaceState.EMPTY)

    def is_persistent(self) -> bool:
        return self.persistent