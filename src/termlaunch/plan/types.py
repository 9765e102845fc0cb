"""Launch plan data types

Contains:
- WindowSource: where a window came from (CLI, loaded config, session)
- MenubarState: forced menubar visibility tri-state
- TabSpec: one tab to open
- WindowSpec: one window to open, never without tabs
- ResolvedTab: a tab with pending defaults filled in
"""

from dataclasses import dataclass, field
from enum import Enum

from .. import config
from .fds import FdPassRegistry, PassedFd


class WindowSource(Enum):
    """Window origin tag"""

    CLI = "cli"
    DEFAULT = "default"  # --load-config
    SESSION = "session"  # --sm-client-state-file


class MenubarState(Enum):
    """Menubar visibility; UNSET leaves it to the profile."""

    UNSET = "unset"
    SHOWN = "shown"
    HIDDEN = "hidden"

    @property
    def forced(self) -> bool:
        return self is not MenubarState.UNSET

    @classmethod
    def from_visible(cls, visible: bool) -> "MenubarState":
        return cls.SHOWN if visible else cls.HIDDEN


@dataclass
class TabSpec:
    """Tab to open

    Attributes:
        profile: profile UUID, None uses the pending/default profile
        exec_argv: command to run instead of the shell
        title: initial title
        working_dir: initial working directory
        zoom: font scale
        zoom_set: True when zoom was given explicitly (even as 1.0)
        active: tab should be selected in its window
        wait: caller waits for the child to exit
        fds: descriptors to forward, created on first --fd
    """

    profile: str | None = None
    exec_argv: list[str] | None = None
    title: str | None = None
    working_dir: str | None = None
    zoom: float = config.DEFAULT_ZOOM
    zoom_set: bool = False
    active: bool = False
    wait: bool = False
    fds: FdPassRegistry | None = None

    @property
    def passed_fds(self) -> list[PassedFd]:
        return list(self.fds) if self.fds is not None else []

    def close(self) -> None:
        if self.fds is not None:
            self.fds.close()

    def to_dict(self) -> dict:
        return {
            "profile": self.profile,
            "exec_argv": list(self.exec_argv) if self.exec_argv is not None else None,
            "title": self.title,
            "working_dir": self.working_dir,
            "zoom": self.zoom,
            "zoom_set": self.zoom_set,
            "active": self.active,
            "wait": self.wait,
            "fds": [{"index": e.index, "fd": e.fd} for e in self.passed_fds],
        }


@dataclass
class WindowSpec:
    """Window to open

    Attributes:
        tabs: tabs in order; a window always has at least one
        source: origin tag
        role: window role
        geometry: COLSxROWS[+X+Y], stored verbatim
        start_fullscreen / start_maximized: monotonic flags
        menubar: forced menubar state
        implicit: may be folded into an already running window
        role_from_option: role was set by --role on this window (not inherited)
        menubar_from_option: menubar was forced by an option on this window
    """

    tabs: list[TabSpec]
    source: WindowSource = WindowSource.CLI
    role: str | None = None
    geometry: str | None = None
    start_fullscreen: bool = False
    start_maximized: bool = False
    menubar: MenubarState = MenubarState.UNSET
    implicit: bool = False
    role_from_option: bool = False
    menubar_from_option: bool = False

    def __post_init__(self):
        if not self.tabs:
            raise ValueError("WindowSpec needs at least one tab")

    @property
    def current_tab(self) -> TabSpec:
        return self.tabs[-1]

    @property
    def active_tab(self) -> TabSpec | None:
        """Last tab marked active (ties go to the later tab)."""
        for tab in reversed(self.tabs):
            if tab.active:
                return tab
        return None

    def close(self) -> None:
        for tab in self.tabs:
            tab.close()

    def to_dict(self) -> dict:
        return {
            "source": self.source.value,
            "role": self.role,
            "geometry": self.geometry,
            "start_fullscreen": self.start_fullscreen,
            "start_maximized": self.start_maximized,
            "menubar": self.menubar.value,
            "implicit": self.implicit,
            "tabs": [tab.to_dict() for tab in self.tabs],
        }


@dataclass
class ResolvedTab:
    """Tab values with pending defaults applied (what the launcher uses)."""

    profile: str | None
    exec_argv: list[str] | None
    title: str | None
    working_dir: str | None
    zoom: float
    active: bool
    wait: bool
    fds: list[PassedFd] = field(default_factory=list)
