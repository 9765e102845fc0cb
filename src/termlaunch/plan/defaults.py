"""Pending defaults

Window and tab options given before the first --window/--tab land here.
Window-scoped values are applied when a window is created; tab-scoped
values stay here and are resolved when the plan is launched.
"""

from dataclasses import dataclass

from .. import config
from .types import MenubarState, ResolvedTab, TabSpec, WindowSpec


@dataclass
class Defaults:
    """Values set before any window exists

    Window scope (applied by apply_to):
        role: transferred into the next created window, then cleared
        geometry: copied into every new window lacking one
        menubar: transferred into the next created window, then cleared
        fullscreen / maximize: ORed into every new window

    Tab scope (applied by resolve_tab):
        profile, title, working_dir, zoom
    """

    role: str | None = None
    geometry: str | None = None
    menubar: MenubarState = MenubarState.UNSET
    fullscreen: bool = False
    maximize: bool = False

    profile: str | None = None
    title: str | None = None
    working_dir: str | None = None
    zoom: float = config.DEFAULT_ZOOM
    zoom_set: bool = False

    def apply_to(self, window: WindowSpec) -> None:
        """Apply window-scoped defaults to a newly created window."""
        if self.role is not None:
            window.role = self.role
            self.role = None

        if window.geometry is None:
            window.geometry = self.geometry

        if self.menubar.forced:
            window.menubar = self.menubar
            self.menubar = MenubarState.UNSET

        window.start_fullscreen |= self.fullscreen
        window.start_maximized |= self.maximize

    def resolve_tab(self, tab: TabSpec) -> ResolvedTab:
        """Fill unset tab fields from the tab-scoped defaults."""
        if tab.zoom_set:
            zoom = tab.zoom
        elif self.zoom_set:
            zoom = self.zoom
        else:
            zoom = config.DEFAULT_ZOOM

        return ResolvedTab(
            profile=tab.profile if tab.profile is not None else self.profile,
            exec_argv=tab.exec_argv,
            title=tab.title if tab.title is not None else self.title,
            working_dir=tab.working_dir if tab.working_dir is not None else self.working_dir,
            zoom=zoom,
            active=tab.active,
            wait=tab.wait,
            fds=tab.passed_fds,
        )

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "geometry": self.geometry,
            "menubar": self.menubar.value,
            "fullscreen": self.fullscreen,
            "maximize": self.maximize,
            "profile": self.profile,
            "title": self.title,
            "working_dir": self.working_dir,
            "zoom": self.zoom,
            "zoom_set": self.zoom_set,
        }
