"""Launch plan root object."""

from dataclasses import dataclass, field
from typing import Iterator

from .. import config
from .defaults import Defaults
from .types import ResolvedTab, TabSpec, WindowSpec


@dataclass
class LaunchPlan:
    """Launch plan root

    Attributes:
        windows: windows in order
        defaults: values given before the first window/tab
        exec_argv: pending legacy command (-x/--execute, --, -e before any window)
        execute: -x/--execute was used
        startup_id / display_name / server_app_id: launch context
        server_unique_name / parent_screen_object_path: from private env vars
        show_preferences / print_environment: flags without tree effect
        any_wait: --wait was seen
        sm_client_disable / sm_client_id / sm_config_prefix: session management
        verbosity: diagnostic verbosity at the end of parsing
    """

    windows: list[WindowSpec] = field(default_factory=list)
    defaults: Defaults = field(default_factory=Defaults)
    exec_argv: list[str] | None = None
    execute: bool = False
    startup_id: str | None = None
    display_name: str | None = None
    server_app_id: str | None = None
    server_unique_name: str | None = None
    parent_screen_object_path: str | None = None
    show_preferences: bool = False
    print_environment: bool = False
    any_wait: bool = False
    sm_client_disable: bool = False
    sm_client_id: str | None = None
    sm_config_prefix: str | None = None
    verbosity: int = config.DEFAULT_VERBOSITY

    @property
    def current_window(self) -> WindowSpec | None:
        return self.windows[-1] if self.windows else None

    @property
    def first_tab(self) -> TabSpec | None:
        return self.windows[0].tabs[0] if self.windows else None

    def iter_tabs(self) -> Iterator[TabSpec]:
        for window in self.windows:
            yield from window.tabs

    def resolve_tab(self, tab: TabSpec) -> ResolvedTab:
        return self.defaults.resolve_tab(tab)

    def close(self) -> None:
        """Release every window, tab and forwarded descriptor."""
        for window in self.windows:
            window.close()
        self.windows.clear()

    def to_dict(self) -> dict:
        return {
            "windows": [window.to_dict() for window in self.windows],
            "defaults": self.defaults.to_dict(),
            "exec_argv": list(self.exec_argv) if self.exec_argv is not None else None,
            "execute": self.execute,
            "startup_id": self.startup_id,
            "display_name": self.display_name,
            "server_app_id": self.server_app_id,
            "server_unique_name": self.server_unique_name,
            "parent_screen_object_path": self.parent_screen_object_path,
            "show_preferences": self.show_preferences,
            "print_environment": self.print_environment,
            "any_wait": self.any_wait,
            "sm_client_disable": self.sm_client_disable,
            "sm_client_id": self.sm_client_id,
            "sm_config_prefix": self.sm_config_prefix,
            "verbosity": self.verbosity,
        }
