"""Window/tab builder

Stateful builder that turns option events into a LaunchPlan.

Cursors:
- current window: last window of the plan (None before the first one)
- current tab: last tab of the current window

Every window/tab option mutates the pending defaults while no window
exists, and the current window/tab afterwards.
"""

from typing import Callable

from .. import config
from ..adapters.base import FdTransport, ProfileLookup
from ..adapters.fdlist import UnixFdList
from ..core.names import is_valid_app_id
from ..core.values import parse_zoom, shell_parse_argv
from ..errors import BadValueError, ProfileNotFoundError, UsageError
from ..telemetry import Diagnostics, get_logger, metrics
from .fds import FdPassRegistry, parse_fd, validate_fd_target
from .plan import LaunchPlan
from .types import MenubarState, TabSpec, WindowSource, WindowSpec

logger = get_logger(__name__)

FdTransportFactory = Callable[[], FdTransport]


class PlanBuilder:
    """Launch plan builder

    Strings and lists handed to the builder are stored as-is; callers must
    not mutate them afterwards.

    Usage:
        builder = PlanBuilder(profiles=ProfileList.with_default())
        builder.new_tab()
        builder.set_title("build")
        plan = builder.plan
    """

    def __init__(
        self,
        profiles: ProfileLookup,
        plan: LaunchPlan | None = None,
        diagnostics: Diagnostics | None = None,
        fd_transport_factory: FdTransportFactory = UnixFdList,
        new_terminal_mode: str = config.NEW_TERMINAL_MODE,
    ):
        """
        Args:
            profiles: profile lookup collaborator
            plan: plan to build into (a fresh one by default)
            diagnostics: user diagnostic channel
            fd_transport_factory: creates the descriptor transport of a tab
            new_terminal_mode: "tab" lets a first --tab reuse a running window
        """
        self.profiles = profiles
        self.plan = plan if plan is not None else LaunchPlan()
        self.diagnostics = diagnostics or Diagnostics()
        self._fd_transport_factory = fd_transport_factory
        self.new_terminal_mode = new_terminal_mode

    # === Cursors ===

    @property
    def current_window(self) -> WindowSpec | None:
        return self.plan.current_window

    @property
    def current_tab(self) -> TabSpec | None:
        window = self.current_window
        return window.current_tab if window is not None else None

    # === Creation ===

    def add_window(
        self,
        profile: str | None = None,
        implicit_if_first: bool = False,
        source: WindowSource = WindowSource.CLI,
    ) -> WindowSpec:
        """Append a window with one tab and apply pending defaults.

        Args:
            profile: profile UUID of the first tab
            implicit_if_first: mark the window implicit if it is the plan's first
            source: origin tag
        """
        window = WindowSpec(tabs=[TabSpec(profile=profile)], source=source)
        window.implicit = not self.plan.windows and implicit_if_first
        self.plan.defaults.apply_to(window)
        self.plan.windows.append(window)
        metrics.inc("plan.windows")
        logger.debug(
            f"[Builder] New window #{len(self.plan.windows)} "
            f"(profile={profile}, implicit={window.implicit})"
        )
        return window

    def add_tab(self, profile: str | None = None) -> TabSpec:
        """Append a tab to the current window, creating the first window if needed."""
        window = self.current_window
        if window is None:
            window = self.add_window(profile, implicit_if_first=self.new_terminal_mode == "tab")
            return window.current_tab

        tab = TabSpec(profile=profile)
        window.tabs.append(tab)
        return tab

    def ensure_window(self, implicit_if_first: bool = True) -> WindowSpec:
        window = self.current_window
        if window is None:
            window = self.add_window(implicit_if_first=implicit_if_first)
        return window

    def ensure_tab(self) -> TabSpec:
        """Current tab, creating an implicit first window if none exists."""
        return self.ensure_window(implicit_if_first=True).current_tab

    # === Profiles ===

    def _lookup_profile(self, name: str | None, fallback: bool) -> str:
        try:
            return self.profiles.dup_uuid_or_name(name)
        except ProfileNotFoundError:
            if not fallback or name is None:
                raise
        self.diagnostics.warn(
            f"Profile '{name}' specified but not found. "
            "Attempting to fall back to the default profile."
        )
        return self.profiles.dup_uuid_or_name(None)

    def _assign_profile(self, profile: str) -> None:
        if self.plan.windows:
            self.ensure_tab().profile = profile
        else:
            self.plan.defaults.profile = profile

    def set_profile(self, name: str) -> None:
        """--profile: by UUID or name, falling back to the default profile once."""
        self._assign_profile(self._lookup_profile(name, fallback=True))

    def set_profile_id(self, uuid: str) -> None:
        """--profile-id: strictly by UUID."""
        self._assign_profile(self.profiles.dup_uuid(uuid))

    def new_window(self, profile_name: str | None = None, by_id: bool = False) -> WindowSpec:
        """--window[=PROFILE]"""
        profile = None
        if profile_name is not None:
            if by_id:
                profile = self.profiles.dup_uuid(profile_name)
            else:
                profile = self._lookup_profile(profile_name, fallback=True)
        return self.add_window(profile, implicit_if_first=False)

    def new_tab(self, profile_name: str | None = None, by_id: bool = False) -> TabSpec:
        """--tab[=PROFILE]; no default-profile fallback."""
        profile = None
        if profile_name is not None:
            if by_id:
                profile = self.profiles.dup_uuid(profile_name)
            else:
                profile = self._lookup_profile(profile_name, fallback=False)
        return self.add_tab(profile)

    # === Window options ===

    def set_role(self, role: str) -> None:
        """--role: once per window; as a pending default the last one wins."""
        window = self.current_window
        if window is None:
            self.plan.defaults.role = role
            return
        if window.role_from_option:
            raise UsageError("Two roles given for one window")
        window.role = role
        window.role_from_option = True

    def _force_menubar(self, state: MenubarState, option_name: str) -> None:
        window = self.current_window
        if window is None:
            self.plan.defaults.menubar = state
            return

        if window.menubar_from_option:
            if window.menubar is state:
                self.diagnostics.detail(f"“{option_name}” option given twice for the same window")
            else:
                self.diagnostics.warn(
                    f"“{option_name}” conflicts with an earlier menubar option for the same window, ignored"
                )
            return

        window.menubar = state
        window.menubar_from_option = True

    def show_menubar(self) -> None:
        self._force_menubar(MenubarState.SHOWN, "--show-menubar")

    def hide_menubar(self) -> None:
        self._force_menubar(MenubarState.HIDDEN, "--hide-menubar")

    def set_maximize(self) -> None:
        window = self.current_window
        if window is None:
            self.plan.defaults.maximize = True
        else:
            window.start_maximized = True

    def set_fullscreen(self) -> None:
        window = self.current_window
        if window is None:
            self.plan.defaults.fullscreen = True
        else:
            window.start_fullscreen = True

    def set_geometry(self, geometry: str) -> None:
        """--geometry: stored verbatim, last one wins."""
        window = self.current_window
        if window is None:
            self.plan.defaults.geometry = geometry
        else:
            window.geometry = geometry

    def set_active(self) -> None:
        """--active: marks the current tab; earlier marks are kept."""
        self.ensure_tab().active = True

    # === Tab options ===

    def set_title(self, title: str) -> None:
        if self.plan.windows:
            self.ensure_tab().title = title
        else:
            self.plan.defaults.title = title

    def set_working_directory(self, path: str) -> None:
        if self.plan.windows:
            self.ensure_tab().working_dir = path
        else:
            self.plan.defaults.working_dir = path

    def set_command(self, command: str, option_name: str = "--command") -> None:
        """-e/--command (deprecated): shell-split the value."""
        self.warn_deprecated_command(option_name)
        try:
            argv = shell_parse_argv(command)
        except BadValueError as e:
            raise BadValueError(
                f"Argument to “--command/-e” is not a valid command: {e.message}"
            ) from e

        if self.plan.windows:
            self.ensure_tab().exec_argv = argv
        else:
            self.plan.exec_argv = argv

    def set_wait(self) -> None:
        """--wait: once per plan, attaches to the current tab."""
        if self.plan.any_wait:
            raise BadValueError("Can only use --wait once")
        self.plan.any_wait = True
        self.ensure_tab().wait = True

    def pass_fd(self, value: str) -> None:
        """--fd: forward a descriptor into the current tab."""
        fd = parse_fd(value)
        validate_fd_target(fd)

        tab = self.ensure_tab()
        if tab.fds is None:
            tab.fds = FdPassRegistry(self._fd_transport_factory())
        tab.fds.add(fd)
        metrics.inc("fd.passed")

    def set_zoom(self, value: str) -> None:
        zoom = parse_zoom(value, self.diagnostics)
        if self.plan.windows:
            tab = self.ensure_tab()
            tab.zoom = zoom
            tab.zoom_set = True
        else:
            self.plan.defaults.zoom = zoom
            self.plan.defaults.zoom_set = True

    # === Global options ===

    def set_app_id(self, app_id: str) -> None:
        if not is_valid_app_id(app_id):
            raise BadValueError(f'"{app_id}" is not a valid application ID')
        self.plan.server_app_id = app_id

    # === Diagnostics ===

    def warn_deprecated(self, option_name: str) -> None:
        metrics.inc("options.deprecated")
        self.diagnostics.warn(
            f"Option “{option_name}” is deprecated and might be removed in a later version."
        )

    def warn_deprecated_command(self, option_name: str) -> None:
        self.warn_deprecated(option_name)
        self.diagnostics.warn(
            "Use “-- ” to terminate the options and put the command line to execute after it."
        )
