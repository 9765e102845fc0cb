"""Option parser driver

Runs the whole command line through a PlanBuilder:

1. environment snapshot (startup id, private service/screen vars, display)
2. prescan for -x/--execute/"--"
3. one handler per option action, in command-line order
4. finalize

Any OptionError closes the partially built plan (releasing forwarded
descriptors) before it propagates.
"""

import os
from pathlib import Path
from typing import Callable, Mapping

from rich.console import Console

from .. import config
from ..adapters.base import ProfileLookup, SettingsReader
from ..adapters.fdlist import UnixFdList
from ..adapters.profiles import ProfileList
from ..adapters.settings import EnvSettings
from ..core.names import is_object_path, is_unique_name
from ..errors import OptionError, UnknownOptionError
from ..keyfile.merge import load_config_file
from ..plan.builder import FdTransportFactory, PlanBuilder
from ..plan.finalize import finalize
from ..plan.plan import LaunchPlan
from ..plan.types import WindowSource
from ..telemetry import Diagnostics, get_logger, metrics
from .table import OptionAction
from .tokens import OptionEvent, prescan, tokenize

logger = get_logger(__name__)

Handler = Callable[["OptionParser", OptionEvent], None]


class OptionParser:
    """Feeds option events to a builder.

    Usage:
        parser = OptionParser(PlanBuilder(profiles))
        for event in tokenize(argv):
            parser.handle(event)
    """

    def __init__(self, builder: PlanBuilder, console: Console | None = None):
        self.builder = builder
        self.console = console or Console()

    @property
    def plan(self) -> LaunchPlan:
        return self.builder.plan

    @property
    def diagnostics(self) -> Diagnostics:
        return self.builder.diagnostics

    def handle(self, event: OptionEvent) -> None:
        logger.debug(f"[Parser] {event.spelled} value={event.value!r}")
        metrics.inc("options.handled", {"action": event.spec.action.value})
        _HANDLERS[event.spec.action](self, event)

    # === Global ===

    def _app_id(self, event: OptionEvent) -> None:
        self.builder.set_app_id(event.value)

    def _load_config(self, event: OptionEvent) -> None:
        load_config_file(self.plan, event.value, WindowSource.DEFAULT)

    def _preferences(self, event: OptionEvent) -> None:
        self.plan.show_preferences = True

    def _print_environment(self, event: OptionEvent) -> None:
        self.plan.print_environment = True

    def _version(self, event: OptionEvent) -> None:
        self.console.print(f"termlaunch {config.VERSION}", highlight=False)
        self.plan.close()
        raise SystemExit(0)

    def _verbose(self, event: OptionEvent) -> None:
        self.diagnostics.increase()

    def _quiet(self, event: OptionEvent) -> None:
        self.diagnostics.silence()

    # === Terminal ===

    def _window(self, event: OptionEvent) -> None:
        self.builder.new_window(event.value)

    def _window_by_id(self, event: OptionEvent) -> None:
        self.builder.new_window(event.value, by_id=True)

    def _tab(self, event: OptionEvent) -> None:
        self.builder.new_tab(event.value)

    def _tab_by_id(self, event: OptionEvent) -> None:
        self.builder.new_tab(event.value, by_id=True)

    # === Window ===

    def _show_menubar(self, event: OptionEvent) -> None:
        self.builder.show_menubar()

    def _hide_menubar(self, event: OptionEvent) -> None:
        self.builder.hide_menubar()

    def _maximize(self, event: OptionEvent) -> None:
        self.builder.set_maximize()

    def _fullscreen(self, event: OptionEvent) -> None:
        self.builder.set_fullscreen()

    def _geometry(self, event: OptionEvent) -> None:
        self.builder.set_geometry(event.value)

    def _role(self, event: OptionEvent) -> None:
        self.builder.set_role(event.value)

    def _active(self, event: OptionEvent) -> None:
        self.builder.set_active()

    # === Tab ===

    def _command(self, event: OptionEvent) -> None:
        self.builder.set_command(event.value, event.spelled)

    def _profile(self, event: OptionEvent) -> None:
        self.builder.set_profile(event.value)

    def _profile_id(self, event: OptionEvent) -> None:
        self.builder.set_profile_id(event.value)

    def _title(self, event: OptionEvent) -> None:
        self.builder.set_title(event.value)

    def _working_directory(self, event: OptionEvent) -> None:
        self.builder.set_working_directory(event.value)

    def _wait(self, event: OptionEvent) -> None:
        self.builder.set_wait()

    def _fd(self, event: OptionEvent) -> None:
        self.builder.pass_fd(event.value)

    def _zoom(self, event: OptionEvent) -> None:
        self.builder.set_zoom(event.value)

    # === Internal ===

    def _default_working_directory(self, event: OptionEvent) -> None:
        self.plan.defaults.working_dir = event.value

    def _startup_id(self, event: OptionEvent) -> None:
        self.plan.startup_id = event.value

    # === Retired ===

    def _unsupported(self, event: OptionEvent) -> None:
        self.diagnostics.warn(f"Option “{event.spelled}” is no longer supported in this version.")

    def _unsupported_fatal(self, event: OptionEvent) -> None:
        raise UnknownOptionError(f"Option “{event.spelled}” is no longer supported in this version.")

    # === Session management ===

    def _sm_state_file(self, event: OptionEvent) -> None:
        load_config_file(self.plan, event.value, WindowSource.SESSION)

    def _sm_client_disable(self, event: OptionEvent) -> None:
        self.plan.sm_client_disable = True

    def _sm_client_id(self, event: OptionEvent) -> None:
        self.plan.sm_client_id = event.value

    def _sm_config_prefix(self, event: OptionEvent) -> None:
        self.plan.sm_config_prefix = event.value


_HANDLERS: dict[OptionAction, Handler] = {
    OptionAction.APP_ID: OptionParser._app_id,
    OptionAction.LOAD_CONFIG: OptionParser._load_config,
    OptionAction.PREFERENCES: OptionParser._preferences,
    OptionAction.PRINT_ENVIRONMENT: OptionParser._print_environment,
    OptionAction.VERSION: OptionParser._version,
    OptionAction.VERBOSE: OptionParser._verbose,
    OptionAction.QUIET: OptionParser._quiet,
    OptionAction.WINDOW: OptionParser._window,
    OptionAction.WINDOW_BY_ID: OptionParser._window_by_id,
    OptionAction.TAB: OptionParser._tab,
    OptionAction.TAB_BY_ID: OptionParser._tab_by_id,
    OptionAction.SHOW_MENUBAR: OptionParser._show_menubar,
    OptionAction.HIDE_MENUBAR: OptionParser._hide_menubar,
    OptionAction.MAXIMIZE: OptionParser._maximize,
    OptionAction.FULLSCREEN: OptionParser._fullscreen,
    OptionAction.GEOMETRY: OptionParser._geometry,
    OptionAction.ROLE: OptionParser._role,
    OptionAction.ACTIVE: OptionParser._active,
    OptionAction.COMMAND: OptionParser._command,
    OptionAction.PROFILE: OptionParser._profile,
    OptionAction.PROFILE_ID: OptionParser._profile_id,
    OptionAction.TITLE: OptionParser._title,
    OptionAction.WORKING_DIRECTORY: OptionParser._working_directory,
    OptionAction.WAIT: OptionParser._wait,
    OptionAction.FD: OptionParser._fd,
    OptionAction.ZOOM: OptionParser._zoom,
    OptionAction.DEFAULT_WORKING_DIRECTORY: OptionParser._default_working_directory,
    OptionAction.STARTUP_ID: OptionParser._startup_id,
    OptionAction.UNSUPPORTED: OptionParser._unsupported,
    OptionAction.UNSUPPORTED_FATAL: OptionParser._unsupported_fatal,
    OptionAction.SM_STATE_FILE: OptionParser._sm_state_file,
    OptionAction.SM_CLIENT_DISABLE: OptionParser._sm_client_disable,
    OptionAction.SM_CLIENT_ID: OptionParser._sm_client_id,
    OptionAction.SM_CONFIG_PREFIX: OptionParser._sm_config_prefix,
}


def _snapshot_environment(plan: LaunchPlan, environ: Mapping[str, str], diagnostics: Diagnostics) -> None:
    plan.startup_id = environ.get(config.STARTUP_ID_ENV) or None

    unique_name = environ.get(config.SERVICE_NAME_ENV)
    if unique_name is not None:
        if is_unique_name(unique_name):
            plan.server_unique_name = unique_name
        else:
            diagnostics.warn(
                f'Warning: {config.SERVICE_NAME_ENV} set but "{unique_name}" is not a unique D-Bus name.'
            )

    screen_path = environ.get(config.SCREEN_ENV)
    if screen_path is not None:
        if is_object_path(screen_path):
            plan.parent_screen_object_path = screen_path
        else:
            diagnostics.warn(
                f'Warning: {config.SCREEN_ENV} set but "{screen_path}" is not a valid D-Bus object path.'
            )

    for name in config.DISPLAY_ENVS:
        if environ.get(name):
            plan.display_name = environ[name]
            break


def parse_options(
    argv: list[str],
    profiles: ProfileLookup | None = None,
    settings: SettingsReader | None = None,
    environ: Mapping[str, str] | None = None,
    diagnostics: Diagnostics | None = None,
    fd_transport_factory: FdTransportFactory = UnixFdList,
    cwd: str | None = None,
    console: Console | None = None,
) -> LaunchPlan:
    """Parse a command line (without the program name) into a launch plan.

    Args:
        argv: arguments
        profiles: profile lookup (a list holding only the default profile if None)
        settings: new-terminal-mode source (environment if None)
        environ: environment variables (os.environ if None)
        diagnostics: user diagnostic channel
        fd_transport_factory: creates each tab's descriptor transport
        cwd: default working directory (current directory if None)
        console: output for --version

    Returns:
        The finalized plan. It may still have no window; see ensure_window().

    Raises:
        OptionError: any parse failure; the partial plan is released
        SystemExit: --version
    """
    profiles = profiles if profiles is not None else ProfileList.with_default()
    settings = settings if settings is not None else EnvSettings()
    environ = environ if environ is not None else os.environ
    diagnostics = diagnostics or Diagnostics()

    builder = PlanBuilder(
        profiles,
        diagnostics=diagnostics,
        fd_transport_factory=fd_transport_factory,
        new_terminal_mode=settings.get_new_terminal_mode(),
    )
    plan = builder.plan
    plan.defaults.working_dir = cwd if cwd is not None else str(Path.cwd())
    _snapshot_environment(plan, environ, diagnostics)

    scan = prescan(argv)
    if scan.execute:
        builder.warn_deprecated_command(scan.switch)
    plan.execute = scan.execute
    plan.exec_argv = scan.command

    parser = OptionParser(builder, console)
    try:
        for event in tokenize(scan.options):
            parser.handle(event)
        finalize(builder)
    except OptionError as e:
        logger.debug(f"[Parser] Failed: {e.message}")
        metrics.inc("options.failed", {"kind": e.kind.value})
        plan.close()
        raise

    if plan.startup_id is None:
        diagnostics.detail(f"Warning: {config.STARTUP_ID_ENV} not set and no fallback available.")

    logger.debug(f"[Parser] Plan ready: {len(plan.windows)} window(s)")
    return plan
