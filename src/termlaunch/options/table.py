"""Option table

Every recognised option, its arity and the action it triggers.

| Group | Options |
|-------|---------|
| global | --app-id, --load-config, --save-config*, --disable-factory*, --preferences, -p/--print-environment, --version, -v/--verbose, -q/--quiet |
| terminal | --window[=PROFILE], --tab[=PROFILE] |
| window | --show-menubar, --hide-menubar, --maximize, --full-screen, --geometry, --role, --active |
| tab | -e/--command, --profile, -t/--title, --working-directory, --wait, --fd, --zoom |
| internal | --profile-id, --window-with-profile[-internal-id], --tab-with-profile[-internal-id], --default-working-directory, --use-factory*, --startup-id |
| session | --sm-client-disable, --sm-disable, --sm-client-state-file, --sm-client-id, --sm-config-prefix |

(* retired options)

-x/--execute and "--" are not in the table: they end option scanning and
are handled by the pre-scan in tokens.py.
"""

from dataclasses import dataclass
from enum import Enum


class Arity(Enum):
    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"  # only as --name=VALUE


class OptionAction(Enum):
    """Closed set of operations an option can trigger."""

    # global
    APP_ID = "app_id"
    LOAD_CONFIG = "load_config"
    PREFERENCES = "preferences"
    PRINT_ENVIRONMENT = "print_environment"
    VERSION = "version"
    VERBOSE = "verbose"
    QUIET = "quiet"
    # terminal
    WINDOW = "window"
    WINDOW_BY_ID = "window_by_id"
    TAB = "tab"
    TAB_BY_ID = "tab_by_id"
    # window
    SHOW_MENUBAR = "show_menubar"
    HIDE_MENUBAR = "hide_menubar"
    MAXIMIZE = "maximize"
    FULLSCREEN = "fullscreen"
    GEOMETRY = "geometry"
    ROLE = "role"
    ACTIVE = "active"
    # tab
    COMMAND = "command"
    PROFILE = "profile"
    PROFILE_ID = "profile_id"
    TITLE = "title"
    WORKING_DIRECTORY = "working_directory"
    WAIT = "wait"
    FD = "fd"
    ZOOM = "zoom"
    # internal
    DEFAULT_WORKING_DIRECTORY = "default_working_directory"
    STARTUP_ID = "startup_id"
    # retired
    UNSUPPORTED = "unsupported"
    UNSUPPORTED_FATAL = "unsupported_fatal"
    # session management
    SM_STATE_FILE = "sm_state_file"
    SM_CLIENT_DISABLE = "sm_client_disable"
    SM_CLIENT_ID = "sm_client_id"
    SM_CONFIG_PREFIX = "sm_config_prefix"


@dataclass(frozen=True)
class OptionSpec:
    """One option

    Attributes:
        name: long name without dashes
        action: what the option does
        arity: whether it takes a value
        short: single-letter alias
        hidden: left out of help output
        help: help text
        metavar: value placeholder in help output
    """

    name: str
    action: OptionAction
    arity: Arity = Arity.NONE
    short: str | None = None
    hidden: bool = False
    help: str = ""
    metavar: str | None = None


OPTIONS: tuple[OptionSpec, ...] = (
    # === global ===
    OptionSpec("app-id", OptionAction.APP_ID, Arity.REQUIRED, hidden=True, help="Server application ID", metavar="ID"),
    OptionSpec(
        "disable-factory",
        OptionAction.UNSUPPORTED_FATAL,
        hidden=True,
        help="Do not register with the activation nameserver, do not re-use an active terminal",
    ),
    OptionSpec("load-config", OptionAction.LOAD_CONFIG, Arity.REQUIRED, help="Load a terminal configuration file", metavar="FILE"),
    OptionSpec("save-config", OptionAction.UNSUPPORTED, Arity.REQUIRED, hidden=True),
    OptionSpec("preferences", OptionAction.PREFERENCES, help="Show preferences window"),
    OptionSpec(
        "print-environment",
        OptionAction.PRINT_ENVIRONMENT,
        short="p",
        help="Print environment variables to interact with the terminal",
    ),
    OptionSpec("version", OptionAction.VERSION, hidden=True),
    OptionSpec("verbose", OptionAction.VERBOSE, short="v", help="Increase diagnostic verbosity"),
    OptionSpec("quiet", OptionAction.QUIET, short="q", help="Suppress output"),
    # === terminal ===
    OptionSpec(
        "window",
        OptionAction.WINDOW,
        Arity.OPTIONAL,
        help="Open a new window containing a tab with the default profile",
        metavar="PROFILE",
    ),
    OptionSpec(
        "tab",
        OptionAction.TAB,
        Arity.OPTIONAL,
        help="Open a new tab in the last-opened window with the default profile",
        metavar="PROFILE",
    ),
    # === window ===
    OptionSpec("show-menubar", OptionAction.SHOW_MENUBAR, help="Turn on the menubar"),
    OptionSpec("hide-menubar", OptionAction.HIDE_MENUBAR, help="Turn off the menubar"),
    OptionSpec("maximize", OptionAction.MAXIMIZE, help="Maximize the window"),
    OptionSpec("full-screen", OptionAction.FULLSCREEN, help="Full-screen the window"),
    OptionSpec(
        "geometry",
        OptionAction.GEOMETRY,
        Arity.REQUIRED,
        help="Set the window size; for example: 80x24, or 80x24+200+200 (COLSxROWS+X+Y)",
        metavar="GEOMETRY",
    ),
    OptionSpec("role", OptionAction.ROLE, Arity.REQUIRED, help="Set the window role", metavar="ROLE"),
    OptionSpec("active", OptionAction.ACTIVE, help="Set the last specified tab as the active one in its window"),
    # === tab ===
    OptionSpec(
        "command",
        OptionAction.COMMAND,
        Arity.REQUIRED,
        short="e",
        help="Execute the argument to this option inside the terminal",
        metavar="COMMAND",
    ),
    OptionSpec(
        "profile",
        OptionAction.PROFILE,
        Arity.REQUIRED,
        help="Use the given profile instead of the default profile",
        metavar="PROFILE-NAME",
    ),
    OptionSpec("title", OptionAction.TITLE, Arity.REQUIRED, short="t", help="Set the initial terminal title", metavar="TITLE"),
    OptionSpec(
        "working-directory",
        OptionAction.WORKING_DIRECTORY,
        Arity.REQUIRED,
        help="Set the working directory",
        metavar="DIRNAME",
    ),
    OptionSpec("wait", OptionAction.WAIT, help="Wait until the child exits"),
    OptionSpec("fd", OptionAction.FD, Arity.REQUIRED, help="Forward file descriptor", metavar="FD"),
    OptionSpec(
        "zoom",
        OptionAction.ZOOM,
        Arity.REQUIRED,
        help="Set the terminal’s zoom factor (1.0 = normal size)",
        metavar="ZOOM",
    ),
    # === internal ===
    OptionSpec("profile-id", OptionAction.PROFILE_ID, Arity.REQUIRED, hidden=True),
    OptionSpec("window-with-profile", OptionAction.WINDOW, Arity.REQUIRED, hidden=True),
    OptionSpec("tab-with-profile", OptionAction.TAB, Arity.REQUIRED, hidden=True),
    OptionSpec("window-with-profile-internal-id", OptionAction.WINDOW_BY_ID, Arity.REQUIRED, hidden=True),
    OptionSpec("tab-with-profile-internal-id", OptionAction.TAB_BY_ID, Arity.REQUIRED, hidden=True),
    OptionSpec("default-working-directory", OptionAction.DEFAULT_WORKING_DIRECTORY, Arity.REQUIRED, hidden=True),
    OptionSpec("use-factory", OptionAction.UNSUPPORTED, hidden=True),
    OptionSpec("startup-id", OptionAction.STARTUP_ID, Arity.REQUIRED, hidden=True),
    # === session management ===
    OptionSpec("sm-client-disable", OptionAction.SM_CLIENT_DISABLE, hidden=True),
    OptionSpec("sm-client-state-file", OptionAction.SM_STATE_FILE, Arity.REQUIRED, hidden=True),
    OptionSpec("sm-client-id", OptionAction.SM_CLIENT_ID, Arity.REQUIRED, hidden=True),
    OptionSpec("sm-disable", OptionAction.SM_CLIENT_DISABLE, hidden=True),
    OptionSpec("sm-config-prefix", OptionAction.SM_CONFIG_PREFIX, Arity.REQUIRED, hidden=True),
)

LONG_OPTIONS: dict[str, OptionSpec] = {spec.name: spec for spec in OPTIONS}
SHORT_OPTIONS: dict[str, OptionSpec] = {spec.short: spec for spec in OPTIONS if spec.short}

# Options that end option scanning; everything after them is the command
EXECUTE_SWITCHES = ("-x", "--execute")
TERMINATOR = "--"
