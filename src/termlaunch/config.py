"""termlaunch configuration

Settings fall into these groups:
- Saved config documents: group/key names and supported versions
- Zoom: clamp bounds and neutral factor
- Settings: the persisted new-terminal mode
- Environment: names of the variables read at parse time
- Logging: CLI log level and initial diagnostic verbosity
"""

import os

VERSION = "0.3.0"

# === Saved config documents ===
CONFIG_GROUP = "Terminal Configuration"  # root group name
CONFIG_PROP_VERSION = "Version"
CONFIG_PROP_COMPAT_VERSION = "CompatVersion"
CONFIG_PROP_WINDOWS = "Windows"

CONFIG_WINDOW_PROP_TABS = "Tabs"
CONFIG_WINDOW_PROP_ACTIVE_TAB = "ActiveTab"
CONFIG_WINDOW_PROP_ROLE = "Role"
CONFIG_WINDOW_PROP_GEOMETRY = "Geometry"
CONFIG_WINDOW_PROP_FULLSCREEN = "Fullscreen"
CONFIG_WINDOW_PROP_MAXIMIZED = "Maximized"
CONFIG_WINDOW_PROP_MENUBAR_VISIBLE = "MenubarVisible"

CONFIG_TAB_PROP_PROFILE_ID = "ProfileID"
CONFIG_TAB_PROP_WORKING_DIRECTORY = "WorkingDirectory"
CONFIG_TAB_PROP_TITLE = "Title"
CONFIG_TAB_PROP_COMMAND = "Command"

CONFIG_COMPAT_VERSION = 1  # highest CompatVersion we can read

# === Zoom ===
# Pango font scale ladder: XX_SMALL is 1.2^-3, each step is another factor 1.2
SCALE_MINIMUM = 1.2 ** -7
SCALE_MAXIMUM = 1.2 ** 7
DEFAULT_ZOOM = 1.0

# === Settings ===
# "window" or "tab": whether a bare invocation may reuse an existing window
NEW_TERMINAL_MODE = os.environ.get("TERMLAUNCH_NEW_TERMINAL_MODE", "window")
NEW_TERMINAL_MODES = ("window", "tab")

# === Environment ===
STARTUP_ID_ENV = "DESKTOP_STARTUP_ID"
SERVICE_NAME_ENV = "TERMLAUNCH_SERVICE"  # bus unique name of the running server
SCREEN_ENV = "TERMLAUNCH_SCREEN"  # object path of the parent screen
DISPLAY_ENVS = ("WAYLAND_DISPLAY", "DISPLAY")

# === Logging ===
LOG_LEVEL = os.environ.get("TERMLAUNCH_LOG_LEVEL", "WARNING")
DEFAULT_VERBOSITY = 1  # 0 = quiet, 1 = normal, 2+ = detail
