"""Config file merger

Turns a saved terminal configuration into windows appended to a launch
plan.

Steps:
1. root group present, else InvalidConfigFileError
2. Version > 0 and 0 < CompatVersion <= CONFIG_COMPAT_VERSION, else
   IncompatibleConfigFileError
3. for each window group listed in Windows: skip it when it has no Tabs,
   otherwise build a WindowSpec (pending defaults first, then role, geometry,
   fullscreen and maximized taken from the group whether or not the keys are
   present) with one TabSpec per listed tab group
4. append the new windows to the plan

The merge is atomic: any error leaves the plan (windows and pending
defaults) exactly as it was.
"""

import dataclasses

from .. import config
from ..core.values import shell_parse_argv
from ..errors import (
    IncompatibleConfigFileError,
    InvalidConfigFileError,
    OptionError,
)
from ..plan.defaults import Defaults
from ..plan.plan import LaunchPlan
from ..plan.types import MenubarState, TabSpec, WindowSource, WindowSpec
from ..telemetry import get_logger, metrics
from .document import KeyFile, commandline_path, compress
from .schema import ConfigRoot, TabGroup, WindowGroup

logger = get_logger(__name__)


def _build_tab(key_file: KeyFile, tab_group: str, active_tab: str | None) -> TabSpec:
    group = TabGroup.from_keyfile(key_file, tab_group)

    tab = TabSpec(profile=group.profile_id, title=group.title)
    if group.working_directory is not None:
        tab.working_dir = compress(group.working_directory)
    if active_tab is not None and active_tab == tab_group:
        tab.active = True

    if group.command is not None:
        try:
            flat = key_file.get_string(tab_group, config.CONFIG_TAB_PROP_COMMAND)
            tab.exec_argv = shell_parse_argv(compress(flat or ""))
        except OptionError as e:
            raise e.prefixed(f"{tab_group}: ") from e

    return tab


def _build_window(
    key_file: KeyFile,
    window_group: str,
    source: WindowSource,
    defaults: Defaults,
) -> WindowSpec | None:
    group = WindowGroup.from_keyfile(key_file, window_group)
    if not group.tabs:
        logger.debug(f"[Merge] Window group {window_group!r} has no tabs, skipped")
        return None

    tabs = [_build_tab(key_file, tab_group, group.active_tab) for tab_group in group.tabs]

    window = WindowSpec(tabs=tabs, source=source)
    defaults.apply_to(window)

    window.role = group.role
    window.geometry = group.geometry
    window.start_fullscreen = bool(group.fullscreen)
    window.start_maximized = bool(group.maximized)
    # Menubar stays unforced unless the group says otherwise
    if group.menubar_visible is not None:
        window.menubar = MenubarState.from_visible(group.menubar_visible)

    return window


def merge_config(
    plan: LaunchPlan,
    key_file: KeyFile,
    source: WindowSource = WindowSource.DEFAULT,
) -> list[WindowSpec]:
    """Merge a saved configuration into ``plan``.

    Args:
        plan: plan to append to (its pending defaults are applied and consumed)
        key_file: parsed document
        source: tag for the new windows

    Returns:
        The windows that were appended

    Raises:
        InvalidConfigFileError: not a terminal config file
        IncompatibleConfigFileError: unsupported version
        OptionError: a tab command could not be decoded
    """
    if not key_file.has_group(config.CONFIG_GROUP):
        metrics.inc("config.merge.fail")
        raise InvalidConfigFileError("Not a valid terminal config file.")

    root = ConfigRoot.from_keyfile(key_file)
    if not root.is_compatible:
        metrics.inc("config.merge.fail")
        raise IncompatibleConfigFileError("Incompatible terminal config file version.")

    if root.windows is None:
        metrics.inc("config.merge.fail")
        raise InvalidConfigFileError(
            f"Key file does not have key “{config.CONFIG_PROP_WINDOWS}” in group “{config.CONFIG_GROUP}”"
        )

    # Work on a copy so a failing merge does not consume the pending defaults
    defaults = dataclasses.replace(plan.defaults)
    new_windows: list[WindowSpec] = []
    try:
        for window_group in root.windows:
            window = _build_window(key_file, window_group, source, defaults)
            if window is not None:
                new_windows.append(window)
    except OptionError:
        metrics.inc("config.merge.fail")
        raise

    plan.defaults = defaults
    plan.windows.extend(new_windows)
    metrics.inc("config.merge.ok")
    logger.debug(f"[Merge] Added {len(new_windows)} window(s) from config, source={source.value}")
    return new_windows


def load_config_file(
    plan: LaunchPlan,
    arg: str,
    source: WindowSource = WindowSource.DEFAULT,
) -> list[WindowSpec]:
    """Read the file named on the command line and merge it into ``plan``."""
    path = commandline_path(arg)
    key_file = KeyFile.load_from_file(path)
    return merge_config(plan, key_file, source)
