"""Settings readers."""

import os

from .. import config
from ..telemetry import get_logger
from .base import SettingsReader

logger = get_logger(__name__)


class StaticSettings(SettingsReader):
    """Fixed setting values (tests, embedding)."""

    def __init__(self, new_terminal_mode: str = "window"):
        self.new_terminal_mode = new_terminal_mode

    def get_new_terminal_mode(self) -> str:
        return self.new_terminal_mode


class EnvSettings(SettingsReader):
    """Reads TERMLAUNCH_NEW_TERMINAL_MODE, defaulting to config.NEW_TERMINAL_MODE.

    Unknown values fall back to "window".
    """

    ENV_VAR = "TERMLAUNCH_NEW_TERMINAL_MODE"

    def get_new_terminal_mode(self) -> str:
        mode = os.environ.get(self.ENV_VAR, config.NEW_TERMINAL_MODE)
        if mode not in config.NEW_TERMINAL_MODES:
            logger.warning(f"[Settings] Unknown new-terminal mode {mode!r}, using 'window'")
            return "window"
        return mode
