"""Saved configuration schema

Pydantic models for the three kinds of groups in a saved terminal
configuration. Models are built from a KeyFile with ``from_keyfile``.

Lenient reads, matching how the document has always been consumed:
- unreadable integers read as 0
- unreadable booleans read as false
- undecodable optional strings read as absent

The tab ``command`` is kept raw; decoding it is the merger's job because a
bad command aborts the whole merge.
"""

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from ..errors import BadValueError
from .document import KeyFile


def _lenient_string(key_file: KeyFile, group: str, key: str) -> str | None:
    try:
        return key_file.get_string(group, key)
    except BadValueError:
        return None


def _lenient_list(key_file: KeyFile, group: str, key: str) -> list[str] | None:
    try:
        return key_file.get_string_list(group, key)
    except BadValueError:
        return None


def _lenient_integer(key_file: KeyFile, group: str, key: str) -> int | None:
    # absent keys stay absent so the model default applies
    try:
        return key_file.get_integer(group, key)
    except BadValueError:
        return 0


def _lenient_boolean(key_file: KeyFile, group: str, key: str) -> bool | None:
    try:
        return key_file.get_boolean(group, key)
    except BadValueError:
        return False


def _present(values: dict) -> dict:
    return {key: value for key, value in values.items() if value is not None}


class ConfigRoot(BaseModel):
    """Root group: versions and window group names."""

    model_config = ConfigDict(populate_by_name=True)

    version: int = Field(0, alias=config.CONFIG_PROP_VERSION)
    compat_version: int = Field(0, alias=config.CONFIG_PROP_COMPAT_VERSION)
    windows: list[str] | None = Field(None, alias=config.CONFIG_PROP_WINDOWS)

    @property
    def is_compatible(self) -> bool:
        return self.version > 0 and 0 < self.compat_version <= config.CONFIG_COMPAT_VERSION

    @classmethod
    def from_keyfile(cls, key_file: KeyFile, group: str = config.CONFIG_GROUP) -> "ConfigRoot":
        return cls.model_validate(
            _present(
                {
                    config.CONFIG_PROP_VERSION: _lenient_integer(key_file, group, config.CONFIG_PROP_VERSION),
                    config.CONFIG_PROP_COMPAT_VERSION: _lenient_integer(
                        key_file, group, config.CONFIG_PROP_COMPAT_VERSION
                    ),
                    config.CONFIG_PROP_WINDOWS: _lenient_list(key_file, group, config.CONFIG_PROP_WINDOWS),
                }
            )
        )


class WindowGroup(BaseModel):
    """Window group.

    Attributes:
        tabs: tab group names; None means the window is skipped
        menubar_visible: None when the key is absent (menubar not forced)
    """

    model_config = ConfigDict(populate_by_name=True)

    tabs: list[str] | None = Field(None, alias=config.CONFIG_WINDOW_PROP_TABS)
    active_tab: str | None = Field(None, alias=config.CONFIG_WINDOW_PROP_ACTIVE_TAB)
    role: str | None = Field(None, alias=config.CONFIG_WINDOW_PROP_ROLE)
    geometry: str | None = Field(None, alias=config.CONFIG_WINDOW_PROP_GEOMETRY)
    fullscreen: bool | None = Field(None, alias=config.CONFIG_WINDOW_PROP_FULLSCREEN)
    maximized: bool | None = Field(None, alias=config.CONFIG_WINDOW_PROP_MAXIMIZED)
    menubar_visible: bool | None = Field(None, alias=config.CONFIG_WINDOW_PROP_MENUBAR_VISIBLE)

    @classmethod
    def from_keyfile(cls, key_file: KeyFile, group: str) -> "WindowGroup":
        return cls.model_validate(
            _present(
                {
                    config.CONFIG_WINDOW_PROP_TABS: _lenient_list(key_file, group, config.CONFIG_WINDOW_PROP_TABS),
                    config.CONFIG_WINDOW_PROP_ACTIVE_TAB: _lenient_string(
                        key_file, group, config.CONFIG_WINDOW_PROP_ACTIVE_TAB
                    ),
                    config.CONFIG_WINDOW_PROP_ROLE: _lenient_string(key_file, group, config.CONFIG_WINDOW_PROP_ROLE),
                    config.CONFIG_WINDOW_PROP_GEOMETRY: _lenient_string(
                        key_file, group, config.CONFIG_WINDOW_PROP_GEOMETRY
                    ),
                    config.CONFIG_WINDOW_PROP_FULLSCREEN: _lenient_boolean(
                        key_file, group, config.CONFIG_WINDOW_PROP_FULLSCREEN
                    ),
                    config.CONFIG_WINDOW_PROP_MAXIMIZED: _lenient_boolean(
                        key_file, group, config.CONFIG_WINDOW_PROP_MAXIMIZED
                    ),
                    config.CONFIG_WINDOW_PROP_MENUBAR_VISIBLE: _lenient_boolean(
                        key_file, group, config.CONFIG_WINDOW_PROP_MENUBAR_VISIBLE
                    ),
                }
            )
        )


class TabGroup(BaseModel):
    """Tab group; ``command`` is the raw (still escaped) value."""

    model_config = ConfigDict(populate_by_name=True)

    profile_id: str | None = Field(None, alias=config.CONFIG_TAB_PROP_PROFILE_ID)
    working_directory: str | None = Field(None, alias=config.CONFIG_TAB_PROP_WORKING_DIRECTORY)
    title: str | None = Field(None, alias=config.CONFIG_TAB_PROP_TITLE)
    command: str | None = Field(None, alias=config.CONFIG_TAB_PROP_COMMAND)

    @classmethod
    def from_keyfile(cls, key_file: KeyFile, group: str) -> "TabGroup":
        return cls.model_validate(
            _present(
                {
                    config.CONFIG_TAB_PROP_PROFILE_ID: _lenient_string(
                        key_file, group, config.CONFIG_TAB_PROP_PROFILE_ID
                    ),
                    config.CONFIG_TAB_PROP_WORKING_DIRECTORY: _lenient_string(
                        key_file, group, config.CONFIG_TAB_PROP_WORKING_DIRECTORY
                    ),
                    config.CONFIG_TAB_PROP_TITLE: _lenient_string(key_file, group, config.CONFIG_TAB_PROP_TITLE),
                    config.CONFIG_TAB_PROP_COMMAND: key_file.get_value(group, config.CONFIG_TAB_PROP_COMMAND),
                }
            )
        )
