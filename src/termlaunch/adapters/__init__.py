"""Collaborator adapters

Interfaces and in-process implementations of the services the builder
depends on:
- ProfileLookup / ProfileList: profile resolution
- FdTransport / UnixFdList / SequentialFdTransport: descriptor forwarding
- SettingsReader / StaticSettings / EnvSettings: persisted settings
"""

from .base import FdTransport, ProfileLookup, SettingsReader
from .fdlist import SequentialFdTransport, UnixFdList
from .profiles import DEFAULT_PROFILE_UUID, Profile, ProfileList
from .settings import EnvSettings, StaticSettings

__all__ = [
    # Interfaces
    "ProfileLookup",
    "FdTransport",
    "SettingsReader",
    # Implementations
    "Profile",
    "ProfileList",
    "DEFAULT_PROFILE_UUID",
    "UnixFdList",
    "SequentialFdTransport",
    "StaticSettings",
    "EnvSettings",
]
