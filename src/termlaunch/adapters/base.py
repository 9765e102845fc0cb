"""Collaborator interfaces

The launch plan builder talks to three external services:
- ProfileLookup: resolves profile names / UUIDs
- FdTransport: queues a file descriptor for forwarding, assigns its index
- SettingsReader: reads the one persisted setting the finaliser needs

Design principles:
1. Minimal interface: only what the builder calls
2. Synchronous: every call is an ordinary blocking call
3. Errors are raised as OptionError subclasses (or OSError for transports)
"""

from abc import ABC, abstractmethod


class ProfileLookup(ABC):
    """Profile list abstraction.

    Usage:
        profiles = ProfileList([Profile(uuid="...", name="Default")])
        uuid = profiles.dup_uuid_or_name("Default")
    """

    @abstractmethod
    def dup_uuid_or_name(self, uuid_or_name: str | None) -> str:
        """Resolve a profile by UUID or visible name.

        Args:
            uuid_or_name: UUID or display name; None selects the default profile

        Returns:
            The profile UUID

        Raises:
            ProfileNotFoundError: no (or more than one) matching profile
        """

    @abstractmethod
    def dup_uuid(self, uuid: str) -> str:
        """Resolve a profile strictly by UUID.

        Raises:
            ProfileNotFoundError: no profile with this UUID
        """


class FdTransport(ABC):
    """Descriptor forwarding list for one tab."""

    @abstractmethod
    def append(self, fd: int) -> int:
        """Queue ``fd`` for forwarding.

        Returns:
            Transport index assigned to the descriptor (opaque to callers)

        Raises:
            OSError: the descriptor cannot be queued
        """

    def close(self) -> None:
        """Release any resources held for queued descriptors."""


class SettingsReader(ABC):
    """Persisted settings."""

    @abstractmethod
    def get_new_terminal_mode(self) -> str:
        """Return "window" or "tab"."""
