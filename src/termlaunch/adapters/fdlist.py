"""File descriptor transports.

UnixFdList duplicates each descriptor so the original can be closed by the
caller while the copy waits to be sent alongside the open-tab request.
SequentialFdTransport only assigns indexes; it is used when a plan is
built for inspection rather than launch.
"""

import os

from .base import FdTransport


class UnixFdList(FdTransport):
    """Owns duplicated descriptors, index = position in the list."""

    def __init__(self):
        self._fds: list[int] = []

    def append(self, fd: int) -> int:
        dup = os.dup(fd)
        self._fds.append(dup)
        return len(self._fds) - 1

    def close(self) -> None:
        while self._fds:
            os.close(self._fds.pop())

    def __len__(self) -> int:
        return len(self._fds)


class SequentialFdTransport(FdTransport):
    """Hands out 0, 1, 2, ... without touching the descriptors."""

    def __init__(self):
        self._fds: list[int] = []

    def append(self, fd: int) -> int:
        self._fds.append(fd)
        return len(self._fds) - 1

    def __len__(self) -> int:
        return len(self._fds)
