"""An owning wrapper around a raw file descriptor."""

from __future__ import annotations

import fcntl
import os
import select

_INVALID = -1


def _poll_events(fd: int) -> int:
    poller = select.poll()
    poller.register(fd, select.POLLIN)
    return sum(events for _, events in poller.poll(0))


def fd_is_readable(fd: int) -> bool:
    """Whether ``fd`` has data to read right now."""
    if fd < 0:
        return False
    try:
        events = _poll_events(fd)
    except OSError:
        return False
    return bool(events & select.POLLIN)


def fd_is_closed(fd: int) -> bool:
    """Whether the other side of ``fd`` hung up or the descriptor is in error."""
    if fd < 0:
        return False
    try:
        events = _poll_events(fd)
    except OSError:
        return True
    return bool(events & (select.POLLHUP | select.POLLERR))


class FileDescriptor:
    """Owns a file descriptor and closes it when reset, exited or collected."""

    def __init__(self, fd: int = _INVALID) -> None:
        self._fd = fd

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileDescriptor):
            return NotImplemented
        return self._fd == other._fd

    __hash__ = None  # type: ignore[assignment]

    def __enter__(self) -> "FileDescriptor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.reset()

    def __del__(self) -> None:
        if getattr(self, "_fd", _INVALID) != _INVALID:
            self.reset()

    def __repr__(self) -> str:
        return f"FileDescriptor({self._fd})"

    def is_valid(self) -> bool:
        """Whether a descriptor is held."""
        return self._fd != _INVALID

    def fileno(self) -> int:
        """The raw descriptor, or -1 when none is held."""
        return self._fd

    def flags(self) -> int:
        """The descriptor flags (such as ``FD_CLOEXEC``); raises OSError on failure."""
        return fcntl.fcntl(self._fd, fcntl.F_GETFD)

    def set_flags(self, flags: int) -> None:
        """Set the descriptor flags; raises OSError on failure."""
        fcntl.fcntl(self._fd, fcntl.F_SETFD, flags)

    def take(self) -> int:
        """Give up ownership and return the raw descriptor."""
        fd, self._fd = self._fd, _INVALID
        return fd

    def reset(self) -> None:
        """Close the descriptor if one is held."""
        if self._fd != _INVALID:
            fd, self._fd = self._fd, _INVALID
            try:
                os.close(fd)
            except OSError:
                pass

    def duplicate(self, cloexec: bool = True) -> "FileDescriptor":
        """Return a new owner of a duplicate; empty when nothing is held.

        The duplicate has ``FD_CLOEXEC`` set unless ``cloexec`` is false.
        Raises OSError when duplication fails.
        """
        if self._fd == _INVALID:
            return FileDescriptor()
        if cloexec:
            return FileDescriptor(os.dup(self._fd))
        return FileDescriptor(fcntl.fcntl(self._fd, fcntl.F_DUPFD, 0))

    def is_readable(self) -> bool:
        """Whether the descriptor has data to read right now."""
        return fd_is_readable(self._fd)

    def is_closed(self) -> bool:
        """Whether the other side hung up or the descriptor is in error."""
        return fd_is_closed(self._fd)