"""Running external programs synchronously or fully detached."""

from __future__ import annotations

import os
import signal
import struct
import subprocess
from typing import Sequence

_PID = struct.Struct("i")


def _read_exact(fd: int, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = os.read(fd, size - len(data))
        if not chunk:
            break
        data += chunk
    return data


class Process:
    """A program with arguments and extra environment, not started yet."""

    def __init__(self, binary: str, args: Sequence[str] = ()) -> None:
        self._binary = binary
        self._args = list(args)
        self._env: list[tuple[str, str]] = []
        self._stdout = ""
        self._stderr = ""
        self._pid = 0
        self._exit_code = 0
        self._stdout_fd = -1
        self._stderr_fd = -1

    def add_env(self, name: str, value: str) -> None:
        """Add an environment variable for synchronous runs."""
        self._env.append((name, value))

    def set_stdout_fd(self, fd: int) -> None:
        """Redirect standard output of asynchronous runs to ``fd``."""
        self._stdout_fd = fd

    def set_stderr_fd(self, fd: int) -> None:
        """Redirect standard error of asynchronous runs to ``fd``."""
        self._stderr_fd = fd

    def run_sync(self) -> None:
        """Run to completion, collecting output and exit code.

        A program that cannot be executed counts as exiting with code 1.
        Raises OSError when the process cannot be set up.
        """
        env = dict(os.environ)
        env.update(self._env)
        self._stdout = ""
        self._stderr = ""
        try:
            proc = subprocess.Popen(
                [self._binary, *self._args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=env,
            )
        except (FileNotFoundError, PermissionError, NotADirectoryError):
            self._exit_code = 1
            return

        self._pid = proc.pid
        out, err = proc.communicate()
        self._stdout = out.decode(errors="replace")
        self._stderr = err.decode(errors="replace")
        if proc.returncode >= 0:
            self._exit_code = proc.returncode

    def run_async(self) -> None:
        """Start the program detached from this process.

        Raises OSError when the detached process cannot be started.
        """
        read_end, write_end = os.pipe()
        try:
            child = os.fork()
        except OSError:
            os.close(read_end)
            os.close(write_end)
            raise

        if child == 0:
            self._detach(read_end, write_end)

        os.close(write_end)
        try:
            data = _read_exact(read_end, _PID.size)
        finally:
            os.close(read_end)
        os.waitpid(child, 0)

        if len(data) != _PID.size:
            raise OSError(f"failed to start {self._binary!r} detached")
        self._pid = _PID.unpack(data)[0]

    def _detach(self, read_end: int, write_end: int) -> None:
        status = 1
        try:
            signal.pthread_sigmask(signal.SIG_SETMASK, [])
            grandchild = os.fork()
            if grandchild == 0:
                try:
                    os.close(read_end)
                    os.close(write_end)
                    if self._stdout_fd != -1:
                        os.dup2(self._stdout_fd, 1)
                    if self._stderr_fd != -1:
                        os.dup2(self._stderr_fd, 2)
                    os.execvp(self._binary, [self._binary, *self._args])
                finally:
                    os._exit(0)
            os.close(read_end)
            if os.write(write_end, _PID.pack(grandchild)) == _PID.size:
                status = 0
            os.close(write_end)
        finally:
            os._exit(status)

    @property
    def stdout(self) -> str:
        """Standard output of the last synchronous run."""
        return self._stdout

    @property
    def stderr(self) -> str:
        """Standard error of the last synchronous run."""
        return self._stderr

    @property
    def pid(self) -> int:
        """Process id of the last started program, 0 before any run."""
        return self._pid

    @property
    def exit_code(self) -> int:
        """Exit code of the last synchronous run."""
        return self._exit_code