"""Spawning child processes and waiting for their termination."""

from __future__ import annotations

import errno
import os
import subprocess
from collections import deque
from pathlib import Path
from typing import Iterable, Optional, Union

from npputils.arguments import ProgramArgs
from npputils.searchpath import program_path

__all__ = ["Subprocess"]


def _executable_path(prog_name: str) -> Path:
    if "/" not in prog_name:
        found = program_path(prog_name)
        if found is None:
            raise FileNotFoundError(f"Could not find program {prog_name} in PATH")
        return found
    resolved = Path(os.path.abspath(prog_name))
    if not resolved.is_file():
        raise FileNotFoundError(f"Invalid program path: {prog_name}")
    return resolved


class Subprocess:
    """A running or finished child process."""

    def __init__(self, executable: Path, popen: subprocess.Popen) -> None:
        self._executable = executable
        self._popen = popen

    @classmethod
    def spawn(
        cls,
        prog_name: str,
        args: Union[ProgramArgs, Iterable[str], None] = None,
    ) -> Subprocess:
        """Start ``prog_name`` with ``args``, inheriting the environment.

        A name without ``/`` is looked up in PATH; otherwise it must be the
        path of a regular file. ``args`` gets ``prog_name`` as its
        executable, which the child receives as ``argv[0]``. Raises
        FileNotFoundError if the program cannot be found, and OSError if it
        cannot be executed.
        """
        if args is None:
            args = ProgramArgs(prog_name)
        elif not isinstance(args, ProgramArgs):
            args = ProgramArgs(prog_name, deque(args))
        args.executable = prog_name
        exec_path = _executable_path(prog_name)
        popen = subprocess.Popen(args.argv(), executable=str(exec_path))
        return cls(exec_path, popen)

    @property
    def pid(self) -> int:
        return self._popen.pid

    @property
    def executable(self) -> Path:
        return self._executable

    def stopped(self) -> bool:
        """Whether the process has already been seen to terminate."""
        return self._popen.returncode is not None

    def retcode(self) -> Optional[int]:
        """The exit code, if the process has exited normally."""
        code = self._popen.returncode
        if code is None or code < 0:
            return None
        return code

    def termsig(self) -> Optional[int]:
        """The number of the signal that killed the process, if any."""
        code = self._popen.returncode
        if code is None or code >= 0:
            return None
        return -code

    def join(self) -> None:
        """Block until the process terminates."""
        self._popen.wait()

    def poll_stopped(self) -> bool:
        """Check without blocking whether the process has terminated."""
        return self._popen.poll() is not None

    def signal(self, sig: int) -> None:
        """Send ``sig`` to the process; raises OSError if it cannot be sent."""
        if self.stopped():
            raise ProcessLookupError(errno.ESRCH, f"Process {self.pid} has already been reaped")
        os.kill(self.pid, sig)

    def __repr__(self) -> str:
        return f"Subprocess(pid={self.pid}, executable={str(self._executable)!r})"