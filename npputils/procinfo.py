"""Information about running processes, read from ``/proc``."""

from __future__ import annotations

from pathlib import Path

__all__ = ["proc_exe", "proc_cwd", "proc_root"]


def _proc_link(pid: int, entry: str) -> Path:
    return Path(f"/proc/{pid}/{entry}").resolve(strict=True)


def proc_exe(pid: int) -> Path:
    """Canonical path of the executable of process ``pid``."""
    return _proc_link(pid, "exe")


def proc_cwd(pid: int) -> Path:
    """Canonical working directory of process ``pid``."""
    return _proc_link(pid, "cwd")


def proc_root(pid: int) -> Path:
    """Canonical root directory of process ``pid`` (not ``/`` under chroot)."""
    return _proc_link(pid, "root")