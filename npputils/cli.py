"""Command-line entry points: line diff, process spawning and process info."""

from __future__ import annotations

import os
import sys
from collections import deque
from typing import Optional, Sequence

from npputils.arguments import ProgramArgs
from npputils.conv import parse_int
from npputils.diff import diff
from npputils.fileio import read_file_binary
from npputils.process import Subprocess
from npputils.procinfo import proc_cwd, proc_exe, proc_root

__all__ = ["diff_main", "spawn_main", "procinfo_main"]


def _args(name: str, argv: Optional[Sequence[str]]) -> ProgramArgs:
    return ProgramArgs(name, deque(sys.argv[1:] if argv is None else argv))


def _wants_help(args: ProgramArgs) -> bool:
    return len(args) > 0 and (args.drop("-h") or args.drop("--help"))


def _read_file(path: str) -> str:
    try:
        raw = read_file_binary(path)
    except OSError as exc:
        raise OSError(exc.errno, f"Couldn't read file {path} (errno={exc.errno})") from exc
    return raw.decode("utf-8", errors="replace")


def diff_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the line diff of two files; exit with 1 if they differ."""
    args = _args("npp-diff", argv)
    usage = f"usage: {args.executable} <original> <modified>"

    if _wants_help(args):
        print(usage)
        return 0
    if len(args) < 2:
        print(usage)
        return 1
    try:
        original = _read_file(args.pop())
        modified = _read_file(args.pop())
    except OSError as exc:
        print(exc.strerror, file=sys.stderr)
        return 1
    return 1 if diff(original, modified, sys.stdout) else 0


def spawn_main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a program, wait for it and report how it ended."""
    args = _args("npp-spawn", argv)
    usage = f"usage: {args.executable} <program> [args...]"

    if _wants_help(args):
        print(usage)
        return 0
    if len(args) < 1:
        print(usage)
        return 1
    prog_name = args.pop()
    try:
        proc = Subprocess.spawn(prog_name, args)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    proc.join()
    description = f"Process {proc.pid} ({proc.executable})"
    retcode = proc.retcode()
    if retcode is not None:
        print(f"{description} exited with return code {retcode}")
        return retcode
    termsig = proc.termsig()
    if termsig is not None:
        print(f"{description} exited with signal {termsig}")
        return 1
    print(f"{description} exited abnormally")
    return 1


def procinfo_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the executable, root and working directory of a process."""
    args = _args("npp-procinfo", argv)
    usage = f"usage: {args.executable} <pid>"

    if _wants_help(args):
        print(usage)
        return 0
    if len(args) != 1:
        print(usage)
        return 1
    pid_repr = args.pop()
    if pid_repr == "current":
        pid = os.getppid()
    else:
        try:
            pid = parse_int(pid_repr, bits=64, signed=False)
        except ValueError:
            print("Bad PID")
            return 1
    try:
        exe, root, cwd = proc_exe(pid), proc_root(pid), proc_cwd(pid)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"PID: {pid}")
    print(f"Executable: {exe}")
    print(f"Root: {root}")
    print(f"Working directory: {cwd}")
    return 0