import json
import os
import signal
import sys
from pathlib import Path

import pytest

from npputils.arguments import ProgramArgs
from npputils.process import Subprocess


def test_exit_code_is_reported():
    proc = Subprocess.spawn(sys.executable, ["-c", "import sys; sys.exit(3)"])
    proc.join()
    assert proc.stopped()
    assert proc.retcode() == 3
    assert proc.termsig() is None


def test_arguments_are_passed(tmp_path):
    out = tmp_path / "argv.json"
    code = "import json, sys; open(sys.argv[1], 'w').write(json.dumps(sys.argv[2:]))"
    proc = Subprocess.spawn(sys.executable, ["-c", code, str(out), "alpha", "beta"])
    proc.join()
    assert proc.retcode() == 0
    assert json.loads(out.read_text()) == ["alpha", "beta"]


def test_program_args_get_executable_name():
    args = ProgramArgs("placeholder", ["-c", "pass"])
    proc = Subprocess.spawn(sys.executable, args)
    proc.join()
    assert args.executable == sys.executable
    assert proc.retcode() == 0


def test_program_found_in_path(monkeypatch):
    directory = Path(sys.executable).parent
    name = Path(sys.executable).name
    monkeypatch.setenv("PATH", str(directory))
    proc = Subprocess.spawn(name, ["-c", "pass"])
    proc.join()
    assert proc.executable.name == name
    assert proc.executable.is_absolute()
    assert proc.retcode() == 0


def test_missing_program_in_path(monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        Subprocess.spawn("no-such-program", [])


def test_invalid_program_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        Subprocess.spawn(str(tmp_path / "missing"), [])
    with pytest.raises(FileNotFoundError):
        Subprocess.spawn(str(tmp_path), [])


def test_signal_terminates_process():
    proc = Subprocess.spawn(sys.executable, ["-c", "import time; time.sleep(30)"])
    assert proc.poll_stopped() is False
    assert proc.retcode() is None
    proc.signal(signal.SIGTERM)
    proc.join()
    assert proc.termsig() == signal.SIGTERM
    assert proc.retcode() is None


def test_signal_after_join_fails():
    proc = Subprocess.spawn(sys.executable, ["-c", "pass"])
    proc.join()
    assert proc.poll_stopped() is True
    with pytest.raises(ProcessLookupError):
        proc.signal(signal.SIGTERM)


def test_pid_is_child_pid():
    proc = Subprocess.spawn(sys.executable, ["-c", "pass"])
    proc.join()
    assert proc.pid > 0
    assert proc.pid != os.getpid()