"""An editable copy of a process environment."""

from __future__ import annotations

import os
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

__all__ = ["ProgramEnv"]


class ProgramEnv:
    """Environment variables kept by name, listed in name order."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None) -> None:
        self._vars: Dict[str, str] = {}
        for name, value in (variables or {}).items():
            self.set(name, value)

    @classmethod
    def from_environ(cls) -> ProgramEnv:
        """A snapshot of the current process environment."""
        return cls(os.environ)

    @classmethod
    def from_envp(cls, envp: Iterable[str]) -> ProgramEnv:
        """Parse ``NAME=value`` entries; the first entry for a name wins."""
        env = cls()
        for entry in envp:
            name, sep, value = entry.partition("=")
            if not sep:
                raise ValueError("Bad environment array")
            env._vars.setdefault(name, value)
        return env

    def get(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def set(self, name: str, value: str) -> None:
        if "=" in name:
            raise ValueError("Environment variable cannot contain the '=' symbol")
        self._vars[name] = value

    def unset(self, name: str) -> None:
        """Remove ``name`` if it is set."""
        self._vars.pop(name, None)

    def envp(self) -> List[str]:
        """``NAME=value`` entries sorted by name."""
        return [f"{name}={self._vars[name]}" for name in sorted(self._vars)]

    def as_dict(self) -> Dict[str, str]:
        return dict(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._vars))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProgramEnv):
            return NotImplemented
        return self._vars == other._vars

    def __repr__(self) -> str:
        return f"ProgramEnv({self._vars!r})"