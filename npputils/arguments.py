"""A mutable queue of command-line arguments."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional, Sequence

__all__ = ["ProgramArgs"]

_EMPTY = "No arguments to poll"


@dataclass
class ProgramArgs:
    """An executable name followed by arguments consumed from the front."""

    executable: str = ""
    args: Deque[str] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.args = deque(self.args)

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> ProgramArgs:
        """Build from an argv list whose first item is the executable."""
        if not argv:
            return cls()
        return cls(argv[0], deque(argv[1:]))

    def drop(self, expected: Optional[str] = None) -> bool:
        """Remove the first argument, only if it equals ``expected`` when given.

        Returns whether an argument was removed; raises IndexError if empty.
        """
        if not self.args:
            raise IndexError(_EMPTY)
        if expected is not None and self.args[0] != expected:
            return False
        self.args.popleft()
        return True

    def peek(self) -> str:
        if not self.args:
            raise IndexError(_EMPTY)
        return self.args[0]

    def pop(self) -> str:
        if not self.args:
            raise IndexError(_EMPTY)
        return self.args.popleft()

    def push(self, arg: str) -> None:
        self.args.append(arg)

    def extend(self, args: Iterable[str]) -> None:
        self.args.extend(args)

    def argc(self) -> int:
        """Number of arguments, counting the executable."""
        return len(self.args) + 1

    def argv(self) -> List[str]:
        """A fresh list: the executable followed by the arguments."""
        return [self.executable, *self.args]

    def __len__(self) -> int:
        return len(self.args)