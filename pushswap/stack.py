"""The two push_swap stacks and the operations that act on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from itertools import pairwise
from typing import TextIO


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    Each operation that changes a stack writes its name, one per line, to
    ``out`` (standard output when not given). An operation with nothing to
    act on changes nothing and writes nothing. A combined operation (ss, rr,
    rrr) always writes its own name.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None):
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self._out = out

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(name + "\n")

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[int], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    def sa(self) -> None:
        """Swap the top two elements of a."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self._push(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self._push(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self._emit("rrr")


def is_sorted(values: Iterable[int]) -> bool:
    """True if ``values`` is non-empty and in ascending order from the top."""
    items = list(values)
    if not items:
        return False
    return all(first <= second for first, second in pairwise(items))