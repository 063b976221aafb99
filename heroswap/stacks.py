"""Two stacks of ranks and the eleven push_swap operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, top at the left, with a log of operations.

    Every operation is logged even when it has nothing to act on.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        if any(value < 1 for value in self.a):
            raise ValueError("stack values must be positive ranks")
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> None:
        if source:
            target.appendleft(source.popleft())

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks at once."""
        self._swap(self.a)
        self._swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a)
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b)
        self.operations.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top goes to the bottom."""
        self.a.rotate(-1)
        self.operations.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top goes to the bottom."""
        self.b.rotate(-1)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks up; logs ``ra``, ``rb`` and ``rr``."""
        self.ra()
        self.rb()
        self.operations.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom comes to the top."""
        self.a.rotate(1)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom comes to the top."""
        self.b.rotate(1)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down; logs ``rra``, ``rrb`` and ``rrr``."""
        self.rra()
        self.rrb()
        self.operations.append("rrr")