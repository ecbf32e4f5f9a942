"""The two-stack machine and its named instructions."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pushswap.stacks import Stack


class Machine:
    """Stacks ``a`` and ``b`` plus a record of the instructions applied.

    Every instruction is appended to ``instructions`` and, if given,
    passed to ``emit`` as it is performed.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Callable[[str], object] | None = None,
    ) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.instructions: list[str] = []
        self._emit = emit

    def _record(self, name: str) -> None:
        self.instructions.append(name)
        if self._emit is not None:
            self._emit(name)

    def sa(self) -> None:
        self.a.swap()
        self._record("sa")

    def sb(self) -> None:
        self.b.swap()
        self._record("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._record("ss")

    def pa(self) -> None:
        self.b.push_to(self.a)
        self._record("pa")

    def pb(self) -> None:
        self.a.push_to(self.b)
        self._record("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._record("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._record("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._record("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._record("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._record("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._record("rrr")