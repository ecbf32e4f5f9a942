"""The stack type the push_swap instructions act on."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A stack of integers whose top is at index 0."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._data: list[int] = list(values)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def swap(self) -> None:
        """Swap the two top elements; do nothing with fewer than two."""
        if len(self._data) >= 2:
            self._data[0], self._data[1] = self._data[1], self._data[0]

    def push_to(self, other: Stack) -> None:
        """Move the top element onto the top of ``other``; do nothing if empty."""
        if self._data:
            other._data.insert(0, self._data.pop(0))

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._data) >= 2:
            self._data.append(self._data.pop(0))

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._data) >= 2:
            self._data.insert(0, self._data.pop())

    def is_sorted(self) -> bool:
        """Return True if the elements ascend from top to bottom."""
        return all(x <= y for x, y in zip(self._data, self._data[1:]))

    def replace(self, values: Iterable[int]) -> None:
        """Replace the whole contents, keeping this stack object."""
        self._data = list(values)