"""Sorting strategies that drive a Machine to leave stack ``a`` in ascending order."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.normalize import normalize
from pushswap.operations import Machine


def find_min_index(values: Sequence[int]) -> int:
    """Return the index of the smallest value, or -1 if there is none."""
    if not len(values):
        return -1
    return min(range(len(values)), key=lambda i: (values[i], i))


def find_max_index(values: Sequence[int]) -> int:
    """Return the index of the first largest value, or -1 if there is none."""
    if not len(values):
        return -1
    return max(range(len(values)), key=lambda i: (values[i], -i))


def has_chunk(values: Iterable[int], low: int, high: int) -> bool:
    """Return True if any value lies in the closed range ``[low, high]``."""
    return any(low <= value <= high for value in values)


def sort_two(machine: Machine) -> None:
    """Sort a two-element stack ``a``."""
    a = machine.a
    if a[0] > a[1]:
        machine.sa()


def sort_three(machine: Machine) -> None:
    """Sort a three-element stack ``a`` with at most two instructions."""
    f, s, t = machine.a[0], machine.a[1], machine.a[2]
    if f > s and s < t and f < t:
        machine.sa()
    elif f > s and s > t:
        machine.sa()
        machine.rra()
    elif f > s and s < t and f > t:
        machine.ra()
    elif f < s and s > t and f < t:
        machine.sa()
        machine.ra()
    elif f < s and s > t and f > t:
        machine.rra()


def _bring_to_top_of_a(machine: Machine, index: int) -> None:
    size = len(machine.a)
    if index <= size // 2:
        for _ in range(index):
            machine.ra()
    else:
        for _ in range(size - index):
            machine.rra()


def push_min_to_b(machine: Machine) -> None:
    """Rotate the smallest value of ``a`` to the top by the shorter way and push it to ``b``."""
    _bring_to_top_of_a(machine, find_min_index(machine.a))
    machine.pb()


def sort_four(machine: Machine) -> None:
    """Sort a four-element stack ``a``."""
    push_min_to_b(machine)
    sort_three(machine)
    machine.pa()


def sort_five(machine: Machine) -> None:
    """Sort a five-element stack ``a``."""
    push_min_to_b(machine)
    push_min_to_b(machine)
    sort_three(machine)
    if machine.b[0] < machine.b[1]:
        machine.sb()
    machine.pa()
    machine.pa()


def push_chunks_to_b(machine: Machine, nb_chunks: int) -> None:
    """Move all of ``a`` (holding ranks) into ``b`` one chunk of ranks at a time.

    Values in the lower half of the current chunk are rotated to the bottom of ``b``.
    """
    a, b = machine.a, machine.b
    chunk_size = max(len(a) // nb_chunks, 1)
    total = len(a)
    low, high = 0, chunk_size - 1
    while len(a):
        if not has_chunk(a, low, high):
            low = high + 1
            high = min(low + chunk_size - 1, total - 1)
            continue
        if low <= a[0] <= high:
            machine.pb()
            if b[0] < low + chunk_size // 2:
                machine.rb()
        else:
            machine.ra()


def push_back_sorted(machine: Machine) -> None:
    """Repeatedly bring the largest value of ``b`` to its top and push it onto ``a``."""
    b = machine.b
    while len(b):
        index = find_max_index(b)
        size = len(b)
        if index <= size // 2:
            for _ in range(index):
                machine.rb()
        else:
            for _ in range(size - index):
                machine.rrb()
        machine.pa()


def reverse_final_sort(machine: Machine) -> None:
    """Rotate ``a`` until its smallest value is on top."""
    index = find_min_index(machine.a)
    size = len(machine.a)
    if index <= size // 2:
        for _ in range(index):
            machine.ra()
    else:
        for _ in range(size - index):
            machine.rra()


def sort_big_stack(machine: Machine) -> None:
    """Sort ``a`` by chunking its ranks into ``b`` and pulling them back largest first.

    Stack ``a`` ends up holding the ranks ``0 .. n-1`` rather than the original values.
    """
    nb_chunks = 5 if len(machine.a) <= 100 else 10
    machine.a.replace(normalize(machine.a))
    push_chunks_to_b(machine, nb_chunks)
    push_back_sorted(machine)
    reverse_final_sort(machine)


def push_swap(machine: Machine) -> None:
    """Sort stack ``a`` with the strategy suited to its size."""
    a = machine.a
    if a.is_sorted():
        return
    size = len(a)
    if size == 2:
        sort_two(machine)
    elif size == 3:
        sort_three(machine)
    elif size == 4:
        sort_four(machine)
    elif size == 5:
        sort_five(machine)
    else:
        sort_big_stack(machine)


def solve(values: Iterable[int]) -> list[str]:
    """Return the instructions that sort ``values``."""
    machine = Machine(values)
    push_swap(machine)
    return machine.instructions