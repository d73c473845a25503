"""Sorting strategies that drive the push_swap stacks."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from pushswap.stack import Stacks, is_sorted


def find_min_index(values: Iterable[int]) -> int:
    """Position of the first smallest value, counting from the top."""
    items = list(values)
    if not items:
        raise ValueError("cannot find the minimum of an empty stack")
    return min(range(len(items)), key=items.__getitem__)


def normalize(values: Iterable[int]) -> list[int]:
    """Replace each value by the number of values smaller than it."""
    items = list(values)
    ordered = sorted(items)
    return [bisect_left(ordered, value) for value in items]


def count_max_bits(indices: Iterable[int]) -> int:
    """Number of bits needed for the largest non-negative index."""
    largest = max(indices, default=0)
    return max(largest, 0).bit_length()


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three elements in a")
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack of four or five by parking the smallest values on b."""
    while len(stacks.a) > 3:
        position = find_min_index(stacks.a)
        if position == 0:
            stacks.pb()
        elif position <= len(stacks.a) // 2:
            stacks.ra()
        else:
            stacks.rra()
    sort_three(stacks)
    if len(stacks.b) == 2 and stacks.b[0] < stacks.b[1]:
        stacks.sb()
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort on the ranks of the values in a, using b as a bucket."""
    values: Sequence[int] = list(stacks.a)
    ranks = dict(zip(values, normalize(values)))
    bits = count_max_bits(ranks.values())
    size = len(values)
    for bit in range(bits):
        for _ in range(size):
            if (ranks[stacks.a[0]] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a, choosing the strategy by its size."""
    if not stacks.a or is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)