"""Strategies that sort stack ``a`` using the puzzle's moves."""

from __future__ import annotations

from typing import Sequence

from pushswap.stacks import (
    Item,
    Stacks,
    index_by_ascending_order,
    is_sorted,
    min_nbr_index,
)

SMALL_CHUNK = 16
LARGE_CHUNK = 36


def min_place(stack: Sequence[Item], target: int) -> int:
    """Return how many items lie above the first one indexed ``target``.

    If no item carries that index, the length of the stack is returned.
    """
    return next(
        (position for position, item in enumerate(stack) if item.index == target),
        len(stack),
    )


def _bring_min_to_top(stacks: Stacks) -> None:
    """Rotate ``a`` by the shorter way so that its smallest number is on top."""
    size = len(stacks.a)
    move = min_place(stacks.a, min_nbr_index(stacks.a, -1))
    if move <= size // 2:
        for _ in range(move):
            stacks.ra()
    else:
        for _ in range(size - move):
            stacks.rra()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three items."""
    a = stacks.a
    if is_sorted(a):
        return
    smallest = min_nbr_index(a, -1)
    second = min_nbr_index(a, smallest)
    if a[0].index == smallest:
        stacks.sa()
        stacks.ra()
    elif a[0].index == second:
        if a[1].index == smallest:
            stacks.sa()
        else:
            stacks.rra()
    else:
        stacks.ra()
        sort_three(stacks)


def sort_four(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four items, parking the smallest on ``b``."""
    _bring_min_to_top(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack ``a`` of five items, parking the smallest on ``b``."""
    _bring_min_to_top(stacks)
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def max_nbr(stack: Sequence[Item]) -> int:
    """Return the largest number in the stack."""
    if not stack:
        raise ValueError("stack is empty")
    return max(item.number for item in stack)


def max_nbr_place(stack: Sequence[Item]) -> int:
    """Return the position of the first item holding the largest number."""
    largest = max_nbr(stack)
    return next(
        position for position, item in enumerate(stack) if item.number == largest
    )


def sort_stack_b(stacks: Stacks) -> None:
    """Push ``b`` back onto ``a`` from the highest rank down."""
    size = len(stacks.b) - 1
    while stacks.b:
        if stacks.b[0].index == size and size >= 0:
            stacks.pa()
            size -= 1
        elif max_nbr_place(stacks.b) <= size // 2:
            stacks.rb()
        else:
            stacks.rrb()


def if_bad_distribution(stack: Sequence[Item]) -> bool:
    """Tell whether most neighbours fall by 2 to 4 ranks from top to bottom."""
    falls = sum(
        1
        for upper, lower in zip(stack, stack[1:])
        if upper.index - lower.index in (2, 3, 4)
    )
    return falls * 10 >= len(stack) * 6


def large_numbers(stacks: Stacks, chunk: int) -> None:
    """Sort ``a`` by pushing it to ``b`` in chunks of ranks, then back."""
    index_by_ascending_order(stacks.a)
    pushed = 0
    while stacks.a:
        rank = stacks.a[0].index
        if rank <= pushed:
            stacks.pb()
            pushed += 1
        elif rank <= pushed + chunk:
            stacks.pb()
            stacks.rb()
            pushed += 1
        elif if_bad_distribution(stacks.a):
            stacks.rra()
        else:
            stacks.ra()
    sort_stack_b(stacks)


def sort_it(stacks: Stacks) -> None:
    """Sort stack ``a`` with the strategy that suits its size."""
    size = len(stacks.a)
    if size == 1:
        return
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    elif size <= 100:
        large_numbers(stacks, SMALL_CHUNK)
    else:
        large_numbers(stacks, LARGE_CHUNK)