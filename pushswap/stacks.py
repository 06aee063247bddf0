"""The two stacks of the puzzle, the moves on them and indexing helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

UNINDEXED = -1


@dataclass
class Item:
    """One number on a stack, with the index the sorting code assigns to it."""

    number: int
    index: int = UNINDEXED


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, and the moves performed so far.

    A move that cannot change anything, such as swapping a stack of one,
    is skipped and not recorded.
    """

    a: list[Item] = field(default_factory=list)
    b: list[Item] = field(default_factory=list)
    moves: list[str] = field(default_factory=list)

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self.moves.append("sa")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top item goes to the bottom."""
        if _rotate(self.a):
            self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top item goes to the bottom."""
        if _rotate(self.b):
            self.moves.append("rb")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom item goes to the top."""
        if _reverse_rotate(self.a):
            self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom item goes to the top."""
        if _reverse_rotate(self.b):
            self.moves.append("rrb")


def _rotate(stack: list[Item]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[Item]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def normal_indexing(stack: Sequence[Item]) -> None:
    """Set every item's index to its position in the stack."""
    for position, item in enumerate(stack):
        item.index = position


def min_node(stack: Sequence[Item]) -> Optional[Item]:
    """Return the first smallest item that has no index yet, or None."""
    best: Optional[Item] = None
    for item in stack:
        if item.index == UNINDEXED and (best is None or item.number < best.number):
            best = item
    return best


def index_by_ascending_order(stack: Sequence[Item]) -> None:
    """Give the unindexed items the ranks 0, 1, ... of their numbers."""
    rank = 0
    item = min_node(stack)
    while item is not None:
        item.index = rank
        rank += 1
        item = min_node(stack)


def min_nbr_index(stack: Sequence[Item], excluded: int) -> int:
    """Return the position of the smallest number, skipping position ``excluded``.

    Items are first indexed by position. The search starts from the top
    item's number, so a top item that is the smallest wins even when it is
    the excluded one.
    """
    if not stack:
        raise ValueError("stack is empty")
    normal_indexing(stack)
    smallest = stack[0].number
    found = 0
    for item in stack:
        if smallest > item.number and item.index != excluded:
            found = item.index
            smallest = item.number
    return found


def is_sorted(stack: Sequence[Item]) -> bool:
    """Tell whether the numbers rise from top to bottom."""
    return all(upper.number <= lower.number for upper, lower in zip(stack, stack[1:]))