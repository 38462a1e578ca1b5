"""Recursive classics: sum of the first n numbers and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One Tower of Hanoi move of a disk between two rods."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def sum_of_n(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(range(n + 1))


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry n disks from source to target."""
    if n < 0:
        raise ValueError("number of disks must not be negative")

    def solve(disks: int, src: str, dst: str, aux: str) -> Iterator[Move]:
        if disks == 0:
            return
        yield from solve(disks - 1, src, aux, dst)
        yield Move(disks, src, dst)
        yield from solve(disks - 1, aux, dst, src)

    return solve(n, source, target, auxiliary)


def hanoi_move_count(n: int) -> int:
    """Return the minimum number of moves for n disks."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    return 2**n - 1