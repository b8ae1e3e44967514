"""Pairings of binary variables and the search for the most useful one."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass
class Pairing:
    """A list of disjoint variable pairs, numbered from 1."""

    pairs: list[tuple[int, int]] = field(default_factory=list)

    def add(self, var1: int, var2: int) -> None:
        """Append the pair (var1, var2)."""
        self.pairs.append((var1, var2))

    def copy(self) -> Pairing:
        """Return an independent copy."""
        return Pairing(list(self.pairs))

    def format(self) -> str:
        """The pairing as ``pair is (a b) (c d) ...``."""
        return "pair is" + "".join(f" ({a} {b})" for a, b in self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.pairs)


def _generate(pairs: list[tuple[int, int]], candidates: tuple[int, ...]) -> Iterator[Pairing]:
    if len(candidates) < 2:
        yield Pairing(list(pairs))
        return
    first, rest = candidates[0], candidates[1:]
    for other in rest:
        remaining = tuple(v for v in rest if v != other)
        yield from _generate(pairs + [(first + 1, other + 1)], remaining)
    if len(candidates) % 2 == 1:
        yield from _generate(pairs, rest)


def all_pairings(n: int) -> Iterator[Pairing]:
    """Yield every maximal pairing of ``n`` variables."""
    yield from _generate([], tuple(range(n)))


def _pairing_cost(cost: Sequence[Sequence[int]], pairing: Pairing) -> int:
    return sum(cost[a - 1][b - 1] for a, b in pairing)


def greedy_best_cost(cost: Sequence[Sequence[int]], n: int) -> tuple[int, Pairing]:
    """Repeatedly pair the two free variables of greatest cost.

    ``cost[i][j]`` (with ``i < j``, numbered from 0) is the gain of pairing
    variables i and j. Returns the total gain and the pairing.
    """
    pairing = Pairing()
    free = list(range(n))
    total = 0
    while len(free) >= 2:
        best: tuple[int, int] | None = None
        best_cost = 0
        for pos, i in enumerate(free):
            for j in free[pos + 1:]:
                if best is None or cost[i][j] > best_cost:
                    best, best_cost = (i, j), cost[i][j]
        i, j = best
        pairing.add(i + 1, j + 1)
        free.remove(i)
        free.remove(j)
        total += best_cost
    return total, pairing


def pair_best_cost(cost: Sequence[Sequence[int]], n: int) -> Pairing | None:
    """The first pairing of greatest total gain over all pairings of ``n`` variables."""
    best: Pairing | None = None
    best_cost = -1
    for pairing in all_pairings(n):
        value = _pairing_cost(cost, pairing)
        if value > best_cost:
            best_cost = value
            best = pairing
    return best