"""Patterns for a clue whose filled region spans a pair of adjacent lines.

A pair pattern has ``2 * length`` cells.  Index ``i`` lies on sub-line
``i // length`` at position ``i % length``; the first ``length`` cells are the
first line of the pair.  Two cells touch when they are neighbours on the same
sub-line or share a position on opposite sub-lines.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Sequence, Set

from picross.core.model import EMPTY, FILLED, Dialect, MegaBlock, Pattern

from . import register_generator


def pair_neighbors(pos: int, length: int) -> List[int]:
    col = pos % length
    result = []
    if col > 0:
        result.append(pos - 1)
    if col < length - 1:
        result.append(pos + 1)
    if pos < length:
        result.append(pos + length)
    else:
        result.append(pos - length)
    return result


def is_connected(cells: Iterable[int], length: int) -> bool:
    """True if ``cells`` form one component under paired-line adjacency."""
    chosen: Set[int] = set(cells)
    if not chosen:
        return True

    visited: Set[int] = set()
    stack = [next(iter(chosen))]
    while stack:
        pos = stack.pop()
        if pos in visited:
            continue
        visited.add(pos)
        for n in pair_neighbors(pos, length):
            if n in chosen and n not in visited:
                stack.append(n)
    return len(visited) == len(chosen)


def generate_mega_patterns(length: int, size: int) -> List[Pattern]:
    """All connected ``size``-cell regions over a pair of ``length``-cell lines.

    Subsets are enumerated in increasing index order so each region appears
    once.
    """
    if size <= 0:
        return [(EMPTY,) * (2 * length)]

    patterns: List[Pattern] = []
    for chosen in combinations(range(2 * length), size):
        if not is_connected(chosen, length):
            continue
        pattern = [EMPTY] * (2 * length)
        for pos in chosen:
            pattern[pos] = FILLED
        patterns.append(tuple(pattern))
    return patterns


@register_generator(Dialect.MEGA)
def generate_mega_line_patterns(length: int, clue: Sequence[MegaBlock]) -> List[Pattern]:
    return generate_mega_patterns(length, sum(b.size for b in clue))
