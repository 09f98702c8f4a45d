"""Checks of finished lines and boards against their clues."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from picross.patterns.mega import is_connected

from .model import EMPTY, FILLED, Board, Clue, ColorBlock, Dialect, MegaBlock
from .mega import group_lines, mega_size

Run = Tuple[int, int]


def line_runs(line: Sequence[int]) -> List[Run]:
    """Maximal runs of identical non-empty cells as ``(length, value)``."""
    runs: List[Run] = []
    previous = EMPTY
    for value in line:
        if value != EMPTY:
            if value == previous:
                runs[-1] = (runs[-1][0] + 1, value)
            else:
                runs.append((1, value))
        previous = value
    return runs


def expected_runs(clue: Clue) -> List[Run]:
    runs: List[Run] = []
    for block in clue:
        if isinstance(block, ColorBlock):
            if block.length > 0:
                runs.append((block.length, block.color))
        elif isinstance(block, MegaBlock):
            raise ValueError("mega blocks describe a pair of lines")
        elif block > 0:
            runs.append((block, FILLED))
    return runs


def line_matches(line: Sequence[int], clue: Clue) -> bool:
    return line_runs(line) == expected_runs(clue)


def mega_pair_matches(first: Sequence[int], second: Sequence[int], size: int) -> bool:
    """Two lines hold exactly ``size`` filled cells forming one region."""
    length = len(first)
    cells = [i for i, v in enumerate(list(first) + list(second)) if v != EMPTY]
    return len(cells) == size and is_connected(cells, length)


def _lines_match(lines: Sequence[Sequence[int]], clues: Sequence[Clue], dialect: Dialect) -> bool:
    if dialect != Dialect.MEGA:
        return all(line_matches(line, clue) for line, clue in zip(lines, clues))
    for group in group_lines(clues):
        if len(group) == 1:
            if not line_matches(lines[group[0]], clues[group[0]]):
                return False
        else:
            a, b = group
            size = mega_size(clues[a])
            if size != mega_size(clues[b]) or not mega_pair_matches(lines[a], lines[b], size):
                return False
    return True


def verify_solution(dialect: Dialect, board: Board, row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> bool:
    """True if every row and column of ``board`` satisfies its clue."""
    if len(board) != len(row_clues):
        return False
    if any(len(line) != len(col_clues) for line in board):
        return False
    columns = [list(col) for col in zip(*board)]
    dialect = Dialect(dialect)
    return _lines_match(board, row_clues, dialect) and _lines_match(columns, col_clues, dialect)


def min_line_length(clue: Clue) -> int:
    """Fewest cells a line needs to hold ``clue``."""
    if any(isinstance(b, MegaBlock) for b in clue):
        return 0
    runs = expected_runs(clue)
    gaps = sum(1 for prev, cur in zip(runs, runs[1:]) if prev[1] == cur[1])
    return sum(length for length, _ in runs) + gaps


def is_feasible(length: int, clue: Clue) -> bool:
    """Whether any pattern of ``length`` cells can satisfy ``clue``.

    For a mega clue ``length`` is the length of one line of the pair.
    """
    if any(isinstance(b, MegaBlock) for b in clue):
        return mega_size(clue) <= 2 * length
    return min_line_length(clue) <= length
