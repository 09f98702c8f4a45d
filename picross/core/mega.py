"""Solver for small boards where some line pairs carry a shared mega clue.

Rows are searched in groups: an ordinary row on its own, a mega row pair as
one joint choice.  Columns are not narrowed during the search; the finished
grid is checked against the legal column patterns instead.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, List, Optional, Sequence, Tuple

from picross.patterns.binary import generate_binary_line_patterns
from picross.patterns.mega import generate_mega_patterns

from .model import Clue, MegaBlock, Pattern, SolverOptions, SolverResult
from .trace import TraceRecorder

logger = logging.getLogger(__name__)

LineGroup = Tuple[int, ...]


def is_mega_clue(clue: Clue) -> bool:
    return any(isinstance(b, MegaBlock) for b in clue)


def mega_size(clue: Clue) -> int:
    return sum(b.size for b in clue if isinstance(b, MegaBlock))


def group_lines(clues: Sequence[Clue]) -> List[LineGroup]:
    """Split line indices into singles and adjacent mega pairs.

    Each line of a pair must hold exactly one mega block, both of the same
    size; anything else raises ``ValueError``.
    """
    groups: List[LineGroup] = []
    i = 0
    while i < len(clues):
        if is_mega_clue(clues[i]):
            if i + 1 >= len(clues) or not is_mega_clue(clues[i + 1]):
                raise ValueError(f"mega clue on line {i} has no paired line")
            for j in (i, i + 1):
                if len(clues[j]) != 1:
                    raise ValueError(f"line {j} mixes a mega block with other blocks")
            if mega_size(clues[i]) != mega_size(clues[i + 1]):
                raise ValueError(f"lines {i} and {i + 1} declare different mega sizes")
            groups.append((i, i + 1))
            i += 2
        else:
            groups.append((i,))
            i += 1
    return groups


def _group_candidates(group: LineGroup, clues: Sequence[Clue], length: int) -> List[Tuple[Pattern, ...]]:
    if len(group) == 1:
        return [(p,) for p in generate_binary_line_patterns(length, clues[group[0]])]
    pairs = generate_mega_patterns(length, mega_size(clues[group[0]]))
    return [(p[:length], p[length:]) for p in pairs]


def _legal_set(group: LineGroup, clues: Sequence[Clue], length: int) -> FrozenSet[Pattern]:
    if len(group) == 1:
        return frozenset(generate_binary_line_patterns(length, clues[group[0]]))
    return frozenset(generate_mega_patterns(length, mega_size(clues[group[0]])))


def solve_mega(
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    options: Optional[SolverOptions] = None,
) -> Optional[SolverResult]:
    """Find the first board satisfying plain and mega clues, or ``None``."""
    options = options or SolverOptions()
    n_rows, n_cols = len(row_clues), len(col_clues)
    recorder = TraceRecorder(options.max_trace_length, enabled=options.collect_trace)

    row_groups = group_lines(row_clues)
    col_groups = group_lines(col_clues)
    row_candidates = [_group_candidates(g, row_clues, n_cols) for g in row_groups]
    col_legal = [(g, _legal_set(g, col_clues, n_rows)) for g in col_groups]
    logger.debug(
        "mega row groups %s with %s candidates",
        row_groups, [len(c) for c in row_candidates],
    )

    solution: List[Pattern] = [()] * n_rows

    def check_columns() -> bool:
        columns = list(zip(*solution))
        for group, legal in col_legal:
            key: Pattern = ()
            for c in group:
                key += columns[c]
            if key not in legal:
                return False
        return True

    def search(g: int) -> bool:
        if g == len(row_groups):
            return check_columns()

        first = row_groups[g][0]
        for lines in row_candidates[g]:
            for offset, line in enumerate(lines):
                solution[first + offset] = line
                recorder.write_line(first + offset, line)
            if search(g + 1):
                return True
            for offset in range(len(lines)):
                recorder.clear_line(first + offset, n_cols)
        return False

    if not search(0):
        logger.info("no solution for %dx%d mega board", n_rows, n_cols)
        return None

    board = [list(line) for line in solution]
    trace = recorder.finalize(board)
    logger.info("solved %dx%d mega board; %d trace events", n_rows, n_cols, len(trace))
    return SolverResult(board=board, trace=trace, truncated=recorder.truncated)
