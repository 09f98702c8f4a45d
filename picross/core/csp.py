"""Row-by-row backtracking solver with per-column candidate propagation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from picross.patterns import generate_line_patterns

from .mega import solve_mega
from .model import Clue, Dialect, Pattern, SolverOptions, SolverResult
from .trace import TraceRecorder

if TYPE_CHECKING:
    from picross.io.parser import Puzzle

logger = logging.getLogger(__name__)


def solve_lines(
    row_patterns: Sequence[Sequence[Pattern]],
    col_patterns: Sequence[Sequence[Pattern]],
    options: Optional[SolverOptions] = None,
) -> Optional[SolverResult]:
    """Search for the first board whose rows and columns use the given patterns.

    Rows are committed top to bottom, trying each row's patterns in order.
    Committing a row narrows every column to the patterns that agree with it
    at that row; each level keeps its own narrowed lists, so backtracking only
    has to return.  Returns ``None`` when no assignment exists.
    """
    options = options or SolverOptions()
    n_rows = len(row_patterns)
    n_cols = len(col_patterns)
    recorder = TraceRecorder(options.max_trace_length, enabled=options.collect_trace)
    solution: List[Pattern] = [()] * n_rows

    def search(row: int, possible_cols: List[List[Pattern]]) -> bool:
        if row == n_rows:
            return True

        for pattern in row_patterns[row]:
            next_cols: List[List[Pattern]] = []
            ok = True
            for c in range(n_cols):
                value = pattern[c]
                filtered = [p for p in possible_cols[c] if p[row] == value]
                if not filtered:
                    ok = False
                    break
                next_cols.append(filtered)
            if not ok:
                continue

            solution[row] = pattern
            recorder.write_line(row, pattern)
            if search(row + 1, next_cols):
                return True
            recorder.clear_line(row, n_cols)

        return False

    if not search(0, [list(p) for p in col_patterns]):
        logger.info("no solution for %dx%d board", n_rows, n_cols)
        return None

    board = [list(line) for line in solution]
    trace = recorder.finalize(board)
    logger.info(
        "solved %dx%d board; %d trace events%s",
        n_rows, n_cols, len(trace), " (truncated)" if recorder.truncated else "",
    )
    return SolverResult(board=board, trace=trace, truncated=recorder.truncated)


def _solve_dialect(
    dialect: Dialect,
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    options: Optional[SolverOptions],
) -> Optional[SolverResult]:
    n_rows, n_cols = len(row_clues), len(col_clues)
    row_patterns = [generate_line_patterns(dialect, n_cols, clue) for clue in row_clues]
    col_patterns = [generate_line_patterns(dialect, n_rows, clue) for clue in col_clues]
    logger.debug(
        "%s patterns: rows=%s cols=%s",
        dialect.value,
        [len(p) for p in row_patterns],
        [len(p) for p in col_patterns],
    )
    return solve_lines(row_patterns, col_patterns, options)


def solve_binary(
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    options: Optional[SolverOptions] = None,
) -> Optional[SolverResult]:
    return _solve_dialect(Dialect.BINARY, row_clues, col_clues, options)


def solve_color(
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    options: Optional[SolverOptions] = None,
) -> Optional[SolverResult]:
    return _solve_dialect(Dialect.COLOR, row_clues, col_clues, options)


def solve_puzzle(puzzle: Puzzle, options: Optional[SolverOptions] = None) -> Optional[SolverResult]:
    """Solve a loaded puzzle with the solver for its dialect."""
    options = options or puzzle.solver_options()
    if puzzle.dialect == Dialect.MEGA:
        return solve_mega(puzzle.row_clues, puzzle.col_clues, options)
    if puzzle.dialect == Dialect.COLOR:
        return solve_color(puzzle.row_clues, puzzle.col_clues, options)
    return solve_binary(puzzle.row_clues, puzzle.col_clues, options)
