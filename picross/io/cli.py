"""Command-line interface: solve a puzzle file and print the board."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from picross.core.constraints import is_feasible, verify_solution
from picross.core.csp import solve_puzzle
from picross.core.model import EMPTY, Board, Dialect
from picross.core.replay import steps_from_board

from . import parser

logger = logging.getLogger(__name__)


def render_board(board: Board, dialect: Dialect) -> str:
    lines = []
    for row in board:
        if dialect == Dialect.COLOR:
            lines.append(" ".join("." if v == EMPTY else str(v) for v in row))
        else:
            lines.append("".join("." if v == EMPTY else "#" for v in row))
    return "\n".join(lines)


def _warn_infeasible(puz: parser.Puzzle) -> None:
    n_rows, n_cols = puz.shape
    for kind, clues, length in (("row", puz.row_clues, n_cols), ("column", puz.col_clues, n_rows)):
        for i, clue in enumerate(clues):
            if not is_feasible(length, clue):
                logger.warning("%s %d clue %s does not fit in %d cells", kind, i, clue, length)


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Picross solver with a replayable search trace")
    ap.add_argument("puzzle", type=Path, help="Path to puzzle YAML")
    ap.add_argument("--no-trace", action="store_true", help="Do not record the search trace")
    ap.add_argument("--max-trace", type=int, default=None, help="Trace capacity (events)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        puz = parser.load_puzzle(args.puzzle)
    except (OSError, parser.PuzzleFormatError) as exc:
        raise SystemExit(f"Cannot load {args.puzzle}: {exc}") from exc

    options = puz.solver_options()
    if args.no_trace:
        options.collect_trace = False
    if args.max_trace is not None:
        options.max_trace_length = args.max_trace

    n_rows, n_cols = puz.shape
    print(f"Loaded {puz.dialect.value} puzzle {puz.name!r}: {n_rows}x{n_cols}.")
    _warn_infeasible(puz)

    result = solve_puzzle(puz, options)
    if result is None:
        print("No solution found.")
        return 1

    print(render_board(result.board, puz.dialect))
    if options.collect_trace:
        suffix = " (truncated, closed with clear and fill passes)" if result.truncated else ""
        print(f"Trace: {len(result.trace)} events{suffix}")
    else:
        steps = steps_from_board(result.board)
        print(f"Playback steps: {len(steps)} (column by column from the solved board)")
    if not verify_solution(puz.dialect, result.board, puz.row_clues, puz.col_clues):
        logger.error("solved board does not match its clues")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
