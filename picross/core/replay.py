"""Rebuild boards from a trace the way a playback layer applies it."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .model import EMPTY, RETRACTED, Board, TraceEvent


def empty_board(n_rows: int, n_cols: int) -> Board:
    return [[EMPTY for _ in range(n_cols)] for _ in range(n_rows)]


def apply_event(board: Board, visited: List[List[bool]], event: TraceEvent) -> None:
    row, col, value = event
    if value == RETRACTED:
        board[row][col] = EMPTY
        visited[row][col] = False
    elif value == EMPTY:
        board[row][col] = EMPTY
        visited[row][col] = True
    else:
        board[row][col] = value
        visited[row][col] = False


def replay(trace: Iterable[TraceEvent], n_rows: int, n_cols: int) -> Tuple[Board, List[List[bool]]]:
    """Apply ``trace`` in order to an empty board.

    Returns the board and the grid of cells marked as visited-empty.
    """
    board = empty_board(n_rows, n_cols)
    visited = [[False for _ in range(n_cols)] for _ in range(n_rows)]
    for event in trace:
        apply_event(board, visited, event)
    return board, visited


def steps_from_board(board: Board) -> List[TraceEvent]:
    """One event per cell of a finished board, ordered column by column.

    Used when a solve ran without tracing but playback still wants steps.
    """
    steps = [
        TraceEvent(r, c, value)
        for r, line in enumerate(board)
        for c, value in enumerate(line)
    ]
    return sorted(steps, key=lambda e: (e.col, e.row))
