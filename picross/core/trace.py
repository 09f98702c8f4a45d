"""Bounded recorder for the assignment/retraction events of a search."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .model import RETRACTED, Board, TraceEvent

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20000


class TraceRecorder:
    """Append-only event log with a capacity cap.

    Once ``capacity`` events are stored, later events are dropped and
    :attr:`truncated` is set.  :meth:`finalize` then appends a clear pass and
    a fill pass over the whole board so that replaying the trace still ends
    on the solved grid.  ``capacity=None`` never truncates.
    """

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY, enabled: bool = True) -> None:
        self.capacity = capacity
        self.enabled = enabled
        self.truncated = False
        self.events: List[TraceEvent] = []

    def record(self, row: int, col: int, value: int) -> None:
        if not self.enabled or self.truncated:
            return
        if self.capacity is not None and len(self.events) >= self.capacity:
            self.truncated = True
            logger.debug("trace capacity %d reached; dropping further events", self.capacity)
            return
        self.events.append(TraceEvent(row, col, value))

    def write_line(self, row: int, pattern: Sequence[int]) -> None:
        for col, value in enumerate(pattern):
            self.record(row, col, value)

    def clear_line(self, row: int, width: int) -> None:
        for col in range(width):
            self.record(row, col, RETRACTED)

    def finalize(self, board: Board) -> List[TraceEvent]:
        """Close the trace of a successful search and return it."""
        if self.enabled and self.truncated:
            for r, line in enumerate(board):
                for c in range(len(line)):
                    self.events.append(TraceEvent(r, c, RETRACTED))
            for r, line in enumerate(board):
                for c, value in enumerate(line):
                    self.events.append(TraceEvent(r, c, value))
        return self.events
