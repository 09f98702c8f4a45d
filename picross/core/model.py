from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union


class Dialect(str, Enum):
    """Clue dialect of a puzzle."""
    BINARY = "binary"
    COLOR = "color"
    MEGA = "mega"


EMPTY = 0
FILLED = 1
RETRACTED = -1


@dataclass(frozen=True)
class ColorBlock:
    """A run of ``length`` cells painted with ``color``."""
    length: int
    color: int


@dataclass(frozen=True)
class MegaBlock:
    """A connected region of ``size`` cells spread over two adjacent lines."""
    size: int


Block = Union[int, ColorBlock, MegaBlock]
Clue = Tuple[Block, ...]
Pattern = Tuple[int, ...]
Board = List[List[int]]


class TraceEvent(NamedTuple):
    row: int
    col: int
    value: int


@dataclass
class SolverOptions:
    collect_trace: bool = True
    max_trace_length: Optional[int] = 20000


@dataclass
class SolverResult:
    """Final board plus the ordered search trace."""
    board: Board
    trace: List[TraceEvent] = field(default_factory=list)
    truncated: bool = False
