from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from picross.core.mega import group_lines
from picross.core.model import Block, Clue, ColorBlock, Dialect, MegaBlock, SolverOptions


class PuzzleFormatError(ValueError):
    """Raised when a puzzle document cannot be turned into clues."""


@dataclass
class Puzzle:
    dialect: Dialect
    row_clues: List[Clue]
    col_clues: List[Clue]
    name: str = ""
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.row_clues), len(self.col_clues)

    def solver_options(self) -> SolverOptions:
        opts = SolverOptions()
        if "collect_trace" in self.options:
            opts.collect_trace = bool(self.options["collect_trace"])
        if "max_trace_length" in self.options:
            limit = self.options["max_trace_length"]
            opts.max_trace_length = None if limit is None else int(limit)
        return opts


def _parse_block(dialect: Dialect, item: Any, where: str) -> Block:
    if dialect == Dialect.COLOR:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise PuzzleFormatError(f"{where}: color blocks are [length, color] pairs, got {item!r}")
        return ColorBlock(int(item[0]), int(item[1]))
    if dialect == Dialect.MEGA and isinstance(item, dict):
        if "mega" not in item:
            raise PuzzleFormatError(f"{where}: expected a 'mega' key, got {item!r}")
        return MegaBlock(int(item["mega"]))
    if isinstance(item, bool) or not isinstance(item, int):
        raise PuzzleFormatError(f"{where}: block lengths are integers, got {item!r}")
    if item < 0:
        raise PuzzleFormatError(f"{where}: negative block length {item}")
    return item


def parse_clues(dialect: Dialect, data: Any, kind: str) -> List[Clue]:
    """Turn a YAML list of line clues into tuples of blocks.

    Zero-length blocks are dropped, so ``[0]`` reads as an empty line.
    """
    if not isinstance(data, list) or not data:
        raise PuzzleFormatError(f"'{kind}' must be a non-empty list of clues")
    clues: List[Clue] = []
    for i, raw in enumerate(data):
        items = raw if isinstance(raw, list) else [raw]
        if dialect == Dialect.COLOR and items and not isinstance(items[0], list):
            items = [items]
        blocks = [_parse_block(dialect, item, f"{kind}[{i}]") for item in items]
        clues.append(tuple(b for b in blocks if not _is_zero(b)))
    return clues


def _is_zero(block: Block) -> bool:
    if isinstance(block, ColorBlock):
        return block.length == 0
    if isinstance(block, MegaBlock):
        return False
    return block == 0


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise PuzzleFormatError(f"{path}: top level must be a mapping")
    return puzzle_from_dict(data, name=Path(path).stem)


def puzzle_from_dict(data: Dict[str, Any], name: str = "") -> Puzzle:
    try:
        dialect = Dialect(data.get("dialect", Dialect.BINARY.value))
    except ValueError as exc:
        raise PuzzleFormatError(f"unknown dialect {data.get('dialect')!r}") from exc

    row_clues = parse_clues(dialect, data.get("rows"), "rows")
    col_clues = parse_clues(dialect, data.get("columns"), "columns")
    if dialect == Dialect.MEGA:
        try:
            group_lines(row_clues)
            group_lines(col_clues)
        except ValueError as exc:
            raise PuzzleFormatError(str(exc)) from exc

    options = data.get("options", {}) or {}
    if not isinstance(options, dict):
        raise PuzzleFormatError("'options' must be a mapping")

    return Puzzle(
        dialect=dialect,
        row_clues=row_clues,
        col_clues=col_clues,
        name=str(data.get("name", name)),
        options=options,
    )
