from __future__ import annotations

from typing import List, Sequence

from picross.core.model import EMPTY, FILLED, Dialect, Pattern

from . import register_generator


@register_generator(Dialect.BINARY)
def generate_binary_line_patterns(length: int, clue: Sequence[int]) -> List[Pattern]:
    """Enumerate binary patterns of ``length`` cells for a block-length clue.

    Blocks are placed leftmost-first; consecutive blocks are separated by at
    least one empty cell.  A clue with no (or only zero-length) blocks yields
    the single all-empty line.  An infeasible clue yields no pattern.
    """
    blocks = [b for b in clue if b > 0]
    if not blocks:
        return [(EMPTY,) * length]

    patterns: List[Pattern] = []

    def backtrack(pos: int, idx: int, prefix: Pattern) -> None:
        if idx == len(blocks):
            patterns.append(prefix + (EMPTY,) * (length - pos))
            return

        block = blocks[idx]
        remaining = blocks[idx:]
        min_space_needed = sum(remaining) + len(remaining) - 1

        for start in range(pos, length - min_space_needed + 1):
            head = prefix + (EMPTY,) * (start - pos) + (FILLED,) * block
            if idx < len(blocks) - 1:
                backtrack(start + block + 1, idx + 1, head + (EMPTY,))
            else:
                backtrack(start + block, idx + 1, head)

    backtrack(0, 0, ())
    return patterns
