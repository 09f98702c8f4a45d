from __future__ import annotations

from typing import List, Sequence

from picross.core.model import EMPTY, ColorBlock, Dialect, Pattern

from . import register_generator


@register_generator(Dialect.COLOR)
def generate_color_line_patterns(length: int, clue: Sequence[ColorBlock]) -> List[Pattern]:
    """Enumerate colored patterns of ``length`` cells.

    Two neighbouring blocks of the same color need an empty cell between
    them.  Blocks of different colors may touch, so at such a boundary both
    continuations are tried: touching first, then separated by one empty
    cell.  Colors are only compared for equality.  Each pattern is returned
    once, at its first position in that order.
    """
    blocks = [b for b in clue if b.length > 0]
    if not blocks:
        return [(EMPTY,) * length]

    patterns: List[Pattern] = []

    def backtrack(pos: int, idx: int, prefix: Pattern) -> None:
        if idx == len(blocks):
            patterns.append(prefix + (EMPTY,) * (length - pos))
            return

        block = blocks[idx]
        min_space_needed = sum(b.length for b in blocks[idx:])
        gaps_needed = sum(
            1 for i in range(idx + 1, len(blocks))
            if blocks[i - 1].color == blocks[i].color
        )
        max_start = length - min_space_needed - gaps_needed

        for start in range(pos, max_start + 1):
            head = prefix + (EMPTY,) * (start - pos) + (block.color,) * block.length
            end = start + block.length
            if idx == len(blocks) - 1:
                backtrack(end, idx + 1, head)
            elif blocks[idx + 1].color == block.color:
                backtrack(end + 1, idx + 1, head + (EMPTY,))
            else:
                backtrack(end, idx + 1, head)
                backtrack(end + 1, idx + 1, head + (EMPTY,))

    backtrack(0, 0, ())
    # the touching branch can shift right onto a gapped placement
    return list(dict.fromkeys(patterns))
