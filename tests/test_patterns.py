import pytest

from picross.core.constraints import line_runs, mega_pair_matches
from picross.core.model import ColorBlock, Dialect, MegaBlock
from picross.patterns import generate_line_patterns
from picross.patterns.binary import generate_binary_line_patterns
from picross.patterns.color import generate_color_line_patterns
from picross.patterns.mega import generate_mega_patterns, is_connected


def test_binary_leftmost_order():
    assert generate_binary_line_patterns(5, [2, 1]) == [
        (1, 1, 0, 1, 0),
        (1, 1, 0, 0, 1),
        (0, 1, 1, 0, 1),
    ]


def test_binary_empty_and_zero_clue():
    assert generate_binary_line_patterns(4, []) == [(0, 0, 0, 0)]
    assert generate_binary_line_patterns(4, [0]) == [(0, 0, 0, 0)]


def test_binary_full_line():
    assert generate_binary_line_patterns(3, [3]) == [(1, 1, 1)]


def test_binary_infeasible_clue():
    assert generate_binary_line_patterns(4, [2, 2]) == []


@pytest.mark.parametrize("length,clue", [(10, [3, 1, 2]), (15, [1, 1, 1, 1]), (20, [6, 1, 4, 4])])
def test_binary_patterns_follow_clue(length, clue):
    patterns = generate_binary_line_patterns(length, clue)
    assert patterns
    assert len(set(patterns)) == len(patterns)
    for p in patterns:
        assert len(p) == length
        assert line_runs(p) == [(b, 1) for b in clue]


def test_color_same_color_needs_gap():
    clue = [ColorBlock(1, 1), ColorBlock(1, 1)]
    assert generate_color_line_patterns(3, clue) == [(1, 0, 1)]
    assert generate_color_line_patterns(2, clue) == []


def test_color_different_colors_may_touch():
    clue = [ColorBlock(1, 1), ColorBlock(1, 2)]
    assert generate_color_line_patterns(3, clue) == [(1, 2, 0), (1, 0, 2), (0, 1, 2)]
    assert generate_color_line_patterns(2, clue) == [(1, 2)]


def test_color_patterns_follow_clue():
    clue = [ColorBlock(2, 4), ColorBlock(2, 1), ColorBlock(3, 4), ColorBlock(1, 1)]
    patterns = generate_color_line_patterns(15, clue)
    assert patterns
    assert len(set(patterns)) == len(patterns)
    touching = False
    for p in patterns:
        assert len(p) == 15
        assert line_runs(p) == [(b.length, b.color) for b in clue]
        touching = touching or any(a and b and a != b for a, b in zip(p, p[1:]))
    assert touching


def test_mega_patterns_connected():
    patterns = generate_mega_patterns(5, 6)
    assert patterns
    assert len(set(patterns)) == len(patterns)
    for p in patterns:
        assert len(p) == 10
        assert sum(p) == 6
        assert mega_pair_matches(p[:5], p[5:], 6)


def test_mega_small_pair_counts():
    # 2x2 block: every pair except the diagonals is connected
    assert len(generate_mega_patterns(2, 2)) == 4
    assert generate_mega_patterns(2, 0) == [(0, 0, 0, 0)]
    assert generate_mega_patterns(2, 5) == []


def test_is_connected_uses_pair_adjacency():
    # positions 4 and 5 are the ends of different sub-lines, not neighbours
    assert not is_connected([4, 5], 5)
    assert is_connected([0, 5], 5)
    assert is_connected([3, 4, 9], 5)


def test_registry_dispatch():
    assert generate_line_patterns(Dialect.BINARY, 3, (1,)) == [(1, 0, 0), (0, 1, 0), (0, 0, 1)]
    assert generate_line_patterns("color", 2, (ColorBlock(2, 3),)) == [(3, 3)]
    assert len(generate_line_patterns(Dialect.MEGA, 2, (MegaBlock(4),))) == 1
