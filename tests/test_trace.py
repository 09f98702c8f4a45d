from picross.core.model import TraceEvent
from picross.core.replay import replay, steps_from_board
from picross.core.trace import TraceRecorder


def test_recorder_stops_at_capacity():
    rec = TraceRecorder(capacity=3)
    for c in range(5):
        rec.record(0, c, 1)
    assert rec.truncated
    assert rec.events == [TraceEvent(0, 0, 1), TraceEvent(0, 1, 1), TraceEvent(0, 2, 1)]


def test_recorder_unbounded_and_disabled():
    rec = TraceRecorder(capacity=None)
    rec.write_line(0, [1] * 50)
    assert len(rec.events) == 50 and not rec.truncated

    off = TraceRecorder(enabled=False)
    off.write_line(0, [1, 0, 1])
    off.clear_line(0, 3)
    assert off.finalize([[1, 0, 1]]) == []


def test_finalize_appends_clear_then_fill_when_truncated():
    board = [[1, 0], [0, 2]]
    rec = TraceRecorder(capacity=1)
    rec.write_line(0, [0, 1])
    trace = rec.finalize(board)
    assert trace[0] == TraceEvent(0, 0, 0)
    assert trace[1:5] == [TraceEvent(r, c, -1) for r in range(2) for c in range(2)]
    assert trace[5:] == [TraceEvent(0, 0, 1), TraceEvent(0, 1, 0), TraceEvent(1, 0, 0), TraceEvent(1, 1, 2)]
    assert replay(trace, 2, 2)[0] == board


def test_finalize_leaves_complete_trace_alone():
    rec = TraceRecorder()
    rec.write_line(0, [1, 1])
    assert rec.finalize([[1, 1]]) == [TraceEvent(0, 0, 1), TraceEvent(0, 1, 1)]


def test_replay_marks_visited_empty_cells():
    trace = [TraceEvent(0, 0, 3), TraceEvent(0, 1, 0), TraceEvent(1, 0, 1), TraceEvent(1, 0, -1)]
    board, visited = replay(trace, 2, 2)
    assert board == [[3, 0], [0, 0]]
    assert visited == [[False, True], [False, False]]


def test_steps_from_board_column_major():
    steps = steps_from_board([[1, 2], [3, 4]])
    assert [s.value for s in steps] == [1, 3, 2, 4]
    assert replay(steps, 2, 2)[0] == [[1, 2], [3, 4]]
