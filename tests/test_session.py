import sys
import threading

import pytest

from nqueen import InvalidConfiguration, Session, StepResult, TextView, View
from nqueen.helpers import Point


class RecordingView(View):
    def __init__(self):
        self.calls = []

    def render(self, snapshot, cursor):
        self.calls.append(("render", cursor))

    def report_solution(self, snapshot, count):
        self.calls.append(("solution", count, snapshot.queen_columns()))

    def clear(self):
        self.calls.append(("clear",))


@pytest.fixture
def view():
    return RecordingView()


def test_new_session_renders_empty_board(view):
    Session(4, view=view)

    assert view.calls == [("render", Point(0, 0))]


def test_session_without_view():
    nq_session = Session(4)

    assert nq_session.run_all() > 0
    assert nq_session.work_board.result_count() == 2
    assert len(nq_session.solutions) == 2


def test_run_step_renders(view):
    nq_session = Session(4, view=view)
    result = nq_session.run_step()

    assert result == StepResult(True, False)
    assert view.calls[-1] == ("render", Point(0, 0))
    assert len(view.calls) == 2


def test_run_step_reports_solutions(view):
    nq_session = Session(4, view=view)
    while not nq_session.run_step().solved:
        pass

    assert view.calls[-1] == ("solution", 1, [1, 3, 0, 2])
    assert nq_session.solutions[0].queen_columns() == [1, 3, 0, 2]


def test_finished_session_does_not_render(view):
    nq_session = Session(4, view=view)
    nq_session.run_all()
    count = len(view.calls)

    assert nq_session.run_step() == StepResult(False, False)
    assert len(view.calls) == count
    assert nq_session.finished


def test_run_all_renders_once_at_the_end(view):
    nq_session = Session(6, view=view)
    nq_session.run_all()

    kinds = [call[0] for call in view.calls]
    assert kinds == ["render", "solution", "solution", "solution", "solution", "render"]
    assert [call[1] for call in view.calls if call[0] == "solution"] == [1, 2, 3, 4]


def test_run_all_with_step_limit():
    nq_session = Session(8)

    assert nq_session.run_all(max_steps=100) == 100
    assert not nq_session.finished


def test_run_steps_stops_when_finished():
    nq_session = Session(4)
    total = nq_session.run_all()
    nq_session.reset()

    assert nq_session.run_steps(10) == 10
    assert nq_session.run_steps(total * 2) == total - 10
    assert nq_session.finished


def test_reset_changes_configuration(view):
    nq_session = Session(4, view=view)
    nq_session.run_all()
    nq_session.reset(8, True)

    board = nq_session.work_board
    assert (board.board_size, board.exclude_symmetry) == (8, True)
    assert board.result_count() == 0
    assert nq_session.solutions == []
    assert view.calls[-2:] == [("clear",), ("render", Point(0, 0))]


def test_reset_keeps_configuration_by_default():
    nq_session = Session(5, exclude_symmetry=True)
    nq_session.run_all()
    nq_session.reset()

    assert nq_session.work_board.board_size == 5
    assert nq_session.work_board.exclude_symmetry is True
    assert nq_session.work_board.result_count() == 0


def test_invalid_reset_keeps_board():
    nq_session = Session(4)
    nq_session.run_step()
    board = nq_session.work_board

    with pytest.raises(InvalidConfiguration):
        nq_session.reset(13)
    assert nq_session.work_board is board


@pytest.mark.parametrize("value", [9, 1001, -5])
def test_interval_bounds(value):
    nq_session = Session(4)

    with pytest.raises(ValueError):
        nq_session.interval_ms = value
    assert nq_session.interval_ms == 50


def test_interval_accepts_numeric_strings():
    nq_session = Session(4)
    nq_session.interval_ms = "200"

    assert nq_session.interval_ms == 200


def test_text_view_session():
    view = TextView()
    nq_session = Session(4, view=view)
    nq_session.run_all()

    assert len(view.solutions) == 2
    assert view.solutions[0] == "<1>\nxQ..\nxxxQ\nQ...\nxxQ."
    assert str(nq_session) == "4-Queens session with 2 results"


def test_threads_share_one_session():
    nq_session = Session(8, view=TextView())
    errors = []

    def drive():
        try:
            while nq_session.run_step().executed:
                pass
        except Exception as e:
            errors.append(e)

    interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        threads = [threading.Thread(target=drive) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    finally:
        sys.setswitchinterval(interval)

    assert errors == []
    assert nq_session.finished
    assert nq_session.work_board.result_count() == 92
    assert len(nq_session.view.solutions) == 92


def test_lock_is_reentrant_for_callers():
    nq_session = Session(4)

    with nq_session.lock:
        nq_session.run_step()
        nq_session.reset(5)
        assert nq_session.work_board.board_size == 5
