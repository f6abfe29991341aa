import pytest

from careercoach.coach.state import InvalidTransition, RequestState, RequestStatus


def test_happy_path():
    state = RequestState()
    assert state.status is RequestStatus.IDLE

    assert state.begin()
    assert state.busy
    state.succeed()
    assert state.status is RequestStatus.SUCCEEDED
    state.reset()
    assert state.status is RequestStatus.IDLE


def test_second_begin_while_pending_is_a_no_op():
    state = RequestState()
    assert state.begin()
    assert not state.begin()
    assert state.status is RequestStatus.PENDING


def test_failure_records_error_and_next_begin_clears_it():
    state = RequestState()
    state.begin()
    state.fail("timeout")
    assert state.status is RequestStatus.FAILED
    assert state.error == "timeout"

    assert state.begin()
    assert state.error is None
    assert state.busy


@pytest.mark.parametrize("action", ["succeed", "reset"])
def test_cannot_skip_pending(action):
    state = RequestState()
    with pytest.raises(InvalidTransition):
        getattr(state, action)()


def test_cannot_finish_twice():
    state = RequestState()
    state.begin()
    state.succeed()
    with pytest.raises(InvalidTransition):
        state.fail("late")
