import pytest
from flames.engine import EliminationState, FLAMES, eliminate, run_to_completion, step

# survivor and elimination order for small counts (classic FLAMES table)
@pytest.mark.parametrize("count,survivor,order", [
    (1, "S", ("F", "L", "A", "M", "E")),
    (2, "E", ("L", "M", "S", "A", "F")),
    (3, "F", ("A", "S", "M", "L", "E")),
    (4, "E", ("M", "L", "F", "A", "S")),
    (5, "F", ("E", "M", "S", "L", "A")),
    (6, "M", ("S", "F", "A", "L", "E")),
    (7, "E", ("F", "A", "S", "L", "M")),
    (8, "A", ("L", "E", "M", "F", "S")),
])
def test_elimination_golden(count, survivor, order):
    run = run_to_completion(count)
    assert run.survivor == survivor
    assert run.eliminated == order


@pytest.mark.parametrize("count", range(0, 51))
def test_always_five_rounds_one_survivor(count):
    run = run_to_completion(count)
    assert len(run.eliminated) == 5
    assert len(run.states) == 6
    assert run.states[-1].done
    assert sorted(run.eliminated + (run.survivor,)) == sorted(FLAMES)


def test_zero_count_plays_as_one():
    assert run_to_completion(0).eliminated == run_to_completion(1).eliminated
    assert eliminate(0) == eliminate(1)


def test_step_removes_counted_letter_and_moves_cursor():
    nxt, removed = step(EliminationState(), 2)
    assert removed == "L"
    assert nxt.remaining == ("F", "A", "M", "E", "S")
    assert nxt.cursor == 1


def test_step_wraps_cursor_after_last_letter():
    nxt, removed = step(EliminationState(), 6)
    assert removed == "S"
    assert nxt.cursor == 0


def test_step_is_pure():
    s = EliminationState()
    step(s, 3)
    assert s.remaining == FLAMES and s.cursor == 0


def test_step_terminal_state_raises():
    with pytest.raises(ValueError):
        step(EliminationState(("M",), 0), 3)


def test_run_from_custom_start():
    run = run_to_completion(1, start=EliminationState(("M", "E"), 1))
    assert run.eliminated == ("E",)
    assert run.survivor == "M"
