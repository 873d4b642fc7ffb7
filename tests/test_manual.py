import pytest
from flames.engine import compute_flames, match, remainder
from flames.engine.normalize import normalize
from flames.manual import (
    CrossedLetters, LetterKey, ManualSession, Paired, Unpaired, is_maximal,
    remaining_count, toggle,
)


def _cross_all(name1, name2, name_index):
    crossed = CrossedLetters()
    source = normalize(name1 if name_index == 1 else name2)
    for pos, ch in enumerate(source):
        key = LetterKey(name_index, pos, ch)
        if key not in crossed:
            crossed = toggle(key, name1, name2, crossed)
    return crossed


def test_toggle_pairs_first_uncrossed_occurrence():
    c = toggle(LetterKey(1, 0, "a"), "anna", "nan", CrossedLetters())
    assert len(c) == 2
    assert c.state_of((1, 0)) == Paired((2, 1))
    assert c.state_of((2, 1)) == Paired((1, 0))
    assert c.state_of((1, 3)) == Unpaired()


def test_toggle_skips_already_crossed_partner():
    c = toggle(LetterKey(1, 1, "n"), "anna", "nan", CrossedLetters())
    c = toggle(LetterKey(1, 2, "n"), "anna", "nan", c)
    assert c.state_of((1, 2)) == Paired((2, 2))


def test_toggle_twice_is_undo():
    start = toggle(LetterKey(1, 1, "n"), "anna", "nan", CrossedLetters())
    c = toggle(LetterKey(1, 0, "a"), "anna", "nan", start)
    assert toggle(LetterKey(1, 0, "a"), "anna", "nan", c) == start


def test_uncrossing_either_side_removes_pair():
    c = toggle(LetterKey(1, 0, "a"), "anna", "nan", CrossedLetters())
    c = toggle(LetterKey(2, 1, "a"), "anna", "nan", c)
    assert len(c) == 0


@pytest.mark.parametrize("key", [
    LetterKey(1, 0, "a"),    # no 'a' in the other name
    LetterKey(1, 0, "z"),    # letter doesn't match the position
    LetterKey(1, 9, "a"),    # out of range
    LetterKey(3, 0, "a"),    # no such name
])
def test_invalid_toggle_is_ignored(key):
    c = CrossedLetters()
    assert toggle(key, "abc", "xyz", c) is c


def test_no_unpaired_crossed_letter():
    c = _cross_all("Bartholomew", "Theodora", 1)
    for k in c.keys():
        state = c.state_of(k.slot)
        assert isinstance(state, Paired)
        assert c.state_of(state.partner) == Paired(k.slot)


@pytest.mark.parametrize("name1,name2", [
    ("Naren", "Priya"), ("anna", "nan"), ("Mississippi", "Missouri"), ("John", "John"),
])
def test_manual_converges_to_batch(name1, name2):
    for side in (1, 2):
        c = _cross_all(name1, name2, side)
        assert is_maximal(name1, name2, c)
        assert remaining_count(name1, name2, c) == remainder(name1, name2)
    # crossing name1 left to right reproduces the batch assignment exactly
    c = _cross_all(name1, name2, 1)
    assert [(a.position, b.position) for a, b in c.pairs()] == match(name1, name2).pairs


def test_not_maximal_midway():
    c = toggle(LetterKey(1, 1, "a"), "Naren", "Priya", CrossedLetters())
    assert not is_maximal("Naren", "Priya", c)
    assert remaining_count("Naren", "Priya", c) == 8


def test_letter_key_parse():
    assert LetterKey.parse("2-3-n") == LetterKey(2, 3, "n")
    assert str(LetterKey(1, 0, "a")) == "1-0-a"
    with pytest.raises(ValueError):
        LetterKey.parse("garbage")


def test_session_play_through():
    s = ManualSession("Naren", "Priya")
    s.toggle_letter("1-1-a")
    s.toggle_letter(LetterKey(2, 1, "r"))
    assert s.is_complete()
    assert s.remaining_count() == 6
    assert s.counting_number() == 6

    correct = compute_flames("Naren", "Priya").result
    for ch in "FLAMES":
        if ch != correct:
            s.toggle_flames_letter(ch)
    hint = s.check_answer()
    assert hint.show and hint.is_correct and hint.correct_result == correct


def test_session_wrong_answer_and_hidden_hint():
    s = ManualSession("Naren", "Priya")
    assert s.check_answer().show is False
    for ch in "FLMES":
        s.toggle_flames_letter(ch)
    hint = s.check_answer()
    assert hint.show and not hint.is_correct
    s.toggle_flames_letter("x")  # ignored
    assert s.remaining_flames_letters() == ["A"]


def test_session_edit_names_discards_crossings():
    s = ManualSession("anna", "nan")
    s.toggle_letter("1-0-a")
    s.toggle_flames_letter("F")
    s.set_names("anna", "nan")
    assert len(s.crossed) == 2
    s.set_names("anna", "nana")
    assert len(s.crossed) == 0 and s.flames_crossed == set()


def test_session_fully_crossed_counts_by_one():
    s = ManualSession("John", "John")
    for i, ch in enumerate("john"):
        s.toggle_letter(LetterKey(1, i, ch))
    assert s.remaining_count() == 0
    assert s.counting_number() == 1
    s.reset()
    assert s.name1 == "" and len(s.crossed) == 0
