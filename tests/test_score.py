import pytest

from hauntgame.score import (
    COOKIE_HARD_SCORE,
    COOKIE_NORMAL_SCORE,
    ScoreBoard,
    digit_count,
)


def test_digit_count_zero_is_one():
    assert digit_count(0) == 1


def test_digit_count_powers_of_ten():
    for k in range(10):
        assert digit_count(10**k) == k + 1
        assert digit_count(10 ** (k + 1) - 1) == k + 1


def test_digit_count_ignores_sign():
    for value in (7, 42, 12345):
        assert digit_count(-value) == digit_count(value)


def test_add_accumulates_and_shows_digits():
    board = ScoreBoard()
    board.add(COOKIE_NORMAL_SCORE)
    assert board.value == COOKIE_NORMAL_SCORE
    assert board.digits() == [0, 0, 0, 0, 0, 1, 5, 6]
    board.add(COOKIE_HARD_SCORE)
    assert board.value == COOKIE_NORMAL_SCORE + COOKIE_HARD_SCORE
    assert int("".join(map(str, board.digits()))) == board.value


def test_add_keeps_lowest_digits_on_overflow():
    board = ScoreBoard()
    board.add(123456789)
    assert board.digits() == [2, 3, 4, 5, 6, 7, 8, 9]


def test_set_does_not_redraw_digits():
    board = ScoreBoard()
    board.add(COOKIE_NORMAL_SCORE)
    board.set(9)
    assert board.value == 9
    assert board.digits() == [0, 0, 0, 0, 0, 1, 5, 6]


def test_update_visibility_right_aligned():
    board = ScoreBoard()
    board.add(COOKIE_NORMAL_SCORE)
    board.update()
    shown = board.visible()
    assert shown == (False,) * 5 + (True,) * 3
    assert sum(shown) == digit_count(board.value)


def test_initial_update_shows_single_zero():
    board = ScoreBoard(4)
    assert board.visible() == (False,) * 4
    board.update()
    assert board.visible() == (False, False, False, True)
    assert board.digits() == [0, 0, 0, 0]


def test_width_must_be_positive():
    with pytest.raises(ValueError):
        ScoreBoard(0)