import pytest

from hauntgame.timer import START_MINUTES, SECONDS_REFILL, CountdownTimer, two_digits


def test_two_digits_of_two_digit_value():
    assert two_digits(59) == [5, 9]


def test_two_digits_drops_hundreds():
    assert two_digits(123) == two_digits(23)


@pytest.mark.parametrize("value", [0, 7, 42, 99])
def test_two_digits_recompose(value):
    tens, ones = two_digits(value)
    assert tens * 10 + ones == value


def test_default_minutes():
    timer = CountdownTimer()
    assert timer.minutes == START_MINUTES
    assert timer.seconds == 0
    assert timer.digits() == ([0, 0], [0, 0])


def test_first_tick_borrows_a_minute():
    timer = CountdownTimer(2)
    assert timer.tick() is False
    assert timer.seconds == SECONDS_REFILL
    assert timer.minutes == 1
    assert timer.digits() == (two_digits(1), two_digits(SECONDS_REFILL))


def test_second_passes_after_sixty_frames():
    timer = CountdownTimer(2)
    timer.tick()
    start = timer.seconds
    for _ in range(58):
        timer.tick()
    assert timer.seconds == start
    timer.tick()
    assert timer.seconds == start - 1
    assert timer.frames == 0


def test_expires_with_no_minutes():
    timer = CountdownTimer(0)
    assert timer.expired() is True
    assert timer.tick() is True
    assert timer.minutes == 0


def test_not_expired_while_seconds_left():
    timer = CountdownTimer(0)
    timer.add_seconds(10)
    assert timer.expired() is False
    assert timer.tick() is False


def test_warning_threshold():
    timer = CountdownTimer(0)
    timer.add_seconds(30)
    assert timer.warning() is True
    timer.add_seconds(1)
    assert timer.warning() is False


def test_no_warning_with_minutes_left():
    timer = CountdownTimer(1)
    timer.add_seconds(5)
    assert timer.warning() is False


def test_add_seconds_readout_shows_hundreds_and_tens():
    timer = CountdownTimer(2)
    timer.add_seconds(75)
    assert timer.seconds == 75
    assert timer.digits()[1] == [0, 7]


def test_sub_seconds_and_minutes_redraw():
    timer = CountdownTimer(5)
    timer.add_seconds(40)
    timer.sub_seconds(3)
    timer.sub_minutes(2)
    assert timer.seconds == 37
    assert timer.minutes == 3
    assert timer.digits() == (two_digits(3), two_digits(37))


def test_digits_are_copies():
    timer = CountdownTimer(2)
    minutes, seconds = timer.digits()
    minutes.append(9)
    seconds.append(9)
    assert timer.digits() == ([0, 0], [0, 0])