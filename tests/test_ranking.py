import pytest

from hauntgame.ranking import Ranking, split_digits
from hauntgame.rankstore import read_table, write_table


@pytest.fixture
def paths(tmp_path):
    return tmp_path / "seconds.txt", tmp_path / "minutes.txt"


def test_split_digits_reassembles_two_digit_values():
    for value in range(100):
        tens, ones = split_digits(value, 2)
        assert 10 * tens + ones == value


def test_split_digits_keeps_only_last_digits():
    assert split_digits(123, 2) == [2, 3]
    assert len(split_digits(7, 4)) == 4


def test_split_digits_rejects_zero_count():
    with pytest.raises(ValueError):
        split_digits(5, 0)


def test_size_must_be_positive(paths):
    with pytest.raises(ValueError):
        Ranking(*paths, size=0)


def test_load_missing_files_keeps_zeroes(paths):
    ranking = Ranking(*paths)
    ranking.load()
    assert ranking.seconds == [0] * 5
    assert ranking.minutes == [0] * 5


def test_load_partial_file(paths):
    write_table(paths[0], [50, 40])
    ranking = Ranking(*paths)
    ranking.load()
    assert ranking.seconds == [50, 40, 0, 0, 0]


def test_submit_inserts_and_sorts_descending(paths):
    write_table(paths[0], [50, 40, 30, 20, 10])
    write_table(paths[1], [9, 9, 9, 9, 9])
    ranking = Ranking(*paths)
    ranking.load()
    result = ranking.submit(25, 1)
    assert ranking.seconds == [50, 40, 30, 25, 20]
    assert ranking.minutes == [9, 9, 9, 9, 9]
    assert result == 3
    assert read_table(paths[0], 5) == [50, 40, 30, 25, 20]


def test_submit_too_low_changes_nothing(paths):
    write_table(paths[0], [50, 40, 30, 20, 10])
    write_table(paths[1], [9, 9, 9, 9, 9])
    ranking = Ranking(*paths)
    ranking.load()
    assert ranking.submit(5, 1) is None
    assert ranking.seconds == [50, 40, 30, 20, 10]


def test_minutes_placement_overrides_seconds(paths):
    ranking = Ranking(*paths)
    result = ranking.submit(30, 0)
    assert ranking.seconds[0] == 30
    # zero ties every minutes entry, so the last one is taken
    assert result == ranking.size - 1


def test_dead_player_not_entered_but_saved(paths):
    ranking = Ranking(*paths)
    assert ranking.submit(30, 2, alive=False) is None
    assert read_table(paths[0], 5) == [0] * 5
    assert read_table(paths[1], 5) == [0] * 5


def test_save_load_round_trip(paths):
    ranking = Ranking(*paths)
    ranking.seconds = [5, 4, 3, 2, 1]
    ranking.minutes = [2, 2, 1, 1, 0]
    ranking.save()
    other = Ranking(*paths)
    other.load()
    assert other.seconds == [5, 4, 3, 2, 1]
    assert other.minutes == [2, 2, 1, 1, 0]


def test_blink_pattern(paths):
    write_table(paths[1], [9, 9, 9, 9, 9])
    ranking = Ranking(*paths)
    ranking.load()
    ranking.submit(30, 1)
    lit = []
    for _ in range(10):
        ranking.tick()
        lit.append(ranking.highlighted())
    assert lit[:5] == [0] * 5
    assert lit[5:9] == [None] * 4
    assert lit[9] == 0


def test_nothing_highlighted_without_placement(paths):
    ranking = Ranking(*paths)
    for _ in range(3):
        ranking.tick()
    assert ranking.highlighted() is None