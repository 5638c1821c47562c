import pytest

from hauntgame.motion import MotionSet
from hauntgame.player import Player, PlayerState
from hauntgame.stamina import RECOVERY_FRAMES, StaminaGauge


@pytest.fixture
def player():
    return Player(MotionSet())


def test_initial_gauge_usable_and_hidden():
    gauge = StaminaGauge()
    assert gauge.usable is True
    assert gauge.shown is False


def test_dash_drains_and_shows(player):
    gauge = StaminaGauge()
    player.state = PlayerState.DASH
    start = player.stamina
    gauge.update(player)
    assert player.stamina == start - 1
    assert gauge.shown is True


def test_full_stamina_stays_and_hides(player):
    gauge = StaminaGauge()
    player.stamina = 300
    gauge.update(player)
    assert player.stamina == 300
    assert gauge.shown is False


def test_refills_one_per_frame(player):
    gauge = StaminaGauge()
    player.stamina = 250
    gauge.update(player)
    assert player.stamina == 251
    assert gauge.shown is True


def test_exhaustion_and_recovery(player):
    gauge = StaminaGauge()
    player.state = PlayerState.DASH
    player.stamina = 1
    gauge.update(player)
    assert player.stamina == 0
    assert gauge.usable is False

    player.state = PlayerState.NORMAL
    for _ in range(RECOVERY_FRAMES - 1):
        gauge.update(player)
        assert player.stamina == 0
        assert gauge.usable is False
    gauge.update(player)
    assert player.stamina == 1
    assert gauge.usable is True


def test_bar_width_scales_with_stamina():
    gauge = StaminaGauge()
    assert gauge.bar_width(0) == 0
    assert gauge.bar_width(100) == pytest.approx(500)
    assert gauge.bar_width(200) == pytest.approx(2 * gauge.bar_width(100))