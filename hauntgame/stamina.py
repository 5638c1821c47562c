"""Stamina gauge: drains while dashing, refills while not."""

from __future__ import annotations

from hauntgame.player import START_STAMINA, Player, PlayerState

BAR_WIDTH = 500
BAR_HEIGHT = 10
RECOVERY_FRAMES = 120
_BAR_SCALE = 0.01


class StaminaGauge:
    """Tracks a player's stamina and whether the gauge is on screen."""

    def __init__(self) -> None:
        self.usable = True
        self.shown = False
        self._recover_frames = 0

    def update(self, player: Player) -> None:
        """Drain or refill ``player.stamina`` for one frame."""
        before = player.stamina
        if player.state is PlayerState.DASH:
            player.stamina -= 1
            if player.stamina <= 0:
                self.usable = False
        elif player.stamina <= 0:
            self._recover_frames += 1
            if self._recover_frames >= RECOVERY_FRAMES:
                player.stamina = 1
                self._recover_frames = 0
                self.usable = True
        elif player.stamina < START_STAMINA:
            player.stamina += 1
        self.shown = before != player.stamina

    def bar_width(self, stamina: int) -> float:
        """Drawn length of the bar for ``stamina``."""
        return BAR_WIDTH * (stamina * _BAR_SCALE)