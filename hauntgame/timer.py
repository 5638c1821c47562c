"""Countdown timer shown as minutes and seconds."""

from __future__ import annotations

from hauntgame.ranking import split_digits

DIGITS = 2
START_MINUTES = 2
FRAMES_PER_SECOND = 60
SECONDS_REFILL = 59
WARNING_SECONDS = 30

TEXTURES = (
    "data/TEXTURE/number005.png",
    "data/TEXTURE/number004.png",
    "data/TEXTURE/colon000.png",
    "data/TEXTURE/colon001.png",
)


def two_digits(value: int) -> list[int]:
    """Tens and ones of ``value``, with the sign carried by each digit."""
    return split_digits(value, DIGITS)


def _hundreds_tens(value: int) -> list[int]:
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    return [sign * (magnitude // 100), sign * (magnitude % 100 // 10)]


class CountdownTimer:
    """Counts seconds down frame by frame, borrowing from the minutes."""

    def __init__(self, minutes: int = START_MINUTES) -> None:
        self.minutes = minutes
        self.seconds = 0
        self.frames = 0
        self._minute_digits = [0] * DIGITS
        self._second_digits = [0] * DIGITS

    def add_seconds(self, value: int) -> None:
        """Add to the seconds and redraw both readouts."""
        self.seconds += value
        self._second_digits = _hundreds_tens(self.seconds)
        self._minute_digits = _hundreds_tens(self.minutes)

    def sub_seconds(self, value: int) -> None:
        """Take ``value`` from the seconds and redraw them."""
        self.seconds -= value
        self._second_digits = two_digits(self.seconds)

    def sub_minutes(self, value: int) -> None:
        """Take ``value`` from the minutes and redraw them."""
        self.minutes -= value
        self._minute_digits = two_digits(self.minutes)

    def tick(self) -> bool:
        """Advance one frame; returns True when time has run out."""
        self.frames += 1
        if self.frames >= FRAMES_PER_SECOND:
            self.sub_seconds(1)
            self.frames = 0
        if self.seconds <= 0:
            if self.minutes <= 0:
                return True
            self.sub_seconds(-SECONDS_REFILL)
            self.sub_minutes(1)
        return False

    def expired(self) -> bool:
        """Whether no time is left."""
        return self.seconds <= 0 and self.minutes <= 0

    def warning(self) -> bool:
        """Whether the readout is drawn in its warning colours."""
        return self.seconds <= WARNING_SECONDS and self.minutes <= 0

    def digits(self) -> tuple[list[int], list[int]]:
        """Digits currently shown: (minutes, seconds)."""
        return list(self._minute_digits), list(self._second_digits)