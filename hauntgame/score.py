"""Score counter with a fixed-width digit display."""

from __future__ import annotations

COOKIE_NORMAL_SCORE = 156
COOKIE_HARD_SCORE = 236
DEFAULT_WIDTH = 8


def digit_count(value: int) -> int:
    """Number of decimal digits of ``value``; zero has one digit."""
    count = 0
    remaining = abs(value)
    while remaining != 0:
        remaining //= 10
        count += 1
    return count or 1


def _split(value: int, width: int) -> list[int]:
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    return [sign * (magnitude % 10 ** (p + 1) // 10**p) for p in reversed(range(width))]


class ScoreBoard:
    """A score and the digit cells that display it."""

    def __init__(self, width: int = DEFAULT_WIDTH) -> None:
        if width < 1:
            raise ValueError(f"width must be at least 1, got {width}")
        self.width = width
        self.value = 0
        self._digits = [0] * width
        self._visible = [False] * width

    def set(self, value: int) -> None:
        """Replace the score without redrawing the digits."""
        self.value = value

    def add(self, value: int) -> None:
        """Add to the score and redraw the digits."""
        self.value += value
        self._digits = _split(self.value, self.width)

    def digits(self) -> list[int]:
        """Digits currently shown, most significant first."""
        return list(self._digits)

    def update(self) -> None:
        """Show only the cells the current score needs, right-aligned."""
        needed = digit_count(self.value)
        self._visible = [cell >= self.width - needed for cell in range(self.width)]

    def visible(self) -> tuple[bool, ...]:
        """Which digit cells are drawn."""
        return tuple(self._visible)