"""Best-time ranking: two tables of values kept sorted, saved to text files."""

from __future__ import annotations

import os

from hauntgame.rankstore import read_table, write_table

DEFAULT_SIZE = 5
DIGITS = 2
BLINK_FRAMES = 5
SECONDS_FILE = os.path.join("data", "ranking", "ranking.txt")
MINUTES_FILE = os.path.join("data", "ranking", "ranking1.txt")


def split_digits(value: int, count: int = DIGITS) -> list[int]:
    """The last ``count`` decimal digits of ``value``, most significant first.

    Negative values give negative digits, as truncating division does.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    return [sign * (magnitude % 10 ** (p + 1) // 10**p) for p in reversed(range(count))]


def _insert(table: list[int], value: int) -> int | None:
    """Put ``value`` into a descending table if it beats the last entry.

    Returns the last index holding ``value`` afterwards, or None.
    """
    if value < table[-1]:
        return None
    table[-1] = value
    table.sort(reverse=True)
    return max(i for i, entry in enumerate(table) if entry == value)


class Ranking:
    """Seconds and minutes tables with the entry to highlight."""

    def __init__(
        self,
        seconds_path: str | os.PathLike = SECONDS_FILE,
        minutes_path: str | os.PathLike = MINUTES_FILE,
        size: int = DEFAULT_SIZE,
    ) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.seconds_path = seconds_path
        self.minutes_path = minutes_path
        self.size = size
        self.seconds = [0] * size
        self.minutes = [0] * size
        self.rank_update = -1
        self._timer = 0
        self._lit = False

    def load(self) -> None:
        """Read both tables; entries the files lack keep their values."""
        for table, path in ((self.seconds, self.seconds_path), (self.minutes, self.minutes_path)):
            for index, value in enumerate(read_table(path, self.size)):
                table[index] = value

    def save(self) -> None:
        """Write both tables to their files."""
        write_table(self.seconds_path, self.seconds)
        write_table(self.minutes_path, self.minutes)

    def submit(self, seconds: int, minutes: int, alive: bool = True) -> int | None:
        """Enter a finishing time and save; returns the rank index to highlight.

        Only a living player's time is entered.  Seconds and minutes are
        ranked separately; a minutes placement overrides a seconds one.
        """
        if alive:
            placed = _insert(self.seconds, seconds)
            if placed is not None:
                self.rank_update = placed
            placed = _insert(self.minutes, minutes)
            if placed is not None:
                self.rank_update = placed
        self.save()
        return None if self.rank_update == -1 else self.rank_update

    def tick(self) -> None:
        """Advance the blink of the highlighted entry one frame."""
        self._timer += 1
        self._lit = self.rank_update != -1 and self._timer >= 0
        if self._timer >= BLINK_FRAMES:
            self._timer = -self._timer

    def highlighted(self) -> int | None:
        """Rank index drawn highlighted this frame, or None."""
        return self.rank_update if self._lit else None