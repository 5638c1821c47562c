"""Full-screen tint overlays: the heal flash and the slow-motion tint."""

from __future__ import annotations

from enum import IntEnum

Color = tuple[float, float, float, float]

HEAL_COLOR: Color = (0.0, 0.4, 0.0, 0.7)
HEAL_MAX_ALPHA = 0.8
HEAL_FADE_IN_STEP = 0.01
HEAL_FADE_OUT_STEP = 0.02

SLOW_COLOR: Color = (0.0, 0.0, 0.3, 1.0)
SLOW_MAX_ALPHA = 0.3
SLOW_FADE_IN_STEP = 0.01
SLOW_FADE_OUT_STEP = 0.02
SLOW_FACTOR = 4
SLOW_FRAMES = 300


class FadeMode(IntEnum):
    """Direction an overlay is fading in."""

    NONE = 0
    IN = 1
    OUT = 2


def _with_alpha(color: Color, alpha: float) -> Color:
    return (color[0], color[1], color[2], alpha)


class HealOverlay:
    """Green flash shown for a number of frames after healing."""

    def __init__(self) -> None:
        self.mode = FadeMode.IN
        self.color: Color = HEAL_COLOR
        self.count = 0
        self.active = False

    @property
    def alpha(self) -> float:
        return self.color[3]

    def show(self, count: int) -> None:
        """Flash the overlay for ``count`` frames."""
        self.mode = FadeMode.OUT
        self.count = count
        self.active = True

    def update(self) -> None:
        """Advance the overlay one frame."""
        if self.active:
            self.count -= 1
            if self.count <= 0 and self.mode is FadeMode.NONE:
                self.mode = FadeMode.IN
                self.active = False
                self.count = 0
        if self.mode is FadeMode.IN:
            alpha = self.alpha - HEAL_FADE_IN_STEP
            if alpha <= 0.0:
                alpha = 0.0
                self.mode = FadeMode.NONE
            self.color = _with_alpha(self.color, alpha)
        elif self.mode is FadeMode.OUT:
            alpha = self.alpha + HEAL_FADE_OUT_STEP
            if alpha >= HEAL_MAX_ALPHA:
                alpha = HEAL_MAX_ALPHA
                self.mode = FadeMode.NONE
            self.color = _with_alpha(self.color, alpha)


class SlowMotion:
    """Slow-motion state: time scaling factors and a blue tint."""

    def __init__(self) -> None:
        self.f_multi = 1.0
        self.f_divi = 1.0
        self.n_multi = 1
        self.n_divi = 1
        self.fade = FadeMode.IN
        self.color: Color = SLOW_COLOR
        self.active = False
        self._frames = 0

    @property
    def alpha(self) -> float:
        return self.color[3]

    def start(self) -> None:
        """Turn slow motion on."""
        self.active = True
        self.refresh_rates()

    def refresh_rates(self) -> None:
        """Set the time scaling factors from whether slow motion is on."""
        if self.active:
            self.f_multi = float(SLOW_FACTOR)
            self.f_divi = 1.0 / SLOW_FACTOR
            self.n_multi = SLOW_FACTOR
        else:
            self.f_multi = 1.0
            self.f_divi = 1.0
            self.n_multi = 1

    def update(self) -> None:
        """Advance slow motion and its tint one frame."""
        if self.active:
            self.fade = FadeMode.OUT
            self._frames += 1
            if self._frames > SLOW_FRAMES:
                self._frames = 0
                self.fade = FadeMode.IN
                self.active = False
                self.refresh_rates()
        if self.fade is FadeMode.IN:
            alpha = self.alpha - SLOW_FADE_IN_STEP
            if alpha <= 0.0:
                alpha = 0.0
                self.fade = FadeMode.NONE
            self.color = _with_alpha(self.color, alpha)
        elif self.fade is FadeMode.OUT:
            alpha = min(self.alpha + SLOW_FADE_OUT_STEP, SLOW_MAX_ALPHA)
            self.color = _with_alpha(self.color, alpha)