"""Scrolling static-noise overlay made of several jittering texture layers."""

from __future__ import annotations

import random

Vec2 = tuple[float, float]

DEFAULT_LAYERS = 3
NOISE_TEXTURES = (
    "data/texture/noise00.png",
    "data/texture/noise01.png",
    "data/texture/noise02.png",
)

_STEPS: tuple[Vec2, ...] = (
    (0.025, 0.025),
    (0.0025, 0.0),
    (0.0065, -0.0025),
    (0.05, -0.0025),
    (-0.0025, 0.0),
    (-0.0025, -0.085),
)


def jitter(u: float, v: float, roll: int) -> Vec2:
    """Shift a texture offset by the step chosen by ``roll`` (0 to 5)."""
    if not 0 <= roll < len(_STEPS):
        raise ValueError(f"roll must be between 0 and {len(_STEPS) - 1}, got {roll}")
    du, dv = _STEPS[roll]
    return (u + du, v + dv)


class NoiseOverlay:
    """Texture offsets of the noise layers, moved at random each frame."""

    def __init__(self, layers: int = DEFAULT_LAYERS, rng: random.Random | None = None) -> None:
        if layers < 1:
            raise ValueError(f"layers must be at least 1, got {layers}")
        self.rng = rng if rng is not None else random.Random()
        self.offsets: list[Vec2] = [(0.0, 0.0)] * layers

    def update(self) -> None:
        """Jitter every layer by a random step."""
        self.offsets = [
            jitter(u, v, self.rng.randrange(len(_STEPS))) for u, v in self.offsets
        ]

    def quads(self) -> list[tuple[Vec2, Vec2, Vec2, Vec2]]:
        """Texture coordinates of each layer's full-screen quad."""
        return [
            ((u, v), (u + 1.0, v), (u, v + 1.0), (u + 1.0, v + 1.0))
            for u, v in self.offsets
        ]