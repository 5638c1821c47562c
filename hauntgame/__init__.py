"""Game-logic core of a small 3D escape game: meshes, motion scripts, player, stamina, effects, noise, timer and ranking."""

__version__ = "0.1.0"