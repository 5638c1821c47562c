"""Keyframe motion scripts: parsing and per-frame playback."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from enum import IntEnum

Vec3 = tuple[float, float, float]

MAX_PARTS = 16
MAX_KEY_PARTS = 20
MAX_KEYS = 30
MAX_MOTIONS = 8

_ZERO: Vec3 = (0.0, 0.0, 0.0)


class MotionType(IntEnum):
    """Motion slots in the order a script defines them."""

    NEUTRAL = 0
    MOVE = 1
    RUN = 2
    ACTION = 3
    JUMP = 4
    LANDING = 5


class ScriptError(ValueError):
    """Raised when a motion script cannot be read."""


@dataclass(frozen=True)
class Key:
    """Offset of one part at one keyframe."""

    pos: Vec3 = _ZERO
    rot: Vec3 = _ZERO


@dataclass(frozen=True)
class KeyFrame:
    """A keyframe: how many frames it lasts and a key per part."""

    frame: int = 0
    keys: tuple[Key, ...] = ()

    def key(self, part: int) -> Key:
        """Key for ``part``; parts without a key stay at zero offset."""
        return self.keys[part] if 0 <= part < len(self.keys) else Key()


@dataclass(frozen=True)
class MotionInfo:
    """One motion: whether it loops and its keyframes."""

    loop: bool = False
    keys: tuple[KeyFrame, ...] = ()

    @property
    def num_key(self) -> int:
        return len(self.keys)

    def frame(self, index: int) -> int:
        """Length of keyframe ``index``; missing keyframes last zero frames."""
        return self.keys[index].frame if 0 <= index < len(self.keys) else 0


@dataclass
class Part:
    """One model part of a character, with its pose relative to its parent."""

    model: str | None = None
    parent: int = -1
    pos: Vec3 = _ZERO
    rot: Vec3 = _ZERO


@dataclass
class MotionSet:
    """Everything a motion script describes."""

    models: list[str] = field(default_factory=list)
    parts: list[Part] = field(default_factory=list)
    motions: list[MotionInfo] = field(default_factory=list)

    def motion(self, motion_type: int) -> MotionInfo:
        """The motion in slot ``motion_type``; empty if the script has none."""
        if 0 <= motion_type < len(self.motions):
            return self.motions[motion_type]
        return MotionInfo()


class _Tokens:
    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def next(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ScriptError("unexpected end of script") from None

    def find(self, word: str) -> bool:
        return any(token == word for token in self._items)

    def skip(self) -> None:
        self.next()

    def integer(self) -> int:
        token = self.next()
        try:
            return int(token)
        except ValueError:
            raise ScriptError(f"expected an integer, got {token!r}") from None

    def number(self) -> float:
        token = self.next()
        try:
            return float(token)
        except ValueError:
            raise ScriptError(f"expected a number, got {token!r}") from None

    def vector(self) -> Vec3:
        self.skip()
        return (self.number(), self.number(), self.number())


def _read_models(tokens: _Tokens) -> list[str]:
    tokens.skip()
    count = tokens.integer()
    if not 0 <= count <= MAX_PARTS:
        raise ScriptError(f"NUM_MODEL must be between 0 and {MAX_PARTS}, got {count}")
    models: list[str] = []
    while len(models) < count:
        if tokens.next() == "MODEL_FILENAME":
            tokens.skip()
            models.append(tokens.next())
    return models


def _read_character(tokens: _Tokens, models: list[str]) -> list[Part]:
    count = len(models)
    settings: dict[int, dict] = {}
    index = 0
    while True:
        token = tokens.next()
        if token == "NUM_PARTS":
            tokens.skip()
            count = tokens.integer()
            if not 0 <= count <= MAX_PARTS:
                raise ScriptError(
                    f"NUM_PARTS must be between 0 and {MAX_PARTS}, got {count}"
                )
        elif token == "PARTSSET":
            while True:
                token = tokens.next()
                if token == "INDEX":
                    tokens.skip()
                    index = tokens.integer()
                elif token == "PARENT":
                    tokens.skip()
                    settings.setdefault(index, {})["parent"] = tokens.integer()
                elif token == "POS":
                    settings.setdefault(index, {})["pos"] = tokens.vector()
                elif token == "ROT":
                    settings.setdefault(index, {})["rot"] = tokens.vector()
                elif token == "END_PARTSSET":
                    break
        elif token == "END_CHARACTERSET":
            break

    for index in settings:
        if not 0 <= index < count:
            raise ScriptError(f"part index {index} out of range 0..{count - 1}")
    return [
        Part(
            model=models[i] if i < len(models) else None,
            parent=settings.get(i, {}).get("parent", -1),
            pos=settings.get(i, {}).get("pos", _ZERO),
            rot=settings.get(i, {}).get("rot", _ZERO),
        )
        for i in range(count)
    ]


def _read_keyset(tokens: _Tokens) -> KeyFrame:
    while tokens.next() != "FRAME":
        pass
    tokens.skip()
    frame = tokens.integer()
    keys: list[Key] = []
    while True:
        token = tokens.next()
        if token == "KEY":
            if len(keys) >= MAX_KEY_PARTS:
                raise ScriptError(f"a keyframe holds at most {MAX_KEY_PARTS} keys")
            pos, rot = _ZERO, _ZERO
            while True:
                token = tokens.next()
                if token == "POS":
                    pos = tokens.vector()
                elif token == "ROT":
                    rot = tokens.vector()
                elif token == "END_KEY":
                    break
            keys.append(Key(pos, rot))
        elif token == "END_KEYSET":
            return KeyFrame(frame, tuple(keys))


def _read_motion(tokens: _Tokens) -> MotionInfo:
    loop = False
    keys: list[KeyFrame] = []
    while True:
        token = tokens.next()
        if token == "LOOP":
            tokens.skip()
            loop = tokens.integer() != 0
        elif token == "NUM_KEY":
            tokens.skip()
            count = tokens.integer()
            if not 0 <= count <= MAX_KEYS:
                raise ScriptError(f"NUM_KEY must be between 0 and {MAX_KEYS}, got {count}")
            keys = []
            while len(keys) < count:
                if tokens.next() == "KEYSET":
                    keys.append(_read_keyset(tokens))
        elif token == "END_MOTIONSET":
            return MotionInfo(loop, tuple(keys))


def parse_script(text: str) -> MotionSet:
    """Read a motion script from its text."""
    tokens = _Tokens(text)
    if not tokens.find("SCRIPT"):
        raise ScriptError("script has no SCRIPT section")
    result = MotionSet()
    while True:
        token = tokens.next()
        if token == "NUM_MODEL":
            result.models = _read_models(tokens)
        elif token == "CHARACTERSET":
            result.parts = _read_character(tokens, result.models)
        elif token == "MOTIONSET":
            if len(result.motions) >= MAX_MOTIONS:
                raise ScriptError(f"a script holds at most {MAX_MOTIONS} motions")
            result.motions.append(_read_motion(tokens))
        elif token == "END_SCRIPT":
            return result


def load_script(path: str | os.PathLike) -> MotionSet:
    """Read a motion script from a file."""
    with open(path, encoding="utf-8") as handle:
        return parse_script(handle.read())


def _blend(first: Vec3, key: Vec3, delta: Vec3, amount: float) -> Vec3:
    return tuple(f + k + d * amount for f, k, d in zip(first, key, delta))  # type: ignore[return-value]


class MotionPlayer:
    """Plays the motions of a motion set on a copy of its parts."""

    def __init__(self, motion_set: MotionSet) -> None:
        self.motion_set = motion_set
        self.parts = [copy.copy(part) for part in motion_set.parts]
        self.motion_type = MotionType.NEUTRAL
        self.num_key = 0
        self.key = 0
        self.counter = 0
        self._previous = MotionType.NEUTRAL

    def set_motion(self, motion_type: int) -> None:
        """Switch to another motion; playback restarts on the next update."""
        self.motion_type = MotionType(motion_type)

    def update(self) -> None:
        """Pose every part for the current frame and advance one frame."""
        info = self.motion_set.motion(self.motion_type)
        self.num_key = info.num_key
        if self.num_key == 0:
            raise ValueError(f"motion {self.motion_type.name} has no keyframes")
        if self.motion_type != self._previous:
            self.key = 0
            self.counter = 0

        current = info.keys[self.key] if self.key < self.num_key else KeyFrame()
        following = info.keys[(self.key + 1) % self.num_key]
        amount = self.counter / current.frame if current.frame else 0.0
        for index, (base, part) in enumerate(zip(self.motion_set.parts, self.parts)):
            now = current.key(index)
            then = following.key(index)
            pos_delta = tuple(b - a for a, b in zip(now.pos, then.pos))
            rot_delta = tuple(b - a for a, b in zip(now.rot, then.rot))
            part.pos = _blend(base.pos, now.pos, pos_delta, amount)
            part.rot = _blend(base.rot, now.rot, rot_delta, amount)

        if not info.loop and self.key >= self.num_key - 1:
            self.motion_type = MotionType.NEUTRAL

        info = self.motion_set.motion(self.motion_type)
        if info.loop or self.key + 1 != self.num_key:
            self.counter += 1

        if self.counter >= info.frame(self.key):
            self.counter = 0
            self.key += 1
            if self.key >= self.num_key:
                self.key = 0

        self._previous = self.motion_type