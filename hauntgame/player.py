"""The player character: movement, state machine and damage."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from hauntgame.motion import MotionPlayer, MotionSet, MotionType

Vec3 = tuple[float, float, float]

GRAVITY = 0.05
WALK_SPEED = 2.0
DASH_SPEED = 5.0
MOVE_DAMPING = 0.05
TURN_RATE = 0.2
STICK_DEADZONE = 10922
STATE_FRAMES = 60

START_POS: Vec3 = (1750.0, 100.0, 100.0)
START_ROT: Vec3 = (0.0, 1.57, 0.0)
START_LIFE = 3
START_STAMINA = 300
SWORD_OFFSET: Vec3 = (0.0, 30.0, 0.0)

_PI = math.pi


class PlayerState(IntEnum):
    """What the player is currently doing."""

    NORMAL = 0
    DAMAGE = 1
    MOVE = 2
    DASH = 3
    JUMP = 4
    ACTION = 5


@dataclass(frozen=True)
class Controls:
    """Input for one frame.

    The four directions and ``dash`` are keyboard keys; ``stick`` is the
    left thumb stick as (x, y), or None when no pad is connected, and
    ``stick_dash`` is either shoulder button.
    """

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    dash: bool = False
    stick: tuple[int, int] | None = None
    stick_dash: bool = False


class Player:
    """A player character animated by a motion set."""

    def __init__(self, motion_set: MotionSet) -> None:
        self.pos: Vec3 = START_POS
        self.pos_old: Vec3 = (0.0, 0.0, 0.0)
        self.move: Vec3 = (0.0, 0.0, 0.0)
        self.rot: Vec3 = START_ROT
        self.rot_dest: Vec3 = (0.0, 0.0, 0.0)
        self.offset: Vec3 = SWORD_OFFSET
        self.life = START_LIFE
        self.stamina = START_STAMINA
        self.state = PlayerState.NORMAL
        self.attack = False
        self.eye = False
        self.landed = True
        self.motion = MotionPlayer(motion_set)
        self._state_frames = 0
        self._action_frames = 0

    def _apply_state(self) -> None:
        state = self.state
        if state is PlayerState.DAMAGE:
            self._state_frames = 0
        elif state is PlayerState.MOVE:
            self.motion.set_motion(MotionType.MOVE)
        elif state is PlayerState.DASH:
            self.motion.set_motion(MotionType.RUN)
        elif state is PlayerState.JUMP:
            self.motion.set_motion(MotionType.JUMP)
            if self.landed:
                self.state = PlayerState.NORMAL
        elif state is PlayerState.ACTION:
            self._action_frames += 1
            if self._action_frames >= STATE_FRAMES:
                self.state = PlayerState.NORMAL
                self._action_frames = 0

    def _keyboard(self, controls: Controls, yaw: float, x: float, z: float):
        dest = self.rot_dest[1]
        walking = True
        if controls.left:
            if controls.forward:
                x += math.sin(yaw + _PI * 0.75) * WALK_SPEED
                z += math.cos(yaw + _PI * 0.75) * WALK_SPEED
                dest = yaw + _PI * 0.75
            elif controls.back:
                x -= math.sin(yaw - _PI * 0.75) * WALK_SPEED
                z -= math.cos(yaw - _PI * 0.75) * WALK_SPEED
                dest = yaw - _PI * 0.75
            else:
                x -= math.cos(yaw - _PI) * WALK_SPEED
                z += math.sin(yaw - _PI) * WALK_SPEED
                dest = yaw - _PI * 0.5
        elif controls.right:
            if controls.forward:
                x += math.sin(yaw - _PI * 0.75) * WALK_SPEED
                z += math.cos(yaw - _PI * 0.75) * WALK_SPEED
                dest = yaw - _PI * 0.75
            elif controls.back:
                x -= math.sin(yaw + _PI * 0.75) * WALK_SPEED
                z -= math.cos(yaw + _PI * 0.75) * WALK_SPEED
                dest = yaw + _PI * 0.75
            else:
                x += math.cos(yaw - _PI) * WALK_SPEED
                z -= math.sin(yaw - _PI) * WALK_SPEED
                dest = yaw + _PI * 0.5
        elif controls.forward:
            walking = False
            if controls.dash and self.stamina > 0:
                self.state = PlayerState.DASH
                speed = DASH_SPEED
            else:
                self.state = PlayerState.MOVE
                speed = WALK_SPEED
            x -= math.sin(yaw) * speed
            z -= math.cos(yaw) * speed
            dest = yaw
        elif controls.back:
            x -= math.sin(yaw + _PI) * WALK_SPEED
            z -= math.cos(yaw + _PI) * WALK_SPEED
            dest = yaw + _PI
        else:
            walking = False
            if self.motion.motion_type == MotionType.MOVE:
                self.motion.set_motion(MotionType.NEUTRAL)
        if walking:
            self.motion.set_motion(MotionType.MOVE)
        return x, z, dest

    def _stick(self, controls: Controls, yaw: float, x: float, z: float):
        dest = self.rot_dest[1]
        if controls.stick is None:
            return x, z, dest
        sx, sy = controls.stick
        up = sy > STICK_DEADZONE
        down = sy < -STICK_DEADZONE
        if sx > STICK_DEADZONE:
            if up:
                x -= math.sin(yaw + _PI * 0.25) * WALK_SPEED
                z -= math.cos(yaw + _PI * 0.25) * WALK_SPEED
                dest = yaw
            elif down:
                x -= math.sin(yaw + _PI * 0.75) * WALK_SPEED
                z -= math.cos(yaw + _PI * 0.75) * WALK_SPEED
                dest = yaw + _PI
            else:
                x += math.cos(yaw - _PI) * WALK_SPEED
                z -= math.sin(yaw - _PI) * WALK_SPEED
                dest = yaw + _PI * 0.5
        elif sx < -STICK_DEADZONE:
            if up:
                x -= math.sin(yaw - _PI * 0.25) * WALK_SPEED
                z -= math.cos(yaw - _PI * 0.25) * WALK_SPEED
                dest = yaw
            elif down:
                x -= math.sin(yaw - _PI * 0.75) * WALK_SPEED
                z -= math.cos(yaw - _PI * 0.75) * WALK_SPEED
                dest = yaw + _PI
            else:
                x -= math.cos(yaw - _PI) * WALK_SPEED
                z += math.sin(yaw - _PI) * WALK_SPEED
                dest = yaw - _PI * 0.5
        elif up:
            speed = DASH_SPEED if controls.stick_dash else WALK_SPEED
            x -= math.sin(yaw) * speed
            z -= math.cos(yaw) * speed
            dest = yaw
        elif down:
            x -= math.sin(yaw + _PI) * WALK_SPEED
            z -= math.cos(yaw + _PI) * WALK_SPEED
            dest = yaw + _PI
        else:
            return x, z, dest
        self.motion.set_motion(MotionType.MOVE)
        return x, z, dest

    def update(self, controls: Controls | None = None, camera_yaw: float = 0.0) -> None:
        """Advance the player one frame under ``controls``, seen from ``camera_yaw``."""
        controls = controls or Controls()
        self._state_frames += 1
        self._apply_state()
        if self._state_frames >= STATE_FRAMES:
            self.attack = False

        self.pos_old = self.pos
        mx, my, mz = self.move
        my -= GRAVITY

        x, y, z = self.pos
        x, z, dest = self._keyboard(controls, camera_yaw, x, z)
        self.rot_dest = (self.rot_dest[0], dest, self.rot_dest[2])

        rx, ry, rz = self.rot
        if dest - ry > _PI:
            ry += _PI * 2
        elif ry - dest > _PI:
            ry -= _PI * 2

        mx += (0.0 - mx) * MOVE_DAMPING
        mz += (0.0 - mz) * MOVE_DAMPING
        self.move = (mx, my, mz)
        x, y, z = x + mx, y + my, z + mz

        if y < 0.0:
            self.landed = True
            y = 0.0

        x, z, dest = self._stick(controls, camera_yaw, x, z)
        self.rot_dest = (self.rot_dest[0], dest, self.rot_dest[2])
        self.pos = (x, y, z)

        ry += (dest - ry) * TURN_RATE
        self.rot = (rx, ry, rz)
        self.motion.update()

    def hit(self, damage: int) -> bool:
        """Take ``damage``; returns True when the hit ends the game."""
        self.life -= damage
        self.attack = True
        if self.life >= 0:
            self.state = PlayerState.DAMAGE
            return False
        return True