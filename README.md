# hauntgame

The rules and state machines behind a small third-person 3D escape game.
No rendering or input device is attached. Every module works on plain
Python values, so a front end can drive it and tests can check it.

## Modules

- `hauntgame.mesh` builds the ground grid and the cylindrical wall as
  lists of `Vertex` (`field_vertices`, `wall_vertices`). It computes
  triangle-strip index lists (`strip_index_count`, `strip_indices`).
  `collide_cylinder` puts a point's x and z back to their previous values
  when the point crosses the wall outline.
- `hauntgame.score`: `ScoreBoard` holds a score and the digits on display.
  `add` redraws the digits and `set` does not. `update` decides which
  digit cells show. `digit_count` gives the number of decimal digits.
- `hauntgame.motion` reads keyframe motion scripts into a `MotionSet`,
  from text (`parse_script`) or from a file (`load_script`). A malformed
  script raises `ScriptError`. `MotionPlayer` interpolates part poses
  frame by frame and falls back to `MotionType.NEUTRAL` when a motion
  that does not loop ends.
- `hauntgame.player`: `Player.update` moves the player from `Controls`
  and a camera yaw. It switches `PlayerState`, applies gravity and clamps
  the player to the ground. `hit` takes damage and returns `True` when
  life drops below zero.
- `hauntgame.stamina`: `StaminaGauge` drains a player's stamina while it
  dashes. Otherwise it refills stamina, and after 120 frames at zero it
  restores one point. `bar_width` gives the length of the gauge.
- `hauntgame.effects` provides two overlays driven by `FadeMode`:
  - `HealOverlay` shows a green flash.
  - `SlowMotion` tints the screen blue for 300 frames and sets the
    time-scaling factors.
- `hauntgame.rankstore` reads and writes tables of integers, one per line
  (`read_table`, `write_table`).
- `hauntgame.ranking`: `Ranking` keeps a seconds table and a minutes table,
  each sorted in descending order and stored in its own text file.
  - `submit` enters a living player's time and saves both tables.
  - `tick` and `highlighted` blink the entry that was placed.
  - `split_digits` breaks a value into display digits.
- `hauntgame.noise`: `NoiseOverlay` jitters the texture offsets of layered
  noise quads, one random `jitter` step per layer per frame.
- `hauntgame.timer`: `CountdownTimer` counts seconds down, borrowing from
  the minutes. It reports `expired` and `warning` and gives the display
  `digits`. `two_digits` splits a value into tens and ones.

## Example

```python
from hauntgame.timer import CountdownTimer

timer = CountdownTimer(2)
for _ in range(60):
    timer.tick()
print(timer.digits(), timer.expired())   # ([0, 1], [5, 8]) False
```

## What it does not do

The package has no window, drawing, sound or device input, and no game
loop or command that ties the modules together. The caller has to supply
`Controls` and the camera yaw each frame, and act on the return values:
`Player.hit` ending the game, or `CountdownTimer.tick` running out.
`Player.update` runs no collision against walls, blocks or other objects.
To keep the player inside the wall, call `collide_cylinder` yourself.

## Tests

```
pip install .[test]
pytest
```