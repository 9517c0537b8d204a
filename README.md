# halrium

Game-state logic for a two-player puzzle in which players light up the stars
of the twelve zodiac constellations. The package holds the parts of the game
that do not draw anything: scores, the countdown timer, star markers,
particle trails, the completion bar, the title screen state and a bank of
sounds read from WAVE files. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `halrium.geometry`: `Vec3`, an immutable vector with `length()`,
  `normalized()`, `dot()` and `distance()`, and `Rect`, a screen rectangle
  with `width` and `height`.
- `halrium.score`: `ScoreBoard` keeps the player and enemy scores, clamps
  them to 0..99999 and each frame moves the shown counters
  (`player_shown`, `enemy_shown`) towards the real scores. `compare()`
  decides the winner as a `Side`, a tie going to the player. `digits()`
  splits a value into display digits and `score_layout()` returns the
  rectangles of both score panels for a given screen size.
- `halrium.score_effect`: `BezierParticles`, a pool of 256 particles that
  travel along cubic Bézier curves (`cubic_bezier()`) towards a target;
  `unproject()` turns a screen point into a world position from view and
  projection matrices.
- `halrium.star_effect`: `StarEffects`, a pool of 240 markers placed on
  selected stars in player one's red or player two's blue.
- `halrium.seiza`: `Constellation` holds its `Star`s and the lines set
  between them with `set_line()`. Its `update()` makes unselected stars
  twinkle, lights the lines whose two stars are selected and, on the frame
  every star is selected, adds the bonus to the owner's score and spawns
  particles from each star. `Zodiac` names the twelve constellations and the
  two owners; `random_float()`, `random_vector()` and `distance()` are
  helpers.
- `halrium.stack`: `StackBar`, the row of twelve slots along the bottom of
  the screen, marking completed constellations in their owner's colour;
  `slot_rect()` gives a slot's rectangle.
- `halrium.timer`: `GameTimer`, a countdown in frames at 60 per second
  (999 seconds by default) that ends the round when time runs out or every
  constellation is complete; `digits()` gives the remaining seconds,
  rounded up, as three digits.
- `halrium.sound`: `find_chunk()` and `read_wave()` parse RIFF/WAVE
  streams into `WaveData`, raising `WaveFormatError` on bad input;
  `load_sounds()` reads the game's four sound files from a directory, and
  `SoundBank` records which `SoundLabel` is queued and playing after
  `play()`, `stop()` and `stop_all()`.
- `halrium.title`: `TitleScreen`, the logo fade-in, the blinking start
  prompt, skipping the intro on the first start press, and the cursor that
  chooses a `PlayMode`.

## Example

```python
from halrium.score import ScoreBoard

board = ScoreBoard()
board.change_player(120)
enemy_digits, player_digits = board.update()
print(board.player, board.player_shown)  # 120 2
print(player_digits)                     # [0, 0, 0, 0, 2]
```

## What the package does not do

It draws nothing and plays no audio: `SoundBank` only keeps the state of
each sound, and the screen rectangles and digits are left for a renderer to
use. There is no game loop, input handling or command to start a game, and
it has no artwork shown over completed constellations. `TitleScreen` never
opens the player-mode choice by itself; the caller sets
`mode_select_shown`.