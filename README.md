# falltris

A compact falling-block puzzle game. Seven shapes drop into a 10 × 18 well,
one at a time. You rotate them and slide them into place to fill whole rows.
A full row is cleared and the rows above it move down.

## Installing

```
pip install falltris
```

## Playing

```
falltris
```

```
falltris --assets path/to/assets
```

`--assets` names the directory that holds the font and the sound files. The
default is the current directory.

You can play with a game controller or with the keyboard:

| Controller          | Keyboard        | Action                  |
|---------------------|-----------------|-------------------------|
| D-pad left / right  | Left / Right    | Move the piece sideways |
| D-pad up or A       | Up or Space     | Rotate the piece        |
| D-pad down (held)   | Down (held)     | Soft drop               |
| Start               | Enter or P      | Pause or resume         |

A piece falls one row every half second. A rotation or a sideways move that
would leave the well or overlap settled cells does not happen. A piece that
cannot move further down locks in place. Pieces come from a shuffled bag of
all seven shapes, so every shape turns up once before any shape repeats. The
panel on the right shows the score and the next piece.

The game ends when a new piece has no room to enter the well, and
"Game Over" is shown. Any button press then starts a new game with an empty
well and a score of zero. That press also does its normal action.

### Scoring

- 1 row cleared: 100 points
- 2 rows cleared: 300 points
- 3 or more rows cleared: 500 points
- Soft drop: 1 point for every frame in which down is held

### Assets

The asset directory must hold the font `monogram.ttf`. Without it the game
will not start. The game also loads the sounds `okay.wav` (pause),
`rotate.wav`, `clear.wav` (played once for each cleared row) and the looping
track `music.wav`. If one of these sound files is missing or cannot be read,
a warning is logged and the game runs without that sound.

## Using the game logic

The rules are kept separate from the display code, and you can drive them
directly:

```python
import random
from falltris.game import Game

game = Game(random.Random(1), on_clear=None)
game.move_left()
game.rotate()
game.soft_drop()
game.update(0.5, down_held=False)
print(game.score)
```

- `falltris.blocks` has `Block` (its cells, `move`, `rotate`,
  `undo_rotation`, `copy`), `standard_blocks()` with the seven shapes at
  their spawn positions, and `BlockBag`, the shuffle bag.
- `falltris.game` has `Grid`, `DropTimer`, `score_for_rows` and `Game`.
  `Game.rotate`, `move_left`, `move_right`, `step_down` and `soft_drop`
  return whether the piece moved. `on_clear` is called once for each row
  cleared.
- `falltris.assets` has helpers for loading images, sounds, music and
  rendered text.
- `falltris.app` has the window and main loop (`App`, `main`).

## What it does not do

The game has no levels, so the fall speed never changes. It has no hard drop
and no hold piece. It does not save high scores or settings.

## Running the tests

```
pip install falltris[test]
pytest
```