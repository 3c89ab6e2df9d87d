# simonsays

A small Simon memory game with two buttons, red and blue.

The computer flashes a sequence of buttons. You repeat it by clicking the
buttons in the same order. Each round adds one random move to the sequence.
After each round you complete, the gap between moves shrinks by 10%, but it
never drops below 300 ms. The first round uses a gap of 1000 ms. A progress
bar shows how far through the sequence you are. One wrong click ends the game.

## Installing

```
pip install .
```

The interface uses Tk, which ships with most Python installations. The test
suite needs the `test` extra:

```
pip install .[test]
pytest
```

## Playing

```
simonsays
```

The same window opens with `python -m simonsays.app`. The command has no
options apart from `--help`.

Click **Start** to begin. The red and blue buttons stay disabled while the
computer plays its sequence. They become active once the sequence has
finished. A wrong click hides the buttons and shows "You Lose!".

## Using the game logic

The rules live in `simonsays.model` and do not depend on any interface.

`Model(scheduler, rng=None)` takes a scheduler and, optionally, a random
source:

- `scheduler(delay_ms, callback)` must run `callback` once after `delay_ms`
  milliseconds. With Tk this is `root.after`.
- `rng` is any object with a `randrange(stop)` method, such as
  `random.Random(seed)`. If you leave it out, a new `random.Random()` is used.

The model reports events through `Signal` objects. Each `Signal` has
`connect(slot)` and `emit(*args)`, and calls its slots in the order they were
connected. The model's signals are:

- `player_turn(is_turn)`: player input is enabled or disabled
- `play_move(button_id, speed_factor)`: the computer flashes a button
- `progress_updated(percent)`: progress through the current sequence, 0 to 100
- `game_over()`: the player pressed a wrong button

Button ids come from the `Button` enum. `Button.RED` is 0 and `Button.BLUE`
is 1. Call `start_game()` to begin, then call `handle_player_turn(button_id)`
for each click. If you call `handle_player_turn` before `start_game`, it
raises `RuntimeError`.

The current state is readable on the model as `sequence`, `player_index`,
`speed_factor` and `is_game_over`.

```python
import random
from simonsays.model import Model

pending = []
model = Model(lambda delay, callback: pending.append((delay, callback)),
              random.Random(1))
model.play_move.connect(lambda button, speed: print("flash", button.name))
model.start_game()
for _, callback in sorted(pending, key=lambda item: item[0]):
    callback()
```

`simonsays.app.MainWindow(root, model)` builds the widgets inside a Tk
container and connects them to a model. `flash_duration(speed_factor)` gives
how long a flashed button stays lit. That is 60% of the move interval, and
never less than 100 ms.

## What it does not do

The game plays no sound files. Each flash rings the Tk bell instead. The
game keeps no scores or high scores. To play again after losing, close the
window and start the command again.