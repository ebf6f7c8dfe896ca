# termplatformer

termplatformer is a small side-scrolling platformer that you play in a Linux terminal.

- You run through four levels and jump on enemies (`o`).
- Bumping a `?` block from below turns it into an empty block (`-`) and releases a coin (`$`).
- Landing on a `+` platform takes you to the next level.
- After the fourth level, the game shows "You win!" and starts again from level 1.
- Once your score reaches 2000 points, the next level that loads is a secret final level.
- Finishing the secret level ends the game.

## Requirements

- Linux, with a curses terminal that supports colours. The game draws an 80×24 screen. At start-up it asks the terminal emulator to resize its window to that size.
- Read access to a keyboard event device. The game reads the state of several keys at once from it. The default device is
  `/dev/input/by-path/platform-i8042-serio-0-event-kbd`. You usually need to be in the `input` group to read it.

## Installing and running

```
pip install .
termplatformer
```

To read keys from a different input device:

```
termplatformer --device /dev/input/event3
```

Two problems stop the game before it starts. Each prints `error: ...` to standard error, and the command exits with status 1:

- the keyboard device cannot be opened or read;
- the terminal has no colour support.

## Controls

| Key     | Action                            |
|---------|-----------------------------------|
| `A`     | move left                         |
| `D`     | move right                        |
| `Space` | jump (only while standing)        |
| `Q`     | pause                             |
| `E`     | start, or resume from the pause   |
| `Esc`   | quit from the start or pause menu |

`Ctrl+C`, `Ctrl+\` and `Ctrl+Z` also end the game. Resizing the terminal does not.

When the game ends, it does three things:

- restores the terminal;
- closes the keyboard device;
- discards any keystrokes still waiting in the input queue.

## Scoring

| Event                   | Points |
|-------------------------|--------|
| Collecting a coin (`$`) | 50     |
| Stomping an enemy (`o`) | 100    |

Collecting a coin briefly turns the background yellow.

You die when you touch an enemy without landing on it from above, or when you fall off the bottom of the screen. Your score then goes back to what it was when the level was loaded, and the level restarts.

During play, the screen shows:

- the current level and score in the top-left corner;
- the player's nickname, `changeme`, above the player.

The game keeps no saved games or high scores between runs.

## Using the pieces

The game logic does not depend on the terminal. You can drive these parts directly, for example in tests:

- `termplatformer.game.Game` holds the world and its rules:
  - `step()`, `scroll(dx)`, `jump()`, `tick_effects()`;
  - `control(actions)`, which takes `Action` values;
  - `create_level()`, `player_dead()`.

  Pass `on_message` to receive the messages the game shows, as `(text, delay_ms, background_color)`. Leaving the game through `Action.EXIT` raises `QuitGame`. Finishing the secret level raises `GameFinished`.
- `termplatformer.levels.build_level(number, secret)` returns a `Layout` of bricks and moving objects. It raises `ValueError` for a level number that does not exist.
- `termplatformer.canvas.Canvas` is a character grid with a colour per cell. `rows()` returns its text.
- `termplatformer.render` draws onto a canvas with `draw_world`, `draw_hud`, `draw_menu` and `draw_message`.

```python
from termplatformer.canvas import Canvas
from termplatformer.game import Game
from termplatformer.render import draw_world

game = Game(on_message=lambda text, delay_ms, color: None)
game.step()
canvas = Canvas(80, 24)
draw_world(canvas, game)
print("\n".join(canvas.rows()))
```

Two more modules handle the terminal side:

- `termplatformer.keyboard.Keyboard` polls an input device.
- `termplatformer.terminal.Terminal` is a context manager for the curses screen.

`termplatformer.app.run(terminal, keyboard)` is the main loop. It accepts any objects that offer the same methods, so you can pass stand-ins for the real screen and keyboard.