"""The main loop and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from termplatformer.canvas import Canvas
from termplatformer.entities import GAME_DELAY_CONSTANT
from termplatformer.game import Action, Game, GameFinished, Mode, QuitGame
from termplatformer.keyboard import DEFAULT_DEVICE, Keyboard, KeyboardError, KeyCode
from termplatformer.render import draw_hud, draw_menu, draw_world
from termplatformer.terminal import Terminal

_BINDINGS = {
    KeyCode.A: Action.LEFT,
    KeyCode.D: Action.RIGHT,
    KeyCode.SPACE: Action.JUMP,
    KeyCode.Q: Action.PAUSE,
    KeyCode.E: Action.RESUME,
    KeyCode.ESC: Action.EXIT,
}


def pressed_actions(keyboard) -> set[Action]:
    """Poll the keyboard and return the actions whose keys are down."""
    keyboard.refresh()
    return {action for key, action in _BINDINGS.items() if keyboard.is_pressed(key)}


def run(terminal, keyboard) -> Game:
    """Play until the player quits, a signal arrives or the game is finished."""
    game = Game(on_message=terminal.show_message)
    canvas = Canvas(terminal.width, terminal.height)

    def sync_background() -> None:
        if terminal.background != game.background:
            terminal.set_background(game.background)

    try:
        while True:
            canvas.clear()
            game.tick_effects()
            sync_background()

            if game.mode is Mode.PLAY:
                game.step()
                draw_world(canvas, game)
                draw_hud(canvas, game)
                sync_background()
            else:
                draw_menu(canvas, game.mode)

            if terminal.signals.should_quit():
                break
            game.control(pressed_actions(keyboard))
            time.sleep(GAME_DELAY_CONSTANT / 1000)
            game.control(pressed_actions(keyboard))

            terminal.draw(canvas)
    except (QuitGame, GameFinished):
        pass
    return game


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="termplatformer", description="Console platformer.")
    parser.add_argument(
        "--device",
        default=DEFAULT_DEVICE,
        help="keyboard input device to read key states from",
    )
    args = parser.parse_args(argv)
    try:
        with Terminal() as terminal:
            try:
                with Keyboard(args.device) as keyboard:
                    run(terminal, keyboard)
            finally:
                terminal.drain_input()
    except (KeyboardError, RuntimeError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0