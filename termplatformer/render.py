"""Drawing the world, the HUD, menus and messages onto a canvas."""

from __future__ import annotations

from termplatformer.canvas import Canvas
from termplatformer.entities import COLOR_MENUTEXT, LOGO, NICKNAME, _round_half_away
from termplatformer.game import Game, Mode


def draw_world(canvas: Canvas, game: Game) -> None:
    """Draw the player, then the bricks, then the moving objects."""
    canvas.put_object(game.mario)
    for brick in game.bricks:
        canvas.put_object(brick)
    for mover in game.movers:
        canvas.put_object(mover)


def draw_hud(canvas: Canvas, game: Game) -> None:
    """Draw level, score and the nickname above the player."""
    canvas.put_text(f"level: {game.level}", 1, 1, COLOR_MENUTEXT)
    canvas.put_text(f"score: {game.score}", 2, 1, COLOR_MENUTEXT)
    canvas.put_text(
        NICKNAME,
        _round_half_away(game.mario.y - 2.0),
        int(game.mario.x - len(NICKNAME) // 2 + 1),
        COLOR_MENUTEXT,
    )


def _centered(canvas: Canvas, text: str, y: int) -> None:
    canvas.put_text(text, y, canvas.width // 2 - len(text) // 2 + 1, COLOR_MENUTEXT)


def draw_menu(canvas: Canvas, mode: Mode) -> None:
    """Draw the start or pause menu; nothing is drawn while playing."""
    if mode is Mode.MENU_START:
        for row, line in enumerate(LOGO, start=2):
            _centered(canvas, line, row)
        middle = canvas.height // 2
        _centered(canvas, "Console platformer", middle)
        _centered(canvas, "Press [E] to play", middle + 2)
        _centered(canvas, "Press [Q] to pause", middle + 3)
        _centered(canvas, "Press [Esc] to exit", middle + 4)
    elif mode is Mode.MENU_PAUSE:
        third = canvas.height // 3
        _centered(canvas, "Paused", third)
        _centered(canvas, "Press [E] to return to the game", third + 2)
        _centered(canvas, "Press [Esc] to exit.", third + 3)


def draw_message(canvas: Canvas, text: str) -> None:
    """Clear the canvas and show one line of text in the middle."""
    canvas.clear()
    canvas.put_text(
        text,
        canvas.height // 2 - 1,
        canvas.width // 2 - len(text) // 2,
        COLOR_MENUTEXT,
    )