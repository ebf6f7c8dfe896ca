from termplatformer.canvas import Canvas
from termplatformer.entities import (
    COLOR_BARRIER,
    COLOR_MENUTEXT,
    COLOR_PLAYER,
    LOGO,
    NICKNAME,
)
from termplatformer.game import Game, Mode
from termplatformer.render import draw_hud, draw_menu, draw_message, draw_world


def test_draw_world_places_player_and_bricks():
    canvas = Canvas()
    game = Game()
    draw_world(canvas, game)
    assert canvas.cell(10, 39) == ("@", COLOR_PLAYER)
    assert canvas.cell(20, 20) == ("#", COLOR_BARRIER)


def test_draw_hud_shows_level_and_score():
    canvas = Canvas()
    game = Game()
    game.score = 150
    draw_hud(canvas, game)
    rows = canvas.rows()
    assert rows[1][1:].startswith("level: 1")
    assert rows[2][1:].startswith("score: 150")
    assert canvas.cell(1, 1) == ("l", COLOR_MENUTEXT)


def test_draw_hud_puts_nickname_above_player():
    canvas = Canvas()
    game = Game()
    draw_hud(canvas, game)
    rows = canvas.rows()
    nick_rows = [i for i, row in enumerate(rows) if NICKNAME in row]
    assert nick_rows == [8]
    assert nick_rows[0] < game.mario.y


def test_start_menu_lists_logo_and_keys():
    canvas = Canvas()
    draw_menu(canvas, Mode.MENU_START)
    text = "\n".join(canvas.rows())
    for line in LOGO:
        assert line.strip() in text
    assert "Console platformer" in canvas.rows()[canvas.height // 2]
    assert "Press [E] to play" in text
    assert "Press [Esc] to exit" in text


def test_pause_menu():
    canvas = Canvas()
    draw_menu(canvas, Mode.MENU_PAUSE)
    text = "\n".join(canvas.rows())
    assert "Paused" in canvas.rows()[canvas.height // 3]
    assert "Press [E] to return to the game" in text
    assert "Console platformer" not in text


def test_play_mode_draws_no_menu():
    canvas = Canvas()
    draw_menu(canvas, Mode.PLAY)
    assert all(row.strip() == "" for row in canvas.rows())


def test_draw_message_clears_and_centers():
    canvas = Canvas()
    canvas.put_text("old text", 0, 0, COLOR_MENUTEXT)
    draw_message(canvas, "You win!")
    filled = [row for row in canvas.rows() if row.strip()]
    assert len(filled) == 1
    row = filled[0]
    assert row.strip() == "You win!"
    left = len(row) - len(row.lstrip())
    right = len(row) - len(row.rstrip())
    assert abs(left - right) <= 1