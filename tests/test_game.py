import pytest

from termplatformer.entities import (
    COLOR_BACKGROUND,
    COLOR_ENEMY,
    COLOR_MONEY,
    COLOR_NEXTLEVEL,
    GAME_DELAY_PLAYERDEAD,
    MAP_HEIGHT,
    SCORE_INCR_KILL,
    SCORE_INCR_MONEY,
    SCORE_SECRET_LEVEL,
    Color,
    GameObject,
    Symbol,
)
from termplatformer.game import Action, Game, GameFinished, Mode, QuitGame
from termplatformer.levels import build_level


@pytest.fixture
def recorded():
    messages = []
    game = Game(on_message=lambda text, delay, bg: messages.append((text, delay, bg)))
    return game, messages


def test_new_game_starts_in_menu_on_level_one(recorded):
    game, messages = recorded
    assert game.mode is Mode.MENU_START
    assert game.level == 1
    assert (game.mario.x, game.mario.y) == (39, 10)
    assert game.bricks == build_level(1, False).bricks
    assert messages == []


def test_resume_pause_and_exit(recorded):
    game, _ = recorded
    game.control([Action.RESUME])
    assert game.mode is Mode.PLAY
    game.control([Action.EXIT])
    assert game.mode is Mode.PLAY
    game.control([Action.PAUSE])
    assert game.mode is Mode.MENU_PAUSE
    with pytest.raises(QuitGame):
        game.control([Action.EXIT])


def test_jump_only_from_ground(recorded):
    game, _ = recorded
    game.jump()
    assert game.mario.vert_speed == -1
    game.mario.is_fly = True
    game.mario.vert_speed = 0.5
    game.jump()
    assert game.mario.vert_speed == 0.5


def test_scroll_shifts_world(recorded):
    game, _ = recorded
    game.bricks = [GameObject(36, 10, 3, 3, Symbol.BARRIER, Color.CYAN)]
    game.movers = [GameObject(60, 10, 3, 2, Symbol.ENEMY, COLOR_ENEMY)]
    game.scroll(-1)
    assert game.bricks[0].x == 36 - 1
    assert game.movers[0].x == 60 - 1
    assert game.mario.x == 39


def test_scroll_blocked_by_brick(recorded):
    game, _ = recorded
    game.bricks = [GameObject(36, 10, 3, 3, Symbol.BARRIER, Color.CYAN)]
    game.scroll(1)
    assert game.bricks[0].x == 36
    assert game.mario.x == 39


def test_player_dead_restores_score(recorded):
    game, messages = recorded
    game.score_prev = 100
    game.score = 300
    game.player_dead()
    assert game.score == 100
    assert messages == [("You're dead!", GAME_DELAY_PLAYERDEAD, Color.RED)]


def test_falling_off_map_kills(recorded):
    game, messages = recorded
    game.mario.y = MAP_HEIGHT + 1
    game.step()
    assert messages[0][0] == "You're dead!"


def test_touching_enemy_kills(recorded):
    game, messages = recorded
    game.bricks = []
    game.movers = [GameObject(39, 10, 3, 2, Symbol.ENEMY, COLOR_ENEMY)]
    game.step()
    assert messages[0][0] == "You're dead!"
    assert game.bricks == build_level(1, False).bricks


def test_stomping_enemy_scores(recorded):
    game, messages = recorded
    game.bricks = []
    game.mario.vert_speed = 0.5
    game.movers = [GameObject(39, 13, 3, 2, Symbol.ENEMY, COLOR_ENEMY)]
    game.step()
    assert game.score == SCORE_INCR_KILL
    assert game.movers == []
    assert messages == []


def test_money_scores_and_flashes(recorded):
    game, _ = recorded
    game.bricks = []
    game.movers = [GameObject(39, 10, 3, 2, Symbol.MONEY, COLOR_MONEY)]
    game.step()
    assert game.score == SCORE_INCR_MONEY
    assert game.background is Color.YELLOW
    for _ in range(4):
        game.tick_effects()
    assert game.background is Color.YELLOW
    game.tick_effects()
    assert game.background is COLOR_BACKGROUND


def test_hitting_money_block_releases_coin(recorded):
    game, _ = recorded
    block = GameObject(39, 7, 5, 3, Symbol.MONEYBLOCK, Color.MAGENTA)
    game.bricks = [block]
    game.movers = []
    game.mario.vert_speed = -1
    game.step()
    assert block.symbol is Symbol.EMPTYBLOCK
    assert [m.symbol for m in game.movers] == [Symbol.MONEY]
    assert game.mario.vert_speed == 0


def test_mover_falls_off_and_is_removed(recorded):
    game, _ = recorded
    game.bricks = []
    game.movers = [GameObject(0, MAP_HEIGHT + 1, 3, 2, Symbol.ENEMY, COLOR_ENEMY)]
    game.step()
    assert game.movers == []


def test_mover_turns_at_wall(recorded):
    game, _ = recorded
    mover = GameObject(0, 0, 3, 2, Symbol.ENEMY, COLOR_ENEMY)
    game.bricks = [GameObject(3.5, 0, 2, 2, Symbol.BARRIER, Color.CYAN)]
    game.movers = [mover]
    game.step()
    assert mover.horiz_speed == -0.6
    assert mover.x == 0


def test_exit_brick_advances_level(recorded):
    game, messages = recorded
    game.bricks = [GameObject(39, 13, 10, 2, Symbol.NEXTLEVEL, COLOR_NEXTLEVEL)]
    game.movers = []
    game.step()
    assert game.level == 2
    assert messages[-1][0] == "Next level!"
    assert game.bricks == build_level(2, False).bricks


def test_exit_brick_on_secret_level_finishes(recorded):
    game, messages = recorded
    game.secret_open = True
    game.bricks = [GameObject(39, 13, 10, 2, Symbol.NEXTLEVEL, COLOR_NEXTLEVEL)]
    game.movers = []
    with pytest.raises(GameFinished):
        game.step()
    assert messages[-1][0] == "You have completely completed the game!"


def test_past_last_level_wraps_to_first(recorded):
    game, messages = recorded
    game.level = 5
    game.create_level()
    assert game.level == 1
    assert messages[0][0] == "You win!"
    assert game.bricks == build_level(1, False).bricks


def test_high_score_opens_secret_level(recorded):
    game, messages = recorded
    game.score = SCORE_SECRET_LEVEL
    game.create_level()
    assert game.secret_open is True
    assert messages == [("Is this the end?!", 2000, Color.CYAN)]
    assert game.bricks == build_level(1, True).bricks
    game.create_level()
    assert len(messages) == 1


def test_game_without_message_handler():
    game = Game()
    game.level = 5
    game.create_level()
    assert game.level == 1