"""Game state and rules: movement, collisions, scoring and level flow."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, IntEnum
from typing import Callable, Iterable, Optional

from termplatformer.entities import (
    COLOR_BACKGROUND,
    COLOR_MONEY,
    COLOR_PLAYER,
    GAME_DELAY_NEXTLEVEL,
    GAME_DELAY_PLAYERDEAD,
    GAME_DELAY_WIN,
    MAP_HEIGHT,
    SCORE_INCR_KILL,
    SCORE_INCR_MONEY,
    SCORE_SECRET_LEVEL,
    Color,
    GameObject,
    Symbol,
)
from termplatformer.levels import build_level

MessageHandler = Callable[[str, int, Color], None]

_GRAVITY = 0.07
_COIN_SPEED = -0.7
_JUMP_SPEED = -1.0
_SCROLL_SPEED = 1.0
_MONEY_FLASH_TICKS = 5


class Mode(IntEnum):
    """What the main loop is showing."""

    MENU_START = 0
    PLAY = 1
    MENU_PAUSE = 2


class Action(Enum):
    """Player commands."""

    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"
    PAUSE = "pause"
    RESUME = "resume"
    EXIT = "exit"


class QuitGame(Exception):
    """The player asked to leave the game."""


class GameFinished(Exception):
    """The secret level was completed."""


class Game:
    """The whole game world and its rules."""

    def __init__(self, on_message: Optional[MessageHandler] = None) -> None:
        self.on_message: Optional[MessageHandler] = on_message
        self.level = 1
        self.score = 0
        self.score_prev = 0
        self.secret_open = False
        self.mode = Mode.MENU_START
        self.background = COLOR_BACKGROUND
        self.background_effect = 0
        self.mario = GameObject(39, 10, 3, 3, Symbol.PLAYER, COLOR_PLAYER)
        self.bricks: list[GameObject] = []
        self.movers: list[GameObject] = []
        self.create_level()

    def _message(self, text: str, delay_ms: int, background: Color) -> None:
        if self.on_message is not None:
            self.on_message(text, delay_ms, background)

    def create_level(self) -> None:
        """Reset the player and load the current level (or the secret one)."""
        self.mario = GameObject(39, 10, 3, 3, Symbol.PLAYER, COLOR_PLAYER)
        self.bricks = []
        self.movers = []
        self.score_prev = self.score

        if self.score >= SCORE_SECRET_LEVEL:
            if not self.secret_open:
                self._message("Is this the end?!", GAME_DELAY_WIN, Color.CYAN)
                self.secret_open = True
            layout = build_level(self.level, secret=True)
        else:
            try:
                layout = build_level(self.level, secret=False)
            except ValueError:
                self._message("You win!", GAME_DELAY_WIN, Color.CYAN)
                self.level = 1
                self.create_level()
                return

        self.bricks = layout.bricks
        self.movers = layout.movers

    def player_dead(self) -> None:
        """Lose the points of this attempt and restart the level."""
        self.score = self.score_prev
        self._message("You're dead!", GAME_DELAY_PLAYERDEAD, Color.RED)
        self.create_level()

    def _vertical_move(self, obj: GameObject) -> None:
        obj.is_fly = True
        obj.vert_speed += _GRAVITY
        obj.y += obj.vert_speed

        for brick in self.bricks:
            if not obj.collides(brick):
                continue
            if obj.vert_speed > 0:
                obj.is_fly = False

            if brick.symbol is Symbol.MONEYBLOCK and obj.vert_speed < 0 and obj is self.mario:
                brick.symbol = Symbol.EMPTYBLOCK
                coin = GameObject(brick.x, brick.y - 3, 3, 2, Symbol.MONEY, COLOR_MONEY)
                coin.vert_speed = _COIN_SPEED
                self.movers.append(coin)

            obj.y -= obj.vert_speed
            obj.vert_speed = 0

            if brick.symbol is Symbol.NEXTLEVEL and obj.symbol is Symbol.PLAYER:
                if not self.secret_open:
                    self.level += 1
                    self.create_level()
                    self._message("Next level!", GAME_DELAY_NEXTLEVEL, Color.GREEN)
                else:
                    self._message(
                        "You have completely completed the game!",
                        GAME_DELAY_NEXTLEVEL * 5,
                        Color.GREEN,
                    )
                    raise GameFinished()
            break

    def _horizontal_move(self, obj: GameObject) -> None:
        obj.x += obj.horiz_speed
        if any(obj.collides(brick) for brick in self.bricks):
            obj.x -= obj.horiz_speed
            obj.horiz_speed = -obj.horiz_speed
            return

        if obj.symbol is Symbol.ENEMY:
            probe = replace(obj)
            self._vertical_move(probe)
            if probe.is_fly:
                obj.x -= obj.horiz_speed
                obj.horiz_speed = -obj.horiz_speed

    def _remove_mover(self, mover: GameObject) -> None:
        self.movers = [m for m in self.movers if m is not mover]

    def _player_collisions(self) -> None:
        for mover in list(self.movers):
            if not self.mario.collides(mover):
                continue
            if mover.symbol is Symbol.ENEMY:
                stomp = (
                    self.mario.is_fly
                    and self.mario.vert_speed > 0
                    and self.mario.y + self.mario.height < mover.y + mover.height * 0.5
                )
                if stomp:
                    self._remove_mover(mover)
                    self.score += SCORE_INCR_KILL
                else:
                    self.player_dead()
                    return
            elif mover.symbol is Symbol.MONEY:
                self._remove_mover(mover)
                self.score += SCORE_INCR_MONEY
                self.background_effect = _MONEY_FLASH_TICKS
                self.background = Color.YELLOW

    def step(self) -> None:
        """Advance the world by one frame."""
        if self.mario.y > MAP_HEIGHT:
            self.player_dead()

        self._vertical_move(self.mario)
        self._player_collisions()

        for mover in list(self.movers):
            self._vertical_move(mover)
            self._horizontal_move(mover)
            if mover.y > MAP_HEIGHT:
                self._remove_mover(mover)

    def scroll(self, dx: float) -> None:
        """Shift the world by dx unless the player would walk into a brick."""
        self.mario.x -= dx
        blocked = any(self.mario.collides(brick) for brick in self.bricks)
        self.mario.x += dx
        if blocked:
            return
        for obj in self.bricks + self.movers:
            obj.x += dx

    def jump(self) -> None:
        """Start a jump if the player stands on something."""
        if not self.mario.is_fly:
            self.mario.vert_speed = _JUMP_SPEED

    def tick_effects(self) -> None:
        """Count down a background flash and restore the background after it."""
        if self.background_effect > 0:
            self.background_effect -= 1
            if self.background_effect == 0:
                self.background = COLOR_BACKGROUND

    def control(self, actions: Iterable[Action]) -> None:
        """Apply the player's commands for this frame."""
        pressed = set(actions)
        if self.mode is Mode.PLAY:
            if Action.LEFT in pressed:
                self.scroll(_SCROLL_SPEED)
            if Action.RIGHT in pressed:
                self.scroll(-_SCROLL_SPEED)
            if Action.JUMP in pressed:
                self.jump()
            if Action.PAUSE in pressed:
                self.mode = Mode.MENU_PAUSE
        else:
            if Action.EXIT in pressed:
                raise QuitGame()
            if Action.RESUME in pressed:
                self.mode = Mode.PLAY