"""Game constants, colours, draw symbols and the rectangular game object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator

MAP_HEIGHT = 24
MAP_WIDTH = 80

GAME_DELAY_CONSTANT = 30
GAME_DELAY_NEXTLEVEL = 600
GAME_DELAY_PLAYERDEAD = 200
GAME_DELAY_WIN = 2000

SCORE_INCR_MONEY = 50
SCORE_INCR_KILL = 100
SCORE_SECRET_LEVEL = 2000

NICKNAME = "changeme"

LOGO = (
    " 000       0         0    ",
    " 0  0      0         0    ",
    " 0  0  000 000   00  000  ",
    " 000  0  0 0    0  0 0    ",
    " 0  0 0  0 0    0000 0    ",
    " 0  0 0  0 0    0    0    ",
    " 000   000  000  000  000 ",
)


class Color(IntEnum):
    """Terminal colour numbers."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


COLOR_BACKGROUND = Color.BLACK
COLOR_STANDARD = Color.GREEN
COLOR_MENUTEXT = Color.WHITE
COLOR_PLAYER = Color.RED
COLOR_ENEMY = Color.GREEN
COLOR_BARRIER = Color.CYAN
COLOR_MONEYBLOCK = Color.MAGENTA
COLOR_NEXTLEVEL = Color.YELLOW
COLOR_MONEY = Color.YELLOW


class Symbol(str, Enum):
    """Characters used to draw the world."""

    NOTHING = " "
    BARRIER = "#"
    PLAYER = "@"
    NEXTLEVEL = "+"
    ENEMY = "o"
    MONEYBLOCK = "?"
    EMPTYBLOCK = "-"
    MONEY = "$"


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class GameObject:
    """An axis-aligned rectangle in world coordinates."""

    x: float
    y: float
    width: float
    height: float
    symbol: Symbol
    color: Color
    vert_speed: float = 0.0
    horiz_speed: float = 0.6
    is_fly: bool = False

    def collides(self, other: GameObject) -> bool:
        """Whether the two rectangles overlap (touching edges do not count)."""
        return (
            self.x + self.width > other.x
            and self.x < other.x + other.width
            and self.y + self.height > other.y
            and self.y < other.y + other.height
        )

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (row, column) screen cells the object covers."""
        ix = _round_half_away(self.x)
        iy = _round_half_away(self.y)
        width = _round_half_away(self.width)
        height = _round_half_away(self.height)
        for x in range(ix, ix + width):
            for y in range(iy, iy + height):
                yield y, x