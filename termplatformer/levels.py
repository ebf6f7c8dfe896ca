"""Level layouts: the bricks and moving objects of each level."""

from __future__ import annotations

from dataclasses import dataclass, field

from termplatformer.entities import (
    COLOR_BARRIER,
    COLOR_ENEMY,
    COLOR_MENUTEXT,
    COLOR_MONEY,
    COLOR_MONEYBLOCK,
    COLOR_NEXTLEVEL,
    COLOR_PLAYER,
    GameObject,
    Symbol,
)

_BAR = (Symbol.BARRIER, COLOR_BARRIER)
_MB = (Symbol.MONEYBLOCK, COLOR_MONEYBLOCK)
_EB = (Symbol.EMPTYBLOCK, COLOR_MONEYBLOCK)
_NEXT = (Symbol.NEXTLEVEL, COLOR_NEXTLEVEL)

_SECRET = (
    (
        (15, 20, 45, 5, *_BAR),
        (90, 20, 30, 5, *_BAR),
        (101, 5, 5, 3, Symbol.MONEYBLOCK, COLOR_ENEMY),
        (160, 20, 15, 5, *_BAR),
        (160, 12, 5, 3, *_MB),
        (200, 20, 10, 5, *_BAR),
        (200, 12, 5, 3, *_MB),
        (240, 20, 7, 5, *_BAR),
        (240, 12, 5, 3, *_MB),
        (280, 20, 5, 5, *_BAR),
        (280, 12, 5, 3, *_MB),
        (320, 20, 3, 5, *_BAR),
        (320, 12, 5, 3, *_MB),
        (360, 15, 30, 5, *_BAR),
        (390, 10, 30, 5, *_BAR),
        (430, 20, 80, 5, *_BAR),
        (520, 20, 15, 5, *_BAR),
        (535, 15, 15, 10, *_BAR),
        (550, 10, 15, 15, *_BAR),
        (565, 20, 15, 3, *_NEXT),
        (580, 10, 15, 15, *_BAR),
        (595, 15, 15, 10, *_BAR),
        (610, 20, 15, 5, *_BAR),
    ),
    (
        (20, 10, 8, 5, COLOR_PLAYER),
        (440, 15, 8, 5, COLOR_PLAYER),
        (450, 15, 3, 2, COLOR_ENEMY),
        (460, 15, 3, 2, COLOR_ENEMY),
        (470, 15, 3, 2, COLOR_ENEMY),
        (480, 15, 3, 2, COLOR_ENEMY),
        (490, 15, 3, 2, COLOR_ENEMY),
        (500, 15, 3, 2, COLOR_ENEMY),
        (530, 5, 3, 2, COLOR_MENUTEXT),
        (540, 5, 3, 2, COLOR_MENUTEXT),
        (560, 5, 3, 2, COLOR_MENUTEXT),
    ),
)

_LEVELS = {
    1: (
        (
            (20, 20, 40, 5, *_BAR),
            (30, 10, 5, 3, *_MB),
            (50, 10, 5, 3, *_MB),
            (60, 15, 40, 10, *_BAR),
            (60, 5, 10, 3, *_EB),
            (70, 5, 5, 3, *_MB),
            (75, 5, 5, 3, *_EB),
            (80, 5, 5, 3, *_MB),
            (85, 5, 10, 3, *_EB),
            (100, 20, 20, 5, *_BAR),
            (120, 15, 10, 10, *_BAR),
            (150, 20, 40, 5, *_BAR),
            (210, 15, 10, 2, *_NEXT),
            (210, 17, 10, 8, *_BAR),
        ),
        (
            (25, 10, 3, 2, COLOR_ENEMY),
            (80, 10, 3, 2, COLOR_ENEMY),
        ),
    ),
    2: (
        (
            (20, 20, 40, 5, *_BAR),
            (60, 15, 10, 10, *_BAR),
            (80, 20, 20, 5, *_BAR),
            (120, 15, 10, 10, *_BAR),
            (150, 20, 40, 5, *_BAR),
            (210, 15, 10, 2, *_NEXT),
            (210, 17, 10, 8, *_BAR),
            (163, 10, 5, 3, *_EB),
            (168, 10, 5, 3, *_MB),
            (173, 10, 5, 3, *_EB),
        ),
        (
            (25, 10, 3, 2, COLOR_ENEMY),
            (80, 10, 3, 2, COLOR_ENEMY),
            (150, 10, 3, 2, COLOR_ENEMY),
            (178, 10, 3, 2, COLOR_ENEMY),
            (163, 5, 3, 2, COLOR_ENEMY),
            (167, 5, 3, 2, COLOR_ENEMY),
        ),
    ),
    3: (
        (
            (20, 20, 40, 5, *_BAR),
            (80, 20, 15, 5, *_BAR),
            (120, 15, 15, 10, *_BAR),
            (164, 10, 8, 2, *_NEXT),
            (160, 12, 15, 13, *_BAR),
        ),
        (
            (25, 10, 3, 2, COLOR_ENEMY),
            (50, 10, 3, 2, COLOR_ENEMY),
            (80, 10, 3, 2, COLOR_ENEMY),
            (90, 10, 3, 2, COLOR_ENEMY),
            (130, 10, 3, 2, COLOR_ENEMY),
        ),
    ),
    4: (
        (
            (10, 20, 40, 5, *_BAR),
            (85, 15, 20, 5, *_BAR),
            (135, 15, 15, 10, *_BAR),
            (170, 10, 20, 7, *_BAR),
            (170, 0, 20, 5, *_BAR),
            (210, 10, 20, 7, *_BAR),
            (210, 0, 20, 5, *_BAR),
            (250, 15, 20, 7, *_BAR),
            (250, 5, 20, 5, *_BAR),
            (290, 10, 20, 7, *_BAR),
            (290, 0, 20, 5, *_BAR),
            (370, 10, 15, 2, *_NEXT),
            (370, 12, 15, 13, *_BAR),
            (-230, 17, 12, 10, Symbol.BARRIER, COLOR_MONEYBLOCK),
            (-220, 10, 5, 3, *_EB),
            (-175, 10, 5, 3, *_EB),
            (-180, 10, 5, 3, *_MB),
            (-185, 10, 5, 3, *_EB),
            (-180, 22, 25, 3, *_EB),
            (-120, 22, 25, 3, *_EB),
            (-60, 22, 25, 3, *_EB),
            (-55, 10, 5, 3, *_EB),
            (-60, 10, 5, 3, *_MB),
        ),
        (
            (85, 10, 3, 2, COLOR_ENEMY),
            (170, 5, 3, 2, COLOR_ENEMY),
            (-230, 10, 3, 3, COLOR_MONEY),
        ),
    ),
}

LEVEL_COUNT = len(_LEVELS)


@dataclass
class Layout:
    """The static bricks and the moving objects of one level."""

    bricks: list[GameObject] = field(default_factory=list)
    movers: list[GameObject] = field(default_factory=list)


def build_level(number: int, secret: bool) -> Layout:
    """Build fresh objects for a level; the secret level ignores the number."""
    if secret:
        bricks, movers = _SECRET
    else:
        try:
            bricks, movers = _LEVELS[number]
        except KeyError:
            raise ValueError(f"no such level: {number}") from None
    return Layout(
        bricks=[GameObject(x, y, w, h, symbol, color) for x, y, w, h, symbol, color in bricks],
        movers=[GameObject(x, y, w, h, Symbol.ENEMY, color) for x, y, w, h, color in movers],
    )