"""A character grid with a colour per cell."""

from __future__ import annotations

from itertools import groupby
from typing import Iterator

from termplatformer.entities import COLOR_STANDARD, MAP_HEIGHT, MAP_WIDTH, Color, GameObject, Symbol


class Canvas:
    """Fixed-size grid of characters and colours that frames are drawn into."""

    def __init__(self, width: int = MAP_WIDTH, height: int = MAP_HEIGHT) -> None:
        self.width = width
        self.height = height
        self._chars: list[list[str]] = []
        self._colors: list[list[Color]] = []
        self.clear()

    def _inside(self, y: int, x: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        """Blank every cell and reset its colour."""
        self._chars = [[Symbol.NOTHING.value] * self.width for _ in range(self.height)]
        self._colors = [[COLOR_STANDARD] * self.width for _ in range(self.height)]

    def cell(self, y: int, x: int) -> tuple[str, Color]:
        """Return the character and colour at a cell."""
        if not self._inside(y, x):
            raise IndexError(f"cell ({y}, {x}) is outside the canvas")
        return self._chars[y][x], self._colors[y][x]

    def put_text(self, text: str, y: int, x: int, color: Color) -> None:
        """Write text starting at a cell; characters outside are dropped."""
        for offset, char in enumerate(text):
            if self._inside(y, x + offset):
                self._chars[y][x + offset] = char
                self._colors[y][x + offset] = color

    def put_object(self, obj: GameObject) -> None:
        """Fill the visible cells an object covers with its symbol and colour."""
        for y, x in obj.cells():
            if self._inside(y, x):
                self._chars[y][x] = obj.symbol.value
                self._colors[y][x] = obj.color

    def rows(self) -> list[str]:
        """Return the characters of every row as strings."""
        return ["".join(row) for row in self._chars]

    def runs(self, y: int) -> Iterator[tuple[int, str, Color]]:
        """Yield (column, text, colour) for each stretch of one colour in a row."""
        cells = enumerate(zip(self._chars[y], self._colors[y]))
        for color, group in groupby(cells, key=lambda item: item[1][1]):
            items = list(group)
            yield items[0][0], "".join(char for _, (char, _) in items), color