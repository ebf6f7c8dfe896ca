"""Curses screen handling, colours and signals."""

from __future__ import annotations

import contextlib
import curses
import signal
import sys
from typing import Optional, TextIO

from termplatformer.canvas import Canvas
from termplatformer.entities import COLOR_BACKGROUND, MAP_HEIGHT, MAP_WIDTH, Color
from termplatformer.render import draw_message

_WATCHED = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGQUIT", "SIGWINCH", "SIGTSTP")
    if hasattr(signal, name)
)
_SIGWINCH = getattr(signal, "SIGWINCH", None)


class SignalWatcher:
    """Records the last interrupt, quit, resize or suspend signal received."""

    def __init__(self) -> None:
        self.status = 0
        self._previous: dict = {}

    def install(self) -> None:
        """Route the watched signals to this watcher."""
        for signum in _WATCHED:
            previous = signal.signal(signum, self.handle)
            self._previous.setdefault(signum, previous)

    def _restore(self) -> None:
        for signum, previous in self._previous.items():
            signal.signal(signum, previous)
        self._previous.clear()

    def handle(self, signum, frame) -> None:
        """Signal handler: remember the signal."""
        self.status = signum

    def should_quit(self) -> bool:
        """Whether a signal other than a terminal resize has arrived."""
        return bool(self.status) and self.status != _SIGWINCH


def set_console_size(width: int, height: int, stream: Optional[TextIO] = None) -> None:
    """Ask the terminal emulator to resize its window."""
    out = stream if stream is not None else sys.stdout
    out.write(f"\x1b[8;{height};{width}t")
    out.flush()


class Terminal:
    """The curses screen the game is drawn on."""

    def __init__(
        self,
        width: int = MAP_WIDTH,
        height: int = MAP_HEIGHT,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.stream = stream
        self.signals = SignalWatcher()
        self.background = COLOR_BACKGROUND
        self._screen = None

    def __enter__(self) -> Terminal:
        set_console_size(self.width, self.height, self.stream)
        screen = curses.initscr()
        self._screen = screen
        curses.savetty()
        curses.nonl()
        curses.cbreak()
        curses.noecho()
        screen.timeout(0)
        screen.leaveok(True)
        with contextlib.suppress(curses.error):
            curses.curs_set(0)
        if not curses.has_colors():
            self._close()
            raise RuntimeError("terminal does not support colours")
        curses.start_color()
        self.set_background(COLOR_BACKGROUND)
        self.signals.install()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._close()

    def _close(self) -> None:
        screen = self._screen
        if screen is None:
            return
        with contextlib.suppress(curses.error):
            curses.curs_set(1)
        screen.clear()
        screen.refresh()
        curses.resetty()
        curses.endwin()
        self.signals._restore()
        self._screen = None

    def _require_screen(self):
        if self._screen is None:
            raise RuntimeError("terminal is not open")
        return self._screen

    def set_background(self, color: Color) -> None:
        """Draw every foreground colour on the given background."""
        for pair in Color:
            if pair is Color.BLACK:
                continue
            curses.init_pair(pair, pair, color)
        self.background = color

    def draw(self, canvas: Canvas) -> None:
        """Copy a canvas to the screen."""
        screen = self._require_screen()
        for y in range(canvas.height):
            for x, text, color in canvas.runs(y):
                # Writing the bottom-right cell moves the cursor off screen.
                with contextlib.suppress(curses.error):
                    screen.addstr(y, x, text, curses.color_pair(color))
        screen.refresh()

    def show_message(self, text: str, delay_ms: int, background: Color) -> None:
        """Show a centred message for a while on a tinted background."""
        tinted = 0 < background < 8
        if tinted:
            self.set_background(background)
        canvas = Canvas(self.width, self.height)
        draw_message(canvas, text)
        self.draw(canvas)
        curses.napms(delay_ms)
        if tinted:
            self.set_background(COLOR_BACKGROUND)

    def drain_input(self) -> None:
        """Discard keystrokes waiting in the input queue."""
        screen = self._require_screen()
        while screen.getch() != -1:
            pass