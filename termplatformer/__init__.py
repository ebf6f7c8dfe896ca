"""A side-scrolling platformer for the Linux terminal: game rules, levels, drawing and a curses front end."""

__version__ = "0.1.0"