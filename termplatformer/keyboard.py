"""Reading the state of every key at once from a Linux input device."""

from __future__ import annotations

import fcntl
import os
import struct
import sys
from enum import IntEnum
from typing import Optional

DEFAULT_DEVICE = "/dev/input/by-path/platform-i8042-serio-0-event-kbd"

KEY_CNT = 0x300
_LONG_BYTES = struct.calcsize("l")
_LONG_BITS = _LONG_BYTES * 8
STATE_SIZE = -(-KEY_CNT // _LONG_BITS) * _LONG_BYTES

_IOC_READ = 2


def _eviocgkey(length: int) -> int:
    """The ioctl request that reads the global key state into `length` bytes."""
    return (_IOC_READ << 30) | (length << 16) | (ord("E") << 8) | 0x18


class KeyCode(IntEnum):
    """Linux input key codes used by the game."""

    ESC = 1
    Q = 16
    E = 18
    A = 30
    D = 32
    SPACE = 57


class KeyboardError(Exception):
    """The keyboard device could not be opened or read."""


def key_bit_set(state: bytes, key: int) -> bool:
    """Whether the bit for `key` is set in a key-state bitmap of native longs."""
    if not 0 <= key < len(state) * 8:
        raise ValueError(f"key code {key} is outside the key state")
    index, bit = divmod(key, _LONG_BITS)
    chunk = state[index * _LONG_BYTES:(index + 1) * _LONG_BYTES]
    return bool((int.from_bytes(chunk, sys.byteorder) >> bit) & 1)


class Keyboard:
    """An input device whose pressed keys can be polled together."""

    def __init__(self, path: str = DEFAULT_DEVICE) -> None:
        self.path = path
        self._fd: Optional[int] = None
        self._state = bytes(STATE_SIZE)

    def __enter__(self) -> Keyboard:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """Open the device for reading."""
        if self._fd is not None:
            return
        try:
            self._fd = os.open(self.path, os.O_RDONLY)
        except OSError as error:
            raise KeyboardError(f"could not open keyboard device {self.path}") from error

    def close(self) -> None:
        """Close the device if it is open."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def refresh(self) -> None:
        """Read the current state of every key."""
        if self._fd is None:
            raise KeyboardError("keyboard device is not open")
        try:
            self._state = bytes(fcntl.ioctl(self._fd, _eviocgkey(STATE_SIZE), bytes(STATE_SIZE)))
        except OSError as error:
            raise KeyboardError("could not read keyboard state") from error

    def is_pressed(self, key: int) -> bool:
        """Whether the key was down at the last refresh."""
        return key_bit_set(self._state, key)