"""Console key decoding and a small multi-slot line editor driven by keys."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

__all__ = ["Key", "SlotEditor", "decode_key"]

_VIRTUAL_KEY = 224
_ARROWS = {75: -129, 77: -130, 72: -131, 80: -132}


class Key(IntEnum):
    """Decoded key codes; raw characters are passed through as their own codes."""

    ERR_VIRTUAL_KEY_INPUT = -1
    LEFT = -129
    RIGHT = -130
    UP = -131
    DOWN = -132
    BACKSPACE = -133
    CTRL_A = -134
    CTRL_B = -135
    CTRL_C = -136
    CTRL_D = -137
    CTRL_E = -138
    CTRL_F = -139
    CTRL_G = -140
    CTRL_H = -141
    CTRL_I = -142
    CTRL_J = -143
    CTRL_K = -144
    CTRL_L = -145
    CTRL_M = -146
    CTRL_N = -147
    CTRL_O = -148
    CTRL_P = -149
    CTRL_Q = -150
    CTRL_R = -151
    CTRL_S = -152
    CTRL_T = -153
    CTRL_U = -154
    CTRL_V = -155
    CTRL_W = -156
    CTRL_X = -157
    CTRL_Y = -158
    CTRL_Z = -159
    CR = -160
    LF = -161


def _control_codes() -> dict[int, Key]:
    table = {8: Key.BACKSPACE, 127: Key.CTRL_H, 10: Key.LF, 13: Key.CR}
    for code in range(1, 27):
        if code in (8, 10, 13):
            continue
        table[code] = Key[f"CTRL_{chr(ord('A') + code - 1)}"]
    return table


_CONTROLS = _control_codes()


def decode_key(read: Callable[[], int]) -> Key | int:
    """Decode one key press from ``read``, a function returning raw console bytes.

    A 224 prefix introduces an arrow key; unknown codes after it give
    ``Key.ERR_VIRTUAL_KEY_INPUT``. Other codes map to control keys or are
    returned unchanged.
    """
    code = read()
    if code == _VIRTUAL_KEY:
        second = read()
        if second in _ARROWS:
            return Key(_ARROWS[second])
        return Key.ERR_VIRTUAL_KEY_INPUT
    return _CONTROLS.get(code, code)


class SlotEditor:
    """A row of text slots, one selected at a time, edited by key presses."""

    QUIT = ord("q")

    def __init__(self, slots: int = 10, slot_length: int = 100) -> None:
        if slots < 1 or slot_length < 0:
            raise ValueError("need at least one slot and a non-negative length")
        self.slot_length = slot_length
        self.slots: list[str] = [""] * slots
        self.pos = 0

    @property
    def current(self) -> str:
        """Text of the selected slot."""
        return self.slots[self.pos]

    def type_char(self, char: str) -> None:
        """Append ``char`` to the selected slot unless it is full."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        if len(self.slots[self.pos]) < self.slot_length:
            self.slots[self.pos] += char

    def backspace(self) -> None:
        """Remove the last character of the selected slot, if any."""
        self.slots[self.pos] = self.slots[self.pos][:-1]

    def left(self) -> None:
        """Select the previous slot, stopping at the first."""
        if self.pos > 0:
            self.pos -= 1

    def right(self) -> None:
        """Select the next slot, stopping at the last."""
        if self.pos < len(self.slots) - 1:
            self.pos += 1

    def handle(self, key: Key | int) -> bool:
        """Apply a decoded key; returns False once ``q`` was typed."""
        if key == Key.LEFT:
            self.left()
        elif key == Key.RIGHT:
            self.right()
        elif key == Key.BACKSPACE:
            self.backspace()
        elif 32 <= key <= 126:
            self.type_char(chr(key))
        return key != self.QUIT

    def render(self, width: int) -> str:
        """Status line for a console ``width`` columns wide.

        Shows ``<`` and ``>`` when slots exist on either side, the slot number,
        a bar and as much text as fits, ending in ``...`` when cut short.
        """
        parts = []
        if self.pos > 0:
            parts.append("<")
        parts.append(str(self.pos))
        if self.pos < len(self.slots) - 1:
            parts.append(">")
        parts.append("|")
        head = "".join(parts)
        room = max(0, width - len(head) - 4)
        text = self.current
        if len(text) > room:
            return head + text[:room] + "..."
        return head + text