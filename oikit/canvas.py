"""A fixed-size character canvas with glyph loading, line drawing and text."""

from __future__ import annotations

import argparse
import io
import math
import os
import string
from pathlib import Path

__all__ = ["Canvas", "read_font_config", "split_font", "main"]

FONT_CONFIG_NAME = "config"


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


class Canvas:
    """A grid of ``height`` rows by ``width`` columns of single characters.

    Cells are addressed as ``(x, y)``: ``x`` is the column, ``y`` the row.
    A write cursor supports character-by-character output with line wrapping.
    """

    def __init__(self, width: int, height: int, blank: str = " ") -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        _check_char(blank)
        self.width = width
        self.height = height
        self.blank = blank
        self._cells = [[blank] * width for _ in range(height)]
        self.cur_x = 0
        self.cur_y = 0

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = pos
        self._check(x, y)
        return self._cells[y][x]

    def __setitem__(self, pos: tuple[int, int], char: str) -> None:
        x, y = pos
        _check_char(char)
        self._check(x, y)
        self._cells[y][x] = char

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the canvas")

    def lines(self) -> list[str]:
        """The rows of the canvas as strings."""
        return ["".join(row) for row in self._cells]

    def move_to(self, x: int = 0, y: int = 0) -> None:
        """Place the write cursor."""
        self.cur_x = x
        self.cur_y = y

    def fill(self, char: str) -> None:
        """Set every cell to ``char``."""
        _check_char(char)
        for row in self._cells:
            row[:] = [char] * self.width

    def reset(self) -> None:
        """Blank every cell and move the cursor to the top left."""
        self.fill(self.blank)
        self.move_to()

    def next_line(self) -> bool:
        """Move the cursor to the start of the next row; False on the last row."""
        if self.cur_y + 1 >= self.height:
            return False
        self.cur_y += 1
        self.cur_x = 0
        return True

    def put(self, char: str) -> bool:
        """Write ``char`` at the cursor and advance it.

        Returns True if the character wrapped onto a new row. Raises
        ``OverflowError`` when the canvas has no room left.
        """
        _check_char(char)
        wrapped = False
        if self.cur_x >= self.width:
            if not self.next_line():
                raise OverflowError("canvas is full")
            wrapped = True
        self._check(self.cur_x, self.cur_y)
        self._cells[self.cur_y][self.cur_x] = char
        self.cur_x += 1
        return wrapped

    def render(self) -> str:
        """Every row followed by a newline."""
        return "".join(f"{line}\n" for line in self.lines())

    def render_marked(self) -> str:
        """The rows with a column ruler on top and a row digit on the left."""
        ruler = "".join(str(i % 10) for i in range(self.width))
        body = "".join(f"{y % 10}{line}\n" for y, line in enumerate(self.lines()))
        return f"\\{ruler}\n{body}"

    def render_marked_split(self, box_size: int) -> str:
        """Like ``render_marked`` with a gap before every ``box_size`` columns and rows."""
        if box_size <= 0:
            raise ValueError("box_size must be positive")
        out = io.StringIO()
        out.write("\\")
        for x in range(self.width):
            if x % box_size == 0:
                out.write(" ")
            out.write(str(x % 10))
        out.write("\n")
        for y, row in enumerate(self._cells):
            if y % box_size == 0:
                out.write("\n")
            out.write(str(y % 10))
            for x, char in enumerate(row):
                if x % box_size == 0:
                    out.write(" ")
                out.write(char)
            out.write("\n")
        return out.getvalue()

    def load_glyph(self, x: int, y: int, text: str, removed_bg: str = ".") -> None:
        """Draw the lines of ``text`` with their top left corner at ``(x, y)``.

        Characters equal to ``removed_bg`` are transparent. A line stops at a
        carriage return; whatever falls outside the canvas is cut off.
        """
        if x < 0 or y < 0:
            raise IndexError("glyph origin must be inside the canvas")
        for row, line in enumerate(text.split("\n"), start=y):
            if row >= self.height:
                break
            content = line.split("\r", 1)[0]
            for col, char in enumerate(content[: max(0, self.width - x)], start=x):
                if char != removed_bg:
                    self._cells[row][col] = char

    def load_glyph_file(
        self, x: int, y: int, path: str | os.PathLike[str], removed_bg: str = "."
    ) -> None:
        """Draw the glyph stored in the file at ``path``; see ``load_glyph``."""
        text = Path(path).read_bytes().decode("latin-1")
        self.load_glyph(x, y, text, removed_bg)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, char: str) -> None:
        """Draw ``char`` at every integer column from ``(x1, y1)`` to ``(x2, y2)``."""
        _check_char(char)
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if x1 == x2:
            low, high = sorted((_round_half_away(y1), _round_half_away(y2)))
            for y in range(low, high + 1):
                self[math.floor(x1), y] = char
            return
        x1, y1, x2 = int(x1), int(y1), int(x2)
        dx = x2 - x1
        slope = (y2 - y1) / dx
        for i in range(dx + 1):
            self[x1 + i, y1 + _round_half_away(slope * i)] = char

    def put_text(
        self, x: int, y: int, font_dir: str | os.PathLike[str], text: str
    ) -> None:
        """Draw ``text`` with one glyph file per character from ``font_dir``.

        Glyphs are placed apart by the width from the font's config file.
        """
        folder = Path(font_dir)
        advance, _ = read_font_config(folder / FONT_CONFIG_NAME)
        for char in text:
            self.load_glyph_file(x, y, folder / char)
            x += advance


def read_font_config(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Glyph width and height, the first two integers in the file at ``path``."""
    fields = Path(path).read_text(encoding="utf-8").split()
    try:
        width, height = int(fields[0]), int(fields[1])
    except (IndexError, ValueError):
        raise ValueError(f"{path}: expected a width and a height") from None
    return width, height


def split_font(
    source: str | os.PathLike[str],
    dest_dir: str | os.PathLike[str],
    glyph_height: int = 6,
) -> list[Path]:
    """Cut a font file into one file per glyph of ``glyph_height`` lines.

    The glyphs are named ``A`` to ``Z`` in order.
    """
    if glyph_height <= 0:
        raise ValueError("glyph_height must be positive")
    lines = io.BytesIO(Path(source).read_bytes()).readlines()
    folder = Path(dest_dir)
    folder.mkdir(parents=True, exist_ok=True)
    written = []
    for index, name in enumerate(string.ascii_uppercase):
        chunk = lines[index * glyph_height : (index + 1) * glyph_height]
        target = folder / name
        target.write_bytes(b"".join(chunk))
        written.append(target)
    return written


def main(argv: list[str] | None = None) -> int:
    """Fill a canvas, optionally write text with a font, and print it marked."""
    parser = argparse.ArgumentParser(description="Draw text on a character canvas.")
    parser.add_argument("--width", type=int, default=100)
    parser.add_argument("--height", type=int, default=10)
    parser.add_argument("--fill", default=".")
    parser.add_argument("--font", help="directory holding one glyph file per character")
    parser.add_argument("text", nargs="?", default="")
    args = parser.parse_args(argv)

    canvas = Canvas(args.width, args.height)
    canvas.fill(args.fill)
    if args.font and args.text:
        canvas.put_text(0, 0, args.font, args.text)
    print(canvas.render_marked(), end="")
    return 0