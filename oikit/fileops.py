"""In-place byte scrambling of files and a byte reader that flags line breaks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from enum import IntEnum
from typing import BinaryIO

__all__ = ["CharReader", "Whence", "xor_invert_file", "EOF", "CR", "LF"]

EOF = -1
CR = -160
LF = -161

_U64 = 1 << 64


def xor_invert_file(path: str | os.PathLike[str], key: int) -> None:
    """Invert every byte of the file and XOR it with the little-endian bytes of ``key``.

    Byte ``i`` uses key byte ``i % 8``. Applying it twice restores the file.
    """
    if not 0 <= key < _U64:
        raise ValueError("key must fit in 64 unsigned bits")
    keys = key.to_bytes(8, "little")
    with open(path, "r+b") as handle:
        data = handle.read()
        scrambled = bytes((~byte ^ keys[i % 8]) & 0xFF for i, byte in enumerate(data))
        handle.seek(0)
        handle.write(scrambled)


class Whence(IntEnum):
    """Reference points for ``CharReader.seek``."""

    BEGIN = os.SEEK_SET
    END = os.SEEK_END
    NOW = os.SEEK_CUR


class CharReader:
    """Reads a file one byte at a time, reporting line breaks as ``CR`` and ``LF``."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._file: BinaryIO | None = None
        self._eof = False
        if path is not None:
            self.open(path)

    def open(self, path: str | os.PathLike[str]) -> None:
        """Open ``path`` for reading, closing any file opened before."""
        self.close()
        self._file = open(path, "rb")
        self._eof = False

    def close(self) -> None:
        """Close the file; does nothing if none is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def _require(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("no file is open")
        return self._file

    def read_code(self) -> int:
        """Next byte value, ``LF`` for a newline, ``CR`` for a carriage return,
        or ``EOF`` at the end."""
        chunk = self._require().read(1)
        if not chunk:
            self._eof = True
            return EOF
        byte = chunk[0]
        if byte == 0x0A:
            return LF
        if byte == 0x0D:
            return CR
        return byte

    def seek(self, offset: int, whence: Whence = Whence.NOW) -> None:
        """Move the read position by ``offset`` from ``whence``."""
        self._require().seek(offset, int(whence))
        self._eof = False

    def is_open(self) -> bool:
        """True while a file is open."""
        return self._file is not None

    def eof(self) -> bool:
        """True once a read hit the end of the file, or when no file is open."""
        return self._file is None or self._eof

    def __iter__(self) -> Iterator[int]:
        """Codes up to, not including, ``EOF``."""
        while (code := self.read_code()) != EOF:
            yield code

    def __enter__(self) -> CharReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()