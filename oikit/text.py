"""Character tests, integer scanning, KMP string search and Roman numerals."""

from __future__ import annotations

__all__ = [
    "dec_len",
    "is_digit",
    "is_alpha",
    "read_signed",
    "prefix_function",
    "find_occurrences",
    "kmp_search",
    "int_to_roman",
    "roman_to_int",
]

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def dec_len(n: int) -> int:
    """Number of decimal digits in ``n``; zero has one digit, the sign is ignored."""
    return len(str(abs(n)))


def is_digit(c: str) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return "0" <= c <= "9"


def is_alpha(c: str) -> bool:
    """True if ``c`` is an ASCII letter."""
    return "a" <= c <= "z" or "A" <= c <= "Z"


def read_signed(s: str, pos: int) -> tuple[int, int]:
    """Read an optionally signed integer from ``s`` starting at ``pos``.

    Returns the value and the position just after the last character read.
    If no digits follow, the value is zero.
    """
    negative = False
    if pos < len(s) and s[pos] in "+-":
        negative = s[pos] == "-"
        pos += 1
    value = 0
    while pos < len(s) and is_digit(s[pos]):
        value = value * 10 + ord(s[pos]) - ord("0")
        pos += 1
    return (-value if negative else value), pos


def prefix_function(s: str) -> list[int]:
    """Length of the longest proper border of every prefix of ``s``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Start indices of ``pattern`` in ``text``, found via the prefix function of
    ``pattern + '#' + text``."""
    size = len(pattern)
    lps = prefix_function(f"{pattern}#{text}")
    return [i - 2 * size for i in range(size + 1, len(text) + size + 1) if lps[i] == size]


def _borders(pattern: str) -> list[int]:
    borders = [0] * len(pattern)
    for i in range(1, len(pattern)):
        j = borders[i - 1]
        while j > 0 and pattern[i] != pattern[j]:
            j = borders[j - 1]
        borders[i] = j + (pattern[i] == pattern[j])
    return borders


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every (possibly overlapping) match of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = _borders(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = borders[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i - len(pattern) + 1)
            j = borders[j - 1]
    return matches


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num``; non-positive numbers give an empty string."""
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Value of the Roman numeral ``s``; a smaller symbol before a larger one subtracts."""
    try:
        values = [_ROMAN_VALUES[c] for c in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    total = 0
    previous = 0
    for value in (*values, 0):
        total += -previous if previous < value else previous
        previous = value
    return total